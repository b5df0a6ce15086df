"""Tests for puzzle input loading."""
import pytest

from agent_bench.util import inputs
from agent_bench.util.inputs import RangeData, parse_range_data, parse_to_number_grid


class TestInputPath:

    def test_uses_base_dir(self, tmp_path):
        assert inputs.get_input_path("03", tmp_path) == tmp_path / "03.txt"

    def test_uses_environment_variable(self, tmp_path, monkeypatch):
        monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path))
        assert inputs.get_input_path("11") == tmp_path / "11.txt"

    def test_defaults_to_input_dir(self, monkeypatch):
        monkeypatch.delenv("AOC_INPUT_DIR", raising=False)
        assert str(inputs.get_input_path("01")) == "input/01.txt"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            inputs.read_file_as_string("25", tmp_path)


class TestReaders:

    def test_read_file_as_lines(self, tmp_path):
        (tmp_path / "01.txt").write_text("a\nb\n")
        assert inputs.read_file_as_lines("01", tmp_path) == ["a", "b"]

    def test_read_int_pairs(self, tmp_path):
        (tmp_path / "01.txt").write_text("3   4\n4   3\n2   5\n")
        assert inputs.read_int_pairs("01", tmp_path) == ([3, 4, 2], [4, 3, 5])

    def test_read_int_pairs_rejects_single_column(self, tmp_path):
        (tmp_path / "01.txt").write_text("3\n")
        with pytest.raises(ValueError):
            inputs.read_int_pairs("01", tmp_path)

    def test_read_numbers_with_whitespace(self, tmp_path):
        (tmp_path / "11.txt").write_text("125 17\n 0\n")
        assert inputs.read_numbers_with_whitespace("11", tmp_path) == [125, 17, 0]

    def test_read_number_grid_with_whitespace(self, tmp_path):
        (tmp_path / "02.txt").write_text("7 6 4\n1 2 7 8\n")
        assert inputs.read_number_grid_with_whitespace("02", tmp_path) == [[7, 6, 4], [1, 2, 7, 8]]

    def test_read_ascii_grid(self, tmp_path):
        (tmp_path / "04.txt").write_text("XMAS\n.SA.\n")
        assert inputs.read_ascii_grid("04", tmp_path) == [b"XMAS", b".SA."]

    def test_read_ascii_grid_keeps_non_ascii_bytes(self, tmp_path):
        (tmp_path / "04.txt").write_text("a\u00e9b\n", encoding="utf-8")
        assert inputs.read_ascii_grid("04", tmp_path) == [b"a\xc3\xa9b"]

    def test_read_number_grid(self, tmp_path):
        (tmp_path / "03.txt").write_text("123\n45\n")
        assert inputs.read_number_grid("03", tmp_path) == [[1, 2, 3], [4, 5]]


class TestNumberGrid:

    def test_ignores_non_digits_and_blank_lines(self):
        assert parse_to_number_grid("1a2\n\n  \n 3 4 \n") == [[1, 2], [3, 4]]

    def test_empty_text(self):
        assert parse_to_number_grid("") == []


class TestRangeData:

    def test_parse(self):
        assert parse_range_data("1-4\n7-11\n\n2\n9") == RangeData(ranges=[(1, 4), (7, 11)], values=[2, 9])

    def test_extra_blank_lines_are_tolerated(self):
        assert parse_range_data("1-4\n7-11\n\n\n2\n9\n") == RangeData(ranges=[(1, 4), (7, 11)], values=[2, 9])

    def test_start_after_end_is_rejected(self):
        with pytest.raises(ValueError, match="start > end"):
            parse_range_data("5-4\n\n1")

    def test_requires_two_sections(self):
        with pytest.raises(ValueError, match="two sections"):
            parse_range_data("1-4\n7-11\n")

    @pytest.mark.parametrize("text", ["x-4\n\n1", "1-y\n\n1", "14\n\n1", "1-4\n\nabc"])
    def test_malformed_input(self, text):
        with pytest.raises(ValueError):
            parse_range_data(text)

    def test_read_range_data(self, tmp_path):
        (tmp_path / "05.txt").write_text("3-5\n10-14\n\n1\n5\n")
        assert inputs.read_range_data("05", tmp_path).ranges == [(3, 5), (10, 14)]
