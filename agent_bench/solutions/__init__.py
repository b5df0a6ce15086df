"""Reference Python solutions for the benchmarked puzzles."""
