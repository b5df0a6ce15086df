"""Enumerations shared across the benchmark tooling."""

from .AgentType import AgentType
from .Part import Part

__all__ = ["AgentType", "Part"]
