"""Exceptions raised while validating spanning-forest input."""

from __future__ import annotations

from typing import Any


class MSTError(ValueError):
    """Base class for invalid graph input."""


class DuplicateVertex(MSTError):
    def __init__(self, vertex: Any) -> None:
        self.vertex = vertex
        super().__init__(f"vertex {vertex!r} is registered more than once")


class UnknownVertex(MSTError):
    def __init__(self, vertex: Any, index: int | None = None) -> None:
        self.vertex = vertex
        self.index = index
        where = "" if index is None else f" (edge {index})"
        super().__init__(f"vertex {vertex!r} is not in the vertex set{where}")


class InvalidWeight(MSTError):
    def __init__(self, weight: Any, index: int | None = None, reason: str = "not a real number") -> None:
        self.weight = weight
        self.index = index
        where = "" if index is None else f" for edge {index}"
        super().__init__(f"invalid weight {weight!r}{where}: {reason}")


__all__ = ["MSTError", "DuplicateVertex", "UnknownVertex", "InvalidWeight"]
