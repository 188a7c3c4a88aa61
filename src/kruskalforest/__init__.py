"""Kruskal minimum spanning forests on a union-find backbone."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "DisjointSet": "kruskalforest.union_find",
    "Edge": "kruskalforest.mst",
    "MSTResult": "kruskalforest.mst",
    "kruskal_mst": "kruskalforest.mst",
    "count_components": "kruskalforest.mst",
    "MSTError": "kruskalforest.errors",
    "DuplicateVertex": "kruskalforest.errors",
    "UnknownVertex": "kruskalforest.errors",
    "InvalidWeight": "kruskalforest.errors",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'kruskalforest' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
