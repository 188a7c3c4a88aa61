from __future__ import annotations

import math
import numbers
from typing import Any, Hashable, Iterable, NamedTuple, Sequence

import numpy as np

from .errors import InvalidWeight, UnknownVertex
from .union_find import DisjointSet

UNKNOWN_VERTEX_POLICIES = {"raise", "register"}


class Edge(NamedTuple):
    u: Hashable
    v: Hashable
    weight: float


class MSTResult(NamedTuple):
    edges: list[Edge]
    total_cost: float
    n_components: int


def _check_weight(weight: Any, index: int) -> None:
    if weight is None:
        raise InvalidWeight(weight, index, "missing")
    if isinstance(weight, (bool, np.bool_)) or not isinstance(weight, numbers.Real):
        raise InvalidWeight(weight, index)
    if isinstance(weight, (float, np.floating)) and math.isnan(weight):
        raise InvalidWeight(weight, index, "not a number")


def _as_edges(edges: Iterable[Sequence[Any]]) -> list[Edge]:
    out: list[Edge] = []
    for i, edge in enumerate(edges):
        try:
            u, v, *rest = edge
        except (TypeError, ValueError):
            raise InvalidWeight(None, i, "expected (u, v, weight)") from None
        if not rest:
            raise InvalidWeight(None, i, "missing")
        if len(rest) > 1:
            raise InvalidWeight(tuple(rest), i, "expected a single weight after (u, v)")
        _check_weight(rest[0], i)
        out.append(Edge(u, v, rest[0]))
    return out


def _build_forest(
    vertices: Iterable[Hashable],
    edges: Sequence[Edge],
    unknown_vertices: str,
    path_compression: bool,
) -> DisjointSet:
    policy = str(unknown_vertices).lower()
    if policy not in UNKNOWN_VERTEX_POLICIES:
        raise ValueError(f"unknown_vertices must be one of {sorted(UNKNOWN_VERTEX_POLICIES)}, got {unknown_vertices!r}")
    forest = DisjointSet(vertices, path_compression=path_compression)
    for i, edge in enumerate(edges):
        for endpoint in (edge.u, edge.v):
            if endpoint in forest:
                continue
            if policy == "raise":
                raise UnknownVertex(endpoint, i)
            forest.add(endpoint)
    return forest


def kruskal_mst(
    vertices: Iterable[Hashable],
    edges: Iterable[Sequence[Any]],
    *,
    unknown_vertices: str = "raise",
    path_compression: bool = True,
    verbose: bool = False,
) -> MSTResult:
    """Minimum spanning forest of an undirected weighted graph.

    Parameters
    ----------
    vertices:
        Vertex identifiers; each must appear once.
    edges:
        ``(u, v, weight)`` triples or :class:`Edge` instances. The collection
        is copied and never modified.
    unknown_vertices:
        ``"raise"`` rejects edges whose endpoints are not in ``vertices``
        with :class:`UnknownVertex`; ``"register"`` adds such endpoints as new
        singleton vertices.
    path_compression:
        Disable to fall back on union by rank alone. The result is the same.
    verbose:
        Print a short summary of the scan.

    Returns
    -------
    MSTResult
        Selected edges in acceptance order (ascending weight, ties by input
        position), their total weight and the number of components. Every
        input is validated before the scan starts, so an error never leaves a
        partial result behind.
    """
    edge_list = _as_edges(edges)
    forest = _build_forest(vertices, edge_list, unknown_vertices, path_compression)
    selected: list[Edge] = []
    total_cost: float = 0
    if edge_list:
        weights = np.empty(len(edge_list), dtype=object)
        weights[:] = [e.weight for e in edge_list]
        order = np.argsort(weights, kind="stable")
        for i in order:
            edge = edge_list[int(i)]
            if not forest.union(edge.u, edge.v):
                continue
            selected.append(edge)
            total_cost += edge.weight
            if forest.n_components == 1:
                break
    if verbose:
        print(
            f"MST: {len(selected)} edges kept out of {len(edge_list)}, "
            f"{len(forest)} vertices, {forest.n_components} components, total cost {total_cost}"
        )
    return MSTResult(selected, total_cost, forest.n_components)


def count_components(
    vertices: Iterable[Hashable],
    edges: Iterable[Sequence[Any]],
    *,
    unknown_vertices: str = "raise",
) -> int:
    edge_list = _as_edges(edges)
    forest = _build_forest(vertices, edge_list, unknown_vertices, True)
    for edge in edge_list:
        forest.union(edge.u, edge.v)
    return forest.n_components


__all__ = ["Edge", "MSTResult", "kruskal_mst", "count_components", "UNKNOWN_VERTEX_POLICIES"]
