"""Small office network: computers are vertices, cables are weighted edges."""

from __future__ import annotations

from .edgelist import format_mst
from .mst import Edge, MSTResult, kruskal_mst

OFFICE_VERTICES = ["A", "B", "C", "D", "E"]

OFFICE_EDGES = [
    Edge("A", "B", 4),
    Edge("A", "C", 2),
    Edge("B", "C", 1),
    Edge("B", "D", 5),
    Edge("C", "D", 8),
    Edge("C", "E", 10),
    Edge("D", "E", 2),
]


def run_demo(verbose: bool = False) -> MSTResult:
    result = kruskal_mst(OFFICE_VERTICES, OFFICE_EDGES, verbose=verbose)
    print("=== MST (Kruskal) Demo ===")
    print("Vertices (computers):", ", ".join(OFFICE_VERTICES))
    print("Selected connections (edges):")
    print(format_mst(result))
    return result
