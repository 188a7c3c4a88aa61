"""Plain-text edge lists and result rendering.

File format::

    # comment
    A, B, C, D
    A B 4
    B C 1.5

The first non-comment line lists the vertices, separated by commas; each
following line is one edge ``u v weight``.
"""

from __future__ import annotations

import os
from pathlib import Path

from .errors import InvalidWeight
from .mst import Edge, MSTResult


def _parse_weight(token: str, index: int | None) -> int | float:
    try:
        return int(token)
    except ValueError:
        pass
    try:
        weight = float(token)
    except ValueError:
        raise InvalidWeight(token, index) from None
    if weight != weight:
        raise InvalidWeight(token, index, "not a number")
    return weight


def parse_edge_line(line: str, index: int | None = None) -> Edge:
    tokens = line.split()
    if len(tokens) != 3:
        raise InvalidWeight(line.strip(), index, "expected 'u v weight'")
    u, v, w = tokens
    return Edge(u, v, _parse_weight(w, index))


def parse_vertices(line: str) -> list[str]:
    return [name.strip() for name in line.split(",") if name.strip()]


def read_edge_list(path: str | os.PathLike[str]) -> tuple[list[str], list[Edge]]:
    vertices: list[str] | None = None
    edges: list[Edge] = []
    with Path(path).open("r", encoding="utf-8") as f:
        for raw in f:
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue
            if vertices is None:
                vertices = parse_vertices(line)
                continue
            edges.append(parse_edge_line(line, len(edges)))
    return vertices or [], edges


def _fmt_weight(weight: float) -> str:
    if isinstance(weight, float) and weight.is_integer():
        return str(int(weight))
    return str(weight)


def format_mst(result: MSTResult) -> str:
    if not result.edges:
        return "No edges selected. Graph might be disconnected or input invalid."
    lines = [f"{e.u} -- {e.v}  (cost: {_fmt_weight(e.weight)})" for e in result.edges]
    lines.append(f"Total cost: {_fmt_weight(result.total_cost)}")
    return "\n".join(lines)


__all__ = ["parse_edge_line", "parse_vertices", "read_edge_list", "format_mst"]
