"""Spanning forest of a random sparse graph, checked against the office demo."""

from __future__ import annotations

import numpy as np

from kruskalforest import kruskal_mst
from kruskalforest.demo import run_demo


def make_graph(n: int = 200, m: int = 600, seed: int = 0) -> tuple[list[int], list[tuple[int, int, float]]]:
    rng = np.random.default_rng(seed)
    u = rng.integers(0, n, size=m)
    v = rng.integers(0, n, size=m)
    w = rng.uniform(0.0, 10.0, size=m)
    return list(range(n)), list(zip(u.tolist(), v.tolist(), w.tolist()))


def main() -> None:
    run_demo()
    vertices, edges = make_graph()
    result = kruskal_mst(vertices, edges, verbose=True)
    print(f"Random graph: {len(result.edges)} edges, {result.n_components} components, cost {result.total_cost:.3f}")


if __name__ == "__main__":
    main()
