from __future__ import annotations

import argparse
import sys

from .demo import run_demo
from .edgelist import format_mst, read_edge_list
from .mst import kruskal_mst


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kruskalforest",
        description="Minimum spanning forest of a weighted undirected graph (Kruskal)",
    )
    parser.add_argument("edge_file", nargs="?", help="edge list; runs the office demo when omitted")
    parser.add_argument(
        "--register-unknown",
        action="store_true",
        help="add vertices that only appear in edges instead of failing",
    )
    parser.add_argument("--no-path-compression", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.edge_file is None:
        run_demo(verbose=args.verbose)
        return 0

    try:
        vertices, edges = read_edge_list(args.edge_file)
        result = kruskal_mst(
            vertices,
            edges,
            unknown_vertices="register" if args.register_unknown else "raise",
            path_compression=not args.no_path_compression,
            verbose=args.verbose,
        )
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    print(format_mst(result))
    if result.n_components > 1:
        print(f"Graph is disconnected: {result.n_components} components")
    return 0


if __name__ == "__main__":
    sys.exit(main())
