import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from kruskalforest.__main__ import main
from kruskalforest.edgelist import format_mst, parse_edge_line, parse_vertices, read_edge_list
from kruskalforest.errors import InvalidWeight
from kruskalforest.mst import Edge, MSTResult, kruskal_mst

OFFICE_FILE = """\
# office network
A, B, C, D, E
A B 4
A C 2
B C 1
B D 5
C D 8   # long cable
C E 10
D E 2
"""


def test_parse_edge_line():
    assert parse_edge_line("A B 5") == Edge("A", "B", 5)
    assert parse_edge_line("  x\ty  2.5 ") == Edge("x", "y", 2.5)
    assert isinstance(parse_edge_line("A B 5").weight, int)


@pytest.mark.parametrize("line", ["A B", "A B C D", "A B five", "A B nan", ""])
def test_parse_edge_line_rejects(line):
    with pytest.raises(InvalidWeight):
        parse_edge_line(line)


def test_parse_vertices():
    assert parse_vertices(" A, B ,,C ") == ["A", "B", "C"]
    assert parse_vertices("") == []


def test_read_edge_list(tmp_path):
    path = tmp_path / "office.txt"
    path.write_text(OFFICE_FILE, encoding="utf-8")
    vertices, edges = read_edge_list(path)
    assert vertices == ["A", "B", "C", "D", "E"]
    assert len(edges) == 7
    assert edges[4] == Edge("C", "D", 8)
    assert kruskal_mst(vertices, edges).total_cost == 10


def test_read_edge_list_reports_edge_index(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("A, B\nA B 1\nA B ?\n", encoding="utf-8")
    with pytest.raises(InvalidWeight) as info:
        read_edge_list(path)
    assert info.value.index == 1


def test_format_mst():
    result = kruskal_mst(["A", "B", "C"], [("A", "B", 1.0), ("B", "C", 2.5)])
    assert format_mst(result) == "A -- B  (cost: 1)\nB -- C  (cost: 2.5)\nTotal cost: 3.5"


def test_format_empty():
    text = format_mst(MSTResult([], 0, 3))
    assert text.startswith("No edges selected")


def test_cli_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "B -- C  (cost: 1)" in out
    assert "Total cost: 10" in out


def test_cli_file(tmp_path, capsys):
    path = tmp_path / "office.txt"
    path.write_text(OFFICE_FILE, encoding="utf-8")
    assert main([str(path), "--no-path-compression"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Total cost: 10"


def test_cli_unknown_vertex(tmp_path, capsys):
    path = tmp_path / "typo.txt"
    path.write_text("A, B\nA B 1\nB Q 2\n", encoding="utf-8")
    assert main([str(path)]) == 2
    assert "'Q'" in capsys.readouterr().err
    assert main([str(path), "--register-unknown"]) == 0
    assert "Total cost: 3" in capsys.readouterr().out


def test_cli_disconnected(tmp_path, capsys):
    path = tmp_path / "split.txt"
    path.write_text("A, B, C\nA B 1\n", encoding="utf-8")
    assert main([str(path)]) == 0
    assert "2 components" in capsys.readouterr().out


def test_cli_undecodable_file(tmp_path, capsys):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"A, B\nA \xff 1\n")
    assert main([str(path)]) == 2
    assert capsys.readouterr().err.startswith("error:")


def test_cli_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.txt")]) == 2
    assert capsys.readouterr().err.startswith("error:")
