import importlib

import pytest


def test_import_package():
    try:
        module = importlib.import_module("kruskalforest")
    except ModuleNotFoundError as exc:  # pragma: no cover
        pytest.skip(f"Missing dependency: {exc.name}")
    assert hasattr(module, "kruskal_mst")
    assert hasattr(module, "DisjointSet")
    assert "UnknownVertex" in dir(module)


def test_unknown_attribute():
    module = importlib.import_module("kruskalforest")
    with pytest.raises(AttributeError):
        module.prim_mst
