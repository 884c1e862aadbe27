"""Pytest configuration and shared fixtures."""

import os

import pytest

from adjgraph.config import reset_config
from adjgraph.graph import Graph


@pytest.fixture(autouse=True)
def reset_config_singleton():
    """Reset configuration singleton before and after each test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clean_env_vars(monkeypatch, tmp_path):
    """Clean environment variables and run outside any configured directory."""
    for key in list(os.environ.keys()):
        if key.startswith("ADJGRAPH_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def triangle() -> Graph:
    """Graph with edges (0,1), (1,2), (2,0)."""
    graph = Graph(3)
    graph.add(0, 1, 1)
    graph.add(1, 2, 2)
    graph.add(2, 0, 3)
    return graph


@pytest.fixture
def path_graph() -> Graph:
    """Graph with edges (0,1), (1,2)."""
    graph = Graph(3)
    graph.add(0, 1, 1)
    graph.add(1, 2, 2)
    return graph
