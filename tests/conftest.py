"""The conftest.py, providing shared structures, sessions and the Flask client."""

import logging

import pytest

from config import VisualizerConfig
from engine import Session
from main import create_app
from structures import BinarySearchTree, Graph, HashTable

logger = logging.getLogger(__name__)

BST_VALUES = [50, 30, 70, 20, 40, 60, 80]


@pytest.fixture
def tree():
    bst = BinarySearchTree()
    for value in BST_VALUES:
        bst.insert(value)
    return bst


@pytest.fixture
def graph():
    """A-B, A-C, B-D, C-D: the classroom square."""
    g = Graph()
    for a, b in [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]:
        g.add_edge(a, b)
    return g


@pytest.fixture
def table():
    return HashTable(bucket_count=10)


@pytest.fixture
def empty_config():
    return VisualizerConfig(seed_examples=False)


@pytest.fixture
def session():
    """Session loaded with the example data."""
    return Session(VisualizerConfig())


@pytest.fixture
def empty_session(empty_config):
    return Session(empty_config)


@pytest.fixture
def app():
    application = create_app(VisualizerConfig())
    application.config["TESTING"] = True
    return application


@pytest.fixture
def client(app):
    return app.test_client()
