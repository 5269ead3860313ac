"""
Shared pytest fixtures for database engine tests.
"""

import io

import pytest

from main import register_commands
from shell.shell import Shell
from simpledb.engine.controller import TransactionController
from simpledb.engine.engine import Engine
from simpledb.models.transaction_log import TransactionLog
from simpledb.models.value_index import ValueIndex
from simpledb.models.value_store import ValueStore


@pytest.fixture
def engine():
    """Provide a fresh Engine instance."""
    return Engine()


@pytest.fixture
def store():
    return ValueStore()


@pytest.fixture
def index():
    return ValueIndex()


@pytest.fixture
def log():
    return TransactionLog()


@pytest.fixture
def controller(store, index, log):
    """Provide a controller wired to the store, index and log fixtures."""
    return TransactionController(store, index, log)


@pytest.fixture
def shell(engine):
    """Provide a Shell with the database commands registered on in-memory streams."""
    sh = Shell(input_stream=io.StringIO(), output=io.StringIO(), errors=io.StringIO())
    register_commands(sh, engine)
    return sh


@pytest.fixture
def sample_entries():
    """Provide sample key-value entries for testing."""
    return [
        ("a", "10"),
        ("b", "10"),
        ("c", "20"),
    ]
