"""
In-memory key-value database with nested transactions.

This package provides a single-process key-value store with:
- set(key, value) / unset(key) - O(1) writes, undoable inside a transaction
- get(key) - O(1) read of the current value
- count_equal_to(value) - O(1) count of keys holding a value
- begin() / commit() / rollback() - nested transaction scopes
"""

from simpledb.engine.engine import Engine

__all__ = ["Engine"]
