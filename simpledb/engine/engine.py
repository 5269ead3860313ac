"""
Engine - Main database engine API.
"""

from simpledb.engine.controller import TransactionController
from simpledb.models.outcome import CommitOutcome, RollbackOutcome, UnsetOutcome
from simpledb.models.transaction_log import TransactionLog
from simpledb.models.value_index import ValueIndex
from simpledb.models.value_store import ValueStore


class Engine:
    """
    In-memory key-value database engine with nested transactions.

    Provides:
    - set(key, value): Insert/update a key-value pair
    - unset(key): Mark a key as unset
    - get(key): Retrieve the current value of a key
    - count_equal_to(value): Count keys currently holding a value
    - begin() / commit() / rollback(): Nested transaction scopes

    Architecture:
    - Writes go through the TransactionController, which logs them for undo
      while a scope is open and keeps the ValueIndex in sync
    - Reads go straight to the ValueStore / ValueIndex

    The engine is single-threaded: each call runs to completion and no
    locking is done. Share an instance across threads at your own risk.
    """

    def __init__(self) -> None:
        self._store = ValueStore()
        self._index = ValueIndex()
        self._log = TransactionLog()
        self._controller = TransactionController(self._store, self._index, self._log)

    @property
    def depth(self) -> int:
        """Number of open transaction scopes."""
        return self._controller.depth

    @property
    def pending_mutations(self) -> int:
        return self._controller.pending_mutations

    @property
    def in_transaction(self) -> bool:
        return self._controller.depth > 0

    def set(self, key: str, value: str) -> None:
        self._controller.set(key, value)

    def unset(self, key: str) -> UnsetOutcome:
        """
        Unset a key.

        Args:
            key: The key to unset.

        Returns:
            UnsetOutcome.NOT_ASSIGNED if the key was never set, OK otherwise.
        """
        return self._controller.unset(key)

    def get(self, key: str) -> str | None:
        """
        Retrieve a value by key.

        Args:
            key: The key to look up.

        Returns:
            The value if set, None if the key was unset or never assigned.
        """
        value = self._store.current_value(key)
        if value is None or not value.is_regular():
            return None
        return value.data

    def count_equal_to(self, value: str) -> int:
        return self._index.count_equal_to(value)

    def keys_equal_to(self, value: str) -> frozenset[str]:
        """Keys whose current value equals value."""
        return self._index.keys_equal_to(value)

    def begin(self) -> None:
        self._controller.begin()

    def commit(self) -> CommitOutcome:
        """
        Commit every open transaction scope.

        Returns:
            NO_TRANSACTION, NOTHING_TO_COMMIT or COMMITTED.
        """
        return self._controller.commit()

    def rollback(self) -> RollbackOutcome:
        """
        Roll back the innermost transaction scope.

        Returns:
            NO_TRANSACTION, NOTHING_TO_ROLLBACK or ROLLED_BACK.
        """
        return self._controller.rollback()
