"""
TransactionController - Applies writes and resolves begin/commit/rollback.
"""

import logging
from collections import Counter

from simpledb.models.exceptions import ConsistencyError, UndoUnderflowError
from simpledb.models.outcome import CommitOutcome, RollbackOutcome, UnsetOutcome
from simpledb.models.transaction_log import TransactionLog
from simpledb.models.value import Value
from simpledb.models.value_index import ValueIndex
from simpledb.models.value_store import ValueStore

logger = logging.getLogger(__name__)


class TransactionController:
    """
    Sole writer of the ValueStore, ValueIndex and TransactionLog.

    Every write made while a scope is open is recorded in the log before it
    reaches the store, and every store change is mirrored into the index.

    Commit and rollback are deliberately asymmetric:
    - commit() makes every open scope permanent at once and leaves depth 0
    - rollback() undoes only the innermost scope
    """

    def __init__(self, store: ValueStore, index: ValueIndex, log: TransactionLog) -> None:
        """
        Initialize the controller.

        Args:
            store: The per-key value stacks.
            index: The value-to-keys index kept in sync with store.
            log: The undo log; owned exclusively by this controller.
        """
        self._store = store
        self._index = index
        self._log = log

        # Number of open scopes
        self._depth = 0

        # Mutations logged since the outermost open scope began
        self._pending_mutations = 0

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def pending_mutations(self) -> int:
        return self._pending_mutations

    def begin(self) -> None:
        self._depth += 1
        self._log.mark_scope_start()
        logger.debug(f"BEGIN depth={self._depth}")

    def set(self, key: str, value: str) -> None:
        """
        Make value the current value of key.

        Args:
            key: The key to write.
            value: The value to store.
        """
        self._record(key)
        new = Value.regular(value)
        old = self._store.write(key, new, keep_history=self._depth > 0)
        self._index.reindex(key, old, new)

    def unset(self, key: str) -> UnsetOutcome:
        """
        Mark key as unset.

        A key that was never assigned is left untouched, and nothing is
        logged for it.

        Args:
            key: The key to unset.

        Returns:
            UnsetOutcome.OK, or UnsetOutcome.NOT_ASSIGNED for an unknown key.
        """
        if not self._store.has(key):
            return UnsetOutcome.NOT_ASSIGNED

        self._record(key)
        tombstone = Value.tombstone()
        old = self._store.write_tombstone(key, keep_history=self._depth > 0)
        self._index.reindex(key, old, tombstone)
        return UnsetOutcome.OK

    def commit(self) -> CommitOutcome:
        """
        Make the writes of every open scope permanent and close them all.

        Returns:
            The CommitOutcome describing what happened.
        """
        if self._depth == 0:
            return CommitOutcome.NO_TRANSACTION

        if self._pending_mutations == 0:
            logger.debug(f"COMMIT closing {self._depth} empty scope(s)")
            self._log.clear()
            self._reset()
            return CommitOutcome.NOTHING_TO_COMMIT

        keys = self._log.mutated_keys()
        for key in keys:
            self._store.collapse_history(key)
        logger.debug(
            f"COMMIT depth={self._depth} mutations={self._pending_mutations} keys={len(keys)}"
        )
        self._log.clear()
        self._reset()
        return CommitOutcome.COMMITTED

    def rollback(self) -> RollbackOutcome:
        """
        Undo every write of the innermost open scope and close it.

        Returns:
            The RollbackOutcome describing what happened.

        Raises:
            ConsistencyError: If the log and the store disagree.
        """
        if self._depth == 0:
            return RollbackOutcome.NO_TRANSACTION

        if self._pending_mutations == 0:
            # Only scope-start markers are logged; drop the innermost one
            self._log.drain_to_last_scope_start()
            self._depth -= 1
            logger.debug(f"ROLLBACK closing empty scope, depth={self._depth}")
            return RollbackOutcome.NOTHING_TO_ROLLBACK

        try:
            self._check_undoable(self._log.innermost_scope_keys())
        except ConsistencyError as e:
            logger.critical(f"ROLLBACK aborted at depth {self._depth}: {e}")
            raise

        keys = self._log.drain_to_last_scope_start()
        for key in keys:
            removed = self._store.pop_undo(key)
            restored = self._store.current_value(key)
            self._index.reindex(key, removed, restored)

        self._depth -= 1
        self._pending_mutations -= len(keys)
        logger.debug(f"ROLLBACK undone={len(keys)} depth={self._depth}")
        return RollbackOutcome.ROLLED_BACK

    def _check_undoable(self, keys: list[str]) -> None:
        """
        Verify every logged write can be popped before touching any state.

        Each mutation of a key needs one pushed slot above the key's base.

        Raises:
            UndoUnderflowError: If a key holds fewer slots than its writes need.
        """
        for key, writes in Counter(keys).items():
            slots = self._store.depth_of(key)
            if slots < writes + 1:
                raise UndoUnderflowError(key, slots)

    def _record(self, key: str) -> None:
        """Log key as mutated if a scope is open. Must run before the write."""
        if self._depth > 0:
            self._pending_mutations += 1
            self._log.record_mutation(key)

    def _reset(self) -> None:
        self._depth = 0
        self._pending_mutations = 0
