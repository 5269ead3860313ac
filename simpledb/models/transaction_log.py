"""
TransactionLog - Flat undo log for nested transaction scopes.
"""

from dataclasses import dataclass

from simpledb.models.exceptions import MissingScopeError


@dataclass(frozen=True)
class LogEntry:
    """
    Represents a single entry in the transaction log.

    Attributes:
        key: The key that was written, None for a scope-start marker.
    """

    key: str | None = None

    @classmethod
    def scope_start(cls) -> "LogEntry":
        return cls(key=None)

    @classmethod
    def mutation(cls, key: str) -> "LogEntry":
        return cls(key=key)

    def is_scope_start(self) -> bool:
        return self.key is None


class TransactionLog:
    """
    Ordered record of scope boundaries and per-write undo markers.

    One log is shared by every nesting level. Read backward, it always
    splits into complete [mutation*, scope-start] groups, one per open scope.
    """

    def __init__(self) -> None:
        self._entries: list[LogEntry] = []
        self._scopes = 0

    def mark_scope_start(self) -> None:
        self._entries.append(LogEntry.scope_start())
        self._scopes += 1

    def record_mutation(self, key: str) -> None:
        self._entries.append(LogEntry.mutation(key))

    def innermost_scope_keys(self) -> list[str]:
        """
        Keys mutated in the innermost scope, most recent first, without
        removing anything from the log.

        Raises:
            MissingScopeError: If the log holds no scope-start marker.
        """
        if self._scopes == 0:
            raise MissingScopeError(len(self._entries))

        keys = []
        for entry in reversed(self._entries):
            if entry.is_scope_start():
                break
            keys.append(entry.key)
        return keys

    def drain_to_last_scope_start(self) -> list[str]:
        """
        Remove the innermost scope from the log.

        Returns:
            Keys mutated in that scope, most recent first. A key written
            several times appears once per write.

        Raises:
            MissingScopeError: If the log holds no scope-start marker.
        """
        if self._scopes == 0:
            raise MissingScopeError(len(self._entries))

        keys = []
        while True:
            entry = self._entries.pop()
            if entry.is_scope_start():
                break
            keys.append(entry.key)
        self._scopes -= 1
        return keys

    def clear(self) -> None:
        self._entries.clear()
        self._scopes = 0

    def mutated_keys(self) -> set[str]:
        """Distinct keys referenced by any mutation marker in the log."""
        return {entry.key for entry in self._entries if not entry.is_scope_start()}

    def scope_count(self) -> int:
        return self._scopes

    def __len__(self) -> int:
        return len(self._entries)
