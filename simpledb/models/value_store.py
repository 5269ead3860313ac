"""
ValueStore - Per-key stacks of value snapshots.
"""

from collections.abc import Iterator

from simpledb.models.exceptions import UndoUnderflowError
from simpledb.models.value import Value


class ValueStore:
    """
    Maps each key to a stack of value slots.

    The top of a stack is the key's current value (possibly a tombstone).
    Slots below the top are prior values kept only so that a rollback can
    restore them. A stack, once created, always holds at least one slot.

    Writes made outside a transaction overwrite the top slot in place.
    Writes made inside a transaction push a new slot.
    """

    def __init__(self) -> None:
        # Stacks are stored bottom-first; the current value is at [-1]
        self._stacks: dict[str, list[Value]] = {}

    def has(self, key: str) -> bool:
        """
        Check if key has ever been assigned.

        Args:
            key: The key to check.

        Returns:
            True if the key has a value stack (even a tombstoned one).
        """
        return key in self._stacks

    def write(self, key: str, value: Value, keep_history: bool) -> Value | None:
        """
        Make value the current value of key.

        Args:
            key: The key to write.
            value: The new current value.
            keep_history: Push the value instead of overwriting, so the
                previous value survives for a rollback.

        Returns:
            The value that was current before the write, None if the key
            had no stack.
        """
        stack = self._stacks.get(key)
        if stack is None:
            # A key born inside a transaction gets a base slot so that undoing
            # its first write never empties the stack
            stack = [Value.unassigned(), value] if keep_history else [value]
            self._stacks[key] = stack
            return None

        previous = stack[-1]
        if keep_history:
            stack.append(value)
        else:
            stack[-1] = value
        return previous

    def write_tombstone(self, key: str, keep_history: bool) -> Value | None:
        """
        Mark key as unset.

        Args:
            key: The key to unset.
            keep_history: Push the tombstone instead of overwriting.

        Returns:
            The value that was current before the write, or None if the key
            was never assigned (in which case nothing is written).
        """
        if key not in self._stacks:
            return None
        return self.write(key, Value.tombstone(), keep_history)

    def current_value(self, key: str) -> Value | None:
        """
        Retrieve the current slot of key.

        Args:
            key: The key to look up.

        Returns:
            The current Value (possibly a tombstone), None if never assigned.
        """
        stack = self._stacks.get(key)
        if stack is None:
            return None
        return stack[-1]

    def pop_undo(self, key: str) -> Value:
        """
        Remove and return the current slot of key, exposing the one below.

        When only the unassigned base slot remains afterwards, the key's
        stack is dropped and the key reads as never assigned again.

        Args:
            key: The key to undo one write for.

        Returns:
            The removed Value.

        Raises:
            UndoUnderflowError: If the key has no stack or a single slot.
        """
        stack = self._stacks.get(key)
        if stack is None or len(stack) <= 1:
            raise UndoUnderflowError(key, 0 if stack is None else len(stack))

        removed = stack.pop()
        if len(stack) == 1 and stack[0].is_unassigned():
            del self._stacks[key]
        return removed

    def collapse_history(self, key: str) -> None:
        """Discard every slot of key except the current one."""
        stack = self._stacks.get(key)
        if stack is not None and len(stack) > 1:
            del stack[:-1]

    def depth_of(self, key: str) -> int:
        """Number of slots held for key (0 if never assigned)."""
        return len(self._stacks.get(key, ()))

    def keys(self) -> Iterator[str]:
        return iter(self._stacks)

    def size(self) -> int:
        return len(self._stacks)
