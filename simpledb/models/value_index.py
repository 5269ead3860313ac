"""
ValueIndex - Reverse index from a value to the keys currently holding it.
"""

from simpledb.models.value import Value


class ValueIndex:
    """
    Maps each regular value to the set of keys whose current slot holds it.

    Tombstones and unassigned slots are never indexed. The index is updated
    incrementally from the before/after value of every store mutation, so
    count_equal_to is O(1).
    """

    def __init__(self) -> None:
        self._keys_by_value: dict[str, set[str]] = {}

    def reindex(self, key: str, old: Value | None, new: Value | None) -> None:
        """
        Move key from the set of old to the set of new.

        Args:
            key: The key whose current value changed.
            old: The value current before the change (None if none).
            new: The value current after the change (None if none).
        """
        if old is not None and old.is_regular():
            keys = self._keys_by_value.get(old.data)
            if keys is not None:
                keys.discard(key)
                if not keys:
                    del self._keys_by_value[old.data]

        if new is not None and new.is_regular():
            self._keys_by_value.setdefault(new.data, set()).add(key)

    def count_equal_to(self, value: str) -> int:
        """
        Count keys whose current value equals value.

        Args:
            value: The value to look up.

        Returns:
            Number of keys holding value, 0 if none.
        """
        keys = self._keys_by_value.get(value)
        return 0 if keys is None else len(keys)

    def keys_equal_to(self, value: str) -> frozenset[str]:
        return frozenset(self._keys_by_value.get(value, ()))

    def size(self) -> int:
        """Number of distinct values currently held by at least one key."""
        return len(self._keys_by_value)
