"""
Custom exceptions for the database engine.
"""


class ConsistencyError(Exception):
    """
    Raised when the engine's internal bookkeeping disagrees with itself.

    This is a fail-fast error: it signals a programming bug in the
    transaction machinery, never a user mistake.
    """


class UndoUnderflowError(ConsistencyError):
    """
    Raised when an undo would pop the only remaining slot of a key.
    """

    def __init__(self, key: str, slots: int):
        """
        Initialize underflow error.

        Args:
            key: The key whose value stack was popped.
            slots: Number of slots the stack held at the time.
        """
        self.key = key
        self.slots = slots
        super().__init__(
            f"Cannot undo write to {key!r}: value stack holds {slots} slot(s)"
        )


class MissingScopeError(ConsistencyError):
    """
    Raised when the transaction log is drained but holds no scope-start marker.
    """

    def __init__(self, mutations: int = 0):
        self.mutations = mutations
        super().__init__(
            f"Transaction log has no open scope ({mutations} orphan mutation(s))"
        )
