"""
Outcomes returned by the engine's mutating operations.

These are ordinary return values for the caller to render; none of them
leaves the engine in an inconsistent state.
"""

from enum import Enum


class UnsetOutcome(Enum):
    """Result of unsetting a key."""

    OK = "ok"
    NOT_ASSIGNED = "not_assigned"  # Key was never written


class CommitOutcome(Enum):
    """Result of committing the open transaction scopes."""

    NO_TRANSACTION = "no_transaction"
    NOTHING_TO_COMMIT = "nothing_to_commit"
    COMMITTED = "committed"


class RollbackOutcome(Enum):
    """Result of rolling back the innermost transaction scope."""

    NO_TRANSACTION = "no_transaction"
    NOTHING_TO_ROLLBACK = "nothing_to_rollback"
    ROLLED_BACK = "rolled_back"
