"""
Data models for the database engine.
"""

from simpledb.models.value import Value, ValueType
from simpledb.models.value_store import ValueStore
from simpledb.models.value_index import ValueIndex
from simpledb.models.transaction_log import LogEntry, TransactionLog
from simpledb.models.outcome import CommitOutcome, RollbackOutcome, UnsetOutcome

__all__ = [
    "Value",
    "ValueType",
    "ValueStore",
    "ValueIndex",
    "LogEntry",
    "TransactionLog",
    "CommitOutcome",
    "RollbackOutcome",
    "UnsetOutcome",
]
