"""
Engine package: the public Engine API and its transaction controller.
"""

from simpledb.engine.engine import Engine
from simpledb.engine.controller import TransactionController

__all__ = ["Engine", "TransactionController"]
