"""
models/ - Record Types
======================
Each record type maps one table: its columns, its base SELECT and how a
row is hydrated into an object. Importing this package registers them all.
"""

from models.expense import Expense
from models.user import User

__all__ = ["Expense", "User"]
