"""
repositories/expense_collection.py
----------------------------------
Batch queries over the `expenses` table.
"""

from typing import Optional, Sequence

from models.expense import Expense
from repositories.collection import DataCollection


class ExpenseCollection(DataCollection):
    """Collection of Expense records."""

    @classmethod
    def get_for_user(
        cls,
        user_id: int,
        tx_type: Optional[str] = None,
        limit: Optional[Sequence[int]] = None,
        db=None,
    ) -> list[Expense]:
        """
        Fetch a user's transactions, newest first.

        Args:
            user_id: Owning user ID.
            tx_type: Optional filter ('expense' or 'income').
            limit: Passed through to `get_with`, e.g. ``(20,)``.

        Returns:
            List of Expense objects ordered by date and id, descending.
        """
        properties = {"userId": user_id}
        if tx_type:
            properties["type"] = tx_type
        return cls.get_with(properties, order=["date", "id"], direction="desc", limit=limit, db=db)

    @classmethod
    def get_by_category(cls, user_id: int, category: str, db=None) -> list[Expense]:
        """Fetch a user's transactions in one category, newest first."""
        return cls.get_with(
            {"userId": user_id, "category": category},
            order=["date", "id"],
            direction="desc",
            db=db,
        )
