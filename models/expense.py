"""
models/expense.py
-----------------
Record type for financial transactions (expenses and income).
"""

from models.base import Column, DataModel


class Expense(DataModel):
    """
    Represents a single financial transaction.

    Attributes:
        id: Database primary key (None for new records).
        user_id: Owning user ID.
        type: Either 'expense' or 'income'.
        amount: Transaction amount in the specified currency.
        currency: ISO currency code.
        category: Spending category (e.g., food, transport).
        description: Optional human-readable note.
        date: Date of the transaction.
        raw_text: The original text the transaction was entered as.
        created_at: Timestamp when the record was created.
    """
    table = "expenses"
    columns = (
        Column("id", "integer", primary_key=True),
        Column("user_id", "integer"),
        Column("type", "varchar"),  # 'expense' | 'income'
        Column("amount", "numeric"),
        Column("currency", "varchar"),
        Column("category", "varchar"),
        Column("description", "text"),
        Column("date", "date"),
        Column("raw_text", "text"),
        Column("created_at", "timestamptz"),
    )

    def is_expense(self) -> bool:
        """Returns True if this is an expense transaction."""
        return self.type == "expense"

    def is_income(self) -> bool:
        """Returns True if this is an income transaction."""
        return self.type == "income"

    def __str__(self) -> str:
        sign = "-" if self.is_expense() else "+"
        return f"{sign}{float(self.amount or 0):.2f} {self.currency} | {self.category} | {self.date}"
