"""
models/user.py
--------------
Record type for application users.
"""

from models.base import Column, DataModel


class User(DataModel):
    """
    One row of the `users` table.

    Attributes:
        id: Database primary key.
        username: Unique login name.
        email: Contact address.
        status: Account state, e.g. 'active' or 'inactive'.
        created_at: Timestamp when the record was created.
    """
    table = "users"
    columns = (
        Column("id", "integer", primary_key=True),
        Column("username", "varchar"),
        Column("email", "varchar"),
        Column("status", "varchar"),
        Column("created_at", "timestamptz"),
    )

    def is_active(self) -> bool:
        return self.status == "active"

    def __str__(self) -> str:
        return f"{self.username} <{self.email}> ({self.status})"
