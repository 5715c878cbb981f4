"""
repositories/user_collection.py
-------------------------------
Batch queries over the `users` table.
"""

from typing import Optional

from models.user import User
from repositories.collection import DataCollection


class UserCollection(DataCollection):
    """Collection of User records."""

    @classmethod
    def get_by_status(cls, status, db=None) -> list[User]:
        """All users with the given status (or any of a list of statuses), by id."""
        return cls.get_with({"status": status}, order=["id"], db=db)

    @classmethod
    def get_by_username(cls, username: str, db=None) -> Optional[User]:
        """The user with this username, or None if absent or not unique."""
        return cls.get_one({"username": username}, coalesce=False, db=db)
