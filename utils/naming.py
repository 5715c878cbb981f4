"""
utils/naming.py
---------------
Naming conventions shared by record types, collections and the query builder.

Logical property names (``rawText``, ``createdAt``) map to physical column
names (``raw_text``, ``created_at``). A collection class is named after its
record class plus ``COLLECTION_SUFFIX``.
"""

import re
from typing import Optional

COLLECTION_SUFFIX = "Collection"

_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_IDENTIFIER = re.compile(r"^[a-z_][a-z0-9_]*$")


def convert_from_camel_case(name: str) -> str:
    """Translate a logical property name into its snake_case column name."""
    return _CAMEL_BOUNDARY.sub(r"\1_\2", name).lower()


def is_safe_identifier(name: str) -> bool:
    """True for plain lowercase SQL identifiers that need no escaping."""
    return bool(_IDENTIFIER.match(name))


def strip_collection_suffix(class_name: str) -> Optional[str]:
    """
    Derive the record class name from a collection class name.

    Returns:
        ``"User"`` for ``"UserCollection"``; None when the suffix is
        missing or nothing precedes it.
    """
    if not class_name.endswith(COLLECTION_SUFFIX):
        return None
    return class_name[: -len(COLLECTION_SUFFIX)] or None
