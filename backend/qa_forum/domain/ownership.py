"""Ownership rule shared by every mutating operation."""

from typing import Any
from uuid import UUID


def normalize_identity(identity: Any) -> str:
    """Reduce a user identifier to a canonical string form.

    Stored ids and ids resolved from a request may differ in type (``UUID``
    vs ``str``) or in casing/whitespace, so UUID-shaped values are rendered
    in their canonical lowercase hyphenated form.
    """
    if isinstance(identity, UUID):
        return str(identity)
    text = str(identity).strip()
    try:
        return str(UUID(text))
    except ValueError:
        return text


def is_owner(acting_identity: Any, owner_identity: Any) -> bool:
    """Return True if the acting identity owns the resource."""
    if acting_identity is None or owner_identity is None:
        return False
    return normalize_identity(acting_identity) == normalize_identity(owner_identity)
