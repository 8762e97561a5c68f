"""Common utilities."""

from uuid import UUID, uuid4


def create_id() -> UUID:
    """Create a new random id."""
    return uuid4()
