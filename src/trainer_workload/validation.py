"""Trainer identity checks."""

from typing import Any


def is_valid_trainer(identity: Any) -> bool:
    """
    Check that a trainer identity carries a usable username.

    Args:
        identity: A username string, None, or any object with a ``username``
            attribute (a record or an event)

    Returns:
        True if the username is a string that is not blank after trimming
    """
    if identity is None or isinstance(identity, str):
        username = identity
    else:
        username = getattr(identity, "username", None)
    return isinstance(username, str) and bool(username.strip())
