"""Object key sanitization."""
from __future__ import annotations

import re

__all__ = ["sanitize_object_key"]

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9\-_./]")


def sanitize_object_key(object_key: str) -> str:
    """
    Strip every character outside ``[A-Za-z0-9-_./]`` from an object key.

    This is a character filter, not percent-encoding. It never fails and is
    idempotent; the result may be empty if the input held no safe characters.

    Examples:
        >>> sanitize_object_key("folder/my file (1).zip")
        'folder/myfile1.zip'
    """
    return _UNSAFE_KEY_CHARS.sub("", object_key)
