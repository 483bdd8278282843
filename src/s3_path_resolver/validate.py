"""
Stateless validation rules for storage paths.

Bucket naming, file extension membership and protocol deny-list checks.
These are plain functions so they can be used standalone as well as from
PathResolver.
"""
from __future__ import annotations

import re
from typing import Iterable

from .errors import InvalidBucketName

__all__ = [
    "BUCKET_MIN_LENGTH",
    "BUCKET_MAX_LENGTH",
    "validate_bucket",
    "is_valid_bucket",
    "file_extension",
    "has_valid_extension",
    "find_disallowed_protocol",
    "has_disallowed_protocol",
]

BUCKET_MIN_LENGTH = 3
BUCKET_MAX_LENGTH = 63

_BUCKET_CHARS = re.compile(r"^[a-z0-9\-.]+$")


def validate_bucket(name: str) -> None:
    """
    Validate a bucket name against the naming rules.

    Rules:
    - Between 3 and 63 characters long
    - Only lowercase letters, digits, hyphens and dots

    Args:
        name: Candidate bucket name

    Raises:
        InvalidBucketName: If the name violates either rule

    Examples:
        >>> validate_bucket("my-bucket.1")

        >>> validate_bucket("ab")
        InvalidBucketName: Bucket name length should be between 3 and 63 characters: ab
    """
    if len(name) < BUCKET_MIN_LENGTH or len(name) > BUCKET_MAX_LENGTH:
        raise InvalidBucketName(
            f"Bucket name length should be between {BUCKET_MIN_LENGTH} and "
            f"{BUCKET_MAX_LENGTH} characters: {name}",
            bucket=name,
        )

    if not _BUCKET_CHARS.match(name):
        raise InvalidBucketName(
            "Bucket name contains invalid characters. Only lowercase letters, "
            f"numbers, hyphens, and dots are allowed: {name}",
            bucket=name,
        )


def is_valid_bucket(name: str) -> bool:
    """Return True if name passes validate_bucket."""
    try:
        validate_bucket(name)
    except InvalidBucketName:
        return False
    return True


def file_extension(path: str) -> str:
    """
    Extract the file extension from the final segment of a path.

    Trailing slashes are ignored. The extension is the text after the last
    dot of the final segment, without the dot; empty if there is no dot.

    Examples:
        >>> file_extension("/bucket/archive.tar.gz")
        'gz'

        >>> file_extension("bucket/folder/")
        ''
    """
    name = path.rstrip("/").rsplit("/", 1)[-1]
    if "." not in name:
        return ""
    return name.rsplit(".", 1)[1]


def has_valid_extension(path: str, allowed_extensions: Iterable[str] = ()) -> bool:
    """
    Check the path's extension against an allow-list.

    With a non-empty allow-list the extension must be a member (exact,
    case-sensitive match). With an empty allow-list any non-empty extension
    is accepted.
    """
    extension = file_extension(path)
    allowed = tuple(allowed_extensions)
    if allowed:
        return extension in allowed
    return bool(extension)


def find_disallowed_protocol(path: str, protocols: Iterable[str]) -> str | None:
    """Return the first deny-listed protocol found anywhere in path, or None."""
    for protocol in protocols:
        if protocol and protocol in path:
            return protocol
    return None


def has_disallowed_protocol(path: str, protocols: Iterable[str]) -> bool:
    """Return True if path contains any of the given protocol substrings."""
    return find_disallowed_protocol(path, protocols) is not None
