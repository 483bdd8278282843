"""
Path resolution error classes.

Provides a clear taxonomy of the failures that can occur while resolving a
storage path into a bucket and object key. All of them are local validation
failures: deterministic, never retried, and never fatal to the process.
"""
from __future__ import annotations

from typing import Optional


class PathResolutionError(ValueError):
    """
    Base class for all path resolution errors.

    Subclasses ValueError so callers that only care about "bad input" can
    catch the builtin without importing this module.
    """

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class EmptyPath(PathResolutionError):
    """
    The provided path is empty.

    Raised when the input is empty or consists only of whitespace.
    """
    pass


class DisallowedProtocol(PathResolutionError):
    """
    The provided path contains a disallowed protocol.

    Raised when any configured deny-listed substring (e.g. "https://",
    "ftp://") appears anywhere in the path.
    """

    def __init__(self, message: str, path: Optional[str] = None, protocol: Optional[str] = None):
        super().__init__(message, path)
        self.protocol = protocol


class InvalidExtension(PathResolutionError):
    """
    The provided path has a missing or disallowed file extension.

    Raised when:
    - An allow-list is configured and the extension is not in it
    - No allow-list is configured and the path has no extension at all
    """

    def __init__(self, message: str, path: Optional[str] = None, extension: Optional[str] = None):
        super().__init__(message, path)
        self.extension = extension


class NoBucketAvailable(PathResolutionError):
    """
    No bucket can be derived from the path or the configuration.

    Raised when the path names no bucket and no default bucket is set.
    """
    pass


class InvalidBucketName(PathResolutionError):
    """
    Bucket name violates the naming rules.

    Raised when:
    - Length is below 3 or above 63 characters
    - Name contains anything but lowercase letters, digits, hyphens and dots
    """

    def __init__(self, message: str, bucket: str, path: Optional[str] = None):
        super().__init__(message, path)
        self.bucket = bucket


__all__ = [
    "PathResolutionError",
    "EmptyPath",
    "DisallowedProtocol",
    "InvalidExtension",
    "NoBucketAvailable",
    "InvalidBucketName",
]
