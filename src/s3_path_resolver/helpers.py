"""
One-shot helpers around PathResolver.

Each call builds a resolver from the given configuration, converts any
resolution failure into a False sentinel, and hands the failure to an
optional error callback first.

Example:
    >>> parse_path("/my-bucket/my-object.zip", "my-default-bucket").bucket
    'my-bucket'
    >>> is_valid_path("https://example.com/file.zip")
    False
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Literal, Optional, Union

from .errors import PathResolutionError
from .models import ResolvedPath
from .resolver import PathResolver

__all__ = ["ErrorCallback", "parse_path", "is_valid_path"]

logger = logging.getLogger(__name__)

ErrorCallback = Callable[[PathResolutionError], None]


def parse_path(
    path: str,
    default_bucket: str = "",
    allowed_extensions: Iterable[str] = (),
    disallowed_protocols: Iterable[str] = (),
    error_callback: Optional[ErrorCallback] = None,
) -> Union[ResolvedPath, Literal[False]]:
    """
    Resolve a path into bucket and object key, returning False on failure.

    Args:
        path: Storage path to resolve
        default_bucket: Bucket used when the path does not name one
        allowed_extensions: Allowed file extensions without leading dots
        disallowed_protocols: Protocols rejected in paths; empty keeps the defaults
        error_callback: Called with the failure before False is returned

    Returns:
        ResolvedPath, or False if the path (or the default bucket) is invalid
    """
    try:
        resolver = PathResolver(default_bucket, allowed_extensions, disallowed_protocols)
        return resolver.resolve(path)
    except PathResolutionError as e:
        logger.debug(f"parse_path failed for {path!r}: {e}")
        if error_callback is not None:
            error_callback(e)
        return False


def is_valid_path(
    path: str,
    default_bucket: str = "",
    allowed_extensions: Iterable[str] = (),
    disallowed_protocols: Iterable[str] = (),
    error_callback: Optional[ErrorCallback] = None,
) -> bool:
    """
    Determine if the provided path is a valid storage path.

    Only configuration errors (an invalid default bucket) reach the error
    callback; an invalid path simply yields False.

    Args:
        path: Path to check
        default_bucket: Bucket used when the path does not name one
        allowed_extensions: Allowed file extensions without leading dots
        disallowed_protocols: Protocols rejected in paths; empty keeps the defaults
        error_callback: Called with a configuration failure before False is returned

    Returns:
        True if the path resolves under this configuration
    """
    try:
        resolver = PathResolver(default_bucket, allowed_extensions, disallowed_protocols)
    except PathResolutionError as e:
        logger.debug(f"is_valid_path could not build resolver: {e}")
        if error_callback is not None:
            error_callback(e)
        return False
    return resolver.is_valid(path)
