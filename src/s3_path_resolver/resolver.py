"""
Storage path resolution.

PathResolver splits S3-style path strings into a bucket and an object key.
It checks for disallowed protocols, validates file extensions, applies the
default bucket where the path omits one, validates the bucket name and
sanitizes the object key.

Example:
    >>> resolver = PathResolver("my-default-bucket", ["zip", "jpg"], ["ftp://"])
    >>> resolver.resolve("/my-bucket/my-object.zip").object_key
    'my-object.zip'
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from .errors import (
    DisallowedProtocol,
    EmptyPath,
    InvalidExtension,
    NoBucketAvailable,
    PathResolutionError,
)
from .models import ResolvedPath
from .sanitize import sanitize_object_key
from .settings import DEFAULT_DISALLOWED_PROTOCOLS, Settings
from .validate import file_extension, find_disallowed_protocol, has_valid_extension, validate_bucket

__all__ = ["PathResolver", "ResolverConfig"]

logger = logging.getLogger(__name__)


def _unique(items: Iterable[str]) -> Tuple[str, ...]:
    return tuple(dict.fromkeys(items))


@dataclass(frozen=True)
class ResolverConfig:
    """
    Immutable configuration snapshot used by a single resolution.

    Attributes:
        default_bucket: Bucket used when a path omits one (empty = none)
        allowed_extensions: Permitted extensions, case-sensitive (empty = any)
        disallowed_protocols: Substrings rejected anywhere in a path
    """
    default_bucket: str = ""
    allowed_extensions: Tuple[str, ...] = ()
    disallowed_protocols: Tuple[str, ...] = DEFAULT_DISALLOWED_PROTOCOLS


class PathResolver:
    """
    Resolve storage paths into bucket and object key.

    Configuration lives in a frozen ResolverConfig. The mutators build a new
    snapshot and swap it in, so every resolve/is_valid call sees one
    consistent configuration. Concurrent read-only use is safe; callers that
    mutate while other threads resolve must synchronize externally.
    """

    def __init__(
        self,
        default_bucket: str = "",
        allowed_extensions: Iterable[str] = (),
        disallowed_protocols: Iterable[str] = (),
    ):
        """
        Args:
            default_bucket: Bucket used when the path does not name one
            allowed_extensions: Allowed file extensions without leading dots
            disallowed_protocols: Protocols rejected in paths; empty keeps the defaults

        Raises:
            InvalidBucketName: If default_bucket is non-empty and invalid
        """
        self._config = ResolverConfig()
        self.set_default_bucket(default_bucket)
        self.set_allowed_extensions(allowed_extensions)
        self.set_disallowed_protocols(disallowed_protocols)

    @classmethod
    def from_settings(cls, settings: Settings) -> PathResolver:
        """Create a resolver from loaded Settings."""
        return cls(
            default_bucket=settings.default_bucket,
            allowed_extensions=settings.allowed_extensions,
            disallowed_protocols=settings.disallowed_protocols,
        )

    @property
    def config(self) -> ResolverConfig:
        return self._config

    @property
    def default_bucket(self) -> str:
        return self._config.default_bucket

    @property
    def allowed_extensions(self) -> Tuple[str, ...]:
        return self._config.allowed_extensions

    @property
    def disallowed_protocols(self) -> Tuple[str, ...]:
        return self._config.disallowed_protocols

    # Configuration mutators

    def set_default_bucket(self, default_bucket: str) -> None:
        """
        Set the bucket used when a path does not name one.

        Leading and trailing slashes are trimmed. An empty value clears the
        default.

        Raises:
            InvalidBucketName: If the trimmed name is non-empty and invalid
        """
        bucket = default_bucket.strip("/")
        if bucket:
            validate_bucket(bucket)
        self._config = dataclasses.replace(self._config, default_bucket=bucket)

    def set_allowed_extensions(self, allowed_extensions: Iterable[str]) -> None:
        """Replace the allowed extensions (de-duplicated, order kept)."""
        self._config = dataclasses.replace(self._config, allowed_extensions=_unique(allowed_extensions))

    def add_allowed_extension(self, extension: str) -> None:
        """Add one allowed extension if it is not already present."""
        extension = extension.strip()
        if extension not in self._config.allowed_extensions:
            self._config = dataclasses.replace(
                self._config,
                allowed_extensions=self._config.allowed_extensions + (extension,),
            )

    def set_disallowed_protocols(self, disallowed_protocols: Iterable[str]) -> None:
        """
        Replace the disallowed protocols.

        An empty list (or one holding only blank entries) is ignored and the
        current list, initially the built-in defaults, is kept; a non-empty
        list replaces it wholesale.
        """
        protocols = _unique(p for p in disallowed_protocols if p.strip())
        if protocols:
            self._config = dataclasses.replace(self._config, disallowed_protocols=protocols)

    def add_disallowed_protocol(self, protocol: str) -> None:
        """Add one disallowed protocol if it is not blank or already present."""
        protocol = protocol.strip()
        if protocol and protocol not in self._config.disallowed_protocols:
            self._config = dataclasses.replace(
                self._config,
                disallowed_protocols=self._config.disallowed_protocols + (protocol,),
            )

    # Checks

    def has_disallowed_protocol(self, path: str) -> bool:
        """Check if the path contains any disallowed protocol."""
        return find_disallowed_protocol(path, self._config.disallowed_protocols) is not None

    def has_valid_extension(self, path: str) -> bool:
        """Check if the path's file extension is acceptable."""
        return has_valid_extension(path, self._config.allowed_extensions)

    def resolve(self, path: str) -> ResolvedPath:
        """
        Resolve a path into its bucket and object key.

        A path starting with '/' names its bucket in the first segment; a
        single segment after the slash is an object key in the default
        bucket. A path without a leading '/' lives in the default bucket when
        one is set, otherwise its first segment is the bucket.

        The extension is checked on the raw path, before the key is
        sanitized. A key whose extension held only unsafe characters (for
        example "file.é" becoming "file.") resolves, but its canonical
        path no longer passes the extension check.

        Args:
            path: Raw path, surrounding whitespace allowed

        Returns:
            ResolvedPath with validated bucket and sanitized object key

        Raises:
            EmptyPath: If the path is empty after trimming
            DisallowedProtocol: If the path contains a deny-listed protocol
            InvalidExtension: If the extension is missing or not allowed
            NoBucketAvailable: If no bucket can be determined
            InvalidBucketName: If the bucket fails the naming rules

        Examples:
            >>> PathResolver().resolve("/mybucket/folder1/folder2/file.zip").object_key
            'folder1/folder2/file.zip'

            >>> PathResolver("default-bucket-name").resolve("my-file.zip").bucket
            'default-bucket-name'
        """
        config = self._config
        bucket, raw_key = self._split(path, config)
        object_key = sanitize_object_key(raw_key)
        if not object_key:
            logger.warning(f"Resolved empty object key for path {path!r} in bucket {bucket}")

        logger.debug(f"Resolved {path!r} to bucket={bucket} key={object_key}")
        return ResolvedPath(bucket=bucket, object_key=object_key)

    def is_valid(self, path: str) -> bool:
        """
        Check whether a path would resolve.

        Runs the same checks as resolve, up to and including bucket
        validation, and returns False at the first failure instead of
        raising. The object key is not sanitized.
        """
        try:
            self._split(path, self._config)
        except PathResolutionError as e:
            logger.debug(f"Path {path!r} is not valid: {e}")
            return False
        return True

    def _split(self, path: str, config: ResolverConfig) -> Tuple[str, str]:
        """Run every validation step and return (bucket, unsanitized key)."""
        path = path.strip()

        if not path:
            raise EmptyPath("The provided path is empty.", path=path)

        protocol = find_disallowed_protocol(path, config.disallowed_protocols)
        if protocol is not None:
            raise DisallowedProtocol(
                f"The provided path contains a disallowed protocol ({protocol}): {path}",
                path=path,
                protocol=protocol,
            )

        if not has_valid_extension(path, config.allowed_extensions):
            extension = file_extension(path)
            raise InvalidExtension(
                f"The provided path has an invalid file extension ({extension or 'none'}): {path}",
                path=path,
                extension=extension,
            )

        if path.startswith("/"):
            remainder = path.lstrip("/")
            segments = remainder.split("/")
            if len(segments) < 2:
                # Single segment after the slash: object key in the default bucket
                if not config.default_bucket:
                    raise NoBucketAvailable(
                        f"No bucket provided and no default bucket set: {path}", path=path
                    )
                bucket, raw_key = config.default_bucket, remainder
            else:
                bucket, raw_key = segments[0], "/".join(segments[1:])
        elif config.default_bucket:
            bucket, raw_key = config.default_bucket, path
        else:
            segments = path.split("/")
            if len(segments) < 2:
                raise NoBucketAvailable(
                    f"The provided path does not contain a bucket and no default bucket is set: {path}",
                    path=path,
                )
            bucket, raw_key = segments[0], "/".join(segments[1:])

        try:
            validate_bucket(bucket)
        except PathResolutionError as e:
            e.path = path
            raise

        return bucket, raw_key

    def __repr__(self) -> str:
        return (
            f"PathResolver(default_bucket={self.default_bucket!r}, "
            f"allowed_extensions={list(self.allowed_extensions)!r}, "
            f"disallowed_protocols={list(self.disallowed_protocols)!r})"
        )
