"""
Settings and configuration for the S3 path resolver.

Centralizes configuration values and provides validation with fail-fast behavior.
Loads settings from environment variables when a resolver or CLI command is built.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from .validate import validate_bucket

__all__ = ["Settings", "create_settings_from_env", "DEFAULT_DISALLOWED_PROTOCOLS"]

DEFAULT_DISALLOWED_PROTOCOLS: Tuple[str, ...] = ("https://", "http://", "ftp://", "s3://")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for path resolution.

    Attributes:
        default_bucket: Bucket used when a path omits one (empty = none)
        allowed_extensions: Permitted file extensions without dots (empty = any)
        disallowed_protocols: Substrings that mark a path as not a storage path
            (empty = built-in defaults)
    """
    default_bucket: str = ""
    allowed_extensions: Tuple[str, ...] = ()
    disallowed_protocols: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate settings on construction."""
        bucket = self.default_bucket.strip("/")
        if bucket:
            validate_bucket(bucket)
        # frozen, so normalize through object.__setattr__
        object.__setattr__(self, "default_bucket", bucket)
        object.__setattr__(
            self, "disallowed_protocols", tuple(p for p in self.disallowed_protocols if p.strip())
        )

        for ext in self.allowed_extensions:
            if ext.startswith("."):
                raise ValueError(f"allowed extension must not start with '.': {ext}")

    @property
    def effective_disallowed_protocols(self) -> Tuple[str, ...]:
        """Configured protocols, or the built-in defaults when none are set."""
        return self.disallowed_protocols or DEFAULT_DISALLOWED_PROTOCOLS


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - S3_PATH_DEFAULT_BUCKET (default: empty)
        - S3_PATH_ALLOWED_EXTENSIONS (comma-separated, default: empty)
        - S3_PATH_DISALLOWED_PROTOCOLS (comma-separated, default: built-in list)

    Returns:
        Settings object with validated configuration

    Raises:
        InvalidBucketName: If S3_PATH_DEFAULT_BUCKET is not a valid bucket
        ValueError: If an allowed extension is malformed

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    def get_list(key: str) -> Tuple[str, ...]:
        value = os.getenv(key, "")
        return tuple(item.strip() for item in value.split(",") if item.strip())

    return Settings(
        default_bucket=os.getenv("S3_PATH_DEFAULT_BUCKET", ""),
        allowed_extensions=get_list("S3_PATH_ALLOWED_EXTENSIONS"),
        disallowed_protocols=get_list("S3_PATH_DISALLOWED_PROTOCOLS"),
    )
