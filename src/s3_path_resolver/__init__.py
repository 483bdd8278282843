"""
S3 Path Resolver.

Resolves and validates S3-style object paths into a bucket name and an
object key, enforcing bucket naming rules, extension allow-lists and
protocol deny-lists.
"""
from .errors import (
    DisallowedProtocol,
    EmptyPath,
    InvalidBucketName,
    InvalidExtension,
    NoBucketAvailable,
    PathResolutionError,
)
from .helpers import is_valid_path, parse_path
from .models import ResolvedPath
from .resolver import PathResolver, ResolverConfig
from .sanitize import sanitize_object_key
from .settings import DEFAULT_DISALLOWED_PROTOCOLS, Settings, create_settings_from_env
from .validate import validate_bucket

__all__ = [
    "PathResolver",
    "ResolverConfig",
    "ResolvedPath",
    "parse_path",
    "is_valid_path",
    "validate_bucket",
    "sanitize_object_key",
    "Settings",
    "create_settings_from_env",
    "DEFAULT_DISALLOWED_PROTOCOLS",
    "PathResolutionError",
    "EmptyPath",
    "DisallowedProtocol",
    "InvalidExtension",
    "NoBucketAvailable",
    "InvalidBucketName",
]
