"""
S3 Path Resolver CLI

Implements 3 CLI verbs:
- resolve: Split a path into bucket and object key
- check: Report whether a path is valid under the configuration
- env: Show the configuration loaded from the environment

Command-line options override the S3_PATH_* environment settings.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional

import typer

from .operations import run_and_exit
from .operations.printers import print_resolved_path, print_settings, print_validity
from .resolver import PathResolver
from .settings import Settings, create_settings_from_env

app = typer.Typer(name="s3-path", help="Resolve and validate S3-style object paths")

def _build_settings(
    default_bucket: Optional[str],
    extensions: Optional[List[str]],
    deny_protocols: Optional[List[str]],
) -> Settings:
    """
    Load settings from the environment and apply command-line overrides.

    Args:
        default_bucket: Override for S3_PATH_DEFAULT_BUCKET ("" clears it)
        extensions: Override for S3_PATH_ALLOWED_EXTENSIONS
        deny_protocols: Override for S3_PATH_DISALLOWED_PROTOCOLS

    Returns:
        Validated Settings
    """
    settings = create_settings_from_env()
    overrides = {}
    if default_bucket is not None:
        overrides["default_bucket"] = default_bucket
    if extensions:
        overrides["allowed_extensions"] = tuple(extensions)
    if deny_protocols:
        overrides["disallowed_protocols"] = tuple(deny_protocols)
    return dataclasses.replace(settings, **overrides) if overrides else settings

def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

@app.command()
def resolve(
    path: str = typer.Argument(..., help="Path to resolve, e.g. /my-bucket/file.zip"),
    default_bucket: Optional[str] = typer.Option(None, "--default-bucket", help="Bucket for paths that omit one"),
    ext: Optional[List[str]] = typer.Option(None, "--ext", help="Allowed file extension (repeatable)"),
    deny_protocol: Optional[List[str]] = typer.Option(None, "--deny-protocol", help="Disallowed protocol (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """Split a path into bucket and object key."""
    _configure_logging(verbose)

    def _resolve() -> None:
        settings = _build_settings(default_bucket, ext, deny_protocol)
        resolved = PathResolver.from_settings(settings).resolve(path)
        print_resolved_path(resolved, as_json=as_json)

    run_and_exit(_resolve)

@app.command()
def check(
    path: str = typer.Argument(..., help="Path to check"),
    default_bucket: Optional[str] = typer.Option(None, "--default-bucket", help="Bucket for paths that omit one"),
    ext: Optional[List[str]] = typer.Option(None, "--ext", help="Allowed file extension (repeatable)"),
    deny_protocol: Optional[List[str]] = typer.Option(None, "--deny-protocol", help="Disallowed protocol (repeatable)"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """Check whether a path is valid. Exits 0 when valid, 1 when not."""
    _configure_logging(verbose)

    def _check() -> None:
        settings = _build_settings(default_bucket, ext, deny_protocol)
        valid = PathResolver.from_settings(settings).is_valid(path)
        print_validity(path, valid, as_json=as_json)
        if not valid:
            raise typer.Exit(code=1)

    run_and_exit(_check)

@app.command()
def env() -> None:
    """Show the configuration loaded from S3_PATH_* environment variables."""
    run_and_exit(lambda: print_settings(create_settings_from_env()))

def main() -> None:
    """Console script entry point."""
    app()

if __name__ == "__main__":
    main()
