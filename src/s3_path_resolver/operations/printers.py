"""
Human-readable output formatting.

Centralizes all CLI output formatting, with a JSON mode for scripting.
"""
from __future__ import annotations

import json

import typer

from ..models import ResolvedPath
from ..settings import Settings

def print_resolved_path(resolved: ResolvedPath, as_json: bool = False) -> None:
    """
    Print a resolved path.

    Args:
        resolved: Resolution result to display
        as_json: Emit a single JSON object instead of labelled lines
    """
    if as_json:
        typer.echo(resolved.model_dump_json(by_alias=True))
        return

    typer.echo(f"Bucket: {resolved.bucket}")
    typer.echo(f"Object key: {resolved.object_key}")
    typer.echo(f"Path: {resolved.path}")

def print_validity(path: str, valid: bool, as_json: bool = False) -> None:
    """Print whether a path is valid."""
    if as_json:
        typer.echo(json.dumps({"path": path, "valid": valid}))
        return
    typer.echo("valid" if valid else "invalid")

def print_settings(settings: Settings) -> None:
    """Print settings loaded from the environment."""
    typer.echo(f"Default bucket: {settings.default_bucket or '(none)'}")
    typer.echo(f"Allowed extensions: {', '.join(settings.allowed_extensions) or '(any)'}")
    typer.echo(f"Disallowed protocols: {', '.join(settings.effective_disallowed_protocols)}")
