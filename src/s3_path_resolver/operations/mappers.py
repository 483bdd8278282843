"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping and CLI command wrappers
to ensure consistent error handling across all Typer commands.
"""
from __future__ import annotations

import typer
from typing import Callable, TypeVar

T = TypeVar('T')

EXIT_CODES = {
    "EmptyPath": 2,
    "ValueError": 2,
    "DisallowedProtocol": 3,
    "InvalidExtension": 4,
    "NoBucketAvailable": 5,
    "InvalidBucketName": 6,
}

def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    Returns:
    - 2: Empty path or other bad input (EmptyPath, ValueError)
    - 3: Disallowed protocol (DisallowedProtocol)
    - 4: Invalid extension (InvalidExtension)
    - 5: No bucket available (NoBucketAvailable)
    - 6: Invalid bucket name (InvalidBucketName)
    - 1: Anything else

    Args:
        exc: Exception to map

    Returns:
        Exit code
    """
    return EXIT_CODES.get(type(exc).__name__, 1)

def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exceptions to appropriate
    exit codes using typer.Exit, printing the error message to stderr.

    Args:
        func: Function to execute

    Returns:
        Function result if successful

    Raises:
        typer.Exit: With appropriate exit code if function raises exception
    """
    try:
        return func()
    except typer.Exit:
        raise
    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
