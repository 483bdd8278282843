"""
Operations package - output and error handling between the CLI and the resolver.

Keeps CLI commands thin: printers format results, mappers turn resolution
failures into exit codes.
"""
from .mappers import exit_code_for, run_and_exit

__all__ = ["exit_code_for", "run_and_exit"]
