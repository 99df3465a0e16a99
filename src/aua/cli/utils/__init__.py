"""CLI utility modules."""

from aua.cli.utils.client import CLIState, get_state, run_with_client
from aua.cli.utils.output import console, print_error, print_success, print_warning

__all__ = [
    "CLIState",
    "get_state",
    "run_with_client",
    "console",
    "print_error",
    "print_success",
    "print_warning",
]
