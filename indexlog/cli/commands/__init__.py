"""
Click command implementations for the indexlog CLI.

Each module corresponds to one command; they are registered with the
main group by indexlog.cli.register_commands().
"""

from .compare import compare
from .sessions import sessions
from .show import show

COMMANDS = [
    compare,
    sessions,
    show,
]

__all__ = [
    "COMMANDS",
    "compare",
    "sessions",
    "show",
]
