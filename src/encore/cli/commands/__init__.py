# encore/cli/commands: Command modules for Encore CLI.
#
# Each module in this package provides one or more CLI commands.

from .classify import classify
from .registry import codes, explain

__all__ = [
    # classify.py
    "classify",
    # registry.py
    "codes",
    "explain",
]
