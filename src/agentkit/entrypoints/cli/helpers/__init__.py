"""CLI helpers for agentkit.

Utilities used by the command-line interface: semantic message emitters that
write to stderr with glyph→ASCII fallbacks, and the NAME=LEVEL option parser.
"""

from .log_level_parser import parse_log_level
from .messages import check, error, error_block, header, info, skip, success, warn

__all__ = [
    "check",
    "error",
    "error_block",
    "header",
    "info",
    "parse_log_level",
    "skip",
    "success",
    "warn",
]
