"""Domain layer for agentkit.

Contains the naming rules the rest of the application depends on. This package
is deliberately free of terminal, logging-configuration and CLI concerns.

Dependency rule: do not import from `agentkit.entrypoints`.
"""

from .naming import InvalidName, SanitizeResult, ValidName, sanitize_name

__all__ = ["InvalidName", "SanitizeResult", "ValidName", "sanitize_name"]
