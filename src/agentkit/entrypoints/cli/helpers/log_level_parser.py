"""Helpers for parsing logger-level CLI options.

This module provides utilities used by the CLI to parse options of the
form NAME=LEVEL (repeatable or comma/space-separated). It normalizes input
values into individual items and converts/validates textual log level names
into the corresponding numeric logging levels.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"click_extra": logging.WARNING}
ITEM_SEPARATOR_PATTERN = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...] | None) -> list[str]:
    """Flatten the option value into non-empty NAME=LEVEL fragments.

    Accepts a single string (e.g. from an environment variable) or the tuple a
    repeatable Click option produces; each element may itself hold several
    comma/space separated items.
    """
    if not value:
        return []
    values = [value] if isinstance(value, str) else list(value)
    return [s for v in values for s in ITEM_SEPARATOR_PATTERN.split(v) if s]


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...] | None,
) -> dict[str, int]:
    """Click callback that parses NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LIB_LEVELS with any overrides supplied via the CLI; later
    items win. LEVEL is a standard logging level name, case-insensitive.

    Args:
        ctx (click.Context): Click context (passed by Click, not used here).
        param (click.Parameter | None): Click parameter (passed by Click, not used here).
        value (str | list[str] | tuple[str, ...] | None): The raw option value(s).

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        click.BadParameter: If an item is malformed (not NAME=LEVEL) or LEVEL is invalid.
    """

    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_str = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        lvl = logging.getLevelName(level_str.strip().upper())
        if not isinstance(lvl, int):
            raise click.BadParameter(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels
