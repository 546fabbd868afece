"""Console logging for the agentkit CLI.

Log records go to stderr through a Rich handler, next to the semantic
messages from :mod:`agentkit.entrypoints.cli.helpers.messages`. Records from
other libraries carry a short ``[package]`` prefix so they stand apart from
agentkit's own lines.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "agentkit"
DEFAULT_LEVEL = logging.WARNING

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):  # pylint: disable=too-few-public-methods
    """Set ``record.prefix`` to ``"[package]"`` for non-agentkit loggers, else ``""``."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split(".")[0] != PROJECT_PREFIX:
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def verbosity_level(verbose: int = 0, quiet: int = 0) -> int:
    """Shift the WARNING default one level per ``-v``/``-q``, clamped to DEBUG..CRITICAL."""
    level = DEFAULT_LEVEL - 10 * verbose + 10 * quiet
    return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = DEFAULT_LEVEL, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr RichHandler.

    In debug mode the handler drops to DEBUG and shows the source path and
    line of each record; otherwise third-party records get a short prefix.

    Args:
        level: Minimum console level (ignored in debug mode).
        debug_mode: Show timestamps, logger names and source locations.
        color: Let Rich pick a color system; ``False`` disables styling.

    Returns:
        RichHandler: Handler ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    if debug_mode:
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def configure_logging(
    level: int = DEFAULT_LEVEL,
    *,
    debug_mode: bool = False,
    color: bool = True,
    logger_levels: Mapping[str, int] | None = None,
) -> RichHandler:
    """Install the console handler on the root logger and apply ``-L`` overrides.

    The root logger passes everything through; the handler level does the
    console filtering, and ``logger_levels`` raise or lower individual loggers.
    Calling this again replaces the previous handler.

    Returns:
        RichHandler: The installed console handler.
    """
    handler = config_console_handler(level=level, debug_mode=debug_mode, color=color)
    logging.basicConfig(level=logging.DEBUG, handlers=[handler], force=True)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    return handler
