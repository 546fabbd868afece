"""agentkit CLI entry point.

Defines the top-level ``agentkit`` group (via Click-Extra), wires console
logging from the global options, and registers the subcommands.

Commands
- ``agentkit sanitize``: turn free-form agent names into repository-safe names.

Examples
    $ agentkit --version
    $ agentkit -v sanitize "My Agent!!"
    $ agentkit -L agentkit.domain=DEBUG sanitize -- "-draft"
"""

import logging

import click
import click_extra as clickx

from agentkit import __version__, config
from agentkit.logging import configure_logging, verbosity_level

from .helpers.log_level_parser import parse_log_level
from .names import sanitize

HELP = """agentkit command-line interface.

    agentkit prepares agents for scaffolding: it turns free-form agent names into
    identifiers that are safe to use as repository and path name components, and
    reports results with colors that carry meaning rather than decoration.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Show more log output; -v adds per-run summaries, -vv explains each rejected name.",
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Show less log output; repeat to keep only errors, then only critical records.",
)
@click.option(
    "--debug/--no-debug",
    help="Log everything with timestamps, logger names and source locations.",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum LEVEL for one logger (NAME=LEVEL), e.g. "
        "-L agentkit.domain=INFO to hide per-name rejections under -vv. "
        "Repeatable, or a comma/space list in the environment."
    ),
    envvar=config.LOGGER_LEVELS_ENV,
    show_envvar=True,
)
@clickx.pass_context
def agentkit(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """agentkit command-line interface."""
    # NO_COLOR and --no-color both turn log styling off
    configure_logging(
        verbosity_level(verbose_count, quiet_count),
        debug_mode=debug,
        color=ctx.color is not False and config.color_enabled(),
        logger_levels=logger_levels,
    )
    ctx.call_on_close(logging.shutdown)


agentkit.add_command(sanitize)
