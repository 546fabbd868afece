"""agentkit name commands.

``agentkit sanitize NAME...`` turns free-form agent names into repository-safe
identifiers.

Behavior
- Sanitized names go to **stdout** (one per line, or a JSON list with
  ``--json``) so the command can be used in pipelines.
- Status rows, warnings and the failure report go to **stderr**.
- Exits with status 1 if any name is rejected.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import click

from agentkit.domain.naming import InvalidName, sanitize_name

from .helpers import check, error_block, header, skip, success

logger = logging.getLogger(__name__)

INVALID_NAMES_TITLE = "Some agent names could not be sanitized"
FIX_HINT_COMMAND = 'agentkit sanitize "my agent"'


def _label(raw: str) -> str:
    return raw if raw.strip() else repr(raw)


@click.command()
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Write a JSON list of results to stdout instead of one name per line.",
)
@click.option(
    "--unique/--no-unique",
    default=False,
    show_default=True,
    help="Skip names whose sanitized form was already emitted.",
)
@click.pass_context
def sanitize(ctx: click.Context, names: tuple[str, ...], as_json: bool, unique: bool) -> None:
    """Sanitize agent NAMES for use as repository name components.

    Names are lowercased, whitespace becomes hyphens, and anything other than
    letters, digits and hyphens is dropped.

    Put "--" before names that start with a hyphen.
    """
    header("Agent names")

    records: list[dict[str, Any]] = []
    failures: list[str] = []
    seen: set[str] = set()

    for raw in names:
        result = sanitize_name(raw)
        if isinstance(result, InvalidName):
            check(_label(raw), False)
            failures.append(f"{_label(raw)}: {result.error}")
            records.append({"input": raw, "valid": False, "error": result.error})
            continue

        check(_label(raw), True, result.name)
        if unique and result.name in seen:
            skip(f"{result.name} already emitted, skipping")
            continue
        seen.add(result.name)
        records.append({"input": raw, "valid": True, "name": result.name})

    logger.info("Sanitized %d of %d agent names", len(names) - len(failures), len(names))

    if as_json:
        click.echo(json.dumps(records, indent=2))
    else:
        for record in records:
            if record["valid"]:
                click.echo(record["name"])

    if failures:
        error_block(INVALID_NAMES_TITLE, failures, [FIX_HINT_COMMAND])
        ctx.exit(1)

    success(f"{len(seen)} agent name(s) ready")
