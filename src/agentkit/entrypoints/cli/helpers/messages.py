"""Terminal message helpers for the agentkit CLI.

Color is meaning, not decoration, and at most six colors are used:

- green: success / ok
- red: error / blocking
- yellow: warning / attention
- cyan: info / headers
- magenta: user action / commands to run
- gray: inactive / skipped

Glyphs fall back to ASCII on terminals that cannot encode them. Messages write
to stderr so stdout can remain machine-readable. Color is dropped when
``NO_COLOR`` is set or the active Click context disables it (``--no-color``).
"""

from collections.abc import Sequence
from typing import Any

import click

from agentkit import config

CHECK_LABEL_WIDTH = 20  # pragma: no mutate

# Click's "bright_black" renders as ANSI 90, the conventional gray.
GRAY = "bright_black"  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    This is a lightweight guard to decide whether to emit glyphs or fall back
    to ASCII so terminals without UTF-8 don't raise `UnicodeEncodeError`.

    Args:
        character: A single Unicode character to check (e.g., "✓", "⚠").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(symbol: str, fallback: str) -> str:
    return symbol if _supports_character(symbol) else fallback


def success_glyph() -> str:
    """Success marker: "✓" or "[OK]" depending on stream support."""
    return _glyph("✓", "[OK]")


def error_glyph() -> str:
    """Error marker: "✗" or "[X]" depending on stream support."""
    return _glyph("✗", "[X]")


def caution_glyph() -> str:
    """Warning marker: "⚠" or "[!]" depending on stream support."""
    return _glyph("⚠", "[!]")


def bullet_glyph() -> str:
    """List bullet: "•" or "*" depending on stream support."""
    return _glyph("•", "*")


def use_color() -> bool:
    """Return True when styled output is allowed.

    ``NO_COLOR`` always wins. Otherwise the active Click context (if any) may
    turn color off, which is how click-extra's ``--no-color`` reaches us.
    """
    if not config.color_enabled():
        return False
    ctx = click.get_current_context(silent=True)
    return ctx is None or ctx.color is not False


def _wrap(text: str, **styles: Any) -> str:
    if not use_color():
        return text
    return click.style(text, **styles)


def _emit(line: str = "") -> None:
    click.echo(line, err=True)


# ---------------------------------------------------------------------------
# Raw colors for custom use
# ---------------------------------------------------------------------------


def green(text: str) -> str:
    """Style *text* green (success)."""
    return _wrap(text, fg="green")


def red(text: str) -> str:
    """Style *text* red (error)."""
    return _wrap(text, fg="red")


def yellow(text: str) -> str:
    """Style *text* yellow (warning)."""
    return _wrap(text, fg="yellow")


def cyan(text: str) -> str:
    """Style *text* cyan (info)."""
    return _wrap(text, fg="cyan")


def magenta(text: str) -> str:
    """Style *text* magenta (user action)."""
    return _wrap(text, fg="magenta")


def gray(text: str) -> str:
    """Style *text* gray (inactive)."""
    return _wrap(text, fg=GRAY)


def bold(text: str) -> str:
    """Style *text* bold."""
    return _wrap(text, bold=True)


# ---------------------------------------------------------------------------
# Semantic outputs
# ---------------------------------------------------------------------------


def success(msg: str) -> None:
    """Emit a green success line to **stderr** with a success glyph.

    Example:
        ``✓ Agent name is valid.``
    """
    _emit(green(f"{success_glyph()} {msg}"))


def error(msg: str) -> None:
    """Emit a red error line to **stderr** with an error glyph.

    Example:
        ``✗ Agent name is required.``
    """
    _emit(red(f"{error_glyph()} {msg}"))


def warn(msg: str) -> None:
    """Emit a yellow warning line to **stderr** with a caution glyph.

    Note:
        Warnings go to **stderr** so they won't interfere with data piped from
        stdout (e.g., when using ``--json``).
    """
    _emit(yellow(f"{caution_glyph()} {msg}"))


def info(msg: str) -> None:
    """Emit a cyan informational line to **stderr**."""
    _emit(cyan(msg))


def action(msg: str) -> None:
    """Emit an indented magenta line describing something the user should run."""
    _emit(magenta(f"  {msg}"))


def skip(msg: str) -> None:
    """Emit an indented gray line for something inactive or skipped."""
    _emit(gray(f"  {msg}"))


def header(msg: str) -> None:
    """Emit a bold cyan section header."""
    _emit(_wrap(msg, fg="cyan", bold=True))


def check(label: str, status: bool | None, detail: str | None = None) -> None:
    """Emit a status row of the form ``label........ ✓ (detail)``.

    The label is padded with dots to a fixed width (at least one dot).

    Args:
        label: Left-hand label of the row.
        status: ``True`` renders a green check, ``False`` a red cross, and
            anything else a gray ``--`` (unknown / not applicable).
        detail: Optional gray parenthesized note, shown only for ``True``.
    """
    dots = "." * max(1, CHECK_LABEL_WIDTH - len(label))
    prefix = f"  {label}{dots} "
    if status is True:
        detail_str = f" {gray(f'({detail})')}" if detail else ""
        _emit(f"{prefix}{green(success_glyph())}{detail_str}")
    elif status is False:
        _emit(f"{prefix}{red(error_glyph())}")
    else:
        _emit(f"{prefix}{gray('--')}")


def error_block(
    title: str,
    items: Sequence[str] | None = None,
    commands: Sequence[str] | None = None,
) -> None:
    """Emit a multi-line error report with optional remediation commands.

    Layout::

        <blank>
        ✗ title
          • item
          • item
        <blank>
        Fix with:
          command
        <blank>

    Args:
        title: Headline of the error.
        items: Individual problems, one bullet each.
        commands: Commands the user can run to fix the problem, shown in magenta.
    """
    _emit()
    _emit(red(f"{error_glyph()} {title}"))
    for item in items or ():
        _emit(f"  {bullet_glyph()} {item}")
    if commands:
        _emit()
        _emit("Fix with:")
        for command in commands:
            action(command)
    _emit()
