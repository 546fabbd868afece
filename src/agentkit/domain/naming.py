"""Agent name sanitization.

Turns a free-form agent name (e.g. ``"My Agent!!"``) into an identifier that is
safe to use as a repository or path name component (``"my-agent"``).

Rejections are returned as data (:class:`InvalidName`) rather than raised, so
callers decide how to present them.
"""

import logging
import re
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

logger = logging.getLogger(__name__)

NAME_REQUIRED_MSG = "agent name is required"
NO_ALPHANUMERIC_MSG = "agent name must contain at least one alphanumeric character"

# ECMAScript whitespace (Zs, ASCII controls, line/paragraph separators, BOM),
# not Python's Unicode \s, which adds \x1c-\x1f and \x85 and omits \ufeff.
WHITESPACE_RUN_PATTERN = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]+"
)
DISALLOWED_CHARACTER_PATTERN = re.compile(r"[^a-z0-9-]")


@dataclass(frozen=True)
class ValidName:
    """A sanitized agent name.

    ``name`` is non-empty, consists only of ``[a-z0-9-]``, and neither starts
    nor ends with a hyphen.
    """

    name: str
    valid: ClassVar[bool] = True


@dataclass(frozen=True)
class InvalidName:
    """A rejected agent name with a reason suitable for display to a user."""

    error: str
    valid: ClassVar[bool] = False


SanitizeResult: TypeAlias = ValidName | InvalidName


def sanitize_name(value: object) -> SanitizeResult:
    """Sanitize an agent name for use as a repository name component.

    Steps are applied in order:

    1. Reject missing input (falsy or not a ``str``).
    2. Lowercase and replace each run of whitespace (the ECMAScript whitespace
       set) with a single hyphen.
    3. Drop every character outside ``[a-z0-9-]``.
    4. Reject an empty result or a lone hyphen.
    5. Reject a result with a leading or trailing hyphen.

    Interior hyphen runs are kept as-is (``"a - b"`` becomes ``"a---b"``).

    Args:
        value: The raw name. Any object is accepted; non-strings are rejected.

    Returns:
        SanitizeResult: :class:`ValidName` with the sanitized name, or
        :class:`InvalidName` with the rejection reason.

    Example:
        >>> sanitize_name("My Agent!!")
        ValidName(name='my-agent')
        >>> sanitize_name("-leading")
        InvalidName(error='agent name must contain at least one alphanumeric character')
    """
    if not value or not isinstance(value, str):
        logger.debug("Rejected agent name %r: %s", value, NAME_REQUIRED_MSG)
        return InvalidName(NAME_REQUIRED_MSG)

    sanitized = WHITESPACE_RUN_PATTERN.sub("-", value.lower())
    sanitized = DISALLOWED_CHARACTER_PATTERN.sub("", sanitized)

    if not sanitized or sanitized == "-":
        logger.debug("Rejected agent name %r: nothing left after sanitizing", value)
        return InvalidName(NO_ALPHANUMERIC_MSG)

    if sanitized.startswith("-") or sanitized.endswith("-"):
        logger.debug("Rejected agent name %r: boundary hyphen in %r", value, sanitized)
        return InvalidName(NO_ALPHANUMERIC_MSG)

    return ValidName(sanitized)
