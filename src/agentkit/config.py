"""Configuration utilities for agentkit.

Environment lookups live here so the rest of the package never reads
``os.environ`` directly.
"""

import os
from collections.abc import Mapping

NO_COLOR_ENV = "NO_COLOR"  # pragma: no mutate
LOGGER_LEVELS_ENV = "AGENTKIT_LOGGER_LEVELS"  # pragma: no mutate


def color_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Report whether colored output is allowed by the environment.

    Follows the https://no-color.org convention: any non-empty ``NO_COLOR``
    disables color. The environment is read on every call.

    Args:
        environ: Mapping to consult instead of ``os.environ`` (useful in tests).

    Returns:
        bool: ``False`` if ``NO_COLOR`` is set to a non-empty value; otherwise ``True``.
    """
    env = os.environ if environ is None else environ
    return not env.get(NO_COLOR_ENV)
