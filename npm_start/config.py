"""Environment toggles read during detection."""

from __future__ import annotations

from npm_start.exceptions import InvalidToggleError

LIVE_RELOAD_ENV = "BP_LIVE_RELOAD_ENABLED"
PROJECT_PATH_ENV = "BP_NODE_PROJECT_PATH"

LOG_LEVEL_ENV = "NPM_START_LOG_LEVEL"
LOG_FORMAT_ENV = "NPM_START_LOG_FORMAT"

# Same spellings the buildpack lifecycle accepts elsewhere (Go strconv.ParseBool).
_TRUE_VALUES = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(value: str) -> bool:
    """Parse a boolean literal.

    Accepts ``1 t T TRUE true True`` and ``0 f F FALSE false False``.
    Anything else (including ``yes``/``no`` and surrounding whitespace)
    raises ValueError.
    """
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError("invalid syntax")


def live_reload_enabled(raw: str | None) -> bool:
    """Interpret the raw BP_LIVE_RELOAD_ENABLED value. Unset or empty means off."""
    if not raw:
        return False
    try:
        return parse_bool(raw)
    except ValueError as e:
        raise InvalidToggleError(LIVE_RELOAD_ENV, raw, e) from e
