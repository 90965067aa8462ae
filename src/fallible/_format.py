"""Payload rendering for unwrap diagnostics.

Rendering runs on the way to raising ``UnwrapFailure``, so nothing here may
raise: a broken environment or a payload with a failing ``__str__`` degrades
the message instead of replacing the error.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from fallible.config import Config, configure, get_config
from fallible.errors import ConfigurationError

__all__ = ["REDACTED", "describe"]

log = logging.getLogger(__name__)

REDACTED = "[REDACTED]"
_ELLIPSIS = "..."


def describe(value: Any, config: Config | None = None) -> str:
    """Render ``value`` as text for an ``UnwrapFailure`` message.

    Strings are used as-is, containers are rendered as JSON when they can be
    encoded (falling back to ``repr``), and anything else goes through
    ``str()``. The active config then decides on redaction and truncation.
    """
    cfg = config or _active_config()
    if cfg.redact_payloads:
        return REDACTED

    text = _stringify(value)
    limit = cfg.diagnostic_max_length
    if limit and len(text) > limit:
        if limit <= len(_ELLIPSIS):
            return text[:limit]
        text = text[: limit - len(_ELLIPSIS)] + _ELLIPSIS
    return text


def _active_config() -> Config:
    try:
        return get_config()
    except ConfigurationError as exc:
        # Cache the defaults so the broken environment is read once.
        fallback = Config()
        log.warning("Invalid fallible configuration, using defaults: %s", exc)
        configure(fallback)
        return fallback


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value)
        except (TypeError, ValueError):
            return _safe_repr(value)
    try:
        return str(value)
    except Exception as exc:
        log.debug("str() failed for %s payload: %s", type(value).__name__, exc)
        return _safe_repr(value)


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return object.__repr__(value)
