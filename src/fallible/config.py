"""Configuration: frozen Config controlling how unwrap diagnostics render payloads."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import find_dotenv, load_dotenv

from fallible.errors import ConfigurationError

log = logging.getLogger(__name__)

_MAX_LENGTH_ENV_VAR = "FALLIBLE_DIAGNOSTIC_MAX_LENGTH"
_REDACT_ENV_VAR = "FALLIBLE_REDACT_PAYLOADS"

_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class Config:
    """Immutable settings for unwrap diagnostics.

    Only the text of ``UnwrapFailure`` messages built by the library is
    affected. Messages passed to ``expect()`` are used verbatim.

    Example:
        configure(Config(diagnostic_max_length=80, redact_payloads=True))
    """

    #: Max characters of a payload in a diagnostic; ``0`` disables truncation.
    diagnostic_max_length: int = 200
    #: Render payloads as ``[REDACTED]`` (errors may hold secrets).
    redact_payloads: bool = False

    def __post_init__(self) -> None:
        """Validate numeric fields."""
        if self.diagnostic_max_length < 0:
            raise ConfigurationError(
                f"diagnostic_max_length must be ≥ 0, got {self.diagnostic_max_length}",
                hint=f"Use 0 to disable truncation (env: {_MAX_LENGTH_ENV_VAR}).",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``FALLIBLE_*`` environment variables.

        A ``.env`` file in the working directory is loaded first; variables
        already set in the environment win.
        """
        load_dotenv(find_dotenv(usecwd=True))
        kwargs: dict[str, int | bool] = {}

        raw_length = os.environ.get(_MAX_LENGTH_ENV_VAR)
        if raw_length is not None:
            try:
                kwargs["diagnostic_max_length"] = int(raw_length.strip())
            except ValueError:
                raise ConfigurationError(
                    f"{_MAX_LENGTH_ENV_VAR} must be an integer, got {raw_length!r}",
                    hint="Set it to a non-negative number of characters.",
                ) from None

        raw_redact = os.environ.get(_REDACT_ENV_VAR)
        if raw_redact is not None:
            kwargs["redact_payloads"] = _parse_bool(_REDACT_ENV_VAR, raw_redact)

        config = cls(**kwargs)  # type: ignore[arg-type]
        log.debug("Resolved config from environment: %s", config)
        return config


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean flag, got {raw!r}",
        hint="Use one of: 1, 0, true, false, yes, no, on, off.",
    )


_active: Config | None = None


def get_config() -> Config:
    """Return the active config, resolving it from the environment on first use."""
    global _active
    if _active is None:
        _active = Config.from_env()
    return _active


def configure(config: Config) -> None:
    """Install ``config`` as the active configuration."""
    global _active
    if not isinstance(config, Config):
        raise ConfigurationError(
            f"configure() expects a Config, got {type(config).__name__}",
            hint="Build one with Config(...) or Config.from_env().",
        )
    _active = config
    log.debug("Installed config: %s", config)


def reset_config() -> None:
    """Forget the active config so the next lookup re-reads the environment."""
    global _active
    _active = None
