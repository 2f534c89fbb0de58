"""Configuration: frozen Config for the demo runner and logging."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os

from dotenv import find_dotenv, load_dotenv

from funcore.errors import ConfigurationError

_LOG_LEVEL_ENV_VAR = "FUNCORE_LOG_LEVEL"
_VERIFY_LAWS_ENV_VAR = "FUNCORE_VERIFY_LAWS"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _coerce_bool(v: str) -> bool:
    """Convert string to boolean using common conventions."""
    return v.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Immutable configuration for funcore's runner.

    The library functions themselves take no configuration; this only steers
    logging and the optional law verification of ``python -m funcore``.

    Example:
        config = Config.from_env()
        logging.basicConfig(level=config.log_level_number)
    """

    log_level: str = "WARNING"
    verify_laws: bool = False

    def __post_init__(self) -> None:
        """Normalize and validate both fields."""
        if not isinstance(self.log_level, str):
            raise ConfigurationError(
                f"log_level must be a string, got {type(self.log_level).__name__}",
                hint=f"Use one of: {', '.join(_LOG_LEVELS)}",
            )
        level = self.log_level.strip().upper()
        if level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level!r}",
                hint=f"Use one of: {', '.join(_LOG_LEVELS)}",
            )
        object.__setattr__(self, "log_level", level)

        if not isinstance(self.verify_laws, bool):
            raise ConfigurationError(
                f"verify_laws must be a bool, got {self.verify_laws!r}",
                hint="Pass True/False, or one of 1/true/yes/on via the environment.",
            )

    @property
    def log_level_number(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level]

    @classmethod
    def from_env(cls, *, dotenv: bool = True, **overrides: object) -> Config:
        """Resolve configuration: overrides > environment (and ``.env``) > defaults.

        Reads ``FUNCORE_LOG_LEVEL`` and ``FUNCORE_VERIFY_LAWS``.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        values: dict[str, object] = {}
        if (level := os.environ.get(_LOG_LEVEL_ENV_VAR)) is not None:
            values["log_level"] = level
        if (verify := os.environ.get(_VERIFY_LAWS_ENV_VAR)) is not None:
            values["verify_laws"] = _coerce_bool(verify)
        for key, value in overrides.items():
            if value is None:
                continue
            if key == "verify_laws" and isinstance(value, str):
                value = _coerce_bool(value)
            values[key] = value
        unknown = set(values) - {"log_level", "verify_laws"}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration field(s): {', '.join(sorted(unknown))}",
                hint="Supported fields: log_level, verify_laws",
            )
        return cls(**values)  # type: ignore[arg-type]
