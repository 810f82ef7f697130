"""
CSC configuration (csc.toml).

Example:

    [repl]
    prompt = "> "
    banner = true

    [logging]
    level = "WARNING"

Every key is optional. The CSC_LOG_LEVEL environment variable overrides
``logging.level``.
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from csc.core.errors import ConfigError

CONFIG_FILENAME = "csc.toml"
LOG_LEVEL_ENV = "CSC_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ReplConfig:
    """Interactive prompt configuration."""

    prompt: str = "> "
    banner: bool = True  # Show logo and version on start


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"


@dataclass
class CscConfig:
    """Top-level configuration."""

    repl: ReplConfig = field(default_factory=ReplConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    source: Path | None = None  # File the values were read from


def _normalize_level(value: object, origin: str) -> str:
    level = str(value).upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"Invalid log level {value!r} in {origin}; expected one of {', '.join(_LOG_LEVELS)}")
    return level


def load_config(path: Path) -> CscConfig:
    """Read a csc.toml file.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    repl_data = data.get("repl", {})
    logging_data = data.get("logging", {})

    prompt = repl_data.get("prompt", "> ")
    banner = repl_data.get("banner", True)
    if not isinstance(prompt, str):
        raise ConfigError(f"repl.prompt must be a string in {path}")
    if not isinstance(banner, bool):
        raise ConfigError(f"repl.banner must be true or false in {path}")

    return CscConfig(
        repl=ReplConfig(prompt=prompt, banner=banner),
        logging=LoggingConfig(level=_normalize_level(logging_data.get("level", "WARNING"), str(path))),
        source=path,
    )


def find_config(start: Path | None = None) -> Path | None:
    """Return csc.toml in the given directory (default: cwd), if present."""
    candidate = (start or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def resolve_config(path: Path | None = None) -> CscConfig:
    """Load configuration from an explicit path, csc.toml in cwd, or defaults.

    Environment overrides are applied last.
    """
    if path is not None:
        config = load_config(path)
    else:
        found = find_config()
        config = load_config(found) if found else CscConfig()

    env_level = os.getenv(LOG_LEVEL_ENV)
    if env_level:
        config.logging.level = _normalize_level(env_level, LOG_LEVEL_ENV)

    return config
