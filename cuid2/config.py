"""Config loading for cuid2.

Reads ``.cuid2/config.yaml`` (or ``~/.cuid2/config.yaml``).
Raises SystemExit on parse errors, a missing ``version`` field or invalid values.
If no config file is found, returns default values (safe to run without config).

Config search order:
  1. ``config_path`` argument (explicit override, e.g. ``cuid2 --config``)
  2. CUID2_CONFIG environment variable (if set)
  3. ``.cuid2/config.yaml`` (working directory)
  4. ``~/.cuid2/config.yaml`` (home directory)

Environment variable overrides (applied after the file):
  CUID2_LENGTH     overrides generator.default_length
  CUID2_LOG_LEVEL  overrides logging.level

Example file::

    version: 1
    generator:
      default_length: 16
    logging:
      level: INFO
      json: true
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import NoReturn, Optional

import yaml

from cuid2.constants import DEFAULT_LENGTH, MAX_LENGTH, MIN_LENGTH
from cuid2.utils.logger import get_logger

logger = get_logger(__name__)

# ─── Version constants ────────────────────────────────────────────────────────

SUPPORTED_CONFIG_VERSION = 1

SUPPORTED_VERSIONS: frozenset[int] = frozenset({1})

# ─── Validation sets ─────────────────────────────────────────────────────────

VALID_LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)

DEFAULT_CONFIG_PATHS = [
    ".cuid2/config.yaml",
    os.path.expanduser("~/.cuid2/config.yaml"),
]


# ─── Dataclasses ─────────────────────────────────────────────────────────────


@dataclass
class GeneratorConfig:
    """Identifier generation defaults."""

    default_length: int = DEFAULT_LENGTH


@dataclass
class LoggingConfig:
    """structlog output settings."""

    level: str = "WARNING"
    json: bool = False


@dataclass
class Config:
    """Root configuration object populated from .cuid2/config.yaml.

    All fields have safe defaults; cuid2 runs without any config file.
    """

    version: int = SUPPORTED_CONFIG_VERSION
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: Optional[str] = None

    @classmethod
    def defaults(cls) -> "Config":
        """Return a fully-default Config (no file required)."""
        return cls()

    @classmethod
    def from_dict(cls, raw: dict, path: Optional[str] = None) -> "Config":
        """Construct Config from a parsed YAML dict.

        Merges user-supplied values onto defaults; unknown keys are ignored.

        Raises:
            SystemExit(1): On an out-of-range length or unknown log level.
        """
        source = path or "config"

        generator_raw = raw.get("generator") or {}
        generator = GeneratorConfig(
            default_length=_validate_length(
                generator_raw.get("default_length", DEFAULT_LENGTH),
                f"{source}: generator.default_length",
            ),
        )

        logging_raw = raw.get("logging") or {}
        logging_config = LoggingConfig(
            level=_validate_log_level(
                logging_raw.get("level", "WARNING"),
                f"{source}: logging.level",
            ),
            json=bool(logging_raw.get("json", False)),
        )

        return cls(
            version=raw.get("version", SUPPORTED_CONFIG_VERSION),
            generator=generator,
            logging=logging_config,
            path=path,
        )


# ─── Validation helpers ───────────────────────────────────────────────────────


def _fail(msg: str) -> NoReturn:
    print(msg, file=sys.stderr)
    raise SystemExit(1)


def _validate_length(value: object, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        _fail(f"CONFIG ERROR: {where} must be an integer, got {value!r}")
    if not MIN_LENGTH <= value <= MAX_LENGTH:
        _fail(
            f"CONFIG ERROR: {where} must be between {MIN_LENGTH} and "
            f"{MAX_LENGTH}, got {value}"
        )
    return value


def _validate_log_level(value: object, where: str) -> str:
    level = str(value).upper()
    if level not in VALID_LOG_LEVELS:
        _fail(
            f"CONFIG ERROR: Invalid {where}: '{value}'. "
            f"Supported values: {sorted(VALID_LOG_LEVELS)}."
        )
    return level


# ─── Config loading ───────────────────────────────────────────────────────────


def load_config(config_path: Optional[str] = None) -> Config:
    """Load and validate cuid2 configuration.

    If no file is found at any search path, returns the default Config (not
    an error). If a file is found but invalid, writes an error to stderr and
    raises SystemExit(1). Environment overrides are applied in both cases.

    Raises:
        SystemExit(1): On YAML parse error, missing or unsupported ``version``,
                       or invalid values (file or environment).
    """
    search_paths: list[str] = []
    if config_path:
        search_paths.append(config_path)
    env_config = os.environ.get("CUID2_CONFIG")
    if env_config:
        search_paths.append(env_config)
    search_paths.extend(DEFAULT_CONFIG_PATHS)

    found_path: Optional[str] = None
    for candidate in search_paths:
        expanded = os.path.expanduser(candidate)
        if os.path.isfile(expanded):
            found_path = expanded
            break

    if found_path is None:
        logger.debug("No config file found, using defaults", searched=search_paths)
        config = Config.defaults()
        _apply_env_overrides(config)
        return config

    logger.debug("Loading config", path=found_path)

    try:
        with open(found_path) as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        _fail(
            f"CONFIG ERROR: Failed to parse {found_path}: {exc}\n"
            "Check the YAML syntax and try again."
        )
    except OSError as exc:
        _fail(f"CONFIG ERROR: Could not read {found_path}: {exc}")

    if not isinstance(raw, dict):
        if raw is None:
            _fail(
                f"CONFIG ERROR: {found_path} is missing the required 'version' field.\n"
                "Add 'version: 1' to the top of your config file."
            )
        _fail(
            f"CONFIG ERROR: {found_path} is not a valid YAML mapping.\n"
            "The config file must be a YAML dictionary at the top level."
        )

    version = raw.get("version")
    if version is None:
        _fail(
            f"CONFIG ERROR: {found_path} is missing the required 'version' field.\n"
            "Add 'version: 1' to the top of your config file."
        )

    if version not in SUPPORTED_VERSIONS:
        _fail(
            f"CONFIG ERROR: Unsupported config version: {version}. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}."
        )

    config = Config.from_dict(raw, path=found_path)
    _apply_env_overrides(config)

    logger.debug(
        "Config loaded",
        path=found_path,
        version=config.version,
        default_length=config.generator.default_length,
    )
    return config


def _apply_env_overrides(config: Config) -> None:
    """Apply environment variable overrides to a Config object in-place.

    Raises:
        SystemExit(1): If CUID2_LENGTH is not an integer in range, or
                       CUID2_LOG_LEVEL is not a known level.
    """
    env_length = os.environ.get("CUID2_LENGTH")
    if env_length is not None:
        try:
            length = int(env_length)
        except ValueError:
            _fail(
                f"CONFIG ERROR: CUID2_LENGTH environment variable is not a valid "
                f"integer: '{env_length}'"
            )
        config.generator.default_length = _validate_length(length, "CUID2_LENGTH")

    env_level = os.environ.get("CUID2_LOG_LEVEL")
    if env_level is not None:
        config.logging.level = _validate_log_level(env_level, "CUID2_LOG_LEVEL")
