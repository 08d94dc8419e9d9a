# Interview Coding
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

This module handles reading `coding.yaml`, validating its keys, and converting
it into a typed config object. Every section is optional; a missing file is
only an error if it was requested explicitly.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


CONFIG_ENV_VAR = "INTERVIEW_CODING_CONFIG"
DEFAULT_CONFIG_NAME = "coding.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class WindowConfig:
    """
    Context shown around the current segment.

    Attributes:
        before:
            Number of preceding segments.
        after:
            Number of following segments.
    """

    before: int = 1
    after: int = 1


@dataclass(frozen=True)
class LoggingConfig:
    """
    Diagnostic logging settings.

    Attributes:
        level:
            Name of the log level for the `interview_coding` logger.
    """

    level: str = "WARNING"

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level)


@dataclass(frozen=True)
class CodingConfig:
    """
    Parsed configuration.

    Attributes:
        config_path:
            Path to the YAML file, or None when running on defaults.
        window:
            Navigation window settings.
        logging:
            Logging settings.
    """

    config_path: Path | None = None
    window: WindowConfig = field(default_factory=WindowConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing).
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_config(path: Path) -> CodingConfig:
    """
    Load and validate a `coding.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated CodingConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or
            contains invalid values.
    """

    # Imported here because yaml_io depends on ConfigError from this module.
    from interview_coding.yaml_io import read_yaml_mapping

    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    raw = read_yaml_mapping(path)

    unknown = sorted(k for k in raw if k not in {"window", "logging"})
    if unknown:
        raise ConfigError(f"Config contains unknown key(s): {', '.join(map(str, unknown))}")

    return CodingConfig(
        config_path=path.resolve(),
        window=_parse_window(raw.get("window")),
        logging=_parse_logging(raw.get("logging")),
    )


def load_config_or_default(cli_path: str | None) -> CodingConfig:
    """
    Load the config if one is present.

    An explicitly requested file (CLI flag or environment variable) must exist.
    The implicit `./coding.yaml` may be absent, in which case defaults apply.
    """

    path = find_config_path(cli_path)
    explicit = bool(cli_path) or bool(os.environ.get(CONFIG_ENV_VAR))

    if not explicit and not path.exists():
        return CodingConfig()

    return load_config(path)


def _parse_window(value: Any) -> WindowConfig:
    """
    Parse and validate the optional `window` section.

    Args:
        value:
            Raw YAML value for the `window` key.

    Returns:
        A WindowConfig instance (with defaults if section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return WindowConfig()

    if not isinstance(value, dict):
        raise ConfigError("'window' must be a mapping if provided")

    before = value.get("before", WindowConfig.before)
    after = value.get("after", WindowConfig.after)

    # bool is a subclass of int, but `before: yes` is almost certainly a typo.
    if not isinstance(before, int) or isinstance(before, bool):
        raise ConfigError("window.before must be an integer")
    if not isinstance(after, int) or isinstance(after, bool):
        raise ConfigError("window.after must be an integer")

    if before < 0:
        raise ConfigError("window.before must be >= 0")
    if after < 0:
        raise ConfigError("window.after must be >= 0")

    return WindowConfig(before=before, after=after)


def _parse_logging(value: Any) -> LoggingConfig:
    """
    Parse and validate the optional `logging` section.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return LoggingConfig()

    if not isinstance(value, dict):
        raise ConfigError("'logging' must be a mapping if provided")

    level = value.get("level", LoggingConfig.level)
    if not isinstance(level, str) or not level.strip():
        raise ConfigError("logging.level must be a non-empty string")

    level_norm = level.strip().upper()
    if level_norm not in _LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}")

    return LoggingConfig(level=level_norm)
