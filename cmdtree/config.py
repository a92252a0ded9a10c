"""
Configuration management for cmdtree.
Handles loading, saving, and accessing configuration from a JSON file and environment variables.
"""
import json
import logging
import os
from dataclasses import dataclass, field, asdict, fields
from pathlib import Path
from typing import Any, Optional

from .constants import (
    CONFIG_FILE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_CANDIDATES,
    DEFAULT_PROMPT,
    ENV_LOG_LEVEL,
    ENV_PROMPT,
)


logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class ConfigError(Exception):
    """Raised when configuration parsing or validation fails."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        self.line = line
        self.column = column

        if line is not None and column is not None:
            full_message = f"{message} (line {line}, column {column})"
        elif line is not None:
            full_message = f"{message} (line {line})"
        else:
            full_message = message

        super().__init__(full_message)


@dataclass
class ShellConfig:
    """Interactive shell configuration."""
    prompt: str = DEFAULT_PROMPT
    history: bool = True
    complete_while_typing: bool = True


@dataclass
class UIConfig:
    """Output rendering configuration."""
    show_empty: bool = True
    max_candidates: int = DEFAULT_MAX_CANDIDATES


@dataclass
class AppConfig:
    """Main application configuration."""
    shell: ShellConfig = field(default_factory=ShellConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    log_level: str = DEFAULT_LOG_LEVEL


def _build_section(cls: type, data: Any, section: str) -> Any:
    """Instantiate a config section dataclass, rejecting unknown keys and wrong types."""
    if not isinstance(data, dict):
        raise ConfigError(f"Section '{section}' must be an object")

    known = {f.name: f for f in fields(cls)}
    unknown = sorted(set(data) - set(known))
    if unknown:
        raise ConfigError(f"Unknown key(s) in '{section}': {', '.join(unknown)}")

    defaults = cls()
    for key, value in data.items():
        expected = type(getattr(defaults, key))
        if isinstance(value, bool) != (expected is bool) or not isinstance(value, expected):
            raise ConfigError(
                f"'{section}.{key}' must be of type {expected.__name__}, got {type(value).__name__}"
            )
    return cls(**data)


def _normalize_log_level(value: Any) -> str:
    if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
        raise ConfigError(
            f"Invalid log level: {value!r}. Expected one of {', '.join(sorted(VALID_LOG_LEVELS))}"
        )
    return value.upper()


def parse_config(text: str) -> AppConfig:
    """
    Parse configuration from JSON text.

    Args:
        text: JSON document

    Returns:
        Parsed AppConfig

    Raises:
        ConfigError: If the JSON is malformed or contains invalid values
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON: {e.msg}", line=e.lineno, column=e.colno) from e

    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a JSON object")

    unknown = sorted(set(data) - {"shell", "ui", "log_level"})
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

    config = AppConfig()
    if "shell" in data:
        config.shell = _build_section(ShellConfig, data["shell"], "shell")
    if "ui" in data:
        config.ui = _build_section(UIConfig, data["ui"], "ui")
        if config.ui.max_candidates < 1:
            raise ConfigError("'ui.max_candidates' must be at least 1")
    if "log_level" in data:
        config.log_level = _normalize_log_level(data["log_level"])
    return config


class ConfigManager:
    """
    Manages application configuration backed by a JSON file and environment variables.

    Environment variables take precedence over config file values. The file is
    only written when `save` is called.
    """

    def __init__(self, path: Optional[Path] = None, environ: Optional[dict] = None) -> None:
        """
        Initialize the manager and load configuration.

        Args:
            path: Config file path (defaults to ~/.cmdtree/config.json)
            environ: Environment mapping (defaults to os.environ)
        """
        self._path = Path(path) if path is not None else CONFIG_FILE
        self._environ = environ if environ is not None else os.environ
        self._config = AppConfig()
        self.reload()

    def _load_config(self) -> None:
        """Load configuration from the JSON file, if present."""
        if not self._path.exists():
            logger.debug(f"No config file at {self._path}, using defaults")
            self._config = AppConfig()
            return

        try:
            with open(self._path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read config file {self._path}: {e}") from e

        self._config = parse_config(text)
        logger.debug(f"Loaded config from {self._path}")

    def _load_env_vars(self) -> None:
        """Apply overrides from environment variables."""
        level = self._environ.get(ENV_LOG_LEVEL, "").strip()
        if level:
            self._config.log_level = _normalize_log_level(level)

        prompt = self._environ.get(ENV_PROMPT)
        if prompt:
            self._config.shell.prompt = prompt

    @property
    def config(self) -> AppConfig:
        """Get the current configuration."""
        return self._config

    @property
    def shell(self) -> ShellConfig:
        """Get shell configuration."""
        return self._config.shell

    @property
    def ui(self) -> UIConfig:
        """Get UI configuration."""
        return self._config.ui

    @property
    def log_level(self) -> str:
        """Get the effective log level name."""
        return self._config.log_level

    def save(self) -> None:
        """Write the current configuration to the config file."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with open(self._path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self._config), f, indent=2)

    def reload(self) -> None:
        """Reload configuration from file and environment."""
        self._load_config()
        self._load_env_vars()

    def reset(self) -> None:
        """Reset configuration to defaults (environment overrides still apply)."""
        self._config = AppConfig()
        self._load_env_vars()

