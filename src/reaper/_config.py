"""Configuration management for the Reaper client.

Supports:
- Command-line flag (--host)
- Environment variables (REAPER_HOST, REAPER_TIMEOUT, REAPER_DEBUG)
- Config file (~/.reaper/config.toml)
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from reaper.exceptions import ConfigurationError

DEFAULT_TIMEOUT = 60.0

CONFIG_DIR = Path.home() / ".reaper"
CONFIG_FILE = CONFIG_DIR / "config.toml"

KNOWN_KEYS = ("host", "timeout", "debug")

TRUE_WORDS = ("1", "true", "yes")
FALSE_WORDS = ("0", "false", "no", "")


@dataclass
class ReaperConfig:
    """Client configuration."""

    host: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    @classmethod
    def from_env(cls) -> ReaperConfig:
        """Load configuration from environment variables.

        Raises:
            ConfigurationError: REAPER_TIMEOUT is not a positive number.
        """
        return cls(
            host=os.getenv("REAPER_HOST") or None,
            timeout=parse_timeout(os.getenv("REAPER_TIMEOUT") or DEFAULT_TIMEOUT),
            debug=env_debug(),
        )

    @classmethod
    def from_file(cls, path: Path | None = None) -> ReaperConfig:
        """Load configuration from TOML file.

        Raises:
            ConfigurationError: The file is not valid TOML or holds a bad value.
        """
        data = read_config_file(path)

        return cls(
            host=data.get("host"),
            timeout=parse_timeout(data.get("timeout", DEFAULT_TIMEOUT)),
            debug=parse_bool(data.get("debug", False), key="debug"),
        )

    @classmethod
    def load(cls, host: str | None = None) -> ReaperConfig:
        """Load configuration with precedence: flag > env > file > defaults."""
        config = cls.from_file()
        env_config = cls.from_env()

        if env_config.host:
            config.host = env_config.host
        if os.getenv("REAPER_TIMEOUT"):
            config.timeout = env_config.timeout
        if os.getenv("REAPER_DEBUG"):
            config.debug = env_config.debug

        if host:
            config.host = host

        return config

    def require_host(self) -> str:
        """Return the validated reaper host or raise ConfigurationError."""
        if not self.host:
            raise ConfigurationError(
                "please provide a reaper host (--host or REAPER_HOST)", op="config"
            )
        return validate_host(self.host)


def validate_host(host: str) -> str:
    """Check that host looks like host[:port]."""
    host = host.strip()
    if not host or "://" in host or "/" in host or any(c.isspace() for c in host):
        raise ConfigurationError(f"invalid reaper host {host!r}, expected host[:port]", op="config")

    _, sep, port = host.rpartition(":")
    if sep and not port.isdigit():
        raise ConfigurationError(f"invalid port in reaper host {host!r}", op="config")

    return host


def parse_timeout(value: Any) -> float:
    """Convert a configured timeout to seconds.

    Raises:
        ConfigurationError: ``value`` is not a positive number.
    """
    try:
        timeout = float(value)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(
            f"invalid timeout {value!r}, expected a number of seconds", op="config"
        ) from e
    if not timeout > 0:
        raise ConfigurationError(f"invalid timeout {value!r}, must be positive", op="config")
    return timeout


def parse_bool(value: Any, *, key: str) -> bool:
    """Convert a configured flag, accepting booleans and true/false words.

    Raises:
        ConfigurationError: ``value`` is neither.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
    raise ConfigurationError(f"invalid {key} {value!r}, expected true or false", op="config")


def env_debug() -> bool:
    """Whether REAPER_DEBUG asks for debug logging."""
    return os.getenv("REAPER_DEBUG", "").strip().lower() in TRUE_WORDS


def coerce_config_value(key: str, value: str) -> Any:
    """Turn a command-line string into the value stored for ``key``.

    Raises:
        ConfigurationError: Unknown key, or a value of the wrong type.
    """
    if key == "host":
        return validate_host(value)
    if key == "timeout":
        timeout = parse_timeout(value)
        return int(timeout) if timeout.is_integer() else timeout
    if key == "debug":
        return parse_bool(value, key=key)
    raise ConfigurationError(
        f"unknown key {key!r}, expected one of: {', '.join(KNOWN_KEYS)}", op="config"
    )


def read_config_file(path: Path | None = None) -> dict[str, Any]:
    """Read the raw config file, empty if it does not exist.

    Raises:
        ConfigurationError: The file is not valid TOML.
    """
    config_path = path or CONFIG_FILE
    if not config_path.exists():
        return {}
    with open(config_path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(
                f"invalid config file {config_path}: {e}", op="config"
            ) from e


def save_config(config: dict[str, Any], path: Path | None = None) -> None:
    """Save configuration to TOML file."""
    import tomli_w

    config_path = path or CONFIG_FILE
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    config_path.chmod(0o600)


def get_config_value(key: str) -> Any:
    """Get a single resolved config value."""
    config = ReaperConfig.load()
    return getattr(config, key, None)


def set_config_value(key: str, value: Any) -> None:
    """Set a single config value in the config file."""
    data = read_config_file(CONFIG_FILE)
    data[key] = value
    save_config(data, CONFIG_FILE)
