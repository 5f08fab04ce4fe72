"""Configuration loading for Roster."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from roster.registry.registry import ANONYMOUS_PRINCIPAL


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class RosterConfig:
    """Roster runtime configuration.

    Example ``roster.yaml``::

        db_path: data/roster.db
        server:
          host: 0.0.0.0
          port: 8000
        default_principal: registrar
        logging:
          dir: logs
          level: DEBUG
    """

    db_path: str = "roster.db"
    host: str = "127.0.0.1"
    port: int = 8000
    default_principal: str = ANONYMOUS_PRINCIPAL
    log_dir: str | None = None
    log_level: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RosterConfig:
        """Create config from dictionary.

        Raises:
            ConfigError: If a section has the wrong shape or the port isn't an integer.
        """
        server = data.get("server", {})
        logging_data = data.get("logging", {})
        if not isinstance(server, dict) or not isinstance(logging_data, dict):
            raise ConfigError("'server' and 'logging' sections must be mappings")

        try:
            port = int(server.get("port", cls.port))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid server port: {server.get('port')!r}") from e

        return cls(
            db_path=str(data.get("db_path", cls.db_path)),
            host=str(server.get("host", cls.host)),
            port=port,
            default_principal=str(data.get("default_principal", cls.default_principal)),
            log_dir=logging_data.get("dir"),
            log_level=logging_data.get("level"),
        )

    def apply_env(self, environ: Mapping[str, str] | None = None) -> RosterConfig:
        """Return a copy with ROSTER_* environment overrides applied."""
        env = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        if "ROSTER_DB_PATH" in env:
            changes["db_path"] = env["ROSTER_DB_PATH"]
        if "ROSTER_HOST" in env:
            changes["host"] = env["ROSTER_HOST"]
        if "ROSTER_PORT" in env:
            try:
                changes["port"] = int(env["ROSTER_PORT"])
            except ValueError as e:
                raise ConfigError(f"Invalid ROSTER_PORT: {env['ROSTER_PORT']!r}") from e
        if "ROSTER_PRINCIPAL" in env:
            changes["default_principal"] = env["ROSTER_PRINCIPAL"]
        return replace(self, **changes)


def load_config(config_path: Path | str | None = None) -> RosterConfig:
    """Load Roster configuration from a YAML file, then apply env overrides.

    Args:
        config_path: Path to roster.yaml. When None, defaults are used.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    if config_path is None:
        return RosterConfig().apply_env()

    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return RosterConfig.from_dict(data).apply_env()
