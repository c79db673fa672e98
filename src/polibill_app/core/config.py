"""Configuration loader for record storage and logging settings."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from polibill_app.core.errors import ConfigError


@dataclass(frozen=True)
class StorageConfig:
    data_dir: str = "data"
    clients_file: str = "clients.txt"
    policies_file: str = "policies.txt"
    payments_file: str = "payments.txt"
    strict_records: bool = False

    def _resolve(self, file_name: str) -> Path:
        return Path(self.data_dir) / file_name

    @property
    def clients_path(self) -> Path:
        return self._resolve(self.clients_file)

    @property
    def policies_path(self) -> Path:
        return self._resolve(self.policies_file)

    @property
    def payments_path(self) -> Path:
        return self._resolve(self.payments_file)


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"


@dataclass(frozen=True)
class AppConfig:
    storage: StorageConfig = field(default_factory=StorageConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG_REL_PATH = Path("config/polibill.yaml")
CONFIG_PATH_ENV = "POLIBILL_CONFIG_PATH"


def resolve_default_config_path() -> Path:
    """Resolve configuration path for source and packaged execution."""
    env_path = os.getenv(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)

    candidates: list[Path] = []

    if getattr(sys, "frozen", False):
        exe_dir = Path(sys.executable).resolve().parent
        candidates.append(exe_dir / DEFAULT_CONFIG_REL_PATH)

    candidates.append(Path.cwd() / DEFAULT_CONFIG_REL_PATH)
    candidates.append(Path(__file__).resolve().parents[3] / DEFAULT_CONFIG_REL_PATH)

    for candidate in candidates:
        if candidate.exists():
            return candidate

    return candidates[0] if candidates else DEFAULT_CONFIG_REL_PATH


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping.")
    return section


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load the app configuration from YAML; a missing file yields defaults."""
    path = config_path or resolve_default_config_path()
    if not path.exists():
        return AppConfig()

    try:
        with path.open("r", encoding="utf-8") as file:
            raw = yaml.safe_load(file)
    except yaml.YAMLError as error:
        raise ConfigError(f"Invalid YAML in {path}: {error}") from error

    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ConfigError(f"Config root in {path} must be a mapping.")

    storage = _section(raw, "storage")
    logging_section = _section(raw, "logging")
    defaults = StorageConfig()
    return AppConfig(
        storage=StorageConfig(
            data_dir=str(storage.get("data_dir", defaults.data_dir)),
            clients_file=str(storage.get("clients_file", defaults.clients_file)),
            policies_file=str(storage.get("policies_file", defaults.policies_file)),
            payments_file=str(storage.get("payments_file", defaults.payments_file)),
            strict_records=bool(storage.get("strict_records", defaults.strict_records)),
        ),
        logging=LoggingConfig(
            level=str(logging_section.get("level", "INFO")),
        ),
    )
