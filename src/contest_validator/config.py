"""Configuration loader for dataset validation runs.

Settings come from an optional YAML file (default: contest-validator.yaml in
the working directory). JSON documents are accepted as well since they are
valid YAML. Every key is optional; unknown keys are rejected so that typos do
not silently fall back to defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG_NAME = "contest-validator.yaml"
CONFIG_PATH_ENV_VAR = "CONTEST_VALIDATOR_CONFIG"
DATA_ROOT_ENV_VAR = "CONTEST_VALIDATOR_DATA_ROOT"
WARN_ONLY_ENV_VAR = "CONTEST_VALIDATOR_WARN_ONLY"

TRUTHY = {"1", "true", "yes", "y"}


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be loaded or is invalid."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Locations of the dataset files and rule parameters."""

    data_root: Path = Path("_data")
    handles_dir: str = "handles"
    orgs_dir: str = "orgs"
    contests_file: str = "contests/contests.csv"
    findings_file: str = "findings/findings.json"
    avatar_prefix: str = "./avatars/"
    warn_only: bool = False

    @property
    def handles_path(self) -> Path:
        return self.data_root / self.handles_dir

    @property
    def orgs_path(self) -> Path:
        return self.data_root / self.orgs_dir

    @property
    def contests_path(self) -> Path:
        return self.data_root / self.contests_file

    @property
    def findings_path(self) -> Path:
        return self.data_root / self.findings_file

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Settings:
        """Create Settings from a mapping, validating keys and value types."""
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")

        values: dict[str, Any] = {}
        for key, value in data.items():
            if key == "warn_only":
                if not isinstance(value, bool):
                    raise ConfigError("'warn_only' must be a boolean")
                values[key] = value
            elif key == "data_root":
                if not isinstance(value, str) or not value:
                    raise ConfigError("'data_root' must be a non-empty string")
                values[key] = Path(value)
            else:
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"'{key}' must be a non-empty string")
                values[key] = value

        return cls(**values)


def _resolve_config_path(path: Path | str | None = None) -> tuple[Path, bool]:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. CONTEST_VALIDATOR_CONFIG environment variable
    3. contest-validator.yaml in the working directory (optional)

    The boolean tells whether the file is required to exist.
    """
    if path is not None:
        return Path(path), True

    env_path = os.environ.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path), True

    return Path.cwd() / DEFAULT_CONFIG_NAME, False


def _read_config(config_path: Path) -> dict[str, Any]:
    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration file: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a mapping")
    return data


def load_settings(
    path: Path | str | None = None,
    data_root: Path | str | None = None,
) -> Settings:
    """Load and validate settings.

    Args:
        path: Optional path to the config file. If not provided, uses the
            CONTEST_VALIDATOR_CONFIG env var or falls back to
            contest-validator.yaml when that file exists.
        data_root: Optional dataset root overriding both the file and the
            CONTEST_VALIDATOR_DATA_ROOT env var.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    config_path, required = _resolve_config_path(path)

    if config_path.exists():
        settings = Settings.from_dict(_read_config(config_path))
    elif required:
        raise ConfigError(f"Configuration file not found: {config_path}")
    else:
        settings = Settings()

    env_root = os.environ.get(DATA_ROOT_ENV_VAR)
    if data_root is not None:
        settings = replace(settings, data_root=Path(data_root))
    elif env_root:
        settings = replace(settings, data_root=Path(env_root))

    if os.getenv(WARN_ONLY_ENV_VAR, "").strip().lower() in TRUTHY:
        settings = replace(settings, warn_only=True)

    return settings
