"""rolegate configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml


def _default_config_path() -> Path:
    return Path.home() / ".rolegate" / "config.yaml"


@dataclass
class Config:
    """rolegate configuration."""

    config_path: Path = field(default_factory=_default_config_path)
    log_level: str = "WARNING"
    catalog_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load config from YAML file, then env vars, over defaults."""
        config = cls()

        env_config = os.environ.get("ROLEGATE_CONFIG")
        if config_path:
            config.config_path = Path(config_path)
        elif env_config:
            config.config_path = Path(env_config)

        if config.config_path.exists():
            with open(config.config_path) as f:
                data = yaml.safe_load(f)
            if not isinstance(data, dict):
                data = {}
            if "log_level" in data:
                config.log_level = str(data["log_level"])
            if data.get("catalog_path"):
                config.catalog_path = Path(data["catalog_path"]).expanduser()

        env_log = os.environ.get("ROLEGATE_LOG_LEVEL")
        if env_log:
            config.log_level = env_log

        env_catalog = os.environ.get("ROLEGATE_CATALOG")
        if env_catalog:
            config.catalog_path = Path(env_catalog).expanduser()

        return config

    def save(self) -> None:
        """Save current config to YAML."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, str] = {"log_level": self.log_level}
        if self.catalog_path is not None:
            data["catalog_path"] = str(self.catalog_path)
        with open(self.config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False)
