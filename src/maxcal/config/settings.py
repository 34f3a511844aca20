"""Application settings and configuration management."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".maxcal"


def default_config_path() -> Path:
    """Return the default config.yaml path."""
    return _default_config_dir() / "config.yaml"


@dataclass
class CatalogConfig:
    """Food catalog configuration."""

    path: Optional[Path] = None
    delimiter: str = "^"


@dataclass
class OptimizationConfig:
    """Optimization solver configuration."""

    solver: str = "dynamic"  # "exhaustive" or "dynamic"
    max_weight: float = 500.0
    min_calories: float = 1.0
    max_calories: float = 2500.0
    max_foods: Optional[int] = None
    max_dp_capacity: int = 1_000_000


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table", "json", "markdown"


@dataclass
class Settings:
    """Main application settings."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    optimization: OptimizationConfig = field(default_factory=OptimizationConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses ~/.maxcal/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse catalog config
        if "catalog" in data:
            cat_data = data["catalog"] or {}
            if cat_data.get("path"):
                settings.catalog.path = Path(cat_data["path"]).expanduser()
            if "delimiter" in cat_data:
                settings.catalog.delimiter = str(cat_data["delimiter"])

        # Parse optimization config
        if "optimization" in data:
            opt_data = data["optimization"] or {}
            if "solver" in opt_data:
                settings.optimization.solver = opt_data["solver"]
            if "max_weight" in opt_data:
                settings.optimization.max_weight = float(opt_data["max_weight"])
            if "min_calories" in opt_data:
                settings.optimization.min_calories = float(opt_data["min_calories"])
            if "max_calories" in opt_data:
                settings.optimization.max_calories = float(opt_data["max_calories"])
            if opt_data.get("max_foods") is not None:
                settings.optimization.max_foods = int(opt_data["max_foods"])
            if "max_dp_capacity" in opt_data:
                settings.optimization.max_dp_capacity = int(opt_data["max_dp_capacity"])

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses ~/.maxcal/config.yaml
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        """Return settings as a YAML/JSON-friendly dict."""
        return {
            "catalog": {
                "path": str(self.catalog.path) if self.catalog.path else None,
                "delimiter": self.catalog.delimiter,
            },
            "optimization": {
                "solver": self.optimization.solver,
                "max_weight": self.optimization.max_weight,
                "min_calories": self.optimization.min_calories,
                "max_calories": self.optimization.max_calories,
                "max_foods": self.optimization.max_foods,
                "max_dp_capacity": self.optimization.max_dp_capacity,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None
_config_path: Optional[Path] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load(_config_path)
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk.

    Args:
        config_path: Config file to use from now on. If None, uses ~/.maxcal/config.yaml
    """
    global _settings, _config_path
    _config_path = config_path
    _settings = Settings.load(_config_path)
    return _settings
