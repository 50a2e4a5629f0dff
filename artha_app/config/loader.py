"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    CacheParams,
    DefaultConfig,
    FallbackRates,
    MarketDataParams,
    ProjectionParams,
    SummaryParams,
    get_default_config,
)

_SECTIONS = {
    "projection": ProjectionParams,
    "fallback_rates": FallbackRates,
    "market_data": MarketDataParams,
    "cache": CacheParams,
    "summary": SummaryParams,
}


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings(self) -> dict[str, Any]:
        """Load global setting overrides from settings.yaml."""
        return self._read_yaml("settings.yaml")

    def load_instrument_config(self, instrument_id: str) -> dict[str, Any]:
        """Load catalog overrides for a single instrument."""
        instruments_config = self._read_yaml("instruments.yaml")
        return instruments_config.get("instruments", {}).get(instrument_id, {})  # type: ignore[no-any-return]

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. settings.yaml overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_settings())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Build a typed configuration from the merged tiers."""
        merged = self.merge_config(overrides)
        sections = {}
        for name, params_cls in _SECTIONS.items():
            section = merged.get(name, {})
            known = {f.name for f in fields(params_cls)}
            values = {k: v for k, v in section.items() if k in known}
            if "models" in values:
                values["models"] = tuple(values["models"])
            sections[name] = params_cls(**values)
        return DefaultConfig(**sections)

    def _read_yaml(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename
        if not path.exists():
            return {}

        with open(path) as f:
            data = yaml.safe_load(f)

        return data or {}

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
