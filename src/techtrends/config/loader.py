"""
Configuration loading utilities.

Supports environment variable interpolation and config inheritance.
All sections are optional; missing values fall back to model defaults.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from techtrends.config.settings import (
    BrowseConfig,
    DashboardConfig,
    IngestionConfig,
    LoggingConfig,
    TechTrendsConfig,
)

SECTIONS = ("ingestion", "dashboard", "browse", "logging")


def _interpolate_env_vars(value: str) -> str:
    """
    Interpolate environment variables in string values.

    Supports ${VAR} and ${VAR:default} syntax.
    """
    pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return re.sub(pattern, replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively process config values for env var interpolation."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and process environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping at top level: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> TechTrendsConfig:
    """
    Load configuration from YAML file(s).

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.
            Defaults to a base.yaml next to the main file, if present.

    Returns:
        Fully validated TechTrendsConfig instance.

    Raises:
        ValueError: If the file contains unknown sections or invalid values.
    """
    if base_path is not None:
        base_data = load_yaml(base_path)
    else:
        potential_base = config_path.parent / "base.yaml"
        base_data = (
            load_yaml(potential_base)
            if potential_base.exists() and potential_base != config_path
            else {}
        )

    merged = _deep_merge(base_data, load_yaml(config_path))

    unknown = sorted(set(merged) - set(SECTIONS))
    if unknown:
        msg = f"Unknown config sections: {unknown}"
        raise ValueError(msg)

    return TechTrendsConfig(
        ingestion=IngestionConfig(**merged.get("ingestion", {})),
        dashboard=DashboardConfig(**merged.get("dashboard", {})),
        browse=BrowseConfig(**merged.get("browse", {})),
        logging=LoggingConfig(**merged.get("logging", {})),
    )
