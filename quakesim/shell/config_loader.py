"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (SimulationConfig) are defined in quakesim/core/config.py
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quakesim.core.config import DEFAULT_EPICENTER, SimulationConfig
from quakesim.core.earthquake import (
    HistoricalEvent,
    Site,
    parse_historical_event,
    parse_site,
)
from quakesim.core.geo import GeoPoint


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/config.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${VAR} environment placeholder.

    Args:
        value: Value to resolve

    Returns:
        Resolved value, or the original placeholder if the variable is unset
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def _parse_point(data: dict[str, Any]) -> GeoPoint:
    """Parse a point from config data ({latitude, longitude} or {lat, lon})."""
    return GeoPoint(
        latitude=float(data.get("latitude", data.get("lat"))),
        longitude=float(data.get("longitude", data.get("lon"))),
    )


def _parse_sites(items: list[dict[str, Any]]) -> list[Site]:
    """Parse inline sites, skipping invalid ones with a warning."""
    sites = []
    for i, item in enumerate(items):
        site = parse_site(item)
        if site is None:
            logger.warning("Skipping invalid site at sites[%d]: %s", i, item)
            continue
        sites.append(site)
    return sites


def _parse_events(items: list[dict[str, Any]]) -> list[HistoricalEvent]:
    """Parse inline historical events, skipping invalid ones with a warning."""
    events = []
    for i, item in enumerate(items):
        event = parse_historical_event(item)
        if event is None:
            logger.warning("Skipping invalid event at historical_events[%d]: %s", i, item)
            continue
        events.append(event)
    return events


def _optional_path(value: Any) -> str | None:
    """Resolve an optional path setting."""
    if value is None:
        return None
    resolved = _resolve_value(value)
    return str(resolved) if resolved else None


def load_config_from_dict(data: dict[str, Any]) -> SimulationConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed SimulationConfig object
    """
    epicenter = DEFAULT_EPICENTER
    if "epicenter" in data:
        epicenter = _parse_point(data["epicenter"])

    defaults = SimulationConfig()

    return SimulationConfig(
        magnitude=float(_resolve_value(data.get("magnitude", defaults.magnitude))),
        depth_km=float(_resolve_value(data.get("depth_km", defaults.depth_km))),
        epicenter=epicenter,
        sites=_parse_sites(data.get("sites") or []),
        historical_events=_parse_events(data.get("historical_events") or []),
        sites_path=_optional_path(data.get("sites_path")),
        historical_events_path=_optional_path(data.get("historical_events_path")),
        gdp_per_capita=float(data.get("gdp_per_capita", defaults.gdp_per_capita)),
        felt_intensity=float(data.get("felt_intensity", defaults.felt_intensity)),
        selected_site=data.get("selected_site", defaults.selected_site),
    )


def load_config(config_path: str | Path | None = None) -> SimulationConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed SimulationConfig object

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return SimulationConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return SimulationConfig()

    config = load_config_from_dict(data)

    logger.info(
        "Loaded config: M%.1f at %.0f km, %d inline sites, %d historical events",
        config.magnitude,
        config.depth_km,
        len(config.sites),
        len(config.historical_events),
    )

    return config


def load_config_from_env() -> SimulationConfig:
    """Load minimal configuration from environment variables.

    Useful for simple deployments without a YAML file.

    Environment variables:
        MAGNITUDE: Moment magnitude
        DEPTH_KM: Hypocenter depth in km
        EPICENTER: Comma-separated "lat,lon"
        SITES_PATH: CSV file with sites
        HISTORICAL_EVENTS_PATH: JSON file with historical events
        GDP_PER_CAPITA: GDP per capita in USD

    Returns:
        SimulationConfig object from environment
    """
    defaults = SimulationConfig()

    epicenter = defaults.epicenter
    epicenter_str = os.environ.get("EPICENTER")
    if epicenter_str:
        parts = [float(p.strip()) for p in epicenter_str.split(",")]
        if len(parts) == 2:
            epicenter = GeoPoint(latitude=parts[0], longitude=parts[1])
        else:
            logger.warning("EPICENTER must be 'lat,lon', got %s", epicenter_str)

    return SimulationConfig(
        magnitude=float(os.environ.get("MAGNITUDE", defaults.magnitude)),
        depth_km=float(os.environ.get("DEPTH_KM", defaults.depth_km)),
        epicenter=epicenter,
        sites_path=os.environ.get("SITES_PATH"),
        historical_events_path=os.environ.get("HISTORICAL_EVENTS_PATH"),
        gdp_per_capita=float(os.environ.get("GDP_PER_CAPITA", defaults.gdp_per_capita)),
    )
