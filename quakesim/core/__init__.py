"""Functional Core - Pure functions with no side effects.

This module contains all simulation logic as pure functions:
- Geo/distance calculations
- Ground motion attenuation
- MMI classification
- Damage, population, economic and casualty estimates
- Scenario comparison

All functions here are deterministic and have no I/O.
"""

from quakesim.core.geo import (
    GeoPoint,
    bearing,
    hypocentral_distance,
    is_valid_coordinate,
    is_valid_depth,
    surface_distance,
)
from quakesim.core.earthquake import EarthquakeSource, HistoricalEvent, Site
from quakesim.core.attenuation import (
    calculate_intensity,
    epicentral_intensity,
    felt_radius,
)
from quakesim.core.mmi import MMIEntry, classify
from quakesim.core.damage import (
    casualty_risk,
    damage_category,
    damage_percent,
    economic_loss,
    population_impact,
)
from quakesim.core.scenario import Scenario, assess_site, compare_scenarios

__all__ = [
    # Geo
    "GeoPoint",
    "surface_distance",
    "hypocentral_distance",
    "bearing",
    "is_valid_coordinate",
    "is_valid_depth",
    # Models
    "EarthquakeSource",
    "Site",
    "HistoricalEvent",
    # Attenuation
    "calculate_intensity",
    "epicentral_intensity",
    "felt_radius",
    # MMI
    "MMIEntry",
    "classify",
    # Damage
    "damage_percent",
    "damage_category",
    "population_impact",
    "economic_loss",
    "casualty_risk",
    # Scenario
    "Scenario",
    "assess_site",
    "compare_scenarios",
]
