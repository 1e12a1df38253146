"""Calibration constants - Immutable configuration.

The attenuation, damage and impact models are driven by fixed constants.
They are exposed here as frozen dataclasses, built once at import time and
passed into the pure functions as keyword defaults so callers can inspect
or substitute them without touching module globals.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class AttenuationConstants:
    """Constants for I = a + b*M - c*log10(R) - d*R.

    Tuned against the 2010 M8.8 Maule earthquake as felt in Santiago.

    Attributes:
        a: Base intensity offset
        b: Magnitude scaling factor
        c: Logarithmic distance decay
        d: Linear distance decay
        min_distance_km: Floor on R, keeps log10 finite at the hypocenter
    """
    a: float = -3.5
    b: float = 1.8
    c: float = 3.5
    d: float = 0.002
    min_distance_km: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy of the constants."""
        return asdict(self)


@dataclass(frozen=True)
class DamageParameters:
    """Logistic damage curve: 100 / (1 + e^(-k*(I - threshold))).

    Attributes:
        k: Steepness of the transition
        threshold: Intensity of the 50% damage point (~MMI VI)
    """
    k: float = 1.5
    threshold: float = 6.0

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy of the parameters."""
        return asdict(self)


@dataclass(frozen=True)
class ImpactParameters:
    """Multipliers for the population, economic and casualty estimators.

    These values carry no documented derivation; they are kept exactly
    as the simulator has always used them.

    Attributes:
        affected_multiplier: Share of population affected per damage percent
        displacement_threshold: Damage percent above which people are displaced
        displacement_range: Damage span over which displacement ramps to 100%
        casualty_threshold: Damage percent below which no casualties are estimated
        casualty_range: Damage span over which the fatality rate ramps up
        max_fatality_rate: Fatality rate reached at 100% damage
        casualty_low_factor: Low estimate relative to the medium estimate
        casualty_high_factor: High estimate relative to the medium estimate
        building_value_multiplier: Building value per person, in GDP per capita
        loss_exponent: Exponent applied to the damage fraction
        indirect_loss_ratio: Indirect losses as a share of direct losses
        default_gdp_per_capita: GDP per capita (USD) used when none is given
    """
    affected_multiplier: float = 1.2
    displacement_threshold: float = 40.0
    displacement_range: float = 60.0
    casualty_threshold: float = 60.0
    casualty_range: float = 40.0
    max_fatality_rate: float = 0.01
    casualty_low_factor: float = 0.5
    casualty_high_factor: float = 2.0
    building_value_multiplier: float = 3.0
    loss_exponent: float = 1.3
    indirect_loss_ratio: float = 0.3
    default_gdp_per_capita: float = 15000.0

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dict copy of the parameters."""
        return asdict(self)


@dataclass(frozen=True)
class FeltRadiusSearch:
    """Bisection bounds for the felt-radius search.

    Attributes:
        max_distance_km: Upper end of the search bracket
        tolerance_km: Stop once the bracket is this narrow
        max_iterations: Hard cap on bisection steps
    """
    max_distance_km: float = 5000.0
    tolerance_km: float = 1.0
    max_iterations: int = 50


ATTENUATION_CONSTANTS = AttenuationConstants()
DAMAGE_PARAMETERS = DamageParameters()
IMPACT_PARAMETERS = ImpactParameters()
FELT_RADIUS_SEARCH = FeltRadiusSearch()

# Physical input ranges for the attenuation formula
MIN_MAGNITUDE = 0.0
MAX_MAGNITUDE = 10.0
MIN_DEPTH_KM = 0.0
MAX_DEPTH_KM = 700.0
