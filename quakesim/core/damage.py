"""Damage and impact estimation - Pure functions.

Converts ground motion intensity into an estimated damage percentage with
a logistic curve, then derives population, economic and casualty figures
from it. This is a simplified educational model: real assessments need
building inventories, soil conditions and shaking duration.

Everything here is best-effort and never raises, whatever the input:
negative, NaN or non-numeric intensity yields zero damage, percentages are clamped
to [0, 100], and negative population or damage short-circuits to an
all-zero result. Non-numeric population or damage counts as unusable too.
"""

import math
from dataclasses import dataclass

from quakesim.core.calibration import (
    DAMAGE_PARAMETERS,
    IMPACT_PARAMETERS,
    DamageParameters,
    ImpactParameters,
)


@dataclass(frozen=True)
class DamageCategory:
    """A qualitative damage band.

    Attributes:
        label: Category name (e.g., "Moderate")
        description: Expected effects
        color: Hex color for display
        severity: Ordinal 0 (none) to 5 (very heavy)
        min_percent: Inclusive lower bound of the band
    """
    label: str
    description: str
    color: str
    severity: int
    min_percent: float


DAMAGE_CATEGORIES: tuple[DamageCategory, ...] = (
    DamageCategory("None", "No significant damage expected", "#10B981", 0, 0.0),
    DamageCategory("Very Light", "Minor cosmetic damage, no structural issues", "#84CC16", 1, 5.0),
    DamageCategory("Light", "Some cracks in walls, minor damage to chimneys", "#FDE047", 2, 15.0),
    DamageCategory("Moderate", "Damage to chimneys, plaster falls, some structural damage", "#FB923C", 3, 30.0),
    DamageCategory("Heavy", "Significant structural damage, partial collapse possible", "#F87171", 4, 50.0),
    DamageCategory("Very Heavy", "Severe structural damage, widespread collapse", "#DC2626", 5, 70.0),
)


@dataclass(frozen=True)
class VulnerabilityClass:
    """Damage multiplier for a construction type."""
    key: str
    label: str
    multiplier: float
    description: str


VULNERABILITY_CLASSES: tuple[VulnerabilityClass, ...] = (
    VulnerabilityClass("modern", "Modern/Engineered", 0.4, "Reinforced concrete, seismic design"),
    VulnerabilityClass("standard", "Standard Construction", 1.0, "Well-built ordinary structures"),
    VulnerabilityClass("unreinforced", "Unreinforced Masonry", 1.6, "Older buildings, no seismic design"),
    VulnerabilityClass("informal", "Informal Construction", 2.0, "Poor quality, non-engineered"),
)


@dataclass(frozen=True)
class BuildingDamage:
    """Estimated damage for one construction type."""
    construction_type: str
    damage_percent: float
    description: str


@dataclass(frozen=True)
class PopulationImpact:
    """People affected and displaced.

    Attributes:
        total: Total population considered
        affected: People affected by the shaking
        displaced: People who lose their homes (subset of affected)
        percent_affected: Share affected, one decimal
    """
    total: int
    affected: int
    displaced: int
    percent_affected: float


@dataclass(frozen=True)
class EconomicLoss:
    """Estimated losses in USD.

    Attributes:
        direct_loss: Building losses
        indirect_loss: Economic disruption
        total_loss: direct_loss + indirect_loss
        percent_of_gdp: total_loss relative to annual GDP, one decimal
    """
    direct_loss: int
    indirect_loss: int
    total_loss: int
    percent_of_gdp: float


NO_CASUALTIES_DESCRIPTION = "Casualties unlikely at this damage level"
CASUALTIES_DESCRIPTION = "Estimated casualties (very rough approximation)"
CASUALTIES_WARNING = (
    "This is a simplified model - actual casualties depend on many factors "
    "including time of day, building codes, and emergency response"
)


@dataclass(frozen=True)
class CasualtyEstimate:
    """Fatality range, low <= medium <= high."""
    low: int
    medium: int
    high: int
    description: str = NO_CASUALTIES_DESCRIPTION
    warning: str | None = None


@dataclass(frozen=True)
class DamageCurvePoint:
    """One sample of the damage curve."""
    intensity: float
    damage_percent: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from negative infinity."""
    return int(math.floor(value + 0.5))


def _round_one_decimal(value: float) -> float:
    return round_half_up(value * 10) / 10


def _clamp_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def _is_usable(value: float) -> bool:
    """A finite, non-negative number."""
    if not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value >= 0


def damage_percent(
    intensity: float,
    params: DamageParameters = DAMAGE_PARAMETERS,
) -> float:
    """Estimate the percentage of buildings damaged.

    Pure function. Logistic curve 100 / (1 + e^(-k*(I - threshold))),
    with the 50% point near MMI VI.

    Args:
        intensity: Intensity from the attenuation model
        params: Logistic curve parameters

    Returns:
        Damage percentage in [0, 100]
    """
    if not isinstance(intensity, (int, float)) or math.isnan(intensity) or intensity < 0:
        return 0.0

    exponent = -params.k * (intensity - params.threshold)
    # e^x overflows a float past ~709
    if exponent > 700:
        return 0.0

    return _clamp_percent(100 / (1 + math.exp(exponent)))


def damage_category(percent: float) -> DamageCategory:
    """Qualitative damage band for a damage percentage.

    Pure function. Values below 0, NaN or non-numeric fall in the lowest band.
    """
    result = DAMAGE_CATEGORIES[0]
    if not isinstance(percent, (int, float)):
        return result

    for category in DAMAGE_CATEGORIES:
        if percent >= category.min_percent:
            result = category

    return result


def damage_by_construction_type(
    intensity: float,
    params: DamageParameters = DAMAGE_PARAMETERS,
) -> dict[str, BuildingDamage]:
    """Damage estimates for each construction type.

    Pure function. Applies the vulnerability multipliers to the base damage
    percentage and caps the result at 100.

    Returns:
        Mapping of construction key ("modern", "standard", "unreinforced",
        "informal") to its BuildingDamage
    """
    base = damage_percent(intensity, params)

    return {
        vulnerability.key: BuildingDamage(
            construction_type=vulnerability.label,
            damage_percent=_clamp_percent(base * vulnerability.multiplier),
            description=vulnerability.description,
        )
        for vulnerability in VULNERABILITY_CLASSES
    }


def population_impact(
    total_population: float,
    damage_pct: float,
    params: ImpactParameters = IMPACT_PARAMETERS,
) -> PopulationImpact:
    """Estimate how many people are affected and displaced.

    Pure function. Displacement only accrues above 40% damage, so
    displaced <= affected <= total always holds.

    Args:
        total_population: Population of the site
        damage_pct: Damage percentage (0-100)
        params: Impact multipliers

    Returns:
        PopulationImpact; all zeros for negative or non-finite input
    """
    if not _is_usable(total_population) or not _is_usable(damage_pct):
        return PopulationImpact(total=0, affected=0, displaced=0, percent_affected=0.0)

    damage_pct = min(damage_pct, 100.0)
    total = round_half_up(total_population)

    affected_percent = min(damage_pct * params.affected_multiplier, 100.0)
    affected = round_half_up(total * affected_percent / 100)

    displacement_factor = max(
        0.0,
        (damage_pct - params.displacement_threshold) / params.displacement_range,
    )
    displaced = round_half_up(affected * displacement_factor)

    return PopulationImpact(
        total=total,
        affected=affected,
        displaced=displaced,
        percent_affected=_round_one_decimal(affected_percent),
    )


def economic_loss(
    damage_pct: float,
    total_population: float,
    gdp_per_capita: float | None = None,
    params: ImpactParameters = IMPACT_PARAMETERS,
) -> EconomicLoss:
    """Very rough estimate of economic losses.

    Pure function. Building stock is valued at three years of GDP per
    person; losses grow super-linearly with damage.

    Args:
        damage_pct: Damage percentage (0-100)
        total_population: Population of the site
        gdp_per_capita: GDP per capita in USD (defaults to 15000)
        params: Impact multipliers

    Returns:
        EconomicLoss; all zeros for negative or non-finite input
    """
    if gdp_per_capita is None:
        gdp_per_capita = params.default_gdp_per_capita

    if not all(_is_usable(v) for v in (damage_pct, total_population, gdp_per_capita)):
        return EconomicLoss(direct_loss=0, indirect_loss=0, total_loss=0, percent_of_gdp=0.0)

    damage_pct = min(damage_pct, 100.0)
    building_value = total_population * gdp_per_capita * params.building_value_multiplier

    loss_factor = (damage_pct / 100) ** params.loss_exponent
    direct = building_value * loss_factor
    indirect = direct * params.indirect_loss_ratio
    total = direct + indirect

    gdp = total_population * gdp_per_capita
    percent_of_gdp = _round_one_decimal(total / gdp * 100) if gdp > 0 else 0.0

    return EconomicLoss(
        direct_loss=round_half_up(direct),
        indirect_loss=round_half_up(indirect),
        total_loss=round_half_up(total),
        percent_of_gdp=percent_of_gdp,
    )


def casualty_risk(
    total_population: float,
    damage_pct: float,
    params: ImpactParameters = IMPACT_PARAMETERS,
) -> CasualtyEstimate:
    """Very rough fatality estimate.

    Pure function. No casualties are estimated below 60% damage; above it
    the fatality rate ramps quadratically from 0% to 1% at 100% damage.

    Args:
        total_population: Population of the site
        damage_pct: Damage percentage (0-100)
        params: Impact multipliers

    Returns:
        CasualtyEstimate with low <= medium <= high
    """
    if (
        not _is_usable(total_population)
        or not _is_usable(damage_pct)
        or damage_pct < params.casualty_threshold
    ):
        return CasualtyEstimate(low=0, medium=0, high=0)

    damage_pct = min(damage_pct, 100.0)
    ramp = (damage_pct - params.casualty_threshold) / params.casualty_range
    fatality_rate = ramp ** 2 * params.max_fatality_rate

    medium = round_half_up(total_population * fatality_rate)

    return CasualtyEstimate(
        low=round_half_up(medium * params.casualty_low_factor),
        medium=medium,
        high=round_half_up(medium * params.casualty_high_factor),
        description=CASUALTIES_DESCRIPTION,
        warning=CASUALTIES_WARNING,
    )


def damage_curve(
    min_intensity: float = 0.0,
    max_intensity: float = 12.0,
    steps: int = 100,
    params: DamageParameters = DAMAGE_PARAMETERS,
) -> list[DamageCurvePoint]:
    """Sample the damage function at evenly spaced intensities.

    Pure function. Returns steps + 1 points; every call builds a new list.

    Raises:
        ValueError: If steps < 1
    """
    if steps < 1:
        raise ValueError(f"Invalid steps: {steps}. Must be at least 1.")

    step_size = (max_intensity - min_intensity) / steps
    curve = []

    for i in range(steps + 1):
        intensity = min_intensity + i * step_size
        curve.append(DamageCurvePoint(
            intensity=intensity,
            damage_percent=damage_percent(intensity, params),
        ))

    return curve


def damage_parameters(params: DamageParameters = DAMAGE_PARAMETERS) -> dict[str, float]:
    """Return a copy of the damage curve parameters for display."""
    return params.to_dict()
