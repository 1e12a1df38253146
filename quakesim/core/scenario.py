"""Scenario evaluation and comparison - Pure functions.

This module runs the full pipeline (distance -> intensity -> MMI and
damage -> impact) for sites, compares candidate scenarios side by side,
and picks historical events of similar size. All functions are pure
with no side effects.
"""

from dataclasses import dataclass
from typing import Callable, Iterable

from quakesim.core.attenuation import calculate_intensity
from quakesim.core.damage import (
    BuildingDamage,
    CasualtyEstimate,
    DamageCategory,
    EconomicLoss,
    PopulationImpact,
    casualty_risk,
    damage_by_construction_type,
    damage_category,
    damage_percent,
    economic_loss,
    population_impact,
)
from quakesim.core.earthquake import EarthquakeSource, HistoricalEvent, Site
from quakesim.core.geo import bearing, hypocentral_distance, surface_distance
from quakesim.core.mmi import MMIEntry, classify


IntensityFn = Callable[[float, float, float], float]


@dataclass(frozen=True)
class Scenario:
    """A candidate earthquake described by its distance to a site.

    Attributes:
        magnitude: Moment magnitude (Mw)
        depth_km: Hypocenter depth in kilometers
        distance_km: Horizontal distance to the site in kilometers
    """
    magnitude: float
    depth_km: float
    distance_km: float


@dataclass(frozen=True)
class ScenarioResult:
    """Damage outcome of one scenario.

    Attributes:
        scenario_id: 1-based position in the input
        magnitude: Scenario magnitude
        depth_km: Scenario depth
        distance_km: Scenario distance
        intensity: Computed intensity
        damage_percent: Estimated damage percentage
        category: Damage category label
        severity: Damage category ordinal (0-5)
    """
    scenario_id: int
    magnitude: float
    depth_km: float
    distance_km: float
    intensity: float
    damage_percent: float
    category: str
    severity: int


@dataclass(frozen=True)
class SiteAssessment:
    """Everything the pipeline derives for one site.

    Attributes:
        site: The assessed site
        surface_distance_km: Great-circle distance from the epicenter
        hypocentral_distance_km: 3-D distance from the hypocenter
        bearing_deg: Compass bearing from the epicenter to the site
        intensity: Ground motion intensity
        mmi: MMI band for the intensity
        damage_percent: Estimated damage percentage
        damage_category: Qualitative damage band
        population: People affected and displaced
        economic_loss: Estimated losses
        casualties: Fatality range
        building_damage: Damage by construction type
    """
    site: Site
    surface_distance_km: float
    hypocentral_distance_km: float
    bearing_deg: float
    intensity: float
    mmi: MMIEntry
    damage_percent: float
    damage_category: DamageCategory
    population: PopulationImpact
    economic_loss: EconomicLoss
    casualties: CasualtyEstimate
    building_damage: dict[str, BuildingDamage]


def compare_scenarios(
    scenarios: Iterable[Scenario],
    intensity_fn: IntensityFn = calculate_intensity,
) -> list[ScenarioResult]:
    """Compute damage for each scenario.

    Pure function. Results follow input order; they are not sorted by
    severity. Errors raised by intensity_fn propagate.

    Args:
        scenarios: Candidate scenarios
        intensity_fn: (magnitude, depth_km, distance_km) -> intensity

    Returns:
        One ScenarioResult per scenario
    """
    results = []

    for index, scenario in enumerate(scenarios, start=1):
        intensity = intensity_fn(scenario.magnitude, scenario.depth_km, scenario.distance_km)
        damage = damage_percent(intensity)
        category = damage_category(damage)

        results.append(ScenarioResult(
            scenario_id=index,
            magnitude=scenario.magnitude,
            depth_km=scenario.depth_km,
            distance_km=scenario.distance_km,
            intensity=intensity,
            damage_percent=damage,
            category=category.label,
            severity=category.severity,
        ))

    return results


def assess_site(
    source: EarthquakeSource,
    site: Site,
    gdp_per_capita: float | None = None,
) -> SiteAssessment:
    """Run the full pipeline for one site.

    Pure function. Intensity is evaluated at the horizontal distance; the
    attenuation model folds in the depth itself.

    Args:
        source: Earthquake source
        site: Site to assess
        gdp_per_capita: GDP per capita in USD for loss estimates

    Returns:
        SiteAssessment for the site

    Raises:
        ValueError: If the source magnitude or depth is out of range
    """
    horizontal = surface_distance(source.epicenter, site.location)
    intensity = calculate_intensity(source.magnitude, source.depth_km, horizontal)
    damage = damage_percent(intensity)

    return SiteAssessment(
        site=site,
        surface_distance_km=horizontal,
        hypocentral_distance_km=hypocentral_distance(
            source.epicenter, source.depth_km, site.location,
        ),
        bearing_deg=bearing(source.epicenter, site.location),
        intensity=intensity,
        mmi=classify(intensity),
        damage_percent=damage,
        damage_category=damage_category(damage),
        population=population_impact(site.population, damage),
        economic_loss=economic_loss(damage, site.population, gdp_per_capita),
        casualties=casualty_risk(site.population, damage),
        building_damage=damage_by_construction_type(intensity),
    )


def assess_sites(
    source: EarthquakeSource,
    sites: Iterable[Site],
    gdp_per_capita: float | None = None,
) -> list[SiteAssessment]:
    """Assess every site, preserving input order.

    Pure function.
    """
    return [assess_site(source, site, gdp_per_capita) for site in sites]


def rank_sites_by_severity(assessments: Iterable[SiteAssessment]) -> list[SiteAssessment]:
    """Sort assessments by damage, worst first.

    Pure function. Returns a new list; ties keep their original order.
    """
    return sorted(assessments, key=lambda a: a.damage_percent, reverse=True)


def closest_historical_events(
    events: Iterable[HistoricalEvent],
    magnitude: float,
    limit: int = 5,
) -> list[HistoricalEvent]:
    """Historical events closest in magnitude to a scenario.

    Pure function.

    Args:
        events: Historical events
        magnitude: Scenario magnitude
        limit: Maximum number of events to return

    Returns:
        Up to `limit` events, closest magnitude first
    """
    ranked = sorted(events, key=lambda e: abs(e.magnitude - magnitude))
    return ranked[:max(limit, 0)]
