"""Result formatting - Pure functions.

This module turns pipeline results into plain-text reports and
JSON-serializable dicts for the HTTP surfaces.
All functions are pure with no side effects.
"""

import math
from dataclasses import asdict
from typing import Any

from quakesim.core.attenuation import ReferenceCheck
from quakesim.core.damage import DamageCurvePoint
from quakesim.core.earthquake import EarthquakeSource, HistoricalEvent
from quakesim.core.mmi import MMIEntry
from quakesim.core.scenario import ScenarioResult, SiteAssessment


def get_intensity_emoji(numeric_level: int) -> str:
    """Get an emoji representing shaking severity.

    Pure function.
    """
    if numeric_level >= 9:
        return "🚨"  # Violent and above
    elif numeric_level >= 7:
        return "⚠️"  # Very strong / severe
    elif numeric_level >= 5:
        return "🔶"  # Moderate / strong
    elif numeric_level >= 3:
        return "🔸"  # Weak / light
    else:
        return "🔹"  # Not felt


def format_number(value: float) -> str:
    """Format a count with thousands separators (e.g., 1,234,567)."""
    return f"{value:,.0f}"


def format_source(source: EarthquakeSource) -> str:
    """Format a one-line description of an earthquake source.

    Pure function.
    """
    return (
        f"M{source.magnitude:.1f} at {source.depth_km:g} km depth "
        f"({source.epicenter.latitude:.4f}, {source.epicenter.longitude:.4f})"
    )


def format_site_summary(assessment: SiteAssessment) -> str:
    """Format a one-line summary of a site assessment.

    Pure function.

    Args:
        assessment: Site assessment to summarize

    Returns:
        One-line summary string
    """
    emoji = get_intensity_emoji(assessment.mmi.numeric_level)
    return (
        f"{emoji} {assessment.site.name}: MMI {assessment.mmi.level} "
        f"({assessment.mmi.name}), {assessment.surface_distance_km:.0f} km away, "
        f"damage {assessment.damage_percent:.1f}% ({assessment.damage_category.label})"
    )


def format_site_details(assessment: SiteAssessment) -> list[str]:
    """Format the detailed report lines for one site.

    Pure function.
    """
    population = assessment.population
    loss = assessment.economic_loss
    casualties = assessment.casualties

    lines = [
        format_site_summary(assessment),
        f"    Intensity: {assessment.intensity:.2f}, hypocentral distance "
        f"{assessment.hypocentral_distance_km:.1f} km, bearing {assessment.bearing_deg:.0f}°",
        f"    Shaking: {assessment.mmi.shaking}, potential damage: {assessment.mmi.damage}",
        f"    Population: {format_number(population.affected)} of "
        f"{format_number(population.total)} affected ({population.percent_affected:.1f}%), "
        f"{format_number(population.displaced)} displaced",
        f"    Economic loss: ${format_number(loss.total_loss)} "
        f"({loss.percent_of_gdp:.1f}% of GDP)",
    ]

    if casualties.medium > 0:
        lines.append(
            f"    Casualties: {format_number(casualties.low)} - "
            f"{format_number(casualties.high)} (estimate {format_number(casualties.medium)})"
        )

    return lines


def format_simulation_report(
    source: EarthquakeSource,
    assessments: list[SiteAssessment],
    felt_radius_km: float | None = None,
    similar_events: list[HistoricalEvent] | None = None,
) -> str:
    """Format a full plain-text simulation report.

    Pure function.

    Args:
        source: Simulated earthquake
        assessments: Site assessments to include, in display order
        felt_radius_km: Felt radius, if computed
        similar_events: Historical events of similar magnitude

    Returns:
        Multi-line report
    """
    lines = [f"Simulated earthquake: {format_source(source)}"]

    if felt_radius_km is not None:
        lines.append(f"Felt radius: ~{felt_radius_km:.0f} km")

    lines.append("")

    if assessments:
        for assessment in assessments:
            lines.extend(format_site_details(assessment))
    else:
        lines.append("No sites to assess.")

    if similar_events:
        lines.append("")
        lines.append("Similar historical earthquakes:")
        for event in similar_events:
            year = f" ({event.year})" if event.year is not None else ""
            depth = f", depth {event.depth_km:g} km" if event.depth_km is not None else ""
            lines.append(f"  • M{event.magnitude:.1f} {event.name}{year}{depth}")

    return "\n".join(lines)


def _json_float(value: float) -> float | None:
    """JSON has no infinity; map it to None."""
    return value if math.isfinite(value) else None


def mmi_entry_to_dict(entry: MMIEntry) -> dict[str, Any]:
    """Convert an MMI band to a JSON-serializable dict."""
    data = asdict(entry)
    data["max_intensity"] = _json_float(entry.max_intensity)
    return data


def assessment_to_dict(assessment: SiteAssessment) -> dict[str, Any]:
    """Convert a SiteAssessment to a JSON-serializable dict."""
    site = assessment.site
    return {
        "site": {
            "name": site.name,
            "latitude": site.location.latitude,
            "longitude": site.location.longitude,
            "population": site.population,
        },
        "surface_distance_km": assessment.surface_distance_km,
        "hypocentral_distance_km": assessment.hypocentral_distance_km,
        "bearing_deg": assessment.bearing_deg,
        "intensity": assessment.intensity,
        "mmi": mmi_entry_to_dict(assessment.mmi),
        "damage_percent": assessment.damage_percent,
        "damage_category": asdict(assessment.damage_category),
        "population": asdict(assessment.population),
        "economic_loss": asdict(assessment.economic_loss),
        "casualties": asdict(assessment.casualties),
        "building_damage": {
            key: asdict(value) for key, value in assessment.building_damage.items()
        },
    }


def scenario_result_to_dict(result: ScenarioResult) -> dict[str, Any]:
    """Convert a ScenarioResult to a JSON-serializable dict."""
    return asdict(result)


def historical_event_to_dict(event: HistoricalEvent) -> dict[str, Any]:
    """Convert a HistoricalEvent to a JSON-serializable dict."""
    return {
        "name": event.name,
        "magnitude": event.magnitude,
        "date": event.date.isoformat() if event.date is not None else None,
        "depth_km": event.depth_km,
    }


def curve_to_list(curve: list[DamageCurvePoint]) -> list[dict[str, float]]:
    """Convert a damage curve to a list of dicts."""
    return [asdict(point) for point in curve]


def reference_check_to_dict(check: ReferenceCheck) -> dict[str, Any]:
    """Convert a ReferenceCheck to a JSON-serializable dict."""
    return asdict(check)
