"""Configuration models - Pure data structures.

These are domain models for configuration. The actual loading
(I/O) is handled by the shell layer.
"""

from dataclasses import dataclass, field

from quakesim.core.calibration import IMPACT_PARAMETERS
from quakesim.core.earthquake import EarthquakeSource, HistoricalEvent, Site
from quakesim.core.geo import (
    GeoPoint,
    is_valid_coordinate,
    is_valid_depth,
    is_valid_magnitude,
)


# Santiago, Chile
DEFAULT_EPICENTER = GeoPoint(latitude=-33.4489, longitude=-70.6693)


@dataclass
class SimulationConfig:
    """Simulation configuration.

    This is a pure data structure - no I/O or side effects.

    Attributes:
        magnitude: Moment magnitude of the simulated event
        depth_km: Hypocenter depth in kilometers
        epicenter: Epicenter location
        sites: Sites to assess (inline and loaded from file)
        historical_events: Past events for comparison
        sites_path: CSV file with additional sites
        historical_events_path: JSON file with historical events
        gdp_per_capita: GDP per capita (USD) for loss estimates
        felt_intensity: Intensity used for the felt radius
        selected_site: Site highlighted in reports (None for all)
    """
    magnitude: float = 7.5
    depth_km: float = 35.0
    epicenter: GeoPoint = DEFAULT_EPICENTER
    sites: list[Site] = field(default_factory=list)
    historical_events: list[HistoricalEvent] = field(default_factory=list)
    sites_path: str | None = None
    historical_events_path: str | None = None
    gdp_per_capita: float = IMPACT_PARAMETERS.default_gdp_per_capita
    felt_intensity: float = 3.0
    selected_site: str | None = "Santiago"

    @property
    def source(self) -> EarthquakeSource:
        """The configured earthquake source."""
        return EarthquakeSource(
            magnitude=self.magnitude,
            depth_km=self.depth_km,
            epicenter=self.epicenter,
        )


@dataclass
class ValidationError:
    """A configuration validation error.

    Attributes:
        field: The field that has an error
        message: Human-readable error description
        severity: 'error' or 'warning'
    """
    field: str
    message: str
    severity: str = "error"


@dataclass
class ValidationResult:
    """Result of validating configuration.

    Attributes:
        valid: True if no errors (warnings are OK)
        errors: List of validation errors/warnings
    """
    valid: bool
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def warnings(self) -> list[ValidationError]:
        """Get only warnings."""
        return [e for e in self.errors if e.severity == "warning"]

    @property
    def critical_errors(self) -> list[ValidationError]:
        """Get only critical errors."""
        return [e for e in self.errors if e.severity == "error"]


def validate_coordinates(lat: float, lon: float, field_name: str) -> list[ValidationError]:
    """Validate latitude/longitude coordinates.

    Pure function.

    Args:
        lat: Latitude value
        lon: Longitude value
        field_name: Name of the field for error messages

    Returns:
        List of validation errors (empty if valid)
    """
    if is_valid_coordinate(lat, lon):
        return []

    return [ValidationError(
        field=field_name,
        message=f"Coordinates ({lat}, {lon}) out of range: latitude [-90, 90], longitude [-180, 180]",
    )]


def validate_source(magnitude: float, depth_km: float, epicenter: GeoPoint) -> list[ValidationError]:
    """Validate the earthquake source parameters.

    Pure function.
    """
    errors = []

    if not is_valid_magnitude(magnitude):
        errors.append(ValidationError(
            field="magnitude",
            message=f"Magnitude {magnitude} out of range [0, 10]",
        ))

    if not is_valid_depth(depth_km):
        errors.append(ValidationError(
            field="depth_km",
            message=f"Depth {depth_km} out of range [0, 700] km",
        ))

    errors.extend(validate_coordinates(epicenter.latitude, epicenter.longitude, "epicenter"))

    return errors


def validate_site_reference(name: str | None, sites: list[Site]) -> list[ValidationError]:
    """Warn if the selected site is not among the configured sites.

    Pure function.
    """
    if name is None or not sites:
        return []

    available = {site.name for site in sites}
    if name in available:
        return []

    similar = _find_similar_names(name, available)
    if similar:
        message = f"Site '{name}' not found. Did you mean '{similar[0]}'?"
    else:
        message = f"Site '{name}' not found in sites"

    return [ValidationError(field="selected_site", message=message, severity="warning")]


def _find_similar_names(name: str, candidates: set[str], threshold: float = 0.6) -> list[str]:
    """Find similar names using simple similarity metric.

    Pure function.

    Args:
        name: Name to match
        candidates: Available names
        threshold: Minimum similarity (0-1)

    Returns:
        Similar names sorted by similarity (best first)
    """
    def similarity(a: str, b: str) -> float:
        """Simple case-insensitive substring similarity."""
        a_lower, b_lower = a.lower(), b.lower()
        if a_lower == b_lower:
            return 1.0
        if a_lower in b_lower or b_lower in a_lower:
            return 0.8
        # Count common characters
        common = sum(1 for c in a_lower if c in b_lower)
        return common / max(len(a), len(b))

    scored = [(c, similarity(name, c)) for c in candidates]
    matches = [(c, s) for c, s in scored if s >= threshold]
    matches.sort(key=lambda x: (-x[1], x[0]))

    return [c for c, _ in matches]


def validate_config(config: SimulationConfig) -> ValidationResult:
    """Validate configuration for errors and warnings.

    Pure function.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with any errors/warnings found
    """
    errors = validate_source(config.magnitude, config.depth_km, config.epicenter)

    for i, site in enumerate(config.sites):
        errors.extend(validate_coordinates(
            site.location.latitude, site.location.longitude,
            f"sites[{i}]",
        ))
        if site.population < 0:
            errors.append(ValidationError(
                field=f"sites[{i}].population",
                message=f"Population must be non-negative, got {site.population}",
            ))

    if config.gdp_per_capita <= 0:
        errors.append(ValidationError(
            field="gdp_per_capita",
            message=f"GDP per capita must be positive, got {config.gdp_per_capita}",
        ))

    if not config.sites and config.sites_path is None:
        errors.append(ValidationError(
            field="sites",
            message="No sites configured",
            severity="warning",
        ))

    errors.extend(validate_site_reference(config.selected_site, config.sites))

    has_critical = any(e.severity == "error" for e in errors)

    return ValidationResult(
        valid=not has_critical,
        errors=errors,
    )
