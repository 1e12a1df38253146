"""Ground motion attenuation - Pure functions.

Simplified empirical model of intensity decay with distance:

    I = a + b*M - c*log10(R) - d*R

where M is moment magnitude and R the hypocentral distance in km, floored
at 1 km. Constants are calibrated against the 2010 M8.8 Maule earthquake.
This is an educational approximation, not a peer-reviewed GMPE.

Physically impossible inputs (magnitude outside [0, 10], depth outside
[0, 700] km, negative distance) are caller errors and raise ValueError.
"""

import math
from dataclasses import dataclass

from quakesim.core.calibration import (
    ATTENUATION_CONSTANTS,
    FELT_RADIUS_SEARCH,
    MAX_DEPTH_KM,
    MAX_MAGNITUDE,
    MIN_DEPTH_KM,
    MIN_MAGNITUDE,
    AttenuationConstants,
    FeltRadiusSearch,
)


@dataclass(frozen=True)
class IntensityCurvePoint:
    """One sample of the intensity decay curve."""
    distance_km: float
    intensity: float


@dataclass(frozen=True)
class ReferenceCheck:
    """Outcome of evaluating the model against a reference event.

    Attributes:
        name: Reference event description
        magnitude: Event magnitude
        depth_km: Event depth
        distance_km: Horizontal distance to the observation site
        calculated_intensity: Model output
        expected: Human-readable expectation (e.g., "~7.2", ">= 8.0")
        passed: Whether the model output meets the expectation
    """
    name: str
    magnitude: float
    depth_km: float
    distance_km: float
    calculated_intensity: float
    expected: str
    passed: bool


def _check_magnitude(magnitude: float) -> None:
    if not MIN_MAGNITUDE <= magnitude <= MAX_MAGNITUDE:
        raise ValueError(
            f"Invalid magnitude: {magnitude}. "
            f"Must be between {MIN_MAGNITUDE:g} and {MAX_MAGNITUDE:g}."
        )


def _check_depth(depth_km: float) -> None:
    if not MIN_DEPTH_KM <= depth_km <= MAX_DEPTH_KM:
        raise ValueError(
            f"Invalid depth: {depth_km}. "
            f"Must be between {MIN_DEPTH_KM:g} and {MAX_DEPTH_KM:g} km."
        )


def _check_distance(distance_km: float, label: str = "distance") -> None:
    if not distance_km >= 0:
        raise ValueError(f"Invalid {label}: {distance_km}. Must be non-negative.")


def _attenuate(
    magnitude: float,
    distance_km: float,
    constants: AttenuationConstants,
) -> float:
    """Evaluate the attenuation formula at a 3-D distance, floored at 0."""
    r = max(distance_km, constants.min_distance_km)
    intensity = (
        constants.a
        + constants.b * magnitude
        - constants.c * math.log10(r)
        - constants.d * r
    )
    return max(intensity, 0.0)


def calculate_intensity(
    magnitude: float,
    depth_km: float,
    distance_km: float,
    constants: AttenuationConstants = ATTENUATION_CONSTANTS,
) -> float:
    """Calculate ground motion intensity at a site.

    Pure function.

    Args:
        magnitude: Moment magnitude (Mw), 0-10
        depth_km: Hypocenter depth in kilometers, 0-700
        distance_km: Horizontal distance from the epicenter in kilometers
        constants: Attenuation constants

    Returns:
        Unitless intensity, >= 0, to be mapped onto the MMI scale

    Raises:
        ValueError: If magnitude, depth or distance is out of range
    """
    _check_magnitude(magnitude)
    _check_depth(depth_km)
    _check_distance(distance_km)

    hypocentral = math.sqrt(distance_km ** 2 + depth_km ** 2)
    return _attenuate(magnitude, hypocentral, constants)


def calculate_intensity_from_hypocentral(
    magnitude: float,
    hypocentral_distance_km: float,
    constants: AttenuationConstants = ATTENUATION_CONSTANTS,
) -> float:
    """Calculate intensity when the 3-D distance is already known.

    Pure function.

    Raises:
        ValueError: If magnitude is out of range or the distance is negative
    """
    _check_magnitude(magnitude)
    _check_distance(hypocentral_distance_km, label="hypocentral distance")

    return _attenuate(magnitude, hypocentral_distance_km, constants)


def epicentral_intensity(
    magnitude: float,
    depth_km: float,
    constants: AttenuationConstants = ATTENUATION_CONSTANTS,
) -> float:
    """Maximum intensity an event produces, directly above the hypocenter.

    Pure function. Horizontal distance is 0, so R = max(depth, 1 km).

    Raises:
        ValueError: If magnitude or depth is out of range
    """
    _check_magnitude(magnitude)
    _check_depth(depth_km)

    return _attenuate(magnitude, depth_km, constants)


def felt_radius(
    magnitude: float,
    depth_km: float,
    target_intensity: float = 3.0,
    constants: AttenuationConstants = ATTENUATION_CONSTANTS,
    search: FeltRadiusSearch = FELT_RADIUS_SEARCH,
) -> float:
    """Horizontal distance at which intensity decays to target_intensity.

    Pure function. Bisection over [0, 5000] km; intensity decreases
    monotonically with distance so the bracket always holds the crossing.
    If the event never reaches the target the result sits near 0; if it
    exceeds the target everywhere the result sits near the upper bound.

    Args:
        magnitude: Moment magnitude (Mw)
        depth_km: Hypocenter depth in kilometers
        target_intensity: Intensity to solve for (3.0 is roughly MMI III)
        constants: Attenuation constants
        search: Bisection bracket, tolerance and iteration cap

    Returns:
        Distance in kilometers

    Raises:
        ValueError: If magnitude or depth is out of range
    """
    low = 0.0
    high = search.max_distance_km
    iterations = 0

    while high - low > search.tolerance_km and iterations < search.max_iterations:
        mid = (low + high) / 2
        if calculate_intensity(magnitude, depth_km, mid, constants) > target_intensity:
            low = mid
        else:
            high = mid
        iterations += 1

    return (low + high) / 2


def intensity_decay_curve(
    magnitude: float,
    depth_km: float,
    max_distance_km: float = 1000.0,
    steps: int = 100,
    constants: AttenuationConstants = ATTENUATION_CONSTANTS,
) -> list[IntensityCurvePoint]:
    """Sample intensity at evenly spaced distances for plotting.

    Pure function. Returns steps + 1 points from 0 to max_distance_km.

    Raises:
        ValueError: If steps < 1, or magnitude, depth or distance is out of range
    """
    if steps < 1:
        raise ValueError(f"Invalid steps: {steps}. Must be at least 1.")

    step_size = max_distance_km / steps
    return [
        IntensityCurvePoint(
            distance_km=i * step_size,
            intensity=calculate_intensity(magnitude, depth_km, i * step_size, constants),
        )
        for i in range(steps + 1)
    ]


def model_parameters(constants: AttenuationConstants = ATTENUATION_CONSTANTS) -> dict[str, float]:
    """Return a copy of the attenuation constants for display."""
    return constants.to_dict()


def validate_model(constants: AttenuationConstants = ATTENUATION_CONSTANTS) -> list[ReferenceCheck]:
    """Evaluate the model against reference events.

    Pure function.

    Returns:
        One ReferenceCheck per reference event
    """
    checks = []

    # 2010 Maule earthquake as felt in Santiago, observed MMI VII-VIII
    maule = calculate_intensity(8.8, 35, 335, constants)
    checks.append(ReferenceCheck(
        name="2010 Maule at Santiago",
        magnitude=8.8,
        depth_km=35,
        distance_km=335,
        calculated_intensity=maule,
        expected="~7.2 (+/- 0.5)",
        passed=abs(maule - 7.2) <= 0.5,
    ))

    nearby_strong = calculate_intensity(8.0, 30, 50, constants)
    checks.append(ReferenceCheck(
        name="M8.0 at 50km",
        magnitude=8.0,
        depth_km=30,
        distance_km=50,
        calculated_intensity=nearby_strong,
        expected=">= 8.0",
        passed=nearby_strong >= 8.0,
    ))

    far_weak = calculate_intensity(5.5, 20, 500, constants)
    checks.append(ReferenceCheck(
        name="M5.5 at 500km",
        magnitude=5.5,
        depth_km=20,
        distance_km=500,
        calculated_intensity=far_weak,
        expected="<= 3.0",
        passed=far_weak <= 3.0,
    ))

    return checks
