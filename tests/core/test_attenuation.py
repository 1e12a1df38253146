"""Unit tests for the attenuation model.

Pure function tests - no mocks needed, fast execution.
"""

import math

import pytest

from quakesim.core.attenuation import (
    calculate_intensity,
    calculate_intensity_from_hypocentral,
    epicentral_intensity,
    felt_radius,
    intensity_decay_curve,
    model_parameters,
    validate_model,
)
from quakesim.core.calibration import FeltRadiusSearch


class TestCalculateIntensity:
    """Tests for calculate_intensity()."""

    def test_maule_at_santiago(self):
        """M8.8, 35 km deep, 335 km away evaluates to about 2.82."""
        assert calculate_intensity(8.8, 35, 335) == pytest.approx(2.82, abs=0.01)

    def test_at_epicenter_uses_depth(self):
        """Zero horizontal distance gives R = depth."""
        expected = -3.5 + 1.8 * 7.5 - 3.5 * math.log10(35) - 0.002 * 35
        assert calculate_intensity(7.5, 35, 0) == pytest.approx(expected)

    def test_distance_floored_at_one_km(self):
        """A surface event at the epicenter is evaluated at R = 1 km."""
        assert calculate_intensity(7.0, 0, 0) == pytest.approx(-3.5 + 1.8 * 7.0 - 0.002)

    def test_floored_at_zero(self):
        """Far away from a small event the intensity is 0, never negative."""
        assert calculate_intensity(5.5, 20, 500) == 0.0
        assert calculate_intensity(0, 0, 0) == 0.0

    def test_decreases_with_distance(self):
        """Intensity never increases as the site moves away."""
        values = [calculate_intensity(7.0, 10, d) for d in range(0, 1001, 25)]
        assert all(a >= b for a, b in zip(values, values[1:]))

    def test_increases_with_magnitude(self):
        """Larger events shake harder at the same place."""
        values = [calculate_intensity(m / 2, 10, 50) for m in range(8, 21)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_deeper_event_is_weaker_at_epicenter(self):
        """Depth adds distance to the rupture."""
        assert calculate_intensity(7.0, 100, 0) < calculate_intensity(7.0, 10, 0)

    @pytest.mark.parametrize("magnitude", [-0.1, 10.1, float("nan")])
    def test_rejects_invalid_magnitude(self, magnitude):
        with pytest.raises(ValueError, match="Invalid magnitude"):
            calculate_intensity(magnitude, 10, 50)

    @pytest.mark.parametrize("depth", [-1, 700.5, float("nan")])
    def test_rejects_invalid_depth(self, depth):
        with pytest.raises(ValueError, match="Invalid depth"):
            calculate_intensity(7.0, depth, 50)

    def test_rejects_negative_distance(self):
        with pytest.raises(ValueError, match="Invalid distance"):
            calculate_intensity(7.0, 10, -1)

    def test_accepts_boundary_values(self):
        """Range limits are inclusive."""
        assert calculate_intensity(0, 0, 0) >= 0
        assert calculate_intensity(10, 700, 0) >= 0


class TestCalculateIntensityFromHypocentral:
    """Tests for calculate_intensity_from_hypocentral()."""

    def test_matches_surface_form(self):
        """Same answer as passing horizontal distance and depth."""
        hypocentral = math.sqrt(100 ** 2 + 30 ** 2)
        assert calculate_intensity_from_hypocentral(7.0, hypocentral) == pytest.approx(
            calculate_intensity(7.0, 30, 100)
        )

    def test_rejects_negative_distance(self):
        with pytest.raises(ValueError, match="hypocentral distance"):
            calculate_intensity_from_hypocentral(7.0, -5)


class TestEpicentralIntensity:
    """Tests for epicentral_intensity()."""

    def test_equals_intensity_at_zero_distance(self):
        assert epicentral_intensity(7.5, 35) == pytest.approx(calculate_intensity(7.5, 35, 0))

    def test_is_the_maximum(self):
        """No site is shaken harder than the epicenter."""
        peak = epicentral_intensity(8.0, 20)
        assert all(calculate_intensity(8.0, 20, d) <= peak for d in range(0, 500, 10))

    def test_rejects_invalid_input(self):
        with pytest.raises(ValueError):
            epicentral_intensity(11, 10)


class TestFeltRadius:
    """Tests for felt_radius() bisection search."""

    def test_intensity_at_radius_matches_target(self):
        """The intensity at the returned distance is close to the target."""
        radius = felt_radius(7.5, 35, 3.0)
        assert radius == pytest.approx(81.7, abs=1.5)
        assert calculate_intensity(7.5, 35, radius) == pytest.approx(3.0, abs=0.05)

    def test_larger_event_felt_further(self):
        assert felt_radius(8.0, 20) > felt_radius(6.0, 20)

    def test_never_reaching_target_returns_near_zero(self):
        """An event too weak to reach the target collapses the bracket to 0."""
        assert felt_radius(3.0, 10, 5.0) < 1.0

    def test_respects_iteration_cap(self):
        """One iteration halves the bracket once and returns its midpoint."""
        search = FeltRadiusSearch(max_distance_km=5000.0, tolerance_km=1.0, max_iterations=1)
        assert felt_radius(7.5, 35, 3.0, search=search) == pytest.approx(1250.0)

    def test_result_within_bracket(self):
        radius = felt_radius(10, 0, 0.5)
        assert 0 <= radius <= 5000

    def test_rejects_invalid_magnitude(self):
        with pytest.raises(ValueError):
            felt_radius(12, 10)


class TestIntensityDecayCurve:
    """Tests for intensity_decay_curve()."""

    def test_point_count_and_spacing(self):
        curve = intensity_decay_curve(7.5, 35, max_distance_km=1000, steps=10)
        assert len(curve) == 11
        assert curve[0].distance_km == 0
        assert curve[-1].distance_km == pytest.approx(1000)
        assert curve[1].distance_km == pytest.approx(100)

    def test_first_point_is_epicentral(self):
        curve = intensity_decay_curve(7.5, 35, steps=5)
        assert curve[0].intensity == pytest.approx(epicentral_intensity(7.5, 35))

    def test_monotonic(self):
        curve = intensity_decay_curve(8.0, 20)
        assert all(a.intensity >= b.intensity for a, b in zip(curve, curve[1:]))

    def test_rejects_zero_steps(self):
        with pytest.raises(ValueError, match="steps"):
            intensity_decay_curve(7.5, 35, steps=0)


class TestModelParameters:
    """Tests for model_parameters()."""

    def test_returns_constants(self):
        params = model_parameters()
        assert params["a"] == -3.5
        assert params["b"] == 1.8
        assert params["c"] == 3.5
        assert params["d"] == 0.002

    def test_returns_copy(self):
        """Mutating the result does not change the model."""
        params = model_parameters()
        params["a"] = 100
        assert model_parameters()["a"] == -3.5


class TestValidateModel:
    """Tests for validate_model() reference checks."""

    def test_three_reference_events(self):
        checks = validate_model()
        assert [c.name for c in checks] == [
            "2010 Maule at Santiago",
            "M8.0 at 50km",
            "M5.5 at 500km",
        ]

    def test_reports_calculated_values(self):
        """Checks carry the model output, whether or not it passes."""
        maule, near, far = validate_model()

        assert maule.calculated_intensity == pytest.approx(calculate_intensity(8.8, 35, 335))
        assert maule.passed is False
        assert near.calculated_intensity == pytest.approx(calculate_intensity(8.0, 30, 50))
        assert near.passed is False
        assert far.calculated_intensity == 0.0
        assert far.passed is True
