"""Unit tests for damage and impact estimation.

Pure function tests - no mocks needed, fast execution.
"""

import math

import pytest

from quakesim.core.damage import (
    CASUALTIES_WARNING,
    DAMAGE_CATEGORIES,
    NO_CASUALTIES_DESCRIPTION,
    casualty_risk,
    damage_by_construction_type,
    damage_category,
    damage_curve,
    damage_parameters,
    damage_percent,
    economic_loss,
    population_impact,
    round_half_up,
)


class TestRoundHalfUp:
    """Tests for round_half_up()."""

    @pytest.mark.parametrize("value,expected", [
        (0.5, 1), (1.5, 2), (2.5, 3), (2.4999, 2), (-0.5, 0), (0.0, 0),
    ])
    def test_rounding(self, value, expected):
        assert round_half_up(value) == expected


class TestDamagePercent:
    """Tests for damage_percent() logistic curve."""

    def test_midpoint_at_threshold(self):
        assert damage_percent(6.0) == pytest.approx(50.0)

    def test_below_threshold(self):
        assert damage_percent(5.0) == pytest.approx(18.24, abs=0.01)

    def test_above_threshold(self):
        assert damage_percent(7.2) == pytest.approx(85.81, abs=0.01)

    def test_monotonic(self):
        values = [damage_percent(i * 0.25) for i in range(0, 60)]
        assert all(a <= b for a, b in zip(values, values[1:]))

    def test_bounded(self):
        assert 0 <= damage_percent(0) < 1
        assert 99 < damage_percent(20) <= 100

    def test_negative_intensity_is_zero(self):
        assert damage_percent(-5) == 0.0

    def test_nan_is_zero(self):
        assert damage_percent(float("nan")) == 0.0

    @pytest.mark.parametrize("intensity", [None, "7", [6.0]])
    def test_non_numeric_is_zero(self, intensity):
        assert damage_percent(intensity) == 0.0

    def test_infinite_intensity_is_full_damage(self):
        assert damage_percent(math.inf) == 100.0


class TestDamageCategory:
    """Tests for damage_category()."""

    @pytest.mark.parametrize("percent,label", [
        (0, "None"),
        (4.99, "None"),
        (5, "Very Light"),
        (15, "Light"),
        (29.9, "Light"),
        (30, "Moderate"),
        (50, "Heavy"),
        (70, "Very Heavy"),
        (100, "Very Heavy"),
    ])
    def test_bands(self, percent, label):
        assert damage_category(percent).label == label

    def test_severity_ordinal(self):
        assert [c.severity for c in DAMAGE_CATEGORIES] == [0, 1, 2, 3, 4, 5]

    def test_bad_input_falls_in_lowest_band(self):
        assert damage_category(-10).label == "None"
        assert damage_category(float("nan")).label == "None"
        assert damage_category(None).label == "None"


class TestDamageByConstructionType:
    """Tests for damage_by_construction_type()."""

    def test_all_types_present(self):
        result = damage_by_construction_type(6.0)
        assert set(result) == {"modern", "standard", "unreinforced", "informal"}

    def test_multipliers(self):
        result = damage_by_construction_type(6.0)
        assert result["modern"].damage_percent == pytest.approx(20.0)
        assert result["standard"].damage_percent == pytest.approx(50.0)
        assert result["unreinforced"].damage_percent == pytest.approx(80.0)
        assert result["informal"].damage_percent == pytest.approx(100.0)

    def test_capped_at_100(self):
        result = damage_by_construction_type(9.0)
        assert all(b.damage_percent <= 100 for b in result.values())
        assert result["informal"].damage_percent == 100.0

    def test_carries_labels(self):
        result = damage_by_construction_type(6.0)
        assert result["unreinforced"].construction_type == "Unreinforced Masonry"


class TestPopulationImpact:
    """Tests for population_impact()."""

    def test_moderate_damage(self):
        impact = population_impact(1000, 50)
        assert impact.total == 1000
        assert impact.affected == 600
        assert impact.displaced == 100
        assert impact.percent_affected == 60.0

    def test_no_displacement_below_forty_percent(self):
        impact = population_impact(1000, 40)
        assert impact.affected == 480
        assert impact.displaced == 0

    def test_affected_capped_at_total(self):
        impact = population_impact(1000, 90)
        assert impact.affected == 1000
        assert impact.percent_affected == 100.0
        assert impact.displaced == 833

    def test_full_damage(self):
        impact = population_impact(1000, 100)
        assert impact.affected == 1000
        assert impact.displaced == 1000

    def test_damage_above_100_is_clamped(self):
        assert population_impact(1000, 250) == population_impact(1000, 100)

    def test_ordering(self):
        for damage in range(0, 101, 5):
            impact = population_impact(123457, damage)
            assert 0 <= impact.displaced <= impact.affected <= impact.total

    @pytest.mark.parametrize("population,damage", [
        (-1, 50), (1000, -1), (float("nan"), 50), (1000, float("inf")),
    ])
    def test_invalid_input_gives_zeros(self, population, damage):
        impact = population_impact(population, damage)
        assert (impact.total, impact.affected, impact.displaced) == (0, 0, 0)
        assert impact.percent_affected == 0.0

    def test_non_numeric_input_gives_zeros(self):
        impact = population_impact("1000", None)
        assert (impact.total, impact.affected, impact.displaced) == (0, 0, 0)


class TestEconomicLoss:
    """Tests for economic_loss()."""

    def test_total_destruction(self):
        loss = economic_loss(100, 1000, 15000)
        assert loss.direct_loss == 45_000_000
        assert loss.indirect_loss == 13_500_000
        assert loss.total_loss == 58_500_000
        assert loss.percent_of_gdp == 390.0

    def test_default_gdp_per_capita(self):
        assert economic_loss(100, 1000) == economic_loss(100, 1000, 15000)

    def test_super_linear_in_damage(self):
        loss = economic_loss(50, 1000, 15000)
        assert loss.direct_loss == pytest.approx(45_000_000 * 0.5 ** 1.3, abs=1)
        assert loss.percent_of_gdp == pytest.approx(158.4, abs=0.1)

    def test_total_is_direct_plus_indirect(self):
        loss = economic_loss(37, 98765, 12000)
        assert abs(loss.total_loss - (loss.direct_loss + loss.indirect_loss)) <= 1

    def test_no_damage(self):
        loss = economic_loss(0, 1000)
        assert loss.total_loss == 0
        assert loss.percent_of_gdp == 0.0

    def test_zero_population_has_no_gdp_share(self):
        loss = economic_loss(80, 0)
        assert loss.total_loss == 0
        assert loss.percent_of_gdp == 0.0

    def test_invalid_input_gives_zeros(self):
        loss = economic_loss(-5, 1000)
        assert loss.total_loss == 0
        assert loss.percent_of_gdp == 0.0


class TestCasualtyRisk:
    """Tests for casualty_risk()."""

    def test_below_threshold(self):
        estimate = casualty_risk(1_000_000, 59.9)
        assert (estimate.low, estimate.medium, estimate.high) == (0, 0, 0)
        assert estimate.description == NO_CASUALTIES_DESCRIPTION
        assert estimate.warning is None

    def test_full_damage(self):
        estimate = casualty_risk(1_000_000, 100)
        assert (estimate.low, estimate.medium, estimate.high) == (5000, 10000, 20000)
        assert estimate.warning == CASUALTIES_WARNING

    def test_quadratic_ramp(self):
        estimate = casualty_risk(1_000_000, 80)
        assert estimate.medium == 2500
        assert estimate.low == 1250
        assert estimate.high == 5000

    def test_low_rounds_half_up(self):
        estimate = casualty_risk(500, 100)
        assert estimate.medium == 5
        assert estimate.low == 3
        assert estimate.high == 10

    def test_at_threshold_is_zero(self):
        estimate = casualty_risk(1_000_000, 60)
        assert estimate.medium == 0

    def test_ordering(self):
        for damage in range(60, 101, 2):
            estimate = casualty_risk(777_777, damage)
            assert estimate.low <= estimate.medium <= estimate.high

    def test_invalid_input(self):
        estimate = casualty_risk(-100, 90)
        assert estimate.medium == 0
        assert estimate.description == NO_CASUALTIES_DESCRIPTION


class TestDamageCurve:
    """Tests for damage_curve()."""

    def test_default_range(self):
        curve = damage_curve()
        assert len(curve) == 101
        assert curve[0].intensity == 0
        assert curve[-1].intensity == pytest.approx(12)

    def test_values_match_damage_percent(self):
        curve = damage_curve(4, 8, 4)
        assert [p.intensity for p in curve] == pytest.approx([4, 5, 6, 7, 8])
        assert curve[2].damage_percent == pytest.approx(50.0)

    def test_new_list_each_call(self):
        assert damage_curve() is not damage_curve()

    def test_rejects_zero_steps(self):
        with pytest.raises(ValueError, match="steps"):
            damage_curve(steps=0)


class TestDamageParameters:
    """Tests for damage_parameters()."""

    def test_values(self):
        assert damage_parameters() == {"k": 1.5, "threshold": 6.0}
