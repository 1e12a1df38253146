"""Unit tests for scenario comparison and per-site assessment.

Pure function tests - intensity functions are injected where needed.
"""

import pytest

from quakesim.core.attenuation import calculate_intensity, epicentral_intensity
from quakesim.core.damage import damage_percent, population_impact
from quakesim.core.earthquake import EarthquakeSource, HistoricalEvent, Site
from quakesim.core.geo import GeoPoint
from quakesim.core.scenario import (
    Scenario,
    assess_site,
    assess_sites,
    closest_historical_events,
    compare_scenarios,
    rank_sites_by_severity,
)


SANTIAGO = Site(name="Santiago", location=GeoPoint(-33.4489, -70.6693), population=6_000_000)
TALCA = Site(name="Talca", location=GeoPoint(-35.4264, -71.6554), population=220_000)
ANTOFAGASTA = Site(name="Antofagasta", location=GeoPoint(-23.6509, -70.3975), population=400_000)


@pytest.fixture
def maule_source():
    return EarthquakeSource(magnitude=8.8, depth_km=35, epicenter=GeoPoint(-35.846, -72.719))


class TestCompareScenarios:
    """Tests for compare_scenarios()."""

    def test_ids_and_order(self):
        """IDs are 1-based and results keep input order."""
        scenarios = [
            Scenario(6.0, 10, 50),
            Scenario(8.8, 35, 335),
            Scenario(7.5, 20, 100),
        ]
        results = compare_scenarios(scenarios)

        assert [r.scenario_id for r in results] == [1, 2, 3]
        assert [r.magnitude for r in results] == [6.0, 8.8, 7.5]

    def test_fields_from_pipeline(self):
        results = compare_scenarios([Scenario(8.8, 35, 335)])
        result = results[0]

        assert result.intensity == pytest.approx(calculate_intensity(8.8, 35, 335))
        assert result.damage_percent == pytest.approx(damage_percent(result.intensity))
        assert result.category == "None"
        assert result.severity == 0

    def test_injected_intensity_function(self):
        """The intensity function can be swapped out."""
        results = compare_scenarios(
            [Scenario(1, 2, 3), Scenario(4, 5, 6)],
            intensity_fn=lambda m, d, r: 6.0,
        )
        assert all(r.damage_percent == pytest.approx(50.0) for r in results)
        assert all(r.category == "Heavy" for r in results)

    def test_empty(self):
        assert compare_scenarios([]) == []

    def test_invalid_scenario_propagates(self):
        with pytest.raises(ValueError, match="Invalid magnitude"):
            compare_scenarios([Scenario(7.0, 10, 50), Scenario(11.0, 10, 50)])


class TestAssessSite:
    """Tests for assess_site()."""

    def test_site_at_epicenter(self):
        source = EarthquakeSource(magnitude=7.5, depth_km=35, epicenter=SANTIAGO.location)
        assessment = assess_site(source, SANTIAGO)

        assert assessment.surface_distance_km == pytest.approx(0.0)
        assert assessment.hypocentral_distance_km == pytest.approx(35.0)
        assert assessment.intensity == pytest.approx(epicentral_intensity(7.5, 35))
        assert assessment.mmi.level == "V"

    def test_pipeline_consistency(self, maule_source):
        assessment = assess_site(maule_source, SANTIAGO)

        assert assessment.surface_distance_km == pytest.approx(326, rel=0.01)
        assert assessment.intensity == pytest.approx(
            calculate_intensity(8.8, 35, assessment.surface_distance_km)
        )
        assert assessment.damage_percent == pytest.approx(damage_percent(assessment.intensity))
        assert assessment.population == population_impact(6_000_000, assessment.damage_percent)
        assert assessment.mmi.level == "III"
        assert set(assessment.building_damage) == {"modern", "standard", "unreinforced", "informal"}

    def test_bearing_recorded(self, maule_source):
        assessment = assess_site(maule_source, SANTIAGO)
        assert 0 < assessment.bearing_deg < 90

    def test_gdp_per_capita_scales_loss(self, maule_source):
        low = assess_site(maule_source, TALCA, gdp_per_capita=5000)
        high = assess_site(maule_source, TALCA, gdp_per_capita=20000)
        assert high.economic_loss.total_loss > low.economic_loss.total_loss

    def test_invalid_source_raises(self):
        source = EarthquakeSource(magnitude=7.0, depth_km=900, epicenter=GeoPoint(0, 0))
        with pytest.raises(ValueError, match="Invalid depth"):
            assess_site(source, SANTIAGO)


class TestAssessSites:
    """Tests for assess_sites() and rank_sites_by_severity()."""

    def test_preserves_order(self, maule_source):
        assessments = assess_sites(maule_source, [SANTIAGO, TALCA, ANTOFAGASTA])
        assert [a.site.name for a in assessments] == ["Santiago", "Talca", "Antofagasta"]

    def test_nearest_site_hit_hardest(self, maule_source):
        talca, antofagasta = assess_sites(maule_source, [TALCA, ANTOFAGASTA])
        assert talca.intensity > antofagasta.intensity

    def test_rank_worst_first(self, maule_source):
        assessments = assess_sites(maule_source, [ANTOFAGASTA, SANTIAGO, TALCA])
        ranked = rank_sites_by_severity(assessments)

        assert [a.site.name for a in ranked] == ["Talca", "Santiago", "Antofagasta"]
        assert [a.site.name for a in assessments] == ["Antofagasta", "Santiago", "Talca"]


class TestClosestHistoricalEvents:
    """Tests for closest_historical_events()."""

    events = [
        HistoricalEvent(name="A", magnitude=8.8),
        HistoricalEvent(name="B", magnitude=7.0),
        HistoricalEvent(name="C", magnitude=9.5),
        HistoricalEvent(name="D", magnitude=8.3),
    ]

    def test_closest_first(self):
        result = closest_historical_events(self.events, 8.5, limit=2)
        assert [e.name for e in result] == ["D", "A"]

    def test_limit(self):
        assert len(closest_historical_events(self.events, 8.0, limit=10)) == 4
        assert closest_historical_events(self.events, 8.0, limit=0) == []
