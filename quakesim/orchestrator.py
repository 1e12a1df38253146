"""Orchestrator - Wires Functional Core and Imperative Shell.

This module coordinates the flow of data between the pure functional
core and the I/O-performing shell components. It's the "glue" that
makes the application work.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from quakesim.core.attenuation import epicentral_intensity, felt_radius
from quakesim.core.config import SimulationConfig, validate_config
from quakesim.core.earthquake import EarthquakeSource, HistoricalEvent, Site
from quakesim.core.scenario import (
    SiteAssessment,
    assess_sites,
    closest_historical_events,
)
from quakesim.shell.data_loader import load_historical_events, load_sites


logger = logging.getLogger(__name__)

SiteLoader = Callable[[str | Path], list[Site]]
EventLoader = Callable[[str | Path], list[HistoricalEvent]]


@dataclass
class SimulationResult:
    """Result of a complete simulation run.

    Attributes:
        source: The simulated earthquake
        assessments: Per-site results, in site order
        epicentral_intensity: Intensity directly above the hypocenter
        felt_radius_km: Distance at which shaking drops to the felt threshold
        similar_events: Historical events closest in magnitude
        selected_site: Name of the highlighted site, if any
        warnings: Non-fatal problems (e.g., unreadable data files)
        errors: Problems that prevented the simulation
    """
    source: EarthquakeSource
    assessments: list[SiteAssessment] = field(default_factory=list)
    epicentral_intensity: float | None = None
    felt_radius_km: float | None = None
    similar_events: list[HistoricalEvent] = field(default_factory=list)
    selected_site: str | None = None
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Returns True if no critical errors occurred."""
        return len(self.errors) == 0

    @property
    def selected(self) -> SiteAssessment | None:
        """Assessment of the selected site, falling back to the first site."""
        for assessment in self.assessments:
            if assessment.site.name == self.selected_site:
                return assessment
        return self.assessments[0] if self.assessments else None

    @property
    def summary(self) -> str:
        """Human-readable summary of the simulation result."""
        if not self.success:
            return f"Simulation failed: {'; '.join(self.errors)}"

        damaged = sum(1 for a in self.assessments if a.damage_category.severity > 0)
        affected = sum(a.population.affected for a in self.assessments)
        return (
            f"M{self.source.magnitude:.1f}: {len(self.assessments)} sites assessed, "
            f"{damaged} with damage, {affected} people affected"
        )


class Simulator:
    """Coordinates a simulation run.

    This class wires together:
    - Site and historical event loaders (file I/O)
    - Core functions (distance, attenuation, MMI, damage)
    """

    def __init__(
        self,
        config: SimulationConfig,
        site_loader: SiteLoader | None = None,
        event_loader: EventLoader | None = None,
    ) -> None:
        """Initialize simulator with configuration.

        Args:
            config: Simulation configuration
            site_loader: Reads sites from a path (CSV loader if not provided)
            event_loader: Reads historical events from a path (JSON loader if not provided)
        """
        self.config = config
        self.site_loader = site_loader or load_sites
        self.event_loader = event_loader or load_historical_events

    def _load_sites(self, warnings: list[str]) -> list[Site]:
        """Combine sites from file with inline sites.

        A file that cannot be read is reported as a warning.
        """
        sites: list[Site] = []

        if self.config.sites_path:
            try:
                sites.extend(self.site_loader(self.config.sites_path))
            except (OSError, ValueError) as e:
                message = f"Failed to load sites from {self.config.sites_path}: {e}"
                logger.warning(message)
                warnings.append(message)

        sites.extend(self.config.sites)
        return sites

    def _load_events(self, warnings: list[str]) -> list[HistoricalEvent]:
        """Combine historical events from file with inline events."""
        events: list[HistoricalEvent] = []

        if self.config.historical_events_path:
            try:
                events.extend(self.event_loader(self.config.historical_events_path))
            except (OSError, ValueError) as e:
                message = (
                    f"Failed to load historical events from "
                    f"{self.config.historical_events_path}: {e}"
                )
                logger.warning(message)
                warnings.append(message)

        events.extend(self.config.historical_events)
        return events

    def run(self) -> SimulationResult:
        """Run a complete simulation.

        This is the main entry point that:
        1. Loads sites and historical events
        2. Validates the configuration
        3. Assesses every site
        4. Computes the felt radius and epicentral intensity
        5. Picks similar historical events

        Returns:
            SimulationResult with details of what happened
        """
        source = self.config.source
        warnings: list[str] = []

        # Step 1: Load data
        sites = self._load_sites(warnings)
        events = self._load_events(warnings)
        logger.info("Simulating %d sites, %d historical events", len(sites), len(events))

        # Step 2: Validate (pure core function)
        validation = validate_config(SimulationConfig(
            magnitude=self.config.magnitude,
            depth_km=self.config.depth_km,
            epicenter=self.config.epicenter,
            sites=sites,
            sites_path=self.config.sites_path,
            gdp_per_capita=self.config.gdp_per_capita,
            selected_site=self.config.selected_site,
        ))

        for warning in validation.warnings:
            logger.warning("%s: %s", warning.field, warning.message)
            warnings.append(f"{warning.field}: {warning.message}")

        if not validation.valid:
            errors = [f"{e.field}: {e.message}" for e in validation.critical_errors]
            for error in errors:
                logger.error("Invalid configuration: %s", error)
            return SimulationResult(
                source=source,
                selected_site=self.config.selected_site,
                warnings=warnings,
                errors=errors,
            )

        # Step 3: Assess sites (pure core function)
        assessments = assess_sites(source, sites, self.config.gdp_per_capita)

        for assessment in assessments:
            logger.debug(
                "%s: intensity %.2f, MMI %s, damage %.1f%%",
                assessment.site.name,
                assessment.intensity,
                assessment.mmi.level,
                assessment.damage_percent,
            )

        # Step 4: Source-level figures
        max_intensity = epicentral_intensity(source.magnitude, source.depth_km)
        radius = felt_radius(source.magnitude, source.depth_km, self.config.felt_intensity)

        result = SimulationResult(
            source=source,
            assessments=assessments,
            epicentral_intensity=max_intensity,
            felt_radius_km=radius,
            similar_events=closest_historical_events(events, source.magnitude),
            selected_site=self.config.selected_site,
            warnings=warnings,
        )

        logger.info("Completed: %s", result.summary)
        return result
