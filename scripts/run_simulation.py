#!/usr/bin/env python3
"""Run an earthquake simulation from the command line.

Usage:
    # Simulate with the default config (config/config.yaml)
    python scripts/run_simulation.py

    # Override the event
    python scripts/run_simulation.py --magnitude 8.8 --depth 35 --lat -35.846 --lon -72.719

    # Use a different site list and show only the five worst-hit sites
    python scripts/run_simulation.py --sites data/cities.csv --top 5

    # Compare scenarios at fixed distances
    python scripts/run_simulation.py --compare 8.8,35,335 7.5,20,100 6.0,10,50

    # Check the model against reference events
    python scripts/run_simulation.py --validate

Environment:
    CONFIG_PATH: Path to config file (default: config/config.yaml)
    LOG_LEVEL: Logging level (default: WARNING)
"""

import argparse
import dataclasses
import logging
import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quakesim.core.attenuation import validate_model
from quakesim.core.formatter import format_simulation_report
from quakesim.core.geo import GeoPoint
from quakesim.core.scenario import Scenario, compare_scenarios, rank_sites_by_severity
from quakesim.orchestrator import Simulator
from quakesim.shell.config_loader import load_config

logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "WARNING").upper(), logging.WARNING),
    format="%(levelname)s: %(message)s",
)
logger = logging.getLogger(__name__)


def parse_scenario(text: str) -> Scenario:
    """Parse 'magnitude,depth,distance' into a Scenario."""
    parts = [p.strip() for p in text.split(",")]
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(
            f"Scenario must be 'magnitude,depth,distance', got '{text}'"
        )
    try:
        magnitude, depth, distance = (float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Scenario values must be numbers, got '{text}'")
    return Scenario(magnitude=magnitude, depth_km=depth, distance_km=distance)


def run_comparison(scenarios: list[Scenario]) -> int:
    """Print a scenario comparison table."""
    try:
        results = compare_scenarios(scenarios)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"{'#':>3} {'Mag':>5} {'Depth':>7} {'Dist':>7} {'Int':>6} {'Damage':>8}  Category")
    for r in results:
        print(
            f"{r.scenario_id:>3} {r.magnitude:>5.1f} {r.depth_km:>7.1f} {r.distance_km:>7.1f} "
            f"{r.intensity:>6.2f} {r.damage_percent:>7.1f}%  {r.category}"
        )
    return 0


def run_validation() -> int:
    """Print the reference checks; non-zero exit if any fail."""
    checks = validate_model()
    for check in checks:
        status = "PASS" if check.passed else "FAIL"
        print(
            f"[{status}] {check.name}: intensity {check.calculated_intensity:.2f} "
            f"(expected {check.expected})"
        )
    return 0 if all(c.passed for c in checks) else 1


def main() -> int:
    parser = argparse.ArgumentParser(description="Earthquake impact simulation")
    parser.add_argument("--config", help="Path to YAML config file")
    parser.add_argument("--magnitude", type=float, help="Moment magnitude (0-10)")
    parser.add_argument("--depth", type=float, help="Hypocenter depth in km (0-700)")
    parser.add_argument("--lat", type=float, help="Epicenter latitude")
    parser.add_argument("--lon", type=float, help="Epicenter longitude")
    parser.add_argument("--sites", help="CSV file with sites")
    parser.add_argument("--events", help="JSON file with historical earthquakes")
    parser.add_argument("--top", type=int, help="Only show the N worst-hit sites")
    parser.add_argument(
        "--compare",
        nargs="+",
        type=parse_scenario,
        metavar="M,DEPTH,DIST",
        help="Compare scenarios instead of simulating sites",
    )
    parser.add_argument("--validate", action="store_true", help="Check the model against reference events")
    args = parser.parse_args()

    if args.validate:
        return run_validation()

    if args.compare:
        return run_comparison(args.compare)

    config = load_config(args.config)

    changes = {}
    if args.magnitude is not None:
        changes["magnitude"] = args.magnitude
    if args.depth is not None:
        changes["depth_km"] = args.depth
    if args.lat is not None and args.lon is not None:
        changes["epicenter"] = GeoPoint(latitude=args.lat, longitude=args.lon)
    if args.sites:
        changes["sites_path"] = args.sites
    if args.events:
        changes["historical_events_path"] = args.events
    if changes:
        config = dataclasses.replace(config, **changes)

    result = Simulator(config).run()

    for warning in result.warnings:
        print(f"Warning: {warning}")

    if not result.success:
        print(result.summary)
        return 1

    assessments = result.assessments
    if args.top:
        assessments = rank_sites_by_severity(assessments)[:args.top]

    print(format_simulation_report(
        result.source,
        assessments,
        felt_radius_km=result.felt_radius_km,
        similar_events=result.similar_events,
    ))
    print()
    print(result.summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
