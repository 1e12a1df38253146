"""Cloud Function Entry Point.

This module provides the entry point for Google Cloud Functions.
It's a thin wrapper that loads configuration and invokes the simulator.
"""

import dataclasses
import json
import logging
import os
from typing import Any

import functions_framework
from flask import Request

from quakesim.core.config import SimulationConfig
from quakesim.core.formatter import (
    assessment_to_dict,
    historical_event_to_dict,
)
from quakesim.core.geo import GeoPoint
from quakesim.orchestrator import Simulator
from quakesim.shell.config_loader import load_config, load_config_from_env


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _get_config() -> SimulationConfig:
    """Load configuration from file or environment."""
    config_path = os.environ.get("CONFIG_PATH")

    if config_path:
        return load_config(config_path)
    elif os.environ.get("MAGNITUDE"):
        # Simple env-based config
        return load_config_from_env()
    else:
        # Try default config path
        return load_config()


def _apply_overrides(config: SimulationConfig, args: Any) -> SimulationConfig:
    """Apply query-string overrides (magnitude, depth_km, lat, lon, site).

    Raises:
        ValueError: If an override is not a number
    """
    changes: dict[str, Any] = {}

    if args.get("magnitude") is not None:
        changes["magnitude"] = float(args.get("magnitude"))
    if args.get("depth_km") is not None:
        changes["depth_km"] = float(args.get("depth_km"))
    if args.get("lat") is not None and args.get("lon") is not None:
        changes["epicenter"] = GeoPoint(
            latitude=float(args.get("lat")),
            longitude=float(args.get("lon")),
        )
    if args.get("site"):
        changes["selected_site"] = args.get("site")

    return dataclasses.replace(config, **changes) if changes else config


@functions_framework.http
def earthquake_simulation(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP Cloud Function entry point.

    Runs a complete simulation for the configured sites. Query parameters
    `magnitude`, `depth_km`, `lat`, `lon` and `site` override the config.

    Args:
        request: Flask request object

    Returns:
        Tuple of (response dict, HTTP status code)
    """
    logger.info("Starting earthquake simulation")

    try:
        config = _get_config()

        try:
            config = _apply_overrides(config, request.args)
        except ValueError as e:
            logger.warning("Invalid query parameter: %s", e)
            return {
                "status": "error",
                "message": f"Invalid query parameter: {e}",
            }, 400

        result = Simulator(config).run()

        if not result.success:
            return {
                "status": "error",
                "message": result.summary,
                "errors": result.errors,
            }, 400

        response: dict[str, Any] = {
            "status": "success",
            "summary": result.summary,
            "epicentral_intensity": result.epicentral_intensity,
            "felt_radius_km": result.felt_radius_km,
            "selected_site": result.selected.site.name if result.selected else None,
            "assessments": [assessment_to_dict(a) for a in result.assessments],
            "similar_events": [historical_event_to_dict(e) for e in result.similar_events],
        }

        if result.warnings:
            response["warnings"] = result.warnings

        logger.info("Completed: %s", result.summary)
        return response, 200

    except Exception as e:
        logger.exception("Unexpected error in earthquake simulation")
        return {
            "status": "error",
            "message": str(e),
        }, 500


# For local testing
if __name__ == "__main__":
    print("Running earthquake simulation locally...")

    class MockRequest:
        args: dict[str, str] = {}

    response, status = earthquake_simulation(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2, default=str))
