"""Earthquake Simulation API - FastAPI service.

Exposes the simulation core over HTTP for the web frontend: per-site
impact estimates, scenario comparison, the MMI scale, the damage curve
and the calibration constants.
"""

import logging
import os

from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from quakesim import __version__
from quakesim.core.attenuation import (
    epicentral_intensity,
    felt_radius,
    model_parameters,
    validate_model,
)
from quakesim.core.calibration import IMPACT_PARAMETERS
from quakesim.core.damage import damage_curve, damage_parameters
from quakesim.core.earthquake import EarthquakeSource, Site
from quakesim.core.formatter import (
    assessment_to_dict,
    curve_to_list,
    mmi_entry_to_dict,
    reference_check_to_dict,
    scenario_result_to_dict,
)
from quakesim.core.geo import GeoPoint
from quakesim.core.mmi import mmi_scale
from quakesim.core.scenario import Scenario, assess_sites, compare_scenarios

logging.basicConfig(
    level=getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO),
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Earthquake Simulation API",
    description="Estimates shaking intensity, MMI and damage around a simulated earthquake",
    version=__version__,
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:5173",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# ===== Request Models =====

class PointModel(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class SiteModel(BaseModel):
    name: str
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
    population: int = Field(ge=0)


class SimulationRequest(BaseModel):
    magnitude: float = Field(ge=0, le=10)
    depth_km: float = Field(ge=0, le=700)
    epicenter: PointModel
    sites: list[SiteModel]
    gdp_per_capita: float = Field(default=IMPACT_PARAMETERS.default_gdp_per_capita, gt=0)
    felt_intensity: float = 3.0


class ScenarioModel(BaseModel):
    magnitude: float
    depth_km: float
    distance_km: float


class CompareRequest(BaseModel):
    scenarios: list[ScenarioModel]


# ===== Endpoints =====

@app.post("/api-simulate")
async def simulate(body: SimulationRequest):
    """Assess every site for the requested earthquake."""
    source = EarthquakeSource(
        magnitude=body.magnitude,
        depth_km=body.depth_km,
        epicenter=GeoPoint(body.epicenter.latitude, body.epicenter.longitude),
    )
    sites = [
        Site(
            name=s.name,
            location=GeoPoint(s.latitude, s.longitude),
            population=s.population,
        )
        for s in body.sites
    ]

    assessments = assess_sites(source, sites, body.gdp_per_capita)
    logger.info("Simulated M%.1f for %d sites", source.magnitude, len(sites))

    return {
        "source": {
            "magnitude": source.magnitude,
            "depth_km": source.depth_km,
            "epicenter": body.epicenter.model_dump(),
        },
        "epicentral_intensity": epicentral_intensity(source.magnitude, source.depth_km),
        "felt_radius_km": felt_radius(source.magnitude, source.depth_km, body.felt_intensity),
        "assessments": [assessment_to_dict(a) for a in assessments],
    }


@app.post("/api-compare")
async def compare(body: CompareRequest):
    """Compare damage across candidate scenarios, in input order."""
    scenarios = [
        Scenario(magnitude=s.magnitude, depth_km=s.depth_km, distance_km=s.distance_km)
        for s in body.scenarios
    ]

    try:
        results = compare_scenarios(scenarios)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"results": [scenario_result_to_dict(r) for r in results]}


@app.get("/api-mmi-scale")
async def get_mmi_scale():
    """The full Modified Mercalli Intensity scale."""
    return {"scale": [mmi_entry_to_dict(entry) for entry in mmi_scale()]}


@app.get("/api-damage-curve")
async def get_damage_curve(
    min_intensity: float = Query(default=0.0),
    max_intensity: float = Query(default=12.0),
    steps: int = Query(default=100, ge=1, le=1000),
):
    """Damage percentage sampled across an intensity range."""
    curve = damage_curve(min_intensity, max_intensity, steps)
    return {"curve": curve_to_list(curve)}


@app.get("/api-model")
async def get_model():
    """Calibration constants and reference checks."""
    return {
        "attenuation": model_parameters(),
        "damage": damage_parameters(),
        "impact": IMPACT_PARAMETERS.to_dict(),
        "reference_checks": [reference_check_to_dict(c) for c in validate_model()],
    }


@app.get("/health")
async def health_check():
    """Health check endpoint for Cloud Run."""
    return {"status": "healthy"}
