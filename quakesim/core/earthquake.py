"""Earthquake, site and historical event models and parsing - Pure functions.

This module handles parsing raw records (CSV rows, JSON objects) into typed
objects. All functions are pure with no side effects; reading the files
is the shell's job.
"""

import datetime as dt
import math
from dataclasses import dataclass
from typing import Any, Mapping

from quakesim.core.geo import GeoPoint, is_valid_coordinate


@dataclass(frozen=True)
class EarthquakeSource:
    """Immutable earthquake source for one simulation run.

    Attributes:
        magnitude: Moment magnitude (Mw)
        depth_km: Hypocenter depth in kilometers
        epicenter: Surface projection of the hypocenter
    """
    magnitude: float
    depth_km: float
    epicenter: GeoPoint


@dataclass(frozen=True)
class Site:
    """A populated place to assess.

    Attributes:
        name: Human-readable name (e.g., "Santiago")
        location: Site coordinates
        population: Number of inhabitants
    """
    name: str
    location: GeoPoint
    population: int


@dataclass(frozen=True)
class HistoricalEvent:
    """A past earthquake used for comparison.

    Attributes:
        name: Event name (e.g., "2010 Maule")
        magnitude: Moment magnitude
        date: Event date, None if the record had no parseable date
        depth_km: Hypocenter depth, if known
    """
    name: str
    magnitude: float
    date: dt.date | None = None
    depth_km: float | None = None

    @property
    def year(self) -> int | None:
        """Year of the event, or None if unknown."""
        return self.date.year if self.date is not None else None


# Column aliases accepted for site records
_NAME_KEYS = ("name", "city")
_LATITUDE_KEYS = ("latitude", "lat")
_LONGITUDE_KEYS = ("longitude", "lon", "lng")


def _first_present(row: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    """Return the value of the first key present and non-empty in row."""
    for key in keys:
        value = row.get(key)
        if value is not None and value != "":
            return value
    return None


def parse_site(row: Mapping[str, Any]) -> Site | None:
    """Parse a single site record into a Site.

    Pure function: takes a raw mapping, returns typed Site or None if invalid.
    Accepts both the `city,lat,lon,population` columns of the bundled
    cities file and `name,latitude,longitude,population`.

    Args:
        row: Mapping of column name to raw value

    Returns:
        Site object, or None if a field is missing or unparseable, the
        coordinates are out of range, or the population is negative or
        not finite
    """
    try:
        name = _first_present(row, _NAME_KEYS)
        latitude = _first_present(row, _LATITUDE_KEYS)
        longitude = _first_present(row, _LONGITUDE_KEYS)
        population = row.get("population")

        if name is None or latitude is None or longitude is None or population is None:
            return None

        location = GeoPoint(latitude=float(latitude), longitude=float(longitude))
        population = float(population)
    except (TypeError, ValueError):
        return None

    if not is_valid_coordinate(location.latitude, location.longitude):
        return None
    # Rejects inf and nan as well as negative counts
    if not 0 <= population < math.inf:
        return None

    return Site(
        name=str(name).strip(),
        location=location,
        population=int(population),
    )


def parse_sites(rows: list[Mapping[str, Any]]) -> list[Site]:
    """Parse site records, dropping the invalid ones.

    Pure function. Input order is preserved.
    """
    sites = []

    for row in rows:
        site = parse_site(row)
        if site is not None:
            sites.append(site)

    return sites


def _parse_date(value: Any) -> dt.date | None:
    """Parse an ISO date or datetime string, None if unparseable."""
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str) or not value:
        return None
    try:
        return dt.date.fromisoformat(value[:10])
    except ValueError:
        return None


def parse_historical_event(record: Mapping[str, Any]) -> HistoricalEvent | None:
    """Parse a single historical event record.

    Pure function.

    Args:
        record: JSON object with name, magnitude, date and optional depth

    Returns:
        HistoricalEvent or None if the record lacks a name or magnitude
    """
    try:
        name = record.get("name")
        magnitude = record.get("magnitude")
        if not name or magnitude is None:
            return None

        depth = record.get("depth", record.get("depth_km"))

        return HistoricalEvent(
            name=str(name),
            magnitude=float(magnitude),
            date=_parse_date(record.get("date")),
            depth_km=float(depth) if depth is not None else None,
        )
    except (AttributeError, TypeError, ValueError):
        return None


def parse_historical_events(records: list[Mapping[str, Any]]) -> list[HistoricalEvent]:
    """Parse historical event records, dropping the invalid ones.

    Pure function.
    """
    events = []

    for record in records:
        event = parse_historical_event(record)
        if event is not None:
            events.append(event)

    return events
