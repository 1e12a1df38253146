"""Data Loader - Imperative Shell.

This module reads the site list (CSV) and historical earthquake
reference data (JSON) from disk. All I/O is contained here; parsing
of individual records is in core.earthquake.
"""

import csv
import json
import logging
from pathlib import Path

from quakesim.core.earthquake import (
    HistoricalEvent,
    Site,
    parse_historical_events,
    parse_sites,
)


logger = logging.getLogger(__name__)


def load_sites(path: str | Path) -> list[Site]:
    """Load sites from a CSV file.

    This method performs file I/O. Expects a header row with
    `city,lat,lon,population` (or `name,latitude,longitude,population`).
    Rows that cannot be parsed are skipped with a warning.

    Args:
        path: Path to the CSV file

    Returns:
        Parsed sites in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    logger.info("Loading sites from %s", path)

    with open(path, "r", newline="", encoding="utf-8") as f:
        rows = [
            {(key or "").strip().lower(): value for key, value in row.items()}
            for row in csv.DictReader(f)
        ]

    sites = parse_sites(rows)

    skipped = len(rows) - len(sites)
    if skipped:
        logger.warning("Skipped %d invalid site rows in %s", skipped, path)

    logger.info("Loaded %d sites", len(sites))
    return sites


def load_historical_events(path: str | Path) -> list[HistoricalEvent]:
    """Load historical earthquakes from a JSON file.

    This method performs file I/O. The file holds a list of objects with
    name, magnitude, date and optional depth.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed events in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is not valid JSON or not a list
    """
    path = Path(path)
    logger.info("Loading historical events from %s", path)

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of events in {path}, got {type(data).__name__}")

    events = parse_historical_events([r for r in data if isinstance(r, dict)])

    skipped = len(data) - len(events)
    if skipped:
        logger.warning("Skipped %d invalid historical events in %s", skipped, path)

    logger.info("Loaded %d historical events", len(events))
    return events
