"""Imperative Shell - I/O and side effects.

This module contains all code that touches the outside world:
- Site list loading (CSV)
- Historical event loading (JSON)
- Configuration loading (YAML/environment)

Keep this layer thin and simple. All simulation logic should be in core.
"""

from quakesim.shell.config_loader import load_config, load_config_from_env
from quakesim.shell.data_loader import load_historical_events, load_sites

__all__ = [
    "load_config",
    "load_config_from_env",
    "load_sites",
    "load_historical_events",
]
