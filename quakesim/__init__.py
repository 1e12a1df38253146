"""Earthquake impact simulator.

Estimates shaking intensity, MMI, damage and population impact at sites
around a simulated earthquake. Pure logic lives in quakesim.core; file
and environment access lives in quakesim.shell.
"""

__version__ = "1.0.0"
