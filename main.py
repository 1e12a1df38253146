"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the quakesim package.
"""

from quakesim.main import earthquake_simulation

__all__ = [
    "earthquake_simulation",
]
