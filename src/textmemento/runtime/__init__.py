"""Runtime services shared across the package."""

from . import telemetry

__all__ = ["telemetry"]
