"""Probes for the shared database infrastructure.

ConnectionProbe reports engine lifecycle, connectivity and schema events.
ObservationContext is re-exported so callers can bind request metadata
without importing the shared kernel directly.
"""

from shared_kernel.observability_context import ObservationContext
from infrastructure.observability.probes import (
    ConnectionProbe,
    DefaultConnectionProbe,
)

__all__ = [
    "ConnectionProbe",
    "DefaultConnectionProbe",
    "ObservationContext",
]
