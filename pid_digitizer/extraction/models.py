from dataclasses import dataclass
from enum import Enum


class ComponentStatus(str, Enum):
    """Maintenance condition of a detected component."""

    OPERATIONAL = "OPERATIONAL"
    MAINTENANCE_REQUIRED = "MAINTENANCE_REQUIRED"
    CRITICAL_REPAIR = "CRITICAL_REPAIR"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class Coordinates:
    """Position on the diagram as percentages, origin top-left."""

    x: float = 50.0
    y: float = 50.0


@dataclass
class Component:
    """A single valve, instrument, equipment item or line detected on a P&ID.

    Only current_status changes after hydration.
    """

    id: str
    type: str
    label: str
    description: str
    coordinates: Coordinates
    initial_status: ComponentStatus
    current_status: ComponentStatus
    uae_standard_note: str
    last_inspected: str | None = None
