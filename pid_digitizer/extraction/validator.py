"""Reads model output into Components.

Two failure granularities: an unreadable payload raises ResponseParseError,
while a bad field inside a readable payload falls back to its default.
"""

import json
import math
import re
import uuid
from typing import Any

from pid_digitizer.extraction.exceptions import ResponseParseError
from pid_digitizer.extraction.models import Component, ComponentStatus, Coordinates
from pid_digitizer.logging.logger import Log

DEFAULT_TYPE = "Unknown Component"
DEFAULT_NOTE = "No specific note."
DEFAULT_COORDINATE = 50.0
_MIN_COORDINATE = 0.0
_MAX_COORDINATE = 100.0
_ENVELOPE_KEY = "components"
_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")


def parse_components(raw: str) -> list[Component]:
    """Parse raw model text into hydrated Components, in emission order.

    Raises:
        ResponseParseError: if the payload is not a component array.
    """
    items = load_payload(raw)
    components: list[Component] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            Log.warning(f"Skipping component at index {index}: not an object")
            continue
        components.append(hydrate_component(item))
    return components


def strip_code_fence(raw: str) -> str:
    """Remove a markdown fence, whether or not the markers sit on their own lines."""
    cleaned = _OPENING_FENCE.sub("", raw.strip())
    return _CLOSING_FENCE.sub("", cleaned).strip()


def load_payload(raw: str) -> list[Any]:
    """Strip fencing and decode the component array.

    Accepts a bare array or a {"components": [...]} envelope.
    """
    cleaned = strip_code_fence(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        Log.debug(f"Unparseable model output:\n{cleaned}")
        raise ResponseParseError(f"Invalid JSON response: {exc}") from exc

    if isinstance(parsed, dict) and isinstance(parsed.get(_ENVELOPE_KEY), list):
        parsed = parsed[_ENVELOPE_KEY]
    if not isinstance(parsed, list):
        raise ResponseParseError("JSON response must be an array of components")
    return parsed


def hydrate_component(raw: dict[str, Any]) -> Component:
    """Build a Component, replacing every missing or invalid field with its default."""
    status = _status(raw.get("initialStatus"))
    return Component(
        id=_text(raw.get("id")) or synthesize_id(),
        type=_text(raw.get("type")) or DEFAULT_TYPE,
        label=_text(raw.get("label")),
        description=_text(raw.get("description")),
        coordinates=_coordinates(raw.get("coordinates")),
        initial_status=status,
        current_status=status,
        uae_standard_note=_text(raw.get("uaeStandardNote")) or DEFAULT_NOTE,
        last_inspected=_text(raw.get("lastInspected")) or None,
    )


def synthesize_id() -> str:
    return f"UNK-{uuid.uuid4().hex[:4].upper()}"


def clamp_coordinate(value: Any) -> float:
    """Clamp a numeric value to [0, 100]; anything non-numeric becomes 50."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return DEFAULT_COORDINATE
    if isinstance(value, float) and math.isnan(value):
        return DEFAULT_COORDINATE
    # ints beyond float range are clamped before conversion
    return float(max(_MIN_COORDINATE, min(_MAX_COORDINATE, value)))


def _coordinates(raw: Any) -> Coordinates:
    if not isinstance(raw, dict):
        return Coordinates(x=DEFAULT_COORDINATE, y=DEFAULT_COORDINATE)
    return Coordinates(x=clamp_coordinate(raw.get("x")), y=clamp_coordinate(raw.get("y")))


def _status(raw: Any) -> ComponentStatus:
    if not isinstance(raw, str):
        return ComponentStatus.UNKNOWN
    return ComponentStatus.__members__.get(raw.strip().upper(), ComponentStatus.UNKNOWN)


def _text(raw: Any) -> str:
    return raw if isinstance(raw, str) else ""
