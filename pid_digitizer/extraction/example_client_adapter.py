"""Offline vision client adapter.

Returns a small fixed inventory without touching the network. Used for local
development, the end-to-end tests, and as a template for new providers:
implement BaseVisionClient and register the provider in ModelInvokerFactory.
"""

import json
from typing import ClassVar

from pid_digitizer.extraction.client_base import BaseVisionClient


class ExampleVisionClientAdapter(BaseVisionClient):
    """Adapter that answers every request with DEFAULT_RESPONSE."""

    DEFAULT_RESPONSE: ClassVar[list[dict[str, object]]] = [
        {
            "id": "P-101A",
            "type": "Centrifugal Pump",
            "label": "Feed Pump",
            "description": "Main feed pump on the suction header",
            "coordinates": {"x": 22.5, "y": 61.0},
            "initialStatus": "OPERATIONAL",
            "uaeStandardNote": "Inspect mechanical seal for sand ingress quarterly.",
        },
        {
            "id": "PSV-204",
            "type": "Safety Relief Valve",
            "label": "",
            "description": "Relief valve on V-201 overhead",
            "coordinates": {"x": 71.0, "y": 18.5},
            "initialStatus": "MAINTENANCE_REQUIRED",
            "uaeStandardNote": "Check set pressure drift caused by high ambient heat.",
        },
    ]

    def __init__(self, response: list[dict[str, object]] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        seed: int,
        system_prompt: str,
        user_prompt: str,
        image_bytes: bytes,
        mime_type: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, seed, system_prompt, user_prompt, image_bytes, mime_type, json_schema
        return json.dumps(self._response)
