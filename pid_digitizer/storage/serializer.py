from pid_digitizer.extraction.models import Component
from pid_digitizer.session.models import AnalysisResult, UploadRecord


def component_to_payload(component: Component) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": component.id,
        "type": component.type,
        "label": component.label,
        "description": component.description,
        "coordinates": {"x": component.coordinates.x, "y": component.coordinates.y},
        "initialStatus": component.initial_status.value,
        "currentStatus": component.current_status.value,
        "uaeStandardNote": component.uae_standard_note,
    }
    if component.last_inspected is not None:
        payload["lastInspected"] = component.last_inspected
    return payload


def analysis_to_payload(result: AnalysisResult) -> dict[str, object]:
    """Serialize an AnalysisResult into the JSON-ready camelCase payload."""
    return {
        "fileName": result.file_name,
        "timestamp": result.timestamp,
        "components": [component_to_payload(c) for c in result.components],
        "summary": result.summary,
        "version": result.version,
    }


def record_to_payload(record: UploadRecord, include_preview: bool = False) -> dict[str, object]:
    payload: dict[str, object] = {
        "id": record.id,
        "fileName": record.file_name,
        "version": record.version,
        "timestamp": record.timestamp,
        "components": [component_to_payload(c) for c in record.components],
        "summary": record.summary,
    }
    if include_preview:
        payload["imagePreview"] = record.image_preview
    return payload
