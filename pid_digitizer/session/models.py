from dataclasses import dataclass, field

from pid_digitizer.extraction.models import Component, ComponentStatus


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one pipeline run, as handed to the record store."""

    file_name: str
    timestamp: str
    components: list[Component] = field(default_factory=list)
    summary: str = ""
    version: int = 1


@dataclass(frozen=True)
class UploadRecord:
    """A finalized, versioned analysis kept in the session history.

    The record itself is never replaced; only component current_status changes.
    """

    id: str
    file_name: str
    version: int
    timestamp: str
    components: list[Component]
    image_preview: str
    summary: str

    @classmethod
    def from_analysis(
        cls,
        result: AnalysisResult,
        *,
        record_id: str,
        image_preview: str,
    ) -> "UploadRecord":
        return cls(
            id=record_id,
            file_name=result.file_name,
            version=result.version,
            timestamp=result.timestamp,
            components=result.components,
            image_preview=image_preview,
            summary=result.summary,
        )


@dataclass(frozen=True)
class ComponentStats:
    """Dashboard counters for one record."""

    total: int = 0
    operational: int = 0
    needs_attention: int = 0

    @classmethod
    def from_components(cls, components: list[Component]) -> "ComponentStats":
        operational = sum(
            1 for c in components if c.current_status is ComponentStatus.OPERATIONAL
        )
        return cls(
            total=len(components),
            operational=operational,
            needs_attention=len(components) - operational,
        )


def build_summary(component_count: int) -> str:
    return f"Analyzed {component_count} components according to UAE standards."
