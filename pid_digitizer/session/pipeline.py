from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from pid_digitizer.document.normalizer import NormalizedDocument
from pid_digitizer.extraction.models import Component
from pid_digitizer.session.models import AnalysisResult
from pid_digitizer.storage.models import StorageAck


@dataclass(slots=True)
class PipelineContext:
    """In-flight data for one run; discarded once the record is finalized."""

    file_name: str
    raw_bytes: bytes
    mime_type: str
    document: NormalizedDocument | None = None
    raw_response: str = ""
    components: list[Component] = field(default_factory=list)
    analysis: AnalysisResult | None = None
    ack: StorageAck | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
