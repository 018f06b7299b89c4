from collections.abc import Callable
from datetime import datetime, timezone

from pid_digitizer.document.normalizer import DocumentNormalizer
from pid_digitizer.extraction.invoker import ModelInvoker
from pid_digitizer.extraction.validator import parse_components
from pid_digitizer.logging.logger import Log
from pid_digitizer.session.history import HistoryStore
from pid_digitizer.session.models import AnalysisResult, build_summary
from pid_digitizer.session.pipeline import PipelineContext, PipelineStep
from pid_digitizer.storage.base import BaseRecordStore


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class ConvertDocumentStep(PipelineStep):
    def __init__(self, normalizer: DocumentNormalizer) -> None:
        self._normalizer = normalizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.document = self._normalizer.normalize(context.raw_bytes, context.mime_type)
        Log.info(
            f"Normalized {context.file_name} ({context.mime_type}) to "
            f"{len(context.document.image_bytes)} bytes of {context.document.mime_type}"
        )
        return context


class InvokeModelStep(PipelineStep):
    def __init__(self, invoker: ModelInvoker) -> None:
        self._invoker = invoker

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.document is None:
            raise ValueError("PipelineContext.document must be set before model invocation")
        context.raw_response = self._invoker.invoke(
            context.document.image_bytes,
            context.document.mime_type,
        )
        return context


class ParseResponseStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.components = parse_components(context.raw_response)
        Log.info(f"Extracted {len(context.components)} components from {context.file_name}")
        return context


class AssignVersionStep(PipelineStep):
    def __init__(
        self,
        history: HistoryStore,
        clock: Callable[[], str] = utc_now_iso,
    ) -> None:
        self._history = history
        self._clock = clock

    def run(self, context: PipelineContext) -> PipelineContext:
        version = self._history.next_version(context.file_name)
        context.analysis = AnalysisResult(
            file_name=context.file_name,
            timestamp=self._clock(),
            components=context.components,
            summary=build_summary(len(context.components)),
            version=version,
        )
        Log.info(f"Assigned version {version} to {context.file_name}")
        return context


class SaveRecordStep(PipelineStep):
    def __init__(self, store: BaseRecordStore) -> None:
        self._store = store

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.analysis is None:
            raise ValueError("PipelineContext.analysis must be set before saving")
        context.ack = self._store.save(context.analysis)
        Log.info(f"Store acknowledged {context.file_name} as {context.ack.id}")
        return context
