import uuid
from collections.abc import Callable

from pid_digitizer.auth.authenticator import Authenticator
from pid_digitizer.auth.models import User
from pid_digitizer.config.settings import Settings
from pid_digitizer.document.exceptions import (
    DocumentConversionError,
    UnsupportedDocumentTypeError,
)
from pid_digitizer.document.factory import build_document_normalizer
from pid_digitizer.document.normalizer import DocumentNormalizer, is_pdf
from pid_digitizer.extraction.exceptions import ResponseParseError
from pid_digitizer.extraction.factory import ModelInvokerFactory
from pid_digitizer.extraction.invoker import ModelInvoker
from pid_digitizer.extraction.models import ComponentStatus
from pid_digitizer.logging.logger import Log
from pid_digitizer.session.history import HistoryStore
from pid_digitizer.session.models import ComponentStats, UploadRecord
from pid_digitizer.session.pipeline import PipelineContext
from pid_digitizer.session.state import (
    AppState,
    ComponentSelected,
    ComponentsExtracted,
    DocumentConverted,
    Event,
    FileSelected,
    LoggedIn,
    LoggedOut,
    NavigationRequested,
    Page,
    RecordSaved,
    RecordSelected,
    StageFailed,
    transition,
)
from pid_digitizer.session.steps import (
    AssignVersionStep,
    ConvertDocumentStep,
    InvokeModelStep,
    ParseResponseStep,
    SaveRecordStep,
    utc_now_iso,
)
from pid_digitizer.storage.base import BaseRecordStore
from pid_digitizer.storage.factory import RecordStoreFactory

CONVERSION_FAILED_MESSAGE = "Could not read PDF file. Please try a different file."
ANALYSIS_FAILED_MESSAGE = (
    "Failed to parse AI response. The P&ID might be too complex or the result was malformed."
)
PROCESSING_FAILED_MESSAGE = "Failed to process P&ID. Please try again or check your API Key."


class SessionOrchestrator:
    """Single controller for one user session.

    Drives each upload through convert -> analyze -> save, keeps the AppState
    current via ``transition``, and appends the finished record to the history.
    Only one run may be in flight; a second submit raises SessionBusyError.
    """

    def __init__(
        self,
        *,
        document_normalizer: DocumentNormalizer,
        invoker: ModelInvoker,
        store: BaseRecordStore,
        authenticator: Authenticator | None = None,
        history: HistoryStore | None = None,
        clock: Callable[[], str] = utc_now_iso,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ) -> None:
        self._history = history if history is not None else HistoryStore()
        self._authenticator = authenticator or Authenticator()
        self._id_factory = id_factory
        self._state = AppState()
        self._convert = ConvertDocumentStep(document_normalizer)
        self._invoke = InvokeModelStep(invoker)
        self._parse = ParseResponseStep()
        self._assign_version = AssignVersionStep(self._history, clock)
        self._save = SaveRecordStep(store)

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def history(self) -> HistoryStore:
        return self._history

    def submit(self, file_name: str, data: bytes, mime_type: str) -> UploadRecord | None:
        """Run the full pipeline for one file.

        Returns:
            The new UploadRecord, or None if any stage failed. On failure the
            user-facing message is in ``state.error`` and history is unchanged.

        Raises:
            SessionBusyError: if another run is still in flight.
        """
        self._dispatch(FileSelected(file_name=file_name, mime_type=mime_type))
        Log.info(f"Processing {file_name} ({mime_type}, {len(data)} bytes)")
        context = PipelineContext(file_name=file_name, raw_bytes=data, mime_type=mime_type)

        try:
            context = self._convert.run(context)
        except UnsupportedDocumentTypeError as exc:
            return self._fail(file_name, exc, PROCESSING_FAILED_MESSAGE)
        except DocumentConversionError as exc:
            return self._fail(file_name, exc, CONVERSION_FAILED_MESSAGE)
        if is_pdf(mime_type):
            self._dispatch(DocumentConverted())

        try:
            context = self._invoke.run(context)
            context = self._parse.run(context)
            context = self._assign_version.run(context)
            self._dispatch(ComponentsExtracted())
            context = self._save.run(context)
        except ResponseParseError as exc:
            return self._fail(file_name, exc, ANALYSIS_FAILED_MESSAGE)
        except Exception as exc:
            return self._fail(file_name, exc, PROCESSING_FAILED_MESSAGE)

        if context.analysis is None or context.document is None:
            raise ValueError("Pipeline finished without an analysis result")
        record = UploadRecord.from_analysis(
            context.analysis,
            record_id=self._id_factory(),
            image_preview=context.document.preview_data_url,
        )
        self._history.append(record)
        self._dispatch(RecordSaved(record_id=record.id))
        Log.info(
            f"Finished {record.file_name} v{record.version}: "
            f"{len(record.components)} components, record {record.id}"
        )
        return record

    def login(self, identifier: str, secret: str) -> User:
        """Authenticate and store the user in the session state.

        Raises:
            AuthenticationError: on invalid credentials.
        """
        user = self._authenticator.authenticate(identifier, secret)
        self._dispatch(LoggedIn(user=user))
        return user

    def logout(self) -> None:
        """End the session: clear the user, the selection and the history."""
        self._dispatch(LoggedOut())
        self._history.clear()

    def current_record(self) -> UploadRecord | None:
        if self._state.current_record_id is None:
            return None
        return self._history.select(self._state.current_record_id)

    def select_record(self, record_id: str) -> UploadRecord | None:
        record = self._history.select(record_id)
        if record is not None:
            self._dispatch(RecordSelected(record_id=record_id))
        return record

    def select_component(self, component_id: str | None) -> None:
        self._dispatch(ComponentSelected(component_id=component_id))

    def navigate(self, page: Page) -> Page:
        """Switch page; the dashboard stays closed until something was analyzed."""
        self._dispatch(NavigationRequested(page=page, has_history=len(self._history) > 0))
        return self._state.page

    def update_component_status(
        self,
        component_id: str,
        new_status: ComponentStatus | str,
    ) -> bool:
        """Change one component's status on the current record. No-op without one."""
        record_id = self._state.current_record_id
        if record_id is None:
            return False
        return self._history.update_component_status(record_id, component_id, new_status)

    def stats(self) -> ComponentStats:
        record = self.current_record()
        return ComponentStats.from_components(record.components if record else [])

    def _dispatch(self, event: Event) -> None:
        self._state = transition(self._state, event)

    def _fail(self, file_name: str, exc: Exception, message: str) -> None:
        Log.error(f"Processing {file_name} failed in {self._state.step.value}: {exc}")
        self._dispatch(StageFailed(message=message))
        return None


def build_orchestrator(settings: Settings) -> SessionOrchestrator:
    """Build a SessionOrchestrator with all configured adapters."""
    return SessionOrchestrator(
        document_normalizer=build_document_normalizer(settings),
        invoker=ModelInvokerFactory.create(settings),
        store=RecordStoreFactory.create(settings),
        authenticator=Authenticator(settings.auth_delay_seconds),
    )
