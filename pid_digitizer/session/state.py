"""Application state and the pure transition function that drives it.

transition(state, event) never mutates its input and performs no I/O, so the
processing state machine is testable without any pipeline collaborators.
"""

from dataclasses import dataclass, replace
from enum import Enum

from pid_digitizer.auth.models import User
from pid_digitizer.document.normalizer import is_pdf
from pid_digitizer.session.exceptions import InvalidTransitionError, SessionBusyError


class ProcessingStep(str, Enum):
    IDLE = "IDLE"
    CONVERTING_DOCUMENT = "CONVERTING_DOCUMENT"
    ANALYZING = "ANALYZING"
    SAVING = "SAVING"


class Page(str, Enum):
    UPLOAD = "upload"
    LOADING = "loading"
    DASHBOARD = "dashboard"


@dataclass(frozen=True)
class AppState:
    user: User | None = None
    page: Page = Page.UPLOAD
    step: ProcessingStep = ProcessingStep.IDLE
    current_record_id: str | None = None
    selected_component_id: str | None = None
    error: str | None = None
    in_flight_file: str | None = None

    @property
    def is_busy(self) -> bool:
        return self.step is not ProcessingStep.IDLE


@dataclass(frozen=True)
class FileSelected:
    file_name: str
    mime_type: str


@dataclass(frozen=True)
class DocumentConverted:
    pass


@dataclass(frozen=True)
class ComponentsExtracted:
    pass


@dataclass(frozen=True)
class RecordSaved:
    record_id: str


@dataclass(frozen=True)
class StageFailed:
    message: str


@dataclass(frozen=True)
class RecordSelected:
    record_id: str


@dataclass(frozen=True)
class ComponentSelected:
    component_id: str | None


@dataclass(frozen=True)
class NavigationRequested:
    page: Page
    has_history: bool


@dataclass(frozen=True)
class LoggedIn:
    user: User


@dataclass(frozen=True)
class LoggedOut:
    pass


Event = (
    FileSelected
    | DocumentConverted
    | ComponentsExtracted
    | RecordSaved
    | StageFailed
    | RecordSelected
    | ComponentSelected
    | NavigationRequested
    | LoggedIn
    | LoggedOut
)


def transition(state: AppState, event: Event) -> AppState:
    """Return the state that follows ``event``.

    Raises:
        SessionBusyError: if a file is selected while a run is in flight.
        InvalidTransitionError: if the event does not apply to the current step.
    """
    if isinstance(event, FileSelected):
        if state.is_busy:
            raise SessionBusyError(
                f"Cannot start '{event.file_name}': "
                f"'{state.in_flight_file}' is still {state.step.value}"
            )
        first_step = (
            ProcessingStep.CONVERTING_DOCUMENT
            if is_pdf(event.mime_type)
            else ProcessingStep.ANALYZING
        )
        return replace(
            state,
            page=Page.LOADING,
            step=first_step,
            error=None,
            in_flight_file=event.file_name,
        )

    if isinstance(event, DocumentConverted):
        _require_step(state, event, ProcessingStep.CONVERTING_DOCUMENT)
        return replace(state, step=ProcessingStep.ANALYZING)

    if isinstance(event, ComponentsExtracted):
        _require_step(state, event, ProcessingStep.ANALYZING)
        return replace(state, step=ProcessingStep.SAVING)

    if isinstance(event, RecordSaved):
        _require_step(state, event, ProcessingStep.SAVING)
        return replace(
            state,
            page=Page.DASHBOARD,
            step=ProcessingStep.IDLE,
            current_record_id=event.record_id,
            selected_component_id=None,
            in_flight_file=None,
        )

    if isinstance(event, StageFailed):
        if not state.is_busy:
            raise InvalidTransitionError("StageFailed received while IDLE")
        return replace(
            state,
            page=Page.UPLOAD,
            step=ProcessingStep.IDLE,
            error=event.message,
            in_flight_file=None,
        )

    if isinstance(event, RecordSelected):
        return replace(state, current_record_id=event.record_id, selected_component_id=None)

    if isinstance(event, ComponentSelected):
        return replace(state, selected_component_id=event.component_id)

    if isinstance(event, NavigationRequested):
        if event.page is Page.DASHBOARD and not event.has_history:
            return state
        return replace(state, page=event.page)

    if isinstance(event, LoggedIn):
        return replace(state, user=event.user, page=Page.UPLOAD)

    if isinstance(event, LoggedOut):
        if state.is_busy:
            raise SessionBusyError("Cannot log out while a run is in flight")
        return AppState()

    raise InvalidTransitionError(f"Unknown event {event!r}")


def _require_step(state: AppState, event: Event, expected: ProcessingStep) -> None:
    if state.step is not expected:
        raise InvalidTransitionError(
            f"{type(event).__name__} requires step {expected.value}, "
            f"current step is {state.step.value}"
        )
