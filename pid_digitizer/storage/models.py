from dataclasses import dataclass

from pid_digitizer.session.models import AnalysisResult


@dataclass(frozen=True)
class StorageAck:
    """Acknowledgment returned by a record store after a save."""

    id: str
    upload_date: str
    payload: AnalysisResult
    synced: bool
