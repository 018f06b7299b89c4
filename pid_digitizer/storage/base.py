from abc import ABC, abstractmethod

from pid_digitizer.session.models import AnalysisResult
from pid_digitizer.storage.models import StorageAck


class BaseRecordStore(ABC):
    """Contract for all record persistence adapters."""

    @abstractmethod
    def save(self, result: AnalysisResult) -> StorageAck:
        """Persist one analysis result.

        Returns:
            StorageAck with the generated id and upload date.

        Raises:
            StorageError: if the backend does not acknowledge the save.
        """
