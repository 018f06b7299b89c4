import time
import uuid
from collections.abc import Callable
from datetime import datetime, timezone

from pid_digitizer.logging.logger import Log
from pid_digitizer.session.models import AnalysisResult
from pid_digitizer.storage.base import BaseRecordStore
from pid_digitizer.storage.models import StorageAck


class SimulatedRecordStore(BaseRecordStore):
    """Stands in for the Postgres backend: waits, logs the insert, acknowledges."""

    def __init__(
        self,
        delay_seconds: float = 1.5,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._sleep = sleep

    def save(self, result: AnalysisResult) -> StorageAck:
        Log.info("Connecting to Postgres (simulated)")
        self._sleep(self._delay_seconds)
        ack = StorageAck(
            id=str(uuid.uuid4()),
            upload_date=datetime.now(timezone.utc).isoformat(),
            payload=result,
            synced=True,
        )
        Log.info(
            f"INSERT INTO pid_records (id, data, created_at) VALUES "
            f"({ack.id}, {result.file_name} v{result.version}, {ack.upload_date})"
        )
        return ack
