import uuid

import psycopg
from psycopg.types.json import Jsonb

from pid_digitizer.logging.logger import Log
from pid_digitizer.session.models import AnalysisResult
from pid_digitizer.storage.base import BaseRecordStore
from pid_digitizer.storage.connection import get_connection
from pid_digitizer.storage.exceptions import StorageError
from pid_digitizer.storage.models import StorageAck
from pid_digitizer.storage.serializer import analysis_to_payload


class PostgresRecordStore(BaseRecordStore):
    """Inserts analysis results into the pid_records table."""

    def save(self, result: AnalysisResult) -> StorageAck:
        record_id = str(uuid.uuid4())
        try:
            with get_connection() as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO pid_records (id, data, created_at)
                        VALUES (%s, %s, NOW())
                        RETURNING created_at
                        """,
                        (record_id, Jsonb(analysis_to_payload(result))),
                    )
                    row = cur.fetchone()
                conn.commit()
        except (psycopg.Error, RuntimeError) as exc:
            raise StorageError(f"Failed to save {result.file_name}: {exc}") from exc

        if row is None:
            raise StorageError(f"Insert for {result.file_name} returned no row")
        Log.info(f"Committed record {record_id} for {result.file_name} v{result.version}")
        return StorageAck(
            id=record_id,
            upload_date=row[0].isoformat(),
            payload=result,
            synced=True,
        )
