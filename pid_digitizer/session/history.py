from collections import deque
from collections.abc import Iterator

from pid_digitizer.extraction.models import ComponentStatus
from pid_digitizer.logging.logger import Log
from pid_digitizer.session.models import UploadRecord


class HistoryStore:
    """Session history of upload records, newest first.

    Append-only: no dedup, no eviction. Records are only mutated through
    update_component_status.
    """

    def __init__(self) -> None:
        self._records: deque[UploadRecord] = deque()

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[UploadRecord]:
        return iter(self._records)

    def append(self, record: UploadRecord) -> None:
        self._records.appendleft(record)

    def records(self) -> list[UploadRecord]:
        return list(self._records)

    def select(self, record_id: str) -> UploadRecord | None:
        return next((r for r in self._records if r.id == record_id), None)

    def find(self, file_name: str, version: int) -> UploadRecord | None:
        return next(
            (r for r in self._records if r.file_name == file_name and r.version == version),
            None,
        )

    def count_by_file_name(self, file_name: str) -> int:
        return sum(1 for r in self._records if r.file_name == file_name)

    def next_version(self, file_name: str) -> int:
        """Version for a new upload of file_name: one more than the uploads so far."""
        return self.count_by_file_name(file_name) + 1

    def update_component_status(
        self,
        record_id: str,
        component_id: str,
        new_status: ComponentStatus | str,
    ) -> bool:
        """Set current_status on the matching components of one record.

        Every component carrying component_id is updated, since tags are not
        guaranteed unique. Unknown record or component ids are a no-op.

        Returns:
            True if at least one component was updated.

        Raises:
            ValueError: if new_status is not a ComponentStatus value.
        """
        status = ComponentStatus(new_status)
        record = self.select(record_id)
        if record is None:
            Log.debug(f"Status update ignored: record {record_id} not in history")
            return False
        updated = False
        for component in record.components:
            if component.id == component_id:
                component.current_status = status
                updated = True
        if not updated:
            Log.debug(f"Status update ignored: component {component_id} not in {record_id}")
        return updated

    def clear(self) -> None:
        self._records.clear()
