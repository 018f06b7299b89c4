from pid_digitizer.config.settings import Settings
from pid_digitizer.storage.base import BaseRecordStore
from pid_digitizer.storage.postgres_store import PostgresRecordStore
from pid_digitizer.storage.simulated_store import SimulatedRecordStore


class RecordStoreFactory:
    """Creates the configured record store."""

    BACKENDS = ("simulated", "postgres")

    @classmethod
    def create(cls, settings: Settings) -> BaseRecordStore:
        backend = settings.storage_backend.lower()
        if backend == "simulated":
            return SimulatedRecordStore(settings.storage_delay_seconds)
        if backend == "postgres":
            return PostgresRecordStore()
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
