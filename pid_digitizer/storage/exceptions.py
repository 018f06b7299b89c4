class StorageError(Exception):
    """Raised when the record store fails to acknowledge a save."""
