class SessionError(Exception):
    """Base exception for session state errors."""


class SessionBusyError(SessionError):
    """Raised when a file is submitted while another run is still in flight."""


class InvalidTransitionError(SessionError):
    """Raised when an event is not allowed in the current processing step."""


class FileReadError(SessionError):
    """Raised when an input file cannot be read from disk."""
