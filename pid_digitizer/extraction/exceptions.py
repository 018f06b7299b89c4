class ExtractionError(Exception):
    """Base exception for model extraction failures."""


class ModelCallError(ExtractionError):
    """Raised by a vision client adapter when a single model call fails."""


class TransientModelError(ModelCallError):
    """A failure worth retrying: rate limiting or temporary unavailability."""


class ModelQuotaExceededError(TransientModelError):
    """The provider reported a rate-limit or quota signal (HTTP 429)."""


class ModelUnavailableError(TransientModelError):
    """The provider reported the service as unavailable (HTTP 503)."""


class ModelNetworkError(ModelCallError):
    """The call failed due to network or connection issues."""


class ModelResponseError(ModelCallError):
    """The provider answered, but without usable content."""


class ModelInvocationError(ExtractionError):
    """Raised when every model tier is exhausted or a call fails permanently."""

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ResponseParseError(ExtractionError):
    """Raised when the model output cannot be read as a component array."""
