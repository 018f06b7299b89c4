class AuthenticationError(Exception):
    """Raised when an identifier/secret pair is rejected."""
