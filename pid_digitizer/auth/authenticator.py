import time
from collections.abc import Callable

from pid_digitizer.auth.exceptions import AuthenticationError
from pid_digitizer.auth.models import User
from pid_digitizer.logging.logger import Log

ADMIN_USER = User(
    id="usr_admin_001",
    name="System Administrator",
    email="admin@uae-piping.ae",
    role="Super Admin",
    avatar_url="https://ui-avatars.com/api/?name=System+Admin&background=1e40af&color=fff",
)

# The admin account may log in with either its short name or its email.
_ADMIN_IDENTIFIERS = frozenset({"admin", ADMIN_USER.email})
_ADMIN_SECRET = "password123"


class Authenticator:
    """Stub credential check accepting the single built-in admin account."""

    def __init__(
        self,
        delay_seconds: float = 1.0,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._delay_seconds = delay_seconds
        self._sleep = sleep

    def authenticate(self, identifier: str, secret: str) -> User:
        """Return the admin profile for valid credentials.

        Raises:
            AuthenticationError: for any other identifier/secret pair.
        """
        self._sleep(self._delay_seconds)
        if identifier in _ADMIN_IDENTIFIERS and secret == _ADMIN_SECRET:
            Log.info(f"User {ADMIN_USER.id} authenticated")
            return ADMIN_USER
        Log.warning(f"Rejected login for '{identifier}'")
        raise AuthenticationError("Invalid credentials")
