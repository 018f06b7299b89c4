from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """Profile of an authenticated operator."""

    id: str
    name: str
    email: str
    role: str
    avatar_url: str | None = None
