"""Admin credential check for privileged operations."""

import secrets
from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str


class AdminGuard:
    """Single configured admin account (HTTP Basic style)."""

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password

    def check(self, credentials: Credentials | None) -> bool:
        if credentials is None:
            return False
        user_ok = secrets.compare_digest(credentials.username.encode(), self._username.encode())
        pass_ok = secrets.compare_digest(credentials.password.encode(), self._password.encode())
        return user_ok and pass_ok
