"""Authentication state shared by every request a client builds.

Credentials are meant to be configured once, right after the client is
created and before any request is issued. Setters take a lock so a late
change never leaves a request with half-updated credentials, and request
building reads one consistent :class:`AuthSnapshot`.
"""

import threading
from typing import NamedTuple


class AuthSnapshot(NamedTuple):
    """Immutable view of the credentials at request-build time."""

    basic_auth: tuple[str, str] | None
    bearer_token: str
    user_agent: str | None


class Authentication:
    """Credential holder: basic auth, bearer token and user agent."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._has_basic_auth = False
        self._mail = ""
        self._token = ""
        self._bearer_token = ""
        self._has_user_agent = False
        self._user_agent = ""

    def set_basic_auth(self, mail: str, token: str) -> None:
        with self._lock:
            self._mail = mail
            self._token = token
            self._has_basic_auth = True

    def get_basic_auth(self) -> tuple[str, str]:
        return self._mail, self._token

    def has_basic_auth(self) -> bool:
        return self._has_basic_auth

    def set_bearer_token(self, token: str) -> None:
        with self._lock:
            self._bearer_token = token

    def get_bearer_token(self) -> str:
        return self._bearer_token

    def set_user_agent(self, agent: str) -> None:
        with self._lock:
            self._user_agent = agent
            self._has_user_agent = True

    def get_user_agent(self) -> str:
        return self._user_agent

    def has_user_agent(self) -> bool:
        return self._has_user_agent

    def snapshot(self) -> AuthSnapshot:
        """Return a consistent copy of the current credentials."""
        with self._lock:
            return AuthSnapshot(
                basic_auth=(self._mail, self._token) if self._has_basic_auth else None,
                bearer_token=self._bearer_token,
                user_agent=self._user_agent if self._has_user_agent else None,
            )
