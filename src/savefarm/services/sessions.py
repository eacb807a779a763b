"""Session token registry."""

from dataclasses import dataclass, field
from typing import Protocol
from uuid import uuid4

from savefarm.domain.errors import UnauthenticatedError


class SessionStore(Protocol):
    """Mapping from opaque session tokens to usernames."""

    def lookup(self, token: str) -> str | None:
        """Return the username bound to the token, if any."""

    def create(self, username: str) -> str:
        """Issue a fresh token for the username and return it."""

    def invalidate(self, token: str) -> None:
        """Forget the token. Unknown tokens are ignored."""


def new_token() -> str:
    """Return a fresh opaque session token."""
    return str(uuid4())


@dataclass
class InMemorySessionStore(SessionStore):
    """Process-lifetime session store; a restart logs everyone out."""

    sessions: dict[str, str] = field(default_factory=dict)

    def lookup(self, token: str) -> str | None:
        return self.sessions.get(token)

    def create(self, username: str) -> str:
        token = new_token()
        self.sessions[token] = username
        return token

    def invalidate(self, token: str) -> None:
        self.sessions.pop(token, None)


def require_username(sessions: SessionStore, token: str | None) -> str:
    """Return the username bound to a token or raise ``UnauthenticatedError``."""
    username = sessions.lookup(token) if token else None
    if not username:
        raise UnauthenticatedError()
    return username
