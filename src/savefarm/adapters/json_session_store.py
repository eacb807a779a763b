"""Durable session store kept in a JSON document."""

from dataclasses import dataclass

from savefarm.adapters.json_document import JsonDocument
from savefarm.services.sessions import SessionStore, new_token

EMPTY_SESSIONS: dict[str, object] = {"sessions": {}}


@dataclass
class JsonSessionStore(SessionStore):
    """Session store that survives restarts."""

    document: JsonDocument

    def lookup(self, token: str) -> str | None:
        return self.document.read().get("sessions", {}).get(token)

    def create(self, username: str) -> str:
        token = new_token()

        def mutate(data: dict[str, object]) -> None:
            data.setdefault("sessions", {})[token] = username

        self.document.update(mutate)
        return token

    def invalidate(self, token: str) -> None:
        def mutate(data: dict[str, object]) -> None:
            data.setdefault("sessions", {}).pop(token, None)

        self.document.update(mutate)
