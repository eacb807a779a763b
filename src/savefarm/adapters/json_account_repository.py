"""JSON-document-backed account repository."""

from dataclasses import dataclass
from datetime import UTC, datetime

from savefarm.adapters.json_document import JsonDocument
from savefarm.domain.accounts import AccountRecord
from savefarm.domain.errors import ConflictError, UnauthenticatedError
from savefarm.services.accounts import AccountRepository
from savefarm.services.impact import fold_findings

EMPTY_ACCOUNTS: dict[str, object] = {"users": {}}


@dataclass
class JsonAccountRepository(AccountRepository):
    """Stores accounts as ``{"users": {username: record}}``."""

    document: JsonDocument

    def get_account(self, username: str) -> AccountRecord | None:
        """Return the account for a username, if present."""
        row = _users(self.document.read()).get(username)
        if row is None:
            return None
        return _row_to_account(username, row)

    def create_account(self, username: str, password_hash: str) -> AccountRecord:
        """Create an account row, refusing duplicates."""

        def mutate(data: dict[str, object]) -> dict[str, object]:
            users = _users(data)
            if username in users:
                raise ConflictError("Username already exists")
            row = {
                "passwordHash": password_hash,
                "animals": {},
                "createdAt": datetime.now(tz=UTC).isoformat(),
            }
            users[username] = row
            return row

        return _row_to_account(username, self.document.update(mutate))

    def list_accounts(self) -> list[AccountRecord]:
        """Return every stored account in document order."""
        return [
            _row_to_account(username, row)
            for username, row in _users(self.document.read()).items()
        ]

    def get_animals(self, username: str) -> dict[str, float]:
        """Return the account's animal tally."""
        row = account_row(self.document.read(), username)
        return dict(row.get("animals") or {})

    def set_animals(self, username: str, animals: dict[str, float]) -> None:
        """Replace the account's animal tally."""

        def mutate(data: dict[str, object]) -> None:
            account_row(data, username)["animals"] = animals

        self.document.update(mutate)

    def add_findings(
        self, username: str, details: list[dict[str, object]]
    ) -> dict[str, float]:
        """Fold impact findings into the tally and return the new tally."""

        def mutate(data: dict[str, object]) -> dict[str, float]:
            row = account_row(data, username)
            row["animals"] = fold_findings(row.get("animals") or {}, details)
            return row["animals"]

        return self.document.update(mutate)


def _users(data: dict[str, object]) -> dict[str, dict[str, object]]:
    return data.setdefault("users", {})


def account_row(data: dict[str, object], username: str) -> dict[str, object]:
    """Return the mutable record for a username or raise ``UnauthenticatedError``."""
    row = _users(data).get(username)
    if row is None:
        raise UnauthenticatedError()
    return row


def _row_to_account(username: str, row: dict[str, object]) -> AccountRecord:
    return AccountRecord(
        username=username,
        password_hash=str(row.get("passwordHash", "")),
        animals={
            animal: float(count)
            for animal, count in (row.get("animals") or {}).items()
        },
        created_at=row.get("createdAt"),
    )
