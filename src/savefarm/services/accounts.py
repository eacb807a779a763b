"""Account registration, sessions and animal tallies."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

from savefarm.domain.accounts import AccountRecord, AuthResult
from savefarm.domain.errors import BadRequestError, UnauthorizedError
from savefarm.domain.impact import ImpactResult
from savefarm.services.impact import parse_amount
from savefarm.services.passwords import PasswordHasher
from savefarm.services.sessions import SessionStore, require_username

_logger = logging.getLogger(__name__)


class AccountRepository(Protocol):
    """Persistence interface for account records.

    Methods taking a username of an account that does not exist raise
    ``UnauthenticatedError``.
    """

    def get_account(self, username: str) -> AccountRecord | None:
        """Return the account for a username, if present."""

    def create_account(self, username: str, password_hash: str) -> AccountRecord:
        """Create an account, raising ``ConflictError`` when it exists."""

    def list_accounts(self) -> list[AccountRecord]:
        """Return every stored account."""

    def get_animals(self, username: str) -> dict[str, float]:
        """Return the account's animal tally."""

    def set_animals(self, username: str, animals: dict[str, float]) -> None:
        """Replace the account's animal tally."""

    def add_findings(
        self, username: str, details: list[dict[str, object]]
    ) -> dict[str, float]:
        """Fold impact findings into the tally and return the new tally."""


@dataclass
class AccountService:
    """Application service for accounts and their animal tallies."""

    repository: AccountRepository
    sessions: SessionStore
    hasher: PasswordHasher

    def register(self, username: str | None, password: str | None) -> AuthResult:
        """Create an account and open a session for it."""
        if not username or not password:
            raise BadRequestError("Username and password required")
        self.repository.create_account(username, self.hasher.hash(password))
        _logger.info("Registered account %s", username)
        return AuthResult(session_id=self.sessions.create(username), username=username)

    def login(self, username: str | None, password: str | None) -> AuthResult:
        """Verify credentials and open a new session.

        Sessions opened earlier for the same account stay valid.
        """
        if not username or not password:
            raise BadRequestError("Username and password required")
        account = self.repository.get_account(username)
        if account is None or not self.hasher.verify(password, account.password_hash):
            raise UnauthorizedError("Invalid credentials")
        return AuthResult(session_id=self.sessions.create(username), username=username)

    def logout(self, token: str | None) -> None:
        """Drop the session; unknown tokens are ignored."""
        if token:
            self.sessions.invalidate(token)

    def resolve(self, token: str | None) -> str:
        """Return the username bound to a session token."""
        return require_username(self.sessions, token)

    def get_animals(self, token: str | None) -> dict[str, float]:
        """Return the caller's animal tally."""
        return self.repository.get_animals(self.resolve(token))

    def set_animals(self, token: str | None, animals: object) -> None:
        """Overwrite the caller's animal tally.

        Every count must be a non-negative number.
        """
        username = self.resolve(token)
        if not isinstance(animals, Mapping):
            raise BadRequestError("Animals data required")
        counts = {str(animal): parse_amount(count) for animal, count in animals.items()}
        if any(count is None for count in counts.values()):
            raise BadRequestError("Animals data required")
        self.repository.set_animals(username, counts)

    def reset_animals(self, token: str | None) -> None:
        """Clear the caller's animal tally."""
        self.repository.set_animals(self.resolve(token), {})

    def record_impact(
        self, token: str | None, result: ImpactResult
    ) -> dict[str, float]:
        """Add a vegan analysis result to the caller's tally."""
        username = self.resolve(token)
        if result.animals_saved <= 0:
            return self.repository.get_animals(username)
        return self.repository.add_findings(
            username, [finding.as_dict() for finding in result.details]
        )
