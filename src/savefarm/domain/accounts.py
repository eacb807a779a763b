"""Domain models for accounts and sessions."""

from dataclasses import dataclass


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful registration or login."""

    session_id: str
    username: str


@dataclass(frozen=True)
class AccountRecord:
    """Represents an account stored in the credential document."""

    username: str
    password_hash: str
    animals: dict[str, float]
    created_at: str | None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One row of the community leaderboard."""

    username: str
    total_animals: float
    animals: dict[str, float]
    joined_at: str | None
