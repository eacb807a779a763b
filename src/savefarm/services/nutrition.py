"""Nutrition logging and goals."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from savefarm.domain.errors import BadRequestError, NotFoundError
from savefarm.domain.nutrition import (
    DEFAULT_GOALS,
    NUTRIENT_KEYS,
    DailySummary,
    NutritionLogEntry,
)
from savefarm.services.sessions import SessionStore, require_username


class NutritionRepository(Protocol):
    """Persistence interface for per-account nutrition data."""

    def list_logs(self, username: str) -> dict[str, list[NutritionLogEntry]]:
        """Return every date bucket for the account."""

    def append_log(self, username: str, date: str, entry: NutritionLogEntry) -> None:
        """Append an entry to a date bucket, creating the bucket if needed."""

    def delete_log(self, username: str, date: str, log_id: str) -> bool:
        """Remove an entry by id; return False when the bucket is missing."""

    def get_goals(self, username: str) -> dict[str, float] | None:
        """Return stored goals, if the account has set any."""

    def set_goals(self, username: str, goals: dict[str, float]) -> None:
        """Replace the account's goals."""


@dataclass
class NutritionService:
    """Service for the nutrition log and goals."""

    repository: NutritionRepository
    sessions: SessionStore

    def log_meal(
        self,
        token: str | None,
        date: str | None,
        meal_name: str | None,
        nutrition: Mapping[str, object] | None,
    ) -> NutritionLogEntry:
        """Append a meal to the caller's log for a date."""
        username = require_username(self.sessions, token)
        if not date or not nutrition:
            raise BadRequestError("Date and nutrition data required")
        entry = NutritionLogEntry(
            id=str(uuid4()),
            meal_name=meal_name or "Meal",
            nutrition=dict(nutrition),
            timestamp=datetime.now(tz=UTC).isoformat(),
        )
        self.repository.append_log(username, date, entry)
        return entry

    def list_logs(
        self,
        token: str | None,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict[str, list[NutritionLogEntry]]:
        """Return date buckets, filtered to [start, end] when both are given.

        ISO dates are zero padded so string comparison orders them.
        """
        username = require_username(self.sessions, token)
        logs = self.repository.list_logs(username)
        if not (start_date and end_date):
            return logs
        return {
            date: entries
            for date, entries in logs.items()
            if start_date <= date <= end_date
        }

    def delete_log(self, token: str | None, date: str, log_id: str) -> None:
        """Delete one entry; an emptied date bucket is removed."""
        username = require_username(self.sessions, token)
        if not self.repository.delete_log(username, date, log_id):
            raise NotFoundError("Log not found")

    def get_goals(self, token: str | None) -> dict[str, float]:
        """Return the caller's goals or the default vegan targets."""
        username = require_username(self.sessions, token)
        return self.repository.get_goals(username) or dict(DEFAULT_GOALS)

    def set_goals(
        self, token: str | None, goals: Mapping[str, float] | None
    ) -> dict[str, float]:
        """Replace the caller's goals and return them."""
        username = require_username(self.sessions, token)
        if not goals or not isinstance(goals, Mapping):
            raise BadRequestError("Goals data required")
        stored = dict(goals)
        self.repository.set_goals(username, stored)
        return stored

    def daily_summary(self, token: str | None, date: str | None) -> DailySummary:
        """Total one day's meals and compare them with the goals."""
        username = require_username(self.sessions, token)
        if not date:
            raise BadRequestError("Date required")
        entries = self.repository.list_logs(username).get(date, [])
        goals = self.repository.get_goals(username) or dict(DEFAULT_GOALS)
        totals = _aggregate_day(entries)
        remaining = {
            key: round(float(goals[key]) - totals[key], 2)
            for key in NUTRIENT_KEYS
            if key in goals
        }
        return DailySummary(date=date, totals=totals, goals=goals, remaining=remaining)


def _aggregate_day(entries: list[NutritionLogEntry]) -> dict[str, float]:
    totals = dict.fromkeys(NUTRIENT_KEYS, 0.0)
    for entry in entries:
        for key in NUTRIENT_KEYS:
            totals[key] += _as_number(entry.nutrition.get(key))
    return {key: round(value, 2) for key, value in totals.items()}


def _as_number(value: object) -> float:
    """Coerce a logged nutrient amount to a float; junk counts as zero."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
