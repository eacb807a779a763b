"""JSON-document-backed nutrition repository."""

from dataclasses import dataclass

from savefarm.adapters.json_account_repository import account_row
from savefarm.adapters.json_document import JsonDocument
from savefarm.domain.nutrition import NutritionLogEntry
from savefarm.services.nutrition import NutritionRepository


@dataclass
class JsonNutritionRepository(NutritionRepository):
    """Keeps nutrition logs and goals inside each account record."""

    document: JsonDocument

    def list_logs(self, username: str) -> dict[str, list[NutritionLogEntry]]:
        """Return every date bucket for the account."""
        row = account_row(self.document.read(), username)
        return {
            date: [_row_to_entry(item) for item in items]
            for date, items in (row.get("nutritionLogs") or {}).items()
        }

    def append_log(self, username: str, date: str, entry: NutritionLogEntry) -> None:
        """Append an entry to a date bucket."""

        def mutate(data: dict[str, object]) -> None:
            logs = account_row(data, username).setdefault("nutritionLogs", {})
            logs.setdefault(date, []).append(entry.as_dict())

        self.document.update(mutate)

    def delete_log(self, username: str, date: str, log_id: str) -> bool:
        """Remove entries with the id, pruning the bucket once empty."""

        def mutate(data: dict[str, object]) -> bool:
            logs = account_row(data, username).get("nutritionLogs") or {}
            if date not in logs:
                return False
            remaining = [item for item in logs[date] if item.get("id") != log_id]
            if remaining:
                logs[date] = remaining
            else:
                del logs[date]
            return True

        return self.document.update(mutate)

    def get_goals(self, username: str) -> dict[str, float] | None:
        """Return stored goals, if any."""
        goals = account_row(self.document.read(), username).get("nutritionGoals")
        return dict(goals) if goals else None

    def set_goals(self, username: str, goals: dict[str, float]) -> None:
        """Replace the account's goals."""

        def mutate(data: dict[str, object]) -> None:
            account_row(data, username)["nutritionGoals"] = goals

        self.document.update(mutate)


def _row_to_entry(row: dict[str, object]) -> NutritionLogEntry:
    return NutritionLogEntry(
        id=str(row.get("id", "")),
        meal_name=str(row.get("mealName", "Meal")),
        nutrition=dict(row.get("nutrition") or {}),
        timestamp=str(row.get("timestamp", "")),
    )
