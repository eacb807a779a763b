"""Nutrition log and goal endpoints."""

from fastapi import APIRouter, Depends, Query

from savefarm.api.dependencies import get_container, session_token
from savefarm.api.models import GoalsIn, NutritionLogIn
from savefarm.containers import AppContainer

router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.post("/log")
async def log_meal(
    payload: NutritionLogIn,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Log a meal for a date."""
    entry = container.nutrition_service.log_meal(
        token, payload.date, payload.meal_name, payload.nutrition
    )
    return {"success": True, "log": entry.as_dict()}


@router.get("/logs")
async def list_logs(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return logged meals grouped by date."""
    logs = container.nutrition_service.list_logs(token, start_date, end_date)
    return {
        "logs": {
            date: [entry.as_dict() for entry in entries]
            for date, entries in logs.items()
        }
    }


@router.post("/goals")
async def set_goals(
    payload: GoalsIn,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Replace the caller's nutrition goals."""
    goals = container.nutrition_service.set_goals(token, payload.goals)
    return {"success": True, "goals": goals}


@router.get("/goals")
async def get_goals(
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's goals, or the defaults."""
    return {"goals": container.nutrition_service.get_goals(token)}


@router.delete("/log/{date}/{log_id}")
async def delete_log(
    date: str,
    log_id: str,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Delete one logged meal."""
    container.nutrition_service.delete_log(token, date, log_id)
    return {"success": True}


@router.get("/summary")
async def daily_summary(
    date: str | None = None,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Total a day's meals against the caller's goals."""
    summary = container.nutrition_service.daily_summary(token, date)
    return {
        "date": summary.date,
        "totals": summary.totals,
        "goals": summary.goals,
        "remaining": summary.remaining,
    }
