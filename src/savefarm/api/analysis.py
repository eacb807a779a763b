"""Recipe analysis endpoint."""

from fastapi import APIRouter, Depends

from savefarm.api.dependencies import get_container, session_token
from savefarm.api.models import AnalyzeIn
from savefarm.containers import AppContainer

router = APIRouter(prefix="/api", tags=["analysis"])


@router.post("/analyze")
async def analyze_recipe(
    payload: AnalyzeIn,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Classify a recipe and optionally add its impact to the caller's tally."""
    if payload.record:
        container.account_service.resolve(token)
    result = await container.analysis_service.analyze(payload.recipe_text)
    body = result.as_dict()
    if payload.record:
        body["animals"] = container.account_service.record_impact(token, result)
    return body
