"""Registration, login and animal tally endpoints."""

from fastapi import APIRouter, Depends

from savefarm.api.dependencies import get_container, session_token
from savefarm.api.models import AnimalsIn, CredentialsIn
from savefarm.containers import AppContainer

router = APIRouter(prefix="/api", tags=["accounts"])


@router.post("/register")
async def register(
    payload: CredentialsIn, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Create an account and log it in."""
    result = container.account_service.register(payload.username, payload.password)
    return {
        "success": True,
        "sessionId": result.session_id,
        "username": result.username,
    }


@router.post("/login")
async def login(
    payload: CredentialsIn, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Open a new session for existing credentials."""
    result = container.account_service.login(payload.username, payload.password)
    return {
        "success": True,
        "sessionId": result.session_id,
        "username": result.username,
    }


@router.post("/logout")
async def logout(
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """End the current session."""
    container.account_service.logout(token)
    return {"success": True}


@router.get("/animals")
async def get_animals(
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the caller's animal tally."""
    return {"animals": container.account_service.get_animals(token)}


@router.post("/animals")
async def set_animals(
    payload: AnimalsIn,
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Replace the caller's animal tally."""
    container.account_service.set_animals(token, payload.animals)
    return {"success": True}


@router.post("/animals/reset")
async def reset_animals(
    token: str | None = Depends(session_token),
    container: AppContainer = Depends(get_container),
) -> dict[str, bool]:
    """Clear the caller's animal tally."""
    container.account_service.reset_animals(token)
    return {"success": True}
