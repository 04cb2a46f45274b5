"""
Authentication API endpoints.

Routes:
- POST /auth/sign-in - Sign in with email and password
- POST /auth/sign-up - Register a new account (remote backend only)
- POST /auth/sign-out - End the current session
- GET /auth/session - Current session, if any

Dependencies: gm_tracker.boundary.store, gm_tracker.models
System role: Sign-in HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from gm_tracker.api.deps.dependencies import get_data_store
from gm_tracker.api.routers.error_handling import handle_tracker_errors
from gm_tracker.boundary.store import DataStore
from gm_tracker.models.auth import CredentialsRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/sign-in", response_model=SessionResponse)
@handle_tracker_errors
async def sign_in(
    request: CredentialsRequest,
    store: DataStore = Depends(get_data_store),
) -> SessionResponse:
    """
    Sign in against the active backend.

    Raises:
        HTTPException(401): Credentials rejected
    """
    session = await store.sign_in(request.email, request.password)
    return SessionResponse(session=session)


@router.post("/sign-up", status_code=201)
@handle_tracker_errors
async def sign_up(
    request: CredentialsRequest,
    store: DataStore = Depends(get_data_store),
) -> dict:
    """
    Register an account with the remote backend.

    Raises:
        HTTPException(401): Registration rejected
        HTTPException(501): Fallback mode has no sign-up
    """
    await store.sign_up(request.email, request.password)
    return {"message": "Account created. Check your email to confirm before signing in."}


@router.post("/sign-out", status_code=204)
@handle_tracker_errors
async def sign_out(store: DataStore = Depends(get_data_store)) -> None:
    """End the current session."""
    await store.sign_out()


@router.get("/session", response_model=SessionResponse)
@handle_tracker_errors
async def get_session(store: DataStore = Depends(get_data_store)) -> SessionResponse:
    """Return the current session, or an empty response when signed out."""
    return SessionResponse(session=await store.get_session())
