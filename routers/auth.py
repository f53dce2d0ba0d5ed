from fastapi import APIRouter, HTTPException, Depends, Request
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, EmailStr

from core.supabase_client import get_supabase_client
from core.rate_limiter import require_rate_limit, get_rate_limit_identifier, client_ip
from core.navigation_state import clear_navigation
from core.errors import handle_supabase_error
from core.logging_config import logger
from dependencies.auth import (
    bearer_scheme,
    get_current_user,
    load_current_user,
    CurrentUser,
)
from models.auth import LoginRequest, TokenResponse
from models.user import ThemeUpdate


router = APIRouter(
    prefix="/auth",
    tags=["Auth"],
)


class PasswordResetRequest(BaseModel):
    email: EmailStr


PASSWORD_RESET_MESSAGE = "If an account exists with this email, a password reset link has been sent."


# ============================================================
# LOGIN (SUPABASE AUTH)
# ============================================================
@router.post("/login", response_model=TokenResponse, summary="Authenticate user")
def login(payload: LoginRequest):

    email = payload.email.strip().lower()

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        response = client.auth.sign_in_with_password(
            {"email": email, "password": payload.password}
        )
    except Exception as e:
        logger.warning(f"Login attempt failed for {email}: {type(e).__name__}")
        raise HTTPException(
            status_code=401,
            detail="Invalid email or password"
        )

    if not response.session or not response.session.access_token:
        raise HTTPException(401, "Invalid email or password")

    return TokenResponse(access_token=response.session.access_token)


# ============================================================
# LOGOUT
# ============================================================
@router.post("/logout", summary="End the current session")
def logout(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Revokes the Supabase session and drops this session's navigation state.
    """
    clear_navigation(current_user.session_key)

    client = get_supabase_client()
    try:
        client.auth.admin.sign_out(credentials.credentials)
    except Exception as e:
        logger.warning(f"Supabase sign-out failed for {current_user.id}: {type(e).__name__}")

    return {"success": True}


# ============================================================
# CURRENT USER
# ============================================================
@router.get("/me", response_model=CurrentUser, summary="Current authenticated user")
def read_me(current_user: CurrentUser = Depends(get_current_user)):
    return current_user


@router.patch("/me/theme", response_model=CurrentUser, summary="Update color theme")
def update_theme(
    payload: ThemeUpdate,
    current_user: CurrentUser = Depends(get_current_user),
):
    client = get_supabase_client()

    try:
        (
            client.table("users")
            .update({"theme": payload.theme.value})
            .eq("id", current_user.id)
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, "Update theme")

    logger.info(f"User {current_user.id} switched theme to {payload.theme.value}")
    return load_current_user(
        client,
        current_user.auth_user_id,
        current_user.email,
        session_id=current_user.session_id,
    )


# ============================================================
# PASSWORD RESET
# ============================================================
@router.post(
    "/request-password-reset",
    summary="Send a password reset email via Supabase",
    responses={
        200: {"description": "Email sent (or email not found, for security)"},
        429: {"description": "Rate limit exceeded"},
    },
)
def request_password_reset(payload: PasswordResetRequest, request: Request):
    """
    Always answers with the same message so the endpoint cannot be used
    to discover which emails have accounts. 5 requests / 15 minutes.
    """
    email = payload.email.strip().lower()

    identifier = get_rate_limit_identifier(request, user_key=email)
    require_rate_limit(request, identifier=identifier, max_requests=5, window_seconds=900)

    logger.info(f"Password reset attempt: email={email}, ip={client_ip(request)}")

    client = get_supabase_client()
    if not client:
        logger.error("Supabase not configured for password reset")
        raise HTTPException(500, "Service temporarily unavailable")

    try:
        client.auth.reset_password_for_email(email)
    except Exception as e:
        logger.error(f"Failed to send password reset email to {email}: {type(e).__name__}: {e}")

    return {"success": True, "message": PASSWORD_RESET_MESSAGE}
