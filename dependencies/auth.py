from typing import Optional, List
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import BaseModel
from supabase import Client

from core.supabase_client import get_supabase_client
from core.errors import handle_supabase_error
from core.logging_config import logger
from models.enums import AccountStatus, Theme, UserRole
from models.unit import UnitRead


bearer_scheme = HTTPBearer()

PROFILE_SELECT = "*, units(*)"


# ============================================================
# Current User Model (the session's Actor)
# ============================================================
class CurrentUser(BaseModel):
    id: str
    auth_user_id: str
    email: str
    role: UserRole

    name: Optional[str] = None
    community_id: Optional[str] = None   # absent for SuperAdmin
    units: List[UnitRead] = []
    theme: Optional[Theme] = None
    status: AccountStatus = AccountStatus.active

    # Supabase auth session; one per signed-in browser or device
    session_id: Optional[str] = None

    @property
    def has_units(self) -> bool:
        return bool(self.units)

    @property
    def session_key(self) -> str:
        """Key for per-session state. Tokens without a session claim fall back to the user."""
        return self.session_id or self.id


# ============================================================
# PROFILE → ACTOR
# ============================================================
def build_current_user(
    profile: dict,
    auth_user_id: str,
    email: Optional[str] = None,
    session_id: Optional[str] = None,
) -> CurrentUser:
    """
    Map a users row (joined with units) to the Actor.
    The role enum is closed: anything else is rejected here so the
    resolver never sees an unknown role.
    """
    role = UserRole.parse(profile.get("role"))
    if role is None:
        logger.warning(f"User {auth_user_id} has unrecognized role {profile.get('role')!r}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account role is not recognized",
        )

    theme = Theme.parse(profile.get("theme"))
    account_status = AccountStatus.parse(profile.get("status")) or AccountStatus.active

    return CurrentUser(
        id=str(profile.get("id") or auth_user_id),
        auth_user_id=auth_user_id,
        email=profile.get("email") or email or "",
        role=role,
        name=profile.get("name"),
        community_id=str(profile["community_id"]) if profile.get("community_id") else None,
        units=profile.get("units") or [],
        theme=theme,
        status=account_status,
        session_id=session_id,
    )


def load_current_user(
    client: Client,
    auth_user_id: str,
    email: Optional[str] = None,
    session_id: Optional[str] = None,
) -> CurrentUser:
    """Fetch the profile row for an auth user and build the Actor."""
    try:
        result = (
            client.table("users")
            .select(PROFILE_SELECT)
            .eq("id", auth_user_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, "Load user profile")

    if not result.data:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User profile not found",
        )

    return build_current_user(result.data[0], auth_user_id, email, session_id)


def token_session_id(token: str) -> Optional[str]:
    """
    `session_id` claim of a Supabase access token.
    Only called after GoTrue has validated the token, so the signature
    is not checked again here.
    """
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return None
    session_id = claims.get("session_id")
    return str(session_id) if session_id else None


# ============================================================
# AUTH DECODING (Supabase: validates JWT + fetches profile)
# ============================================================
def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(bearer_scheme),
) -> CurrentUser:

    token = credentials.credentials

    unauthorized = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired authentication token",
        headers={"WWW-Authenticate": "Bearer"},
    )

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    # ---------------------------------------------------------
    # Validate JWT via Supabase GoTrue
    # ---------------------------------------------------------
    try:
        auth_resp = client.auth.get_user(token)
    except Exception:
        raise unauthorized

    if not auth_resp or not auth_resp.user:
        raise unauthorized
    auth_user = auth_resp.user

    current_user = load_current_user(
        client,
        auth_user.id,
        auth_user.email,
        session_id=token_session_id(token),
    )

    if current_user.status == AccountStatus.disabled:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is disabled",
        )

    return current_user


# ============================================================
# OPTIONAL AUTHENTICATION
# ============================================================
def get_optional_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(HTTPBearer(auto_error=False)),
) -> Optional[CurrentUser]:
    """
    Returns CurrentUser if a valid token was provided, None when there is
    no token or it is invalid. A known but refused account (disabled,
    unrecognized role) is still a 403, never anonymous.
    """
    if not credentials:
        return None

    try:
        return get_current_user(credentials)
    except HTTPException as e:
        if e.status_code == status.HTTP_401_UNAUTHORIZED:
            return None
        raise


# ============================================================
# ROLE CHECKER (basic role list guard)
# ============================================================
def requires_role(allowed_roles: List[UserRole]):
    def checker(current_user: CurrentUser = Depends(get_current_user)):
        if current_user.role not in allowed_roles:
            raise HTTPException(
                status_code=403,
                detail=f"Requires one of: {[r.value for r in allowed_roles]}",
            )
        return current_user
    return checker
