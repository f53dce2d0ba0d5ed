# routers/community_setup.py

from fastapi import APIRouter, Depends, HTTPException

from core.errors import handle_supabase_error
from core.logging_config import logger
from core.navigation_state import navigate_to_page
from core.page_access import requires_setup, require_page_access
from core.permissions import SETUP_REQUIRED_ROLES
from core.supabase_client import get_supabase_client
from dependencies.auth import CurrentUser, get_current_user, load_current_user, requires_role
from models.enums import Page
from models.unit import UnitCreate
from routers.navigation import render_state


router = APIRouter(
    prefix="/community-setup",
    tags=["Community Setup"],
)


def load_community(client, community_id: str) -> dict:
    try:
        result = (
            client.table("communities")
            .select("*")
            .eq("id", community_id)
            .limit(1)
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, "Load community details")

    if not result.data:
        raise HTTPException(404, "Community not found")
    return result.data[0]


# -------------------------------------------------------------
# GET /community-setup: setup status + community profile
# -------------------------------------------------------------
@router.get("", summary="Community setup status")
def setup_status(current_user: CurrentUser = Depends(require_page_access(Page.community_setup))):
    if not current_user.community_id:
        raise HTTPException(400, "Account is not linked to a community")

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    return {
        "setup_required": requires_setup(current_user),
        "community": load_community(client, current_user.community_id),
        "units": current_user.units,
    }


# -------------------------------------------------------------
# POST /community-setup/units: residence step
# -------------------------------------------------------------
@router.post(
    "/units",
    summary="Assign the caller's first residence unit",
    dependencies=[Depends(requires_role(list(SETUP_REQUIRED_ROLES)))],
)
def assign_unit(payload: UnitCreate, current_user: CurrentUser = Depends(get_current_user)):
    """
    Units go from empty to non-empty once. Afterwards the setup gate
    no longer applies and the user is sent to the Dashboard.
    Maintenance record generation happens in the billing backend.
    """
    if current_user.has_units:
        raise HTTPException(409, "Residence unit already assigned")
    if not current_user.community_id:
        raise HTTPException(400, "Account is not linked to a community")

    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    # make sure the community exists before writing
    load_community(client, current_user.community_id)

    row = payload.model_dump(mode="json")
    row.update({
        "user_id": current_user.id,
        "community_id": current_user.community_id,
    })

    try:
        result = client.table("units").insert(row).execute()
    except Exception as e:
        raise handle_supabase_error(e, "Assign unit")

    unit = (result.data or [None])[0]
    logger.info(
        f"Assigned unit {row['flat_number']} to {current_user.role.value} {current_user.id}"
    )

    # reload the profile, then send the user to the Dashboard
    refreshed = load_current_user(
        client,
        current_user.auth_user_id,
        current_user.email,
        session_id=current_user.session_id,
    )
    request = navigate_to_page(refreshed.session_key, Page.dashboard)

    return {
        "success": True,
        "unit": unit,
        "navigation": render_state(refreshed, request),
    }
