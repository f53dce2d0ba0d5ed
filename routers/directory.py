# routers/directory.py

from typing import List, Optional, Union

from fastapi import APIRouter, Depends, HTTPException, Query

from core.directory_access import group_by_role, visible_directory_entries
from core.errors import handle_supabase_error
from core.logging_config import logger
from core.navigation_state import is_current_request
from core.page_access import require_page_access
from core.supabase_client import get_supabase_client
from dependencies.auth import CurrentUser
from models.enums import Page
from models.user import DirectoryEntry, DirectoryGroup


router = APIRouter(
    prefix="/directory",
    tags=["Directory"],
)


def fetch_community_members(community_id: str) -> List[DirectoryEntry]:
    client = get_supabase_client()
    if not client:
        raise HTTPException(500, "Supabase client not configured")

    try:
        result = (
            client.table("users")
            .select("*, units(*)")
            .eq("community_id", community_id)
            .execute()
        )
    except Exception as e:
        raise handle_supabase_error(e, "Load directory")

    return [DirectoryEntry(**row) for row in (result.data or [])]


# ============================================================
# LIST DIRECTORY
# ============================================================
@router.get(
    "",
    summary="Member directory",
    description="""
    Members of the caller's community that the caller's role may see.

    **Visibility:** community admins see admins, residents, tenants and the
    helpdesk/security admins; residents see residents and admins; helpdesk
    and security admins see their own teams.

    **Query Parameters:**
    - `search`: case-insensitive match on name, email or flat number
    - `role`: only members with this role
    - `grouped`: group the result by role
    - `request_id`: navigation request this view was opened under; a
      superseded id is answered with 409 so the client drops the result
    """,
)
def list_directory(
    search: Optional[str] = Query(None, max_length=200),
    role: Optional[str] = Query(None, description="Role filter (e.g. Resident)"),
    grouped: bool = Query(False),
    request_id: Optional[int] = Query(None, ge=0),
    current_user: CurrentUser = Depends(require_page_access(Page.directory)),
) -> Union[List[DirectoryEntry], List[DirectoryGroup]]:

    if not current_user.community_id:
        logger.warning(f"User {current_user.id} has no community; directory is empty")
        members = []
    else:
        members = fetch_community_members(current_user.community_id)

    if not is_current_request(current_user.session_key, request_id):
        raise HTTPException(409, "Navigation has moved on; discard this response")

    visible = visible_directory_entries(
        current_user.role,
        members,
        search=search,
        role_filter=role,
    )

    if grouped:
        return group_by_role(visible)
    return visible
