# routers/navigation.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from core.navigation import NAV_SURFACES, nav_items_for_surface
from core.navigation_state import get_navigation, navigate_to_page, remember_page, NavigationRequest
from core.page_access import requires_setup, resolve_page
from core.permissions import allowed_pages
from dependencies.auth import CurrentUser, get_current_user, get_optional_auth
from models.enums import Page
from models.navigation import (
    NavigateRequest,
    NavigationStateRead,
    NavItemRead,
    NavMenuRead,
    PagePermissionsRead,
    ResolvedPageRead,
)


router = APIRouter(
    prefix="/navigation",
    tags=["Navigation"],
)


def render_state(current_user: CurrentUser, request: NavigationRequest) -> NavigationStateRead:
    """
    Resolve the stored request and remember what was rendered.
    The resolved page is returned, never stored as its own state.
    """
    page = resolve_page(current_user, request.page)
    remember_page(current_user.session_key, page)

    return NavigationStateRead(
        requested_page=request.page,
        page=page,
        # params belong to the requested destination only
        params=request.params if Page.parse(request.page) == page else None,
        request_id=request.request_id,
        setup_required=requires_setup(current_user),
    )


# -----------------------------------------------------
# GET /navigation: page the client should render now
# -----------------------------------------------------
@router.get("", response_model=NavigationStateRead, summary="Current page for this user")
def current_navigation(current_user: CurrentUser = Depends(get_current_user)):
    return render_state(current_user, get_navigation(current_user.session_key))


# -----------------------------------------------------
# POST /navigation: open a page
# -----------------------------------------------------
@router.post("", response_model=NavigationStateRead, summary="Request a page")
def navigate(
    payload: NavigateRequest,
    current_user: CurrentUser = Depends(get_current_user),
):
    """
    Unknown or forbidden pages are not an error: the response carries
    the page that will actually be rendered (the role's fallback).
    """
    request = navigate_to_page(current_user.session_key, payload.page, payload.params)
    return render_state(current_user, request)


# -----------------------------------------------------
# GET /navigation/resolve: dry run, no state change
# -----------------------------------------------------
@router.get("/resolve", response_model=ResolvedPageRead, summary="Resolve a page without navigating")
def resolve(
    page: str = Query(..., description="Requested page token"),
    current_user: Optional[CurrentUser] = Depends(get_optional_auth),
):
    return ResolvedPageRead(requested_page=page, page=resolve_page(current_user, page))


# -----------------------------------------------------
# GET /navigation/menu/{surface}: sidebar / bottom bar
# -----------------------------------------------------
@router.get("/menu/{surface}", response_model=NavMenuRead, summary="Visible navigation items")
def navigation_menu(surface: str, current_user: CurrentUser = Depends(get_current_user)):
    if surface not in NAV_SURFACES:
        raise HTTPException(404, f"Unknown navigation surface '{surface}'")

    active = resolve_page(current_user, get_navigation(current_user.session_key).page)
    items = nav_items_for_surface(current_user.role, surface)

    return NavMenuRead(
        surface=surface,
        active_page=active,
        items=[
            NavItemRead(page=item.page, label=item.label, icon=item.icon, active=item.page == active)
            for item in items
        ],
    )


# -----------------------------------------------------
# GET /navigation/permissions
# -----------------------------------------------------
@router.get("/permissions", response_model=PagePermissionsRead, summary="Pages this role may open")
def page_permissions(current_user: CurrentUser = Depends(get_current_user)):
    rule = allowed_pages(current_user.role)
    return PagePermissionsRead(
        role=current_user.role.value,
        # keep enum declaration order for stable output
        allowed_pages=[page for page in Page if page in rule.allowed],
        fallback=rule.fallback,
        setup_required=requires_setup(current_user),
    )
