# core/page_access.py

from typing import Optional, Union

from fastapi import Depends, HTTPException

from core.logging_config import logger
from core.permissions import SETUP_PAGE, SETUP_REQUIRED_ROLES, allowed_pages
from dependencies.auth import CurrentUser, get_current_user
from models.enums import Page


DEFAULT_PAGE = Page.dashboard


# -----------------------------------------------------
# Setup gate
# -----------------------------------------------------
def requires_setup(actor: Optional[CurrentUser]) -> bool:
    """Community admins and residents without a unit are held on setup."""
    if actor is None:
        return False
    return actor.role in SETUP_REQUIRED_ROLES and not actor.units


# -----------------------------------------------------
# Resolver: requested page → page actually rendered
# -----------------------------------------------------
def resolve_page(actor: Optional[CurrentUser], requested: Union[Page, str, None]) -> Page:
    """
    Pure, synchronous and total: never raises, always returns a Page.

    Order matters:
      1. no actor        → requested page as-is (login is handled upstream)
      2. setup gate      → CommunitySetup, whatever was requested
      3. allowed         → requested page
      4. anything else   → the role's fallback (unknown tokens included)
    """
    page = Page.parse(requested)

    if actor is None:
        return page or DEFAULT_PAGE

    if requires_setup(actor):
        return SETUP_PAGE

    rule = allowed_pages(actor.role)
    if page in rule.allowed:
        return page

    logger.debug(
        f"Redirecting {actor.role.value} from {requested!r} to {rule.fallback.value}"
    )
    return rule.fallback


def is_page_allowed(actor: Optional[CurrentUser], page: Union[Page, str]) -> bool:
    """True when the actor would actually see `page` if they asked for it."""
    wanted = Page.parse(page)
    if wanted is None or actor is None:
        return False
    return resolve_page(actor, wanted) == wanted


# -----------------------------------------------------
# FastAPI dependency: guard page content endpoints
# -----------------------------------------------------
def require_page_access(page: Page):
    """
    Usage:
        @router.get("", dependencies=[Depends(require_page_access(Page.directory))])
    """

    def dependency(current_user: CurrentUser = Depends(get_current_user)):
        if not is_page_allowed(current_user, page):
            raise HTTPException(
                status_code=403,
                detail=f"Page '{page.value}' is not available for this account",
            )
        return current_user

    return dependency
