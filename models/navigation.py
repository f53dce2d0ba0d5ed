# models/navigation.py

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from models.enums import Page


# -------------------------------------------------
# Open-page payload
# -------------------------------------------------
class NavigateRequest(BaseModel):
    """
    `page` is a raw token on purpose: unknown or stale pages are
    not a validation error, they resolve to the role's fallback.
    """
    page: str
    params: Optional[Dict[str, Any]] = None


# -------------------------------------------------
# Current navigation (requested vs. rendered)
# -------------------------------------------------
class NavigationStateRead(BaseModel):
    requested_page: str
    page: Page
    params: Optional[Dict[str, Any]] = None
    request_id: int
    setup_required: bool = False


class ResolvedPageRead(BaseModel):
    requested_page: str
    page: Page


class NavItemRead(BaseModel):
    page: Page
    label: str
    icon: str
    active: bool = False


class NavMenuRead(BaseModel):
    surface: str
    active_page: Page
    items: List[NavItemRead] = Field(default_factory=list)


class PagePermissionsRead(BaseModel):
    role: str
    allowed_pages: List[Page]
    fallback: Page
    setup_required: bool = False
