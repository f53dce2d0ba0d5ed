# core/navigation_state.py

"""
Per-session navigation state.

Every signed-in browser or device (Supabase auth session) has its own
request stream and last viewed page; `session_key` is
`CurrentUser.session_key`.

Only the *requested* page is stored. The rendered page is always
re-derived with core.page_access.resolve_page, so it can never drift
from the permission table.
"""

from threading import Lock
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel

from core.cache import cache_delete, cache_get, cache_set
from core.config import settings
from models.enums import Page


DEFAULT_START_PAGE = Page.dashboard

# read-increment-write of request_id must not interleave
_navigation_lock = Lock()


class NavigationRequest(BaseModel):
    page: str
    params: Optional[Dict[str, Any]] = None
    request_id: int = 0


def _navigation_key(session_key: str) -> str:
    return f"navigation:{session_key}"


def last_page_key(session_key: str) -> str:
    return f"{settings.LAST_PAGE_KEY_PREFIX}:{session_key}"


# -----------------------------------------------------
# Last viewed page
# -----------------------------------------------------
def get_last_page(session_key: str) -> Optional[str]:
    return cache_get(last_page_key(session_key))


def remember_page(session_key: str, page: Page):
    """Store the page that was actually rendered."""
    cache_set(last_page_key(session_key), page.value, settings.LAST_PAGE_TTL_SECONDS)


# -----------------------------------------------------
# Latest navigation request
# -----------------------------------------------------
def get_navigation(session_key: str) -> NavigationRequest:
    """
    Latest request for this session. With nothing stored yet, the last
    viewed page (or the default start page) becomes the initial request.
    It is still only a request; callers resolve it before use.
    """
    current = cache_get(_navigation_key(session_key))
    if current is not None:
        return current

    return NavigationRequest(page=get_last_page(session_key) or DEFAULT_START_PAGE.value)


def navigate_to_page(
    session_key: str,
    page: Union[Page, str],
    params: Optional[Dict[str, Any]] = None,
) -> NavigationRequest:
    """
    Replace the session's request. There is no history: the new request
    supersedes the previous one and gets the next request_id.
    """
    token = page.value if isinstance(page, Page) else str(page)

    with _navigation_lock:
        previous = get_navigation(session_key)
        request = NavigationRequest(
            page=token,
            params=params or None,
            request_id=previous.request_id + 1,
        )
        cache_set(_navigation_key(session_key), request, settings.NAVIGATION_TTL_SECONDS)

    return request


def is_current_request(session_key: str, request_id: Optional[int]) -> bool:
    """
    Whether work started under `request_id` still belongs to the latest
    navigation. None means the caller is not tracking requests.
    """
    if request_id is None:
        return True
    return get_navigation(session_key).request_id == request_id


def clear_navigation(session_key: str):
    """Drop everything kept for a session that has ended (logout)."""
    cache_delete(_navigation_key(session_key))
    cache_delete(last_page_key(session_key))
