# core/permissions.py

from typing import Dict, FrozenSet, NamedTuple

from models.enums import Page, UserRole


class PagePermission(NamedTuple):
    allowed: FrozenSet[Page]
    fallback: Page


ALL_PAGES: FrozenSet[Page] = frozenset(Page)


# ============================================
# CENTRALIZED ROLE → PAGE ACCESS MAP
# ============================================
# Every surface that redirects or filters by page (resolver, sidebar,
# bottom nav, page guards) reads this table through allowed_pages().
PAGE_PERMISSIONS: Dict[UserRole, PagePermission] = {

    # =====================================================
    # SUPER ADMIN: platform level only
    # =====================================================
    UserRole.super_admin: PagePermission(
        allowed=frozenset({Page.dashboard, Page.billing}),
        fallback=Page.dashboard,
    ),

    # =====================================================
    # COMMUNITY ADMIN: everything but platform billing
    # =====================================================
    UserRole.admin: PagePermission(
        allowed=ALL_PAGES - {Page.billing},
        fallback=Page.dashboard,
    ),

    # =====================================================
    # RESIDENT: no admin tooling
    # =====================================================
    UserRole.resident: PagePermission(
        allowed=ALL_PAGES - {Page.billing, Page.bulk_operations, Page.community_setup},
        fallback=Page.dashboard,
    ),

    # =====================================================
    # TENANT
    # =====================================================
    UserRole.tenant: PagePermission(
        allowed=frozenset({Page.notices, Page.help_desk, Page.visitors, Page.amenities}),
        fallback=Page.notices,
    ),

    # =====================================================
    # SECURITY GUARD
    # =====================================================
    UserRole.security: PagePermission(
        allowed=frozenset({Page.notices, Page.visitors}),
        fallback=Page.visitors,
    ),

    # =====================================================
    # SECURITY ADMIN: guards + staff directory
    # =====================================================
    UserRole.security_admin: PagePermission(
        allowed=frozenset({Page.notices, Page.visitors, Page.directory}),
        fallback=Page.visitors,
    ),

    # =====================================================
    # HELPDESK AGENT
    # =====================================================
    UserRole.helpdesk_agent: PagePermission(
        allowed=frozenset({Page.notices, Page.help_desk}),
        fallback=Page.help_desk,
    ),

    # =====================================================
    # HELPDESK ADMIN: agents + staff directory
    # =====================================================
    UserRole.helpdesk_admin: PagePermission(
        allowed=frozenset({Page.notices, Page.help_desk, Page.directory}),
        fallback=Page.help_desk,
    ),
}


# Roles that must finish community setup (own at least one unit)
# before any other page is reachable.
SETUP_REQUIRED_ROLES: FrozenSet[UserRole] = frozenset({UserRole.admin, UserRole.resident})
SETUP_PAGE = Page.community_setup


def allowed_pages(role: UserRole) -> PagePermission:
    """
    (allowed pages, fallback page) for a role.

    The role set is closed and checked at import time, so a KeyError
    here means a caller passed something that is not a UserRole.
    """
    return PAGE_PERMISSIONS[role]


def validate_page_permissions(table: Dict[UserRole, PagePermission]):
    """Raise RuntimeError if the table misses a role or has an unusable rule."""
    missing = [role.value for role in UserRole if role not in table]
    if missing:
        raise RuntimeError(f"Page permissions missing for roles: {', '.join(missing)}")

    for role, rule in table.items():
        if not rule.allowed:
            raise RuntimeError(f"Role {role.value} has no allowed pages")
        if rule.fallback not in rule.allowed:
            raise RuntimeError(
                f"Fallback {rule.fallback.value} is not allowed for role {role.value}"
            )


validate_page_permissions(PAGE_PERMISSIONS)
