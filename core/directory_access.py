# core/directory_access.py

from typing import Dict, FrozenSet, Iterable, List, Optional, Union

from models.enums import UserRole
from models.user import DirectoryEntry, DirectoryGroup


# ============================================
# VIEWER ROLE → DIRECTORY ROLES THEY MAY SEE
# ============================================
# Separate from page access: reaching the Directory page says nothing
# about whose records show up on it. Not symmetric (admins see tenants,
# residents do not).
DIRECTORY_VISIBILITY: Dict[UserRole, FrozenSet[UserRole]] = {
    UserRole.super_admin: frozenset(UserRole),
    UserRole.admin: frozenset({
        UserRole.admin,
        UserRole.resident,
        UserRole.helpdesk_admin,
        UserRole.security_admin,
        UserRole.tenant,
    }),
    UserRole.resident: frozenset({UserRole.resident, UserRole.admin}),
    UserRole.helpdesk_admin: frozenset({UserRole.helpdesk_admin, UserRole.helpdesk_agent}),
    UserRole.security_admin: frozenset({UserRole.security_admin, UserRole.security}),
}


def visible_roles(viewer_role: UserRole) -> FrozenSet[UserRole]:
    """Roles not listed see nobody."""
    return DIRECTORY_VISIBILITY.get(viewer_role, frozenset())


def matches_search(entry: DirectoryEntry, query: str) -> bool:
    """
    Case-insensitive substring match on name, email or flat number.
    `query` must already be lowercased and stripped.
    """
    if query in entry.name.lower() or query in entry.email.lower():
        return True
    if entry.units:
        return any(query in (unit.flat_number or "").lower() for unit in entry.units)
    # staff and legacy rows keep the location on the user row
    return bool(entry.flat_number) and query in entry.flat_number.lower()


def visible_directory_entries(
    viewer_role: UserRole,
    candidates: Iterable[DirectoryEntry],
    search: Optional[str] = None,
    role_filter: Optional[Union[UserRole, str]] = None,
) -> List[DirectoryEntry]:
    """
    Entries the viewer may see, in input order.

    Role partition, optional single-role filter (the directory dropdown),
    then optional free-text search. All three are plain predicates, so
    the order they run in does not change the result.
    """
    allowed = visible_roles(viewer_role)
    if role_filter is not None:
        wanted = UserRole.parse(role_filter)
        allowed = allowed & {wanted} if wanted else frozenset()

    query = (search or "").strip().lower()

    visible = []
    for entry in candidates:
        if UserRole.parse(entry.role) not in allowed:
            continue
        if query and not matches_search(entry, query):
            continue
        visible.append(entry)
    return visible


def group_by_role(entries: Iterable[DirectoryEntry]) -> List[DirectoryGroup]:
    """Group entries by role, groups in first-seen order."""
    groups: Dict[str, List[DirectoryEntry]] = {}
    for entry in entries:
        groups.setdefault(entry.role, []).append(entry)
    return [DirectoryGroup(role=role, members=members) for role, members in groups.items()]
