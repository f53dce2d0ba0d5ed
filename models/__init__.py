# -------------------------
# Enums
# -------------------------
from .enums import (
    AccountStatus,
    Page,
    Theme,
    UserRole,
)

# -------------------------
# Unit Models
# -------------------------
from .unit import (
    UnitBase,
    UnitCreate,
    UnitRead,
)

# -------------------------
# User / Directory Models
# -------------------------
from .user import (
    DirectoryEntry,
    DirectoryGroup,
    ThemeUpdate,
)

# -------------------------
# Navigation Models
# -------------------------
from .navigation import (
    NavigateRequest,
    NavigationStateRead,
    NavItemRead,
    NavMenuRead,
    PagePermissionsRead,
    ResolvedPageRead,
)

# -------------------------
# Auth Models
# -------------------------
from .auth import LoginRequest, TokenResponse

__all__ = [
    # enums
    "AccountStatus",
    "Page",
    "Theme",
    "UserRole",

    # units
    "UnitBase",
    "UnitCreate",
    "UnitRead",

    # users
    "DirectoryEntry",
    "DirectoryGroup",
    "ThemeUpdate",

    # navigation
    "NavigateRequest",
    "NavigationStateRead",
    "NavItemRead",
    "NavMenuRead",
    "PagePermissionsRead",
    "ResolvedPageRead",

    # auth
    "LoginRequest",
    "TokenResponse",
]
