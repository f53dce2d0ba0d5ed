from enum import Enum
from typing import Optional


class BaseStrEnum(str, Enum):
    """
    Base enum that serializes cleanly to a string
    and provides a .list() method for UI dropdowns.
    """

    def __str__(self):
        return str(self.value)

    @classmethod
    def list(cls):
        return [item.value for item in cls]

    @classmethod
    def parse(cls, value) -> Optional["BaseStrEnum"]:
        """
        Lenient lookup by value or member name.
        Case, spaces, dashes and underscores are ignored.
        Returns None instead of raising for unknown tokens.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        wanted = _normalize(value)
        if not wanted:
            return None

        for item in cls:
            if _normalize(item.value) == wanted or _normalize(item.name) == wanted:
                return item
        return None


def _normalize(token: str) -> str:
    return "".join(ch for ch in token.lower() if ch not in " -_")


# -----------------------------------------------------
# USER ROLE
# -----------------------------------------------------
class UserRole(BaseStrEnum):
    """Closed set of roles stored on users.role."""

    super_admin = "SuperAdmin"
    admin = "Admin"  # community admin
    resident = "Resident"
    tenant = "Tenant"
    security = "Security"  # security guard
    security_admin = "SecurityAdmin"
    helpdesk_agent = "HelpdeskAgent"
    helpdesk_admin = "HelpdeskAdmin"


# -----------------------------------------------------
# PAGE
# -----------------------------------------------------
class Page(BaseStrEnum):
    """Top-level application views."""

    dashboard = "Dashboard"
    notices = "Notices"
    help_desk = "Help Desk"
    visitors = "Visitors"
    amenities = "Amenities"
    directory = "Directory"
    maintenance = "Maintenance"
    expenses = "Expenses"
    bulk_operations = "BulkOperations"
    community_setup = "CommunitySetup"
    billing = "Billing"


# -----------------------------------------------------
# THEME
# -----------------------------------------------------
class Theme(BaseStrEnum):
    light = "light"
    dark = "dark"


# -----------------------------------------------------
# ACCOUNT STATUS
# -----------------------------------------------------
class AccountStatus(BaseStrEnum):
    active = "active"
    disabled = "disabled"
