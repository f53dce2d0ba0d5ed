# core/navigation.py

from typing import Dict, List, NamedTuple, Sequence

from core.permissions import allowed_pages
from models.enums import Page, UserRole


class NavItem(NamedTuple):
    page: Page
    label: str
    icon: str


# -----------------------------------------------------
# Master lists (order is deliberate, never sorted)
# -----------------------------------------------------
SIDEBAR_ITEMS: List[NavItem] = [
    NavItem(Page.dashboard, "Dashboard", "HomeIcon"),
    NavItem(Page.notices, "Notices", "BellIcon"),
    NavItem(Page.help_desk, "Help Desk", "ShieldCheckIcon"),
    NavItem(Page.visitors, "Visitors", "UsersIcon"),
    NavItem(Page.amenities, "Amenities", "SparklesIcon"),
    NavItem(Page.directory, "Directory", "UserGroupIcon"),
    NavItem(Page.maintenance, "Maintenance", "CurrencyRupeeIcon"),
    NavItem(Page.expenses, "Expenses", "BanknotesIcon"),
    NavItem(Page.bulk_operations, "Bulk Operations", "ClipboardDocumentListIcon"),
    NavItem(Page.billing, "Billing", "CalculatorIcon"),
    NavItem(Page.community_setup, "Community Setup", "Cog6ToothIcon"),
]

BOTTOM_NAV_ITEMS: List[NavItem] = [
    NavItem(Page.dashboard, "Home", "HomeIcon"),
    NavItem(Page.bulk_operations, "Bulk Ops", "ClipboardDocumentListIcon"),
    NavItem(Page.notices, "Notices", "BellIcon"),
    NavItem(Page.help_desk, "Help", "ShieldCheckIcon"),
    NavItem(Page.visitors, "Visitors", "UsersIcon"),
    NavItem(Page.amenities, "Facilities", "SparklesIcon"),
    NavItem(Page.directory, "Members", "UserGroupIcon"),
    NavItem(Page.maintenance, "Bills", "CurrencyRupeeIcon"),
    NavItem(Page.expenses, "Expenses", "BanknotesIcon"),
    NavItem(Page.billing, "Admin", "CalculatorIcon"),
    NavItem(Page.community_setup, "Config", "Cog6ToothIcon"),
]

NAV_SURFACES: Dict[str, List[NavItem]] = {
    "sidebar": SIDEBAR_ITEMS,
    "bottom_nav": BOTTOM_NAV_ITEMS,
}


def visible_nav_items(role: UserRole, items: Sequence[NavItem]) -> List[NavItem]:
    """Items whose page the role may open, in master-list order."""
    allowed = allowed_pages(role).allowed
    return [item for item in items if item.page in allowed]


def nav_items_for_surface(role: UserRole, surface: str) -> List[NavItem]:
    """Raises KeyError for an unknown surface name."""
    return visible_nav_items(role, NAV_SURFACES[surface])
