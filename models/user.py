# models/user.py

from typing import List, Optional
from pydantic import BaseModel, field_validator

from models.enums import Theme
from models.unit import UnitRead


# ===============================================================
# DIRECTORY ENTRY (users row joined with units)
# ===============================================================

class DirectoryEntry(BaseModel):
    """
    One row of the member directory.

    `role` is kept as the raw stored string; visibility rules decide
    what an unknown role means.
    """
    id: str
    name: str = ""
    email: str = ""
    role: str = ""
    status: Optional[str] = None
    community_id: Optional[str] = None
    flat_number: Optional[str] = None  # legacy / staff location
    avatar_url: Optional[str] = None
    units: List[UnitRead] = []

    @field_validator("id", "community_id", mode="before")
    @classmethod
    def normalize_ids(cls, v):
        if v is None:
            return v
        return str(v)

    @field_validator("name", "email", "role", mode="before")
    @classmethod
    def none_to_blank(cls, v):
        return v or ""

    @field_validator("units", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return v or []


class DirectoryGroup(BaseModel):
    role: str
    members: List[DirectoryEntry]


# ===============================================================
# PROFILE UPDATES
# ===============================================================

class ThemeUpdate(BaseModel):
    theme: Theme
