# models/unit.py

from datetime import date
from typing import Optional
from pydantic import BaseModel, field_validator


# -------------------------------------------------
# Shared fields
# -------------------------------------------------
class UnitBase(BaseModel):
    flat_number: str
    block: Optional[str] = None
    floor: Optional[int] = None
    flat_size: Optional[float] = None
    maintenance_start_date: Optional[date] = None


# -------------------------------------------------
# Create (community setup → residence step)
# -------------------------------------------------
class UnitCreate(UnitBase):
    """
    Residence unit submitted during community setup.
    Owner and community are taken from the authenticated user.
    """

    @field_validator("flat_number")
    @classmethod
    def flat_number_required(cls, v: str) -> str:
        v = (v or "").strip()
        if not v:
            raise ValueError("flat_number is required")
        return v

    @field_validator("block", mode="before")
    @classmethod
    def blank_block(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v


# -------------------------------------------------
# Read (Supabase → API response)
# -------------------------------------------------
class UnitRead(UnitBase):
    # rows created outside setup can lack a flat number
    flat_number: Optional[str] = None

    id: str
    user_id: Optional[str] = None
    community_id: Optional[str] = None

    @field_validator("id", "user_id", "community_id", mode="before")
    @classmethod
    def normalize_ids(cls, v):
        if v is None:
            return v
        return str(v)
