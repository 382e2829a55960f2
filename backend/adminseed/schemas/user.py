from pydantic import BaseModel, field_validator
from datetime import date
from typing import Literal

Role = Literal["admin", "user"]

ADMIN_ROLE: Role = "admin"

class AdminProfile(BaseModel):
    """Placeholder profile fields for the seeded administrator.

    The role is not part of the profile: the seeded row is always
    ``ADMIN_ROLE``.
    """

    names: str = "Admin"
    lastnames: str = "User"
    birthdate: date = date(2000, 1, 1)
    phoneCode: str = "502"
    phoneNumber: str = "00000000"

    @field_validator("names", "lastnames", "phoneCode", "phoneNumber")
    @classmethod
    def not_blank(cls, v: str):
        v = str(v).strip()
        if not v:
            raise ValueError("value is required")
        return v
