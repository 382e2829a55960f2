from datetime import date

import pytest
from pydantic import ValidationError

from adminseed.schemas.user import AdminProfile


def test_placeholder_defaults():
    p = AdminProfile()
    assert p.names == "Admin"
    assert p.lastnames == "User"
    assert p.birthdate == date(2000, 1, 1)
    assert p.phoneCode == "502"
    assert p.phoneNumber == "00000000"


def test_fields_are_trimmed():
    p = AdminProfile(names="  Root ", phoneNumber=" 5550100 ")
    assert p.names == "Root"
    assert p.phoneNumber == "5550100"


@pytest.mark.parametrize("field", ["names", "lastnames", "phoneCode", "phoneNumber"])
def test_blank_fields_rejected(field):
    with pytest.raises(ValidationError):
        AdminProfile(**{field: "   "})


def test_profile_has_no_role():
    assert "role" not in AdminProfile.model_fields
    assert not hasattr(AdminProfile(role="user"), "role")
