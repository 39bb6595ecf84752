# tests/test_validators.py
import pytest

from catalog.validators import (
    VolumeLocation, VolumeType,
    validate_library_scope, validate_volume_location, validate_volume_type
)

@pytest.mark.parametrize("scope,expected", [
    ("scope1", True),
    ("personal:admin", True),
    ("", True),
    (None, True),
    ("bad scope", False),
    ("tab\tscope", False),
    (" leading", False),
])
def test_validate_library_scope(scope, expected):
    assert validate_library_scope(scope) is expected

def test_validate_volume_location():
    assert validate_volume_location("Kindle")
    assert validate_volume_location(None)
    assert not validate_volume_location("InvalidPlace")
    # Values are case sensitive
    assert not validate_volume_location("kindle")

def test_validate_volume_type():
    assert validate_volume_type("Anthology")
    assert validate_volume_type("")
    assert not validate_volume_type("Pamphlet")

def test_every_enumeration_value_is_valid():
    assert all(validate_volume_location(member.value) for member in VolumeLocation)
    assert all(validate_volume_type(member.value) for member in VolumeType)
