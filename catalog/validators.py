# catalog/validators.py
"""Validators that need no database access.

A True result means the proposed value is acceptable. Empty values are
always acceptable here; whether a field is required is checked by the
payload schemas.
"""
import re
from enum import Enum
from typing import Optional

LIBRARY_SCOPE_PATTERN = re.compile(r"^\S+$")


class VolumeLocation(str, Enum):
    BOX = "Box"
    COMPUTER = "Computer"
    KINDLE = "Kindle"
    KOBO = "Kobo"
    OTHER = "Other"
    RETURNED = "Returned"
    UNLIMITED = "Unlimited"
    WATCH = "Watch"


class VolumeType(str, Enum):
    SINGLE = "Single"
    COLLECTION = "Collection"
    ANTHOLOGY = "Anthology"


def validate_library_scope(scope: Optional[str]) -> bool:
    """Library scopes are used as authorization tokens, so no whitespace."""
    if not scope:
        return True
    return LIBRARY_SCOPE_PATTERN.match(scope) is not None


def validate_volume_location(location: Optional[str]) -> bool:
    if not location:
        return True
    return location in {member.value for member in VolumeLocation}


def validate_volume_type(volume_type: Optional[str]) -> bool:
    if not volume_type:
        return True
    return volume_type in {member.value for member in VolumeType}
