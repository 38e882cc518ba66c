"""
Markers shared by constructors and structs.

UNDEFINED is the "no value was ever provided" marker. It only travels
as a replacement value (see either_present_or_undefined); a Struct that
receives it leaves the attribute unset.
"""

from __future__ import annotations

from collections.abc import Sized
from enum import Enum
from typing import Any


class Undefined(Enum):
    """Single-member enum so the marker survives copy and pickle as a singleton."""
    UNDEFINED = "undefined"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED = Undefined.UNDEFINED


def is_blank(value: Any) -> bool:
    """
    Check whether a value carries no content.

    Blank values: None, False, UNDEFINED, whitespace-only strings,
    and anything sized with zero length.
    """
    if value is None or value is False or value is UNDEFINED:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Sized):
        return len(value) == 0
    return False
