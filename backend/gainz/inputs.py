# gainz/inputs.py
"""
Parsing for the free-text fields a user types when adding workouts and sets.

Invalid input is never an error: every helper returns ``None`` and the caller
treats that as "ignore this submission".
"""
from __future__ import annotations
import math
import re
from typing import Optional

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def clean_name(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    name = text.strip()
    return name or None


def parse_reps(text: Optional[str]) -> Optional[int]:
    # int() alone would also take " 8", "1_0" and unicode digits
    if not text or not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    if not (INT32_MIN <= value <= INT32_MAX):
        return None
    return value


def parse_weight(text: Optional[str]) -> Optional[float]:
    if not text or not _FLOAT_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value) or value < 0:
        return None
    return value
