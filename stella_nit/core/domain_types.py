"""Domain Types — rich types and fixed constants for NIT validation.

Invariants:
    - CanonicalNIT is always exactly 11 ASCII digits (punctuation already stripped)
    - NIT_WEIGHTS has one multiplier per base digit (10 entries)
    - All error kinds encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, full type-checker support
    - str Enums: error kinds serialize to JSON without custom encoders
    - Weights and modulus are module constants, not runtime configuration
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

CanonicalNIT = NewType("CanonicalNIT", str)     # "ddddddddddd"


# ─── Constants ───────────────────────────────────────────────────

NIT_LENGTH: int = 11
NIT_BASE_LENGTH: int = 10
NIT_MODULUS: int = 11
NIT_WEIGHTS: tuple[int, ...] = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)


# ─── Enums ───────────────────────────────────────────────────────

class NITError(str, Enum):
    """Validation error kinds — one per failure mode, reported in order."""
    INVALID_FORMAT = "INVALID_FORMAT"               # formatted mode, pattern mismatch
    INVALID_DIGITS = "INVALID_DIGITS"               # unformatted mode, pattern mismatch
    INVALID_CHECK_DIGITS = "INVALID_CHECK_DIGITS"   # pattern ok, wrong check digit


class Locale(str, Enum):
    """Locales with built-in human-readable error messages."""
    PT_BR = "pt_BR"
    EN = "en"
