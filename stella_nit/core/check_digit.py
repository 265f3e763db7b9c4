"""Check Digit — weighted modulo-11 computation for the NIT trailing digit.

Invariants:
    - compute_check_digit returns a single digit 0..9 (never 10, never a letter)
    - has_valid_check_digit is PURE: reports False on mismatch, never raises
    - NIT_WEIGHTS / NIT_MODULUS (domain_types) are the single source of truth

Design Decisions:
    - Post-sum rule inlined (remainder < 2 → 0, else 11 - remainder): only one rule
      ever applies to NIT, a pluggable transform would be dead indirection
"""

import re

from stella_nit.core.domain_types import (
    CanonicalNIT, NIT_BASE_LENGTH, NIT_LENGTH, NIT_MODULUS, NIT_WEIGHTS,
)

_BASE_DIGITS = re.compile(r"\d{%d}" % NIT_BASE_LENGTH, re.ASCII)
_ALL_DIGITS = re.compile(r"\d{%d}" % NIT_LENGTH, re.ASCII)


def weighted_sum(base: str) -> int:
    """Sum of base digits multiplied position-wise by NIT_WEIGHTS."""
    return sum(int(digit) * weight for digit, weight in zip(base, NIT_WEIGHTS))


def compute_check_digit(base: str) -> int:
    """Expected check digit for 10 base digits.

    Raises ValueError when base is not exactly 10 ASCII digits: that is a
    caller bug, not a validation outcome.
    """
    if not isinstance(base, str) or not _BASE_DIGITS.fullmatch(base):
        raise ValueError(
            f"NIT base must be exactly {NIT_BASE_LENGTH} digits, got {base!r}"
        )

    remainder = weighted_sum(base) % NIT_MODULUS
    if remainder < 2:
        return 0
    return NIT_MODULUS - remainder


def has_valid_check_digit(nit: CanonicalNIT) -> bool:
    """True if position 11 of a canonical NIT matches the computed digit.

    Re-checks the 11-digit shape so direct callers passing unvalidated input
    get False instead of an exception.
    """
    if not isinstance(nit, str) or not _ALL_DIGITS.fullmatch(nit):
        return False
    return compute_check_digit(nit[:NIT_BASE_LENGTH]) == int(nit[NIT_BASE_LENGTH])
