"""Format Enforcement — shape checks for formatted and unformatted NITs.

Invariants:
    - Patterns are bit-exact: ^\\d{3}\\.\\d{5}\\.\\d{2}-\\d{1}$ and ^\\d{11}$
    - \\d means ASCII 0-9 only (re.ASCII), whole-string match (fullmatch)
    - check_format reports at most ONE error; on error no canonical form is returned
    - is_eligible looks at shape only, never at the check digit

Design Decisions:
    - Corrected eligibility by default: unformatted mode tests the unformatted pattern.
      legacy_eligibility=True reproduces the historical behavior of testing the
      formatted pattern in both modes (ADR: compatibility opt-in, not silent fix)
    - fullmatch over match: "$" alone would accept a trailing newline
"""

import re

from stella_nit.core.domain_types import CanonicalNIT, NITError


NIT_FORMATTED = re.compile(r"^\d{3}\.\d{5}\.\d{2}-\d{1}$", re.ASCII)
NIT_UNFORMATTED = re.compile(r"^\d{11}$", re.ASCII)

_PUNCTUATION = re.compile(r"[.\-]")


def unformat(value: str) -> CanonicalNIT:
    """Strip NIT punctuation ('.' and '-'), leaving only the digits."""
    return CanonicalNIT(_PUNCTUATION.sub("", value))


def check_format(
    value: str, formatted: bool,
) -> tuple[CanonicalNIT | None, list[NITError]]:
    """Match value against the mode's pattern.

    Returns (canonical, []) on match, (None, [error]) on mismatch where error is
    INVALID_FORMAT in formatted mode and INVALID_DIGITS in unformatted mode.
    """
    if formatted:
        if not NIT_FORMATTED.fullmatch(value):
            return None, [NITError.INVALID_FORMAT]
        return unformat(value), []

    if not NIT_UNFORMATTED.fullmatch(value):
        return None, [NITError.INVALID_DIGITS]
    return CanonicalNIT(value), []


def is_eligible(
    value: str, formatted: bool = True, legacy_eligibility: bool = False,
) -> bool:
    """Pre-filter: does value have the shape expected for this mode?"""
    if formatted or legacy_eligibility:
        return NIT_FORMATTED.fullmatch(value) is not None
    return NIT_UNFORMATTED.fullmatch(value) is not None
