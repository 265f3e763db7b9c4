"""NIT Validation — orchestrates format and check-digit checks into an error list.

Invariants:
    - validate_nit is PURE: same input → same list, no side effects
    - None input → [] (no errors). Compatibility quirk: absent values are not
      this validator's concern; callers that require a value must check for None
    - Format error short-circuits: check digit is never evaluated on a bad shape
    - Result list is in insertion order; [] means valid
    - Never raises on malformed input — every string maps to [] or one NITError

Design Decisions:
    - Returns list[NITError] instead of raising: matches enforce_format/check_digit
      pattern, shell decides whether to raise (NITValidator.assert_valid)
"""

from stella_nit.core.check_digit import has_valid_check_digit
from stella_nit.core.domain_types import NITError
from stella_nit.core.enforce_format import check_format


def validate_nit(value: str | None, formatted: bool = True) -> list[NITError]:
    """Validate a NIT. Returns the ordered list of errors, empty when valid."""
    errors: list[NITError] = []
    if value is None:
        return errors

    canonical, format_errors = check_format(value, formatted)
    errors.extend(format_errors)
    if errors or canonical is None:
        return errors

    if not has_valid_check_digit(canonical):
        errors.append(NITError.INVALID_CHECK_DIGITS)
    return errors
