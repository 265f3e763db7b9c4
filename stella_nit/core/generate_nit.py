"""NIT Generation — random NITs that always pass validate_nit.

Invariants:
    - Output of generate_random_valid(formatted=X) validates with formatted=X
    - Deterministic given the same random.Random seed
"""

import random

from stella_nit.core.check_digit import compute_check_digit
from stella_nit.core.domain_types import CanonicalNIT, NIT_BASE_LENGTH


def punctuate(nit: CanonicalNIT) -> str:
    """ddddddddddd → ddd.ddddd.dd-d"""
    return f"{nit[:3]}.{nit[3:8]}.{nit[8:10]}-{nit[10]}"


def generate_random_valid(
    formatted: bool = True, rng: random.Random | None = None,
) -> str:
    """Draw 10 random base digits and append their check digit."""
    rng = rng or random.Random()
    base = "".join(str(rng.randint(0, 9)) for _ in range(NIT_BASE_LENGTH))
    nit = CanonicalNIT(f"{base}{compute_check_digit(base)}")
    return punctuate(nit) if formatted else nit
