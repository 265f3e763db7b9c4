"""NIT Validator — imperative shell around the pure core.

Invariants:
    - Construction-time configuration only: attributes never change after __init__
    - Every method delegates the decision to core/; this class adds messages,
      exceptions and logging
    - validate(None) → [] (inherited compatibility quirk, see core.validate_nit)

Design Decisions:
    - Class over module functions here: callers configure once (formatted, producer)
      and pass the validator around, as with other document validators
    - Message producer is injected, defaults to simple_message
"""

import logging
import random

from stella_nit.config import Settings, get_settings, resolve_locale
from stella_nit.core.domain_types import NITError
from stella_nit.core.enforce_format import is_eligible
from stella_nit.core.error_messages import (
    MessageProducer,
    localized_message_producer,
    simple_message,
)
from stella_nit.core.errors import ErrorContext, InvalidNITError
from stella_nit.core.generate_nit import generate_random_valid
from stella_nit.core.validate_nit import validate_nit

logger = logging.getLogger(__name__)


class NITValidator:
    """Validator for the Número de Identificação do Trabalhador (PIS/PASEP/CI).

    By default values are expected in the punctuated form ddd.ddddd.dd-d;
    pass formatted=False to accept 11 bare digits instead.
    """

    def __init__(
        self,
        formatted: bool = True,
        message_producer: MessageProducer | None = None,
        legacy_eligibility: bool = False,
        rng: random.Random | None = None,
    ):
        self.formatted = formatted
        self.message_producer = message_producer or simple_message
        self.legacy_eligibility = legacy_eligibility
        self._rng = rng

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "NITValidator":
        """Build a validator from STELLA_NIT_* settings with localized messages."""
        settings = settings or get_settings()
        locale = resolve_locale(settings.locale)
        return cls(
            formatted=settings.formatted,
            message_producer=localized_message_producer(locale),
            legacy_eligibility=settings.legacy_eligibility,
        )

    def validate(self, value: str | None) -> list[NITError]:
        errors = validate_nit(value, self.formatted)
        logger.debug(
            "NIT validated",
            extra={
                "formatted": self.formatted,
                "error_count": len(errors),
                "error_code": errors[0].value if errors else None,
            },
        )
        return errors

    def is_valid(self, value: str | None) -> bool:
        return not self.validate(value)

    def is_eligible(self, value: str) -> bool:
        """Shape-only pre-filter; the check digit is not evaluated."""
        return is_eligible(value, self.formatted, self.legacy_eligibility)

    def invalid_messages_for(self, value: str | None) -> list[str]:
        return [self.message_producer(error) for error in self.validate(value)]

    def assert_valid(self, value: str | None) -> None:
        """Raise InvalidNITError carrying every error kind and message."""
        errors = self.validate(value)
        if not errors:
            return

        messages = [self.message_producer(error) for error in errors]
        logger.info(
            "NIT assertion failed",
            extra={
                "formatted": self.formatted,
                "error_code": errors[0].value,
                "error_count": len(errors),
            },
        )
        raise InvalidNITError(
            errors, messages,
            ErrorContext(value=value, formatted=self.formatted),
        )

    def generate_random_valid(self) -> str:
        return generate_random_valid(self.formatted, self._rng)
