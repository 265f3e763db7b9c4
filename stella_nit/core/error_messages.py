"""Error Messages — default producers turning NITError kinds into text.

Invariants:
    - A message producer is any callable (NITError) -> str
    - Every Locale has an entry for every NITError
    - Pure data + formatting, no IO

Design Decisions:
    - Plain callables over a producer class hierarchy: one method, no state
    - simple_message mirrors the historical "NITError : KIND" shape so existing
      consumers that parse it keep working
    - Portuguese is the primary locale: NIT is a Brazilian document
"""

from typing import Callable

from stella_nit.core.domain_types import Locale, NITError

MessageProducer = Callable[[NITError], str]


# --- Localized texts ----------------------------------------------------------

_MESSAGES: dict[Locale, dict[NITError, str]] = {
    Locale.PT_BR: {
        NITError.INVALID_FORMAT: (
            "NIT com formato inválido. Use o formato ddd.ddddd.dd-d."
        ),
        NITError.INVALID_DIGITS: (
            "NIT com dígitos inválidos. Informe exatamente 11 dígitos."
        ),
        NITError.INVALID_CHECK_DIGITS: (
            "NIT com dígito verificador inválido."
        ),
    },
    Locale.EN: {
        NITError.INVALID_FORMAT: (
            "NIT has an invalid format. Expected ddd.ddddd.dd-d."
        ),
        NITError.INVALID_DIGITS: (
            "NIT has invalid digits. Expected exactly 11 digits."
        ),
        NITError.INVALID_CHECK_DIGITS: (
            "NIT has an invalid check digit."
        ),
    },
}


# --- Public API ---------------------------------------------------------------


def simple_message(error: NITError) -> str:
    """Class name and kind, e.g. "NITError : INVALID_FORMAT". No translation."""
    return f"{type(error).__name__} : {error.value}"


def get_message(locale: Locale, error: NITError) -> str:
    return _MESSAGES[locale][error]


def localized_message_producer(locale: Locale) -> MessageProducer:
    """Build a producer bound to one locale."""
    texts = _MESSAGES[locale]

    def produce(error: NITError) -> str:
        return texts[error]

    return produce
