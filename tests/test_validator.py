"""NITValidator tests — shell behavior around the pure core.

Tests cover:
    - Default mode is formatted with simple messages
    - validate / is_valid / invalid_messages_for delegate to the core
    - assert_valid raises InvalidNITError only when invalid
    - is_eligible honors legacy_eligibility
    - from_settings picks up mode, eligibility and locale
    - Validation is logged with structured extra fields
"""

import logging
import random

import pytest

from stella_nit.config import Settings
from stella_nit.core.domain_types import Locale, NITError
from stella_nit.core.error_messages import localized_message_producer
from stella_nit.core.errors import ConfigurationError, InvalidNITError
from stella_nit.validator import NITValidator


# ─── validate / is_valid ─────────────────────────────────────────

def test_default_validator_expects_formatted_values():
    validator = NITValidator()
    assert validator.formatted is True
    assert validator.validate("123.45678.90-0") == []
    assert validator.validate("12345678900") == [NITError.INVALID_FORMAT]


def test_unformatted_validator():
    validator = NITValidator(formatted=False)
    assert validator.is_valid("12345678900") is True
    assert validator.is_valid("12345678901") is False
    assert validator.validate("abc") == [NITError.INVALID_DIGITS]


def test_none_is_valid():
    validator = NITValidator()
    assert validator.validate(None) == []
    assert validator.is_valid(None) is True
    validator.assert_valid(None)


# ─── messages ────────────────────────────────────────────────────

def test_invalid_messages_default_to_simple_messages():
    validator = NITValidator()
    assert validator.invalid_messages_for("123.45678.90-1") == [
        "NITError : INVALID_CHECK_DIGITS",
    ]


def test_invalid_messages_empty_when_valid():
    assert NITValidator().invalid_messages_for("123.45678.90-0") == []


def test_custom_message_producer():
    validator = NITValidator(
        formatted=False, message_producer=lambda error: f"custom:{error.value}",
    )
    assert validator.invalid_messages_for("abc") == ["custom:INVALID_DIGITS"]


# ─── assert_valid ────────────────────────────────────────────────

def test_assert_valid_passes_on_valid_nit():
    NITValidator().assert_valid("111.11111.11-6")


def test_assert_valid_raises_with_errors_and_messages():
    validator = NITValidator(
        message_producer=localized_message_producer(Locale.EN),
    )
    with pytest.raises(InvalidNITError) as exc_info:
        validator.assert_valid("123.45678.90-1")
    err = exc_info.value
    assert err.errors == [NITError.INVALID_CHECK_DIGITS]
    assert err.messages == ["NIT has an invalid check digit."]
    assert err.context.value == "123.45678.90-1"
    assert err.context.formatted is True


# ─── is_eligible ─────────────────────────────────────────────────

def test_is_eligible_corrected_by_default():
    validator = NITValidator(formatted=False)
    assert validator.is_eligible("12345678901") is True
    assert validator.is_eligible("123.45678.90-1") is False


def test_is_eligible_legacy():
    validator = NITValidator(formatted=False, legacy_eligibility=True)
    assert validator.is_eligible("12345678901") is False
    assert validator.is_eligible("123.45678.90-1") is True


# ─── generate_random_valid ───────────────────────────────────────

def test_generate_random_valid_matches_mode():
    for formatted in (True, False):
        validator = NITValidator(formatted=formatted, rng=random.Random(3))
        for _ in range(50):
            assert validator.is_valid(validator.generate_random_valid())


# ─── from_settings ───────────────────────────────────────────────

def test_from_settings_defaults():
    validator = NITValidator.from_settings(Settings())
    assert validator.formatted is True
    assert validator.legacy_eligibility is False
    assert validator.invalid_messages_for("123.45678.90-1") == [
        "NIT com dígito verificador inválido.",
    ]


def test_from_settings_overrides():
    settings = Settings(formatted=False, legacy_eligibility=True, locale="en")
    validator = NITValidator.from_settings(settings)
    assert validator.formatted is False
    assert validator.legacy_eligibility is True
    assert validator.invalid_messages_for("abc") == [
        "NIT has invalid digits. Expected exactly 11 digits.",
    ]


def test_from_settings_unknown_locale():
    with pytest.raises(ConfigurationError):
        NITValidator.from_settings(Settings(locale="fr"))


# ─── logging ─────────────────────────────────────────────────────

def test_validate_logs_debug_with_extra_fields(caplog):
    with caplog.at_level(logging.DEBUG, logger="stella_nit.validator"):
        NITValidator(formatted=False).validate("abc")
    record = caplog.records[-1]
    assert record.levelno == logging.DEBUG
    assert record.formatted is False
    assert record.error_code == "INVALID_DIGITS"
    assert record.error_count == 1


def test_assert_valid_logs_failure(caplog):
    with caplog.at_level(logging.INFO, logger="stella_nit.validator"):
        with pytest.raises(InvalidNITError):
            NITValidator().assert_valid("12345678900")
    messages = [r.getMessage() for r in caplog.records]
    assert "NIT assertion failed" in messages
