"""Library Configuration — environment-driven defaults via pydantic-settings.

Invariants:
    - Every setting has a default: the library works with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings only feed NITValidator.from_settings and configure_logging;
      core functions never read them

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - STELLA_NIT_ prefix: avoids clashing with the host application's variables
    - locale normalized here, resolved to Locale in resolve_locale so that an unknown
      value surfaces as ConfigurationError instead of a bare ValidationError at import
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stella_nit.core.domain_types import Locale
from stella_nit.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Validator defaults from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STELLA_NIT_", env_file=".env", case_sensitive=False,
        extra="ignore",
    )

    # Validation
    formatted: bool = True
    legacy_eligibility: bool = False

    # Messages
    locale: str = Locale.PT_BR.value

    @field_validator("locale", mode="before")
    @classmethod
    def normalize_locale(cls, v: str) -> str:
        """Accept pt-BR / pt_br / PT_BR spellings for the same locale."""
        if not isinstance(v, str):
            return v
        language, _, region = v.strip().replace("-", "_").partition("_")
        if region:
            return f"{language.lower()}_{region.upper()}"
        return language.lower()

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


def resolve_locale(value: str) -> Locale:
    try:
        return Locale(value)
    except ValueError as exc:
        supported = ", ".join(locale.value for locale in Locale)
        raise ConfigurationError(
            f"Unsupported locale '{value}'. Supported: {supported}",
            "locale",
        ) from exc


@lru_cache
def get_settings() -> Settings:
    return Settings()
