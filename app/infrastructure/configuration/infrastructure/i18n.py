"""Locale routing and translation settings."""

from pydantic import Field, field_validator, model_validator

from infrastructure.configuration.base import InfrastructureSettings, split_csv

KNOWN_LOCALE_CODES = ("en", "fr", "ar")


class I18nSettings(InfrastructureSettings):
    """Locale resolution and request routing configuration.

    List-valued settings are comma-separated strings so they can be set
    directly from the environment.

    Environment Variables:
        DEFAULT_LOCALE: Locale used when nothing else matches (default: en)
        SUPPORTED_LOCALES: Enabled locale codes, in display order
        LOCALE_COOKIE_NAME: Cookie storing the preferred locale
        LOCALE_COOKIE_MAX_AGE: Locale cookie lifetime in seconds (one year)
        API_PREFIXES: Path prefixes served without locale handling
        STATIC_PREFIXES: Path prefixes for static assets
        AUTH_PREFIXES: Path prefixes for sign-in and sign-up pages
        TRANSLATIONS_DIR: Directory holding <namespace>.<code>.yml files

    Example:
        ```python
        from infrastructure.configuration import settings

        default = settings.i18n.DEFAULT_LOCALE
        codes = settings.i18n.supported_locales
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")
    SUPPORTED_LOCALES: str = Field(default="en,fr,ar", alias="SUPPORTED_LOCALES")
    LOCALE_COOKIE_NAME: str = Field(default="locale", alias="LOCALE_COOKIE_NAME")
    LOCALE_COOKIE_MAX_AGE: int = Field(
        default=365 * 24 * 60 * 60, alias="LOCALE_COOKIE_MAX_AGE"
    )
    API_PREFIXES: str = Field(
        default="/api/,/health,/version,/docs,/redoc", alias="API_PREFIXES"
    )
    STATIC_PREFIXES: str = Field(default="/static/,/_assets/", alias="STATIC_PREFIXES")
    AUTH_PREFIXES: str = Field(default="/login,/signup,/auth/", alias="AUTH_PREFIXES")
    TRANSLATIONS_DIR: str | None = Field(default=None, alias="TRANSLATIONS_DIR")

    @field_validator("SUPPORTED_LOCALES")
    @classmethod
    def validate_supported_locales(cls, v: str) -> str:
        """Reject empty lists and codes the application has no locale for."""
        codes = split_csv(v)
        if not codes:
            raise ValueError("SUPPORTED_LOCALES must list at least one locale")
        unknown = [code for code in codes if code not in KNOWN_LOCALE_CODES]
        if unknown:
            raise ValueError(f"Unknown locale codes in SUPPORTED_LOCALES: {unknown}")
        return ",".join(codes)

    @model_validator(mode="after")
    def validate_default_locale(self) -> "I18nSettings":
        """The default locale must be one of the supported locales."""
        if self.DEFAULT_LOCALE not in self.supported_locales:
            raise ValueError(
                f"DEFAULT_LOCALE '{self.DEFAULT_LOCALE}' is not in SUPPORTED_LOCALES"
            )
        return self

    @property
    def supported_locales(self) -> list[str]:
        return split_csv(self.SUPPORTED_LOCALES)

    @property
    def api_prefixes(self) -> tuple[str, ...]:
        return tuple(split_csv(self.API_PREFIXES))

    @property
    def static_prefixes(self) -> tuple[str, ...]:
        return tuple(split_csv(self.STATIC_PREFIXES))

    @property
    def auth_prefixes(self) -> tuple[str, ...]:
        return tuple(split_csv(self.AUTH_PREFIXES))
