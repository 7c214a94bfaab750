"""Registry of the locales enabled for this deployment.

The registry is built once from configuration and never changes for the
lifetime of the process. Lookups for unknown codes return None or False and
never raise.
"""

from typing import Iterable, Optional, Sequence

from infrastructure.i18n.models import Locale, LocaleInfo, TextDirection


class LocaleRegistry:
    """Closed, ordered set of supported locales with a default.

    Attributes:
        supported: Enabled locales in display order.
        default: Locale used when no other source yields a supported one.
    """

    def __init__(
        self,
        supported: Sequence[Locale] = (Locale.EN, Locale.FR, Locale.AR),
        default: Locale = Locale.EN,
    ):
        """Initialize locale registry.

        Args:
            supported: Enabled locales, in display order.
            default: Fallback locale; must be one of `supported`.

        Raises:
            ValueError: If no locales are given or the default is not supported.
        """
        if not supported:
            raise ValueError("At least one supported locale is required")
        if default not in supported:
            raise ValueError(f"Default locale {default.value} is not supported")
        self._supported: tuple[Locale, ...] = tuple(dict.fromkeys(supported))
        self._default = default
        self._by_code = {locale.value: locale for locale in self._supported}

    @classmethod
    def from_codes(cls, codes: Iterable[str], default: str) -> "LocaleRegistry":
        """Build a registry from configured code strings.

        Args:
            codes: Locale codes (e.g., ["en", "fr", "ar"]).
            default: Default locale code.

        Returns:
            LocaleRegistry for the given codes.

        Raises:
            ValueError: If a code is unknown or the default is not listed.
        """
        return cls(
            supported=[Locale.from_string(code) for code in codes],
            default=Locale.from_string(default),
        )

    @property
    def supported(self) -> tuple[Locale, ...]:
        return self._supported

    @property
    def default(self) -> Locale:
        return self._default

    @property
    def codes(self) -> tuple[str, ...]:
        """Supported locale codes in display order."""
        return tuple(self._by_code)

    def is_supported(self, code: Optional[str]) -> bool:
        """Check whether a code names an enabled locale.

        Args:
            code: Candidate locale code (may be None or garbage).

        Returns:
            True if the code is supported, False otherwise.
        """
        return code is not None and code in self._by_code

    def get(self, code: Optional[str]) -> Optional[Locale]:
        """Look up an enabled locale by code.

        Args:
            code: Candidate locale code.

        Returns:
            The Locale, or None if the code is not supported.
        """
        if code is None:
            return None
        return self._by_code.get(code)

    def get_valid_locale(self, code: Optional[str]) -> Locale:
        """Return the locale for `code`, or the default if it is not supported."""
        return self.get(code) or self._default

    def describe(self, code: Optional[str]) -> Optional[LocaleInfo]:
        """Describe a supported locale for clients.

        Args:
            code: Locale code.

        Returns:
            LocaleInfo, or None if the code is not supported.
        """
        locale = self.get(code)
        if locale is None:
            return None
        return LocaleInfo.from_locale(locale, is_default=locale is self._default)

    def describe_all(self) -> list[LocaleInfo]:
        return [
            LocaleInfo.from_locale(locale, is_default=locale is self._default)
            for locale in self._supported
        ]

    def direction(self, code: Optional[str]) -> TextDirection:
        """Text direction for a code, falling back to the default locale's."""
        return self.get_valid_locale(code).direction

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code in self._by_code

    def __repr__(self) -> str:
        return f"LocaleRegistry(codes={self.codes!r}, default={self._default.value!r})"
