"""i18n system - locale routing, internationalization and localization.

Provides the locale registry, locale resolution, URL locale segments, request
routing decisions and translation management.

Main components:
- models: Locale, LocaleInfo, TranslationKey, TranslationCatalog
- registry: LocaleRegistry of enabled locales
- resolvers: LocaleResolver (path > cookie > Accept-Language > default)
- paths: strip_locale / add_locale for URL locale segments
- routing: classify_route / decide_route used by the locale middleware
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator service with interpolation and plurals
"""

from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import (
    Locale,
    LocaleInfo,
    PluralCategory,
    TextDirection,
    TranslationCatalog,
    TranslationKey,
)
from infrastructure.i18n.paths import (
    StrippedPath,
    add_locale,
    has_locale_prefix,
    strip_locale,
    switch_locale_path,
)
from infrastructure.i18n.registry import LocaleRegistry
from infrastructure.i18n.resolvers import (
    LocaleResolution,
    LocaleResolver,
    ResolutionSource,
    parse_accept_language,
)
from infrastructure.i18n.routing import (
    Excluded,
    PassThrough,
    RedirectToLocale,
    RouteClassification,
    RouteRules,
    RoutingDecision,
    classify_route,
    decide_route,
)
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.service import TranslationService

__all__ = [
    "Locale",
    "LocaleInfo",
    "PluralCategory",
    "TextDirection",
    "TranslationKey",
    "TranslationCatalog",
    "LocaleRegistry",
    "LocaleResolution",
    "LocaleResolver",
    "ResolutionSource",
    "parse_accept_language",
    "StrippedPath",
    "add_locale",
    "has_locale_prefix",
    "strip_locale",
    "switch_locale_path",
    "Excluded",
    "PassThrough",
    "RedirectToLocale",
    "RouteClassification",
    "RouteRules",
    "RoutingDecision",
    "classify_route",
    "decide_route",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "TranslationService",
]
