"""Structlog processors for the property manager logs.

Each public function here is a processor factory: it takes its options and
returns a `(logger, method_name, event_dict) -> event_dict` callable that
`setup.build_processors` places in the pipeline.
"""

from typing import Any, Callable, Iterable

EventDict = dict[str, Any]
Processor = Callable[[Any, str, EventDict], EventDict]

# Key fragments whose values never reach the logs. Session tokens travel in
# cookies and Authorization headers, so both are covered.
SENSITIVE_PATTERNS = frozenset(
    {
        "auth",
        "authorization",
        "bearer",
        "client_secret",
        "cookie",
        "credential",
        "jwt",
        "oauth_state",
        "password",
        "secret",
        "token",
    }
)

REDACTED = "***REDACTED***"


def _stamp(**fields: Any) -> Processor:
    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.update(fields)
        return event_dict

    return processor


def add_app_info(app_name: str, app_version: str = "unknown") -> Processor:
    """Stamp every entry with `app_name` and `app_version` (the git SHA)."""
    return _stamp(app_name=app_name, app_version=app_version)


def add_environment_info(environment: str) -> Processor:
    """Stamp every entry with the environment ("production", "dev-", "local")."""
    return _stamp(environment=environment)


def is_sensitive_key(key: str, patterns: Iterable[str] = SENSITIVE_PATTERNS) -> bool:
    lowered = key.lower()
    return any(pattern in lowered for pattern in patterns)


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Redact values whose key looks like a credential.

    Matching is a case-insensitive substring test against SENSITIVE_PATTERNS
    (plus `additional_patterns`), so `session_cookie`, `GOOGLE_CLIENT_SECRET`
    and `access_token` are all redacted. The `event` key and None values are
    left alone.

    Example:
        mask_sensitive_data(additional_patterns=frozenset({"iban"}))
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        return {
            key: (
                mask_value
                if key != "event"
                and value is not None
                and is_sensitive_key(key, patterns)
                else value
            )
            for key, value in event_dict.items()
        }

    return processor


def truncate_large_values(max_length: int = 500) -> Processor:
    """Cut string values longer than `max_length`, noting the original size."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    f"{value[:max_length]}...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
