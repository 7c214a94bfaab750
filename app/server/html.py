"""Minimal HTML shells for server-rendered pages."""

from html import escape

from infrastructure.i18n.models import LocaleInfo


def render_shell(info: LocaleInfo, title: str, body: str) -> str:
    """Wrap `body` in a document carrying the locale's lang and dir.

    Args:
        info: Locale description (code and text direction).
        title: Page title, escaped here.
        body: Inner HTML, already escaped by the caller.

    Returns:
        Complete HTML document.
    """
    return (
        "<!DOCTYPE html>"
        f'<html lang="{info.code}" dir="{info.direction.value}">'
        f'<head><meta charset="utf-8"><title>{escape(title)}</title></head>'
        f"<body>{body}</body></html>"
    )
