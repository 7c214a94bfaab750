"""Server-rendered page shells.

Localized pages live under /{locale}/...; the locale middleware has already
redirected unprefixed requests by the time these handlers run. Every page
except /login sits behind the session gate.
"""

from html import escape
from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from infrastructure.auth import Role, Session, SessionDep, require_role
from infrastructure.i18n import Locale, switch_locale_path
from infrastructure.services import (
    LocaleRegistryDep,
    LocaleResolverDep,
    MembershipRepositoryDep,
    SettingsDep,
    TranslationServiceDep,
)
from server.html import render_shell

router = APIRouter(tags=["Pages"], include_in_schema=False)

NAVIGATION = (
    ("dashboard", "/dashboard"),
    ("settings", "/settings/team"),
)


def path_locale(locale: str, registry: LocaleRegistryDep) -> Locale:
    """Resolve the {locale} path parameter; unsupported codes are a 404."""
    resolved = registry.get(locale)
    if resolved is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return resolved


PathLocaleDep = Annotated[Locale, Depends(path_locale)]


def _language_switcher(request: Request, registry: LocaleRegistryDep) -> str:
    links = []
    for info in registry.describe_all():
        locale = registry.get(info.code)
        href = switch_locale_path(request.url.path, locale, registry)
        links.append(
            f'<a href="{escape(href)}" hreflang="{info.code}">'
            f"{info.flag} {escape(info.display_name)}</a>"
        )
    return f'<nav class="languages">{" ".join(links)}</nav>'


def _navigation(locale: Locale, translations: TranslationServiceDep) -> str:
    items = "".join(
        f'<li><a href="/{locale.value}{path}">'
        f"{escape(translations.t(f'navigation.{key}', locale))}</a></li>"
        for key, path in NAVIGATION
    )
    sign_out = escape(translations.t("common.sign_out", locale))
    return f'<ul class="nav">{items}<li><a href="/auth/logout">{sign_out}</a></li></ul>'


@router.get("/login", response_class=HTMLResponse)
def login_page(
    request: Request,
    registry: LocaleRegistryDep,
    resolver: LocaleResolverDep,
    translations: TranslationServiceDep,
    settings: SettingsDep,
    error: str | None = None,
):
    """Sign-in page, localized from the stored locale or Accept-Language."""
    locale = getattr(request.state, "locale", None)
    if locale is None:
        locale = resolver.resolve(
            None,
            request.cookies.get(settings.i18n.LOCALE_COOKIE_NAME),
            request.headers.get("accept-language"),
        ).locale

    next_target = request.query_params.get("next")
    sign_in_href = "/auth/login"
    if next_target:
        sign_in_href = f"{sign_in_href}?next={quote(next_target, safe='/')}"

    body = [
        f"<h1>{escape(translations.t('auth.title', locale))}</h1>",
        f"<p>{escape(translations.t('auth.subtitle', locale))}</p>",
    ]
    if error == "no_membership":
        body.append(
            f'<p class="error">{escape(translations.t("auth.no_membership", locale))}</p>'
        )
    body.append(
        f'<a class="button" href="{escape(sign_in_href)}">'
        f"{escape(translations.t('auth.google', locale))}</a>"
    )
    info = registry.describe(locale.value)
    return HTMLResponse(render_shell(info, translations.t("auth.title", locale), "".join(body)))


def _dashboard(
    request: Request,
    locale: Locale,
    session: Session,
    registry: LocaleRegistryDep,
    translations: TranslationServiceDep,
) -> HTMLResponse:
    title = translations.t("dashboard.title", locale)
    body = "".join(
        [
            _language_switcher(request, registry),
            _navigation(locale, translations),
            f"<h1>{escape(title)}</h1>",
            "<p>"
            + escape(translations.t("dashboard.welcome", locale, name=session.name or session.email))
            + "</p>",
            "<p>" + escape(translations.t("dashboard.role", locale, role=session.role)) + "</p>",
        ]
    )
    return HTMLResponse(render_shell(registry.describe(locale.value), title, body))


@router.get("/{locale}", response_class=HTMLResponse)
def locale_home(
    request: Request,
    page_locale: PathLocaleDep,
    session: SessionDep,
    registry: LocaleRegistryDep,
    translations: TranslationServiceDep,
):
    """Home page of a locale; renders the dashboard."""
    return _dashboard(request, page_locale, session, registry, translations)


@router.get("/{locale}/dashboard", response_class=HTMLResponse)
def dashboard(
    request: Request,
    page_locale: PathLocaleDep,
    session: SessionDep,
    registry: LocaleRegistryDep,
    translations: TranslationServiceDep,
):
    return _dashboard(request, page_locale, session, registry, translations)


@router.get("/{locale}/settings/team", response_class=HTMLResponse)
def team_settings(
    request: Request,
    page_locale: PathLocaleDep,
    session: Annotated[Session, Depends(require_role(Role.MANAGER))],
    registry: LocaleRegistryDep,
    translations: TranslationServiceDep,
    repository: MembershipRepositoryDep,
):
    """Team members of the session's organization (managers and above)."""
    locale = page_locale
    members = repository.list_members(session.organization_id)
    title = translations.t("team.title", locale)
    rows = "".join(
        f"<tr><td>{escape(member.email)}</td><td>{escape(member.role)}</td></tr>"
        for member in members
    )
    body = "".join(
        [
            _language_switcher(request, registry),
            _navigation(locale, translations),
            f"<h1>{escape(title)}</h1>",
            f"<p>{escape(translations.t('team.members', locale, count=len(members)))}</p>",
            "<table><thead><tr>"
            f"<th>{escape(translations.t('team.email', locale))}</th>"
            f"<th>{escape(translations.t('team.role', locale))}</th>"
            f"</tr></thead><tbody>{rows}</tbody></table>",
        ]
    )
    return HTMLResponse(render_shell(registry.describe(locale.value), title, body))
