"""Locale negotiation with as-needed locale prefixes."""

from __future__ import annotations

from collections.abc import Iterable

from storefront_routing.component import ComponentCategory, RoutingComponent
from storefront_routing.config import RoutingConfig
from storefront_routing.context import RoutingContext

RTL_LOCALES = frozenset({"ar", "fa", "he", "ur"})


def split_locale_prefix(path: str, locales: Iterable[str]) -> tuple[str | None, str]:
    """Split a leading locale segment off ``path``.

    Returns the locale (or None when the first segment is not a supported
    locale) and the remaining path, which always starts with ``/``.
    """
    if not path.startswith("/"):
        return None, path
    segment, _, rest = path[1:].partition("/")
    if segment and segment in locales:
        return segment, f"/{rest}"
    return None, path


def localized_path(path: str, locale: str, config: RoutingConfig) -> str:
    """Build the outward path for ``locale`` under the as-needed prefix policy."""
    _, remainder = split_locale_prefix(path, config.locales)
    if locale == config.default_locale or not config.is_supported(locale):
        return remainder
    if remainder == "/":
        return f"/{locale}"
    return f"/{locale}{remainder}"


def text_direction(locale: str) -> str:
    return "rtl" if locale in RTL_LOCALES else "ltr"


class LocaleResolver(RoutingComponent):
    """Resolves the request locale from the locale cookie.

    The default locale never carries a path prefix: a redundant default
    prefix is removed from the effective path. A non-default locale is only
    honoured when the effective path carries its prefix; otherwise the
    request falls back to the default locale. Neither case redirects.
    """

    category = ComponentCategory.LOCALE

    def __init__(self, config: RoutingConfig) -> None:
        self._config = config

    def resolve(self, ctx: RoutingContext) -> None:
        default = self._config.default_locale
        cookie = (ctx.locale_cookie or "").strip().lower()
        locale = cookie if self._config.is_supported(cookie) else default

        prefix, remainder = split_locale_prefix(ctx.effective_path, self._config.locales)
        if prefix == default:
            ctx.effective_path = remainder
            prefix = None

        if locale != default and prefix != locale:
            locale = default

        ctx.locale = locale
