"""Routing configuration: immutable config value and environment settings."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic_settings import BaseSettings, SettingsConfigDict

from storefront_routing.exceptions import ConfigurationError

DEFAULT_MAIN_DOMAIN = "jeepoo.vercel.app"
DEFAULT_LOCALE = "ar"


@dataclass(frozen=True)
class RoutingConfig:
    """Process-wide routing configuration, passed explicitly to resolvers."""

    main_domain: str = DEFAULT_MAIN_DOMAIN
    locales: tuple[str, ...] = ("ar", "en")
    default_locale: str = DEFAULT_LOCALE
    locale_cookie: str = "NEXT_LOCALE"
    local_hosts: tuple[str, ...] = ("localhost", "127.0.0.1")
    store_prefix: str = "/store"
    excluded_prefixes: tuple[str, ...] = ("/api", "/_next", "/_vercel", "/static")
    storefront_header: str = "x-is-storefront"
    vendor_header: str = "x-vendor-slug"

    def __post_init__(self) -> None:
        main_domain = self.main_domain.strip().strip(".").lower()
        if not main_domain:
            raise ConfigurationError("main_domain must not be empty")

        locales = tuple(locale.lower() for locale in self.locales)
        if not locales:
            raise ConfigurationError("at least one locale is required")

        default_locale = self.default_locale.lower()
        if default_locale not in locales:
            raise ConfigurationError(
                f"default locale {self.default_locale!r} is not in {locales!r}"
            )

        if not self.store_prefix.startswith("/"):
            raise ConfigurationError("store_prefix must start with '/'")

        # frozen dataclass: normalised values go through object.__setattr__
        object.__setattr__(self, "main_domain", main_domain)
        object.__setattr__(self, "locales", locales)
        object.__setattr__(self, "default_locale", default_locale)
        object.__setattr__(
            self, "local_hosts", tuple(h.lower() for h in self.local_hosts)
        )
        object.__setattr__(self, "store_prefix", self.store_prefix.rstrip("/"))
        object.__setattr__(self, "storefront_header", self.storefront_header.lower())
        object.__setattr__(self, "vendor_header", self.vendor_header.lower())

    def is_supported(self, locale: str | None) -> bool:
        return locale is not None and locale in self.locales


class RoutingSettings(BaseSettings):
    """Routing settings loaded from ``STOREFRONT_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="STOREFRONT_",
        env_file=".env",
        extra="ignore",
    )

    main_domain: str = DEFAULT_MAIN_DOMAIN
    locales: list[str] = ["ar", "en"]
    default_locale: str = DEFAULT_LOCALE
    locale_cookie: str = "NEXT_LOCALE"
    local_hosts: list[str] = ["localhost", "127.0.0.1"]
    store_prefix: str = "/store"

    def to_config(self) -> RoutingConfig:
        return RoutingConfig(
            main_domain=self.main_domain,
            locales=tuple(self.locales),
            default_locale=self.default_locale,
            locale_cookie=self.locale_cookie,
            local_hosts=tuple(self.local_hosts),
            store_prefix=self.store_prefix,
        )


def load_config() -> RoutingConfig:
    """Read routing settings from the environment once, at startup."""
    return RoutingSettings().to_config()
