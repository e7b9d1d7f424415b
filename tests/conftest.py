"""Shared pytest fixtures for storefront-routing tests."""

from __future__ import annotations

from typing import Any

import pytest

from storefront_routing.config import RoutingConfig
from storefront_routing.context import RoutingContext

MAIN_DOMAIN = "jeepoo.test"


@pytest.fixture
def config() -> RoutingConfig:
    """Routing config with a test main domain and the stock locales."""
    return RoutingConfig(main_domain=MAIN_DOMAIN)


@pytest.fixture
def make_context(config: RoutingConfig) -> Any:
    """Factory for RoutingContext objects initialised with the default locale."""

    def _make(
        hostname: str = MAIN_DOMAIN,
        path: str = "/",
        locale_cookie: str | None = None,
    ) -> RoutingContext:
        return RoutingContext(
            hostname=hostname,
            path=path,
            locale=config.default_locale,
            locale_cookie=locale_cookie,
        )

    return _make
