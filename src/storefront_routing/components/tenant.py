"""Tenant resolution for main domain vs. vendor storefront subdomains."""

from __future__ import annotations

import logging
from enum import Enum

from storefront_routing.component import ComponentCategory, RoutingComponent
from storefront_routing.config import RoutingConfig
from storefront_routing.context import RoutingContext

logger = logging.getLogger(__name__)

_WWW = "www"


class HostKind(Enum):
    """Shape of an inbound hostname relative to the configured domains."""

    LOCAL = "local"
    MAIN = "main"
    VENDOR = "vendor"
    UNKNOWN = "unknown"


def normalize_host(host: str) -> str:
    """Lower-case a Host header value and drop its port and trailing dot."""
    host = host.strip().lower()
    if host.startswith("["):
        end = host.find("]")
        host = host[: end + 1] if end != -1 else host
    elif host.count(":") == 1:
        host = host.split(":", 1)[0]
    return host.rstrip(".")


def _local_base(hostname: str, config: RoutingConfig) -> str | None:
    for local in config.local_hosts:
        if hostname == local or hostname.endswith(f".{local}"):
            return local
    return None


def classify_host(
    hostname: str, config: RoutingConfig
) -> tuple[HostKind, str | None]:
    """Classify a normalised hostname, returning its kind and vendor slug.

    Branches are evaluated in order and the first match wins:

    1. Local loopback hosts. A label in front of the local host
       (``acme.localhost``) simulates a vendor subdomain unless it is ``www``.
    2. The main domain itself or its ``www`` alias.
    3. ``www.`` + main domain reached through the suffix match.
    4. Any other ``<label>.`` + main domain is a vendor storefront.
    5. Everything else is unknown and treated as the main site.
    """
    local = _local_base(hostname, config)
    if local is not None:
        if hostname == local:
            return HostKind.LOCAL, None
        label = hostname[: -len(local) - 1].split(".", 1)[0]
        if label and label != _WWW:
            return HostKind.LOCAL, label
        return HostKind.LOCAL, None

    main_domain = config.main_domain
    if hostname in (main_domain, f"{_WWW}.{main_domain}"):
        return HostKind.MAIN, None

    suffix = f".{main_domain}"
    if hostname.endswith(suffix):
        subdomain = hostname[: -len(suffix)]
        if subdomain == _WWW:
            return HostKind.MAIN, None
        if subdomain:
            return HostKind.VENDOR, subdomain

    return HostKind.UNKNOWN, None


class TenantResolver(RoutingComponent):
    """Maps vendor subdomains onto the storefront route."""

    category = ComponentCategory.TENANT

    def __init__(self, config: RoutingConfig) -> None:
        self._config = config

    def resolve(self, ctx: RoutingContext) -> None:
        kind, slug = classify_host(ctx.hostname, self._config)
        ctx.state["host_kind"] = kind
        if slug is None:
            return

        ctx.mark_storefront(slug)
        if kind is HostKind.LOCAL:
            # Simulated subdomains are signalled through headers only.
            return

        store_prefix = self._config.store_prefix
        if ctx.effective_path.startswith(f"{store_prefix}/"):
            return

        tail = "" if ctx.effective_path == "/" else ctx.effective_path
        ctx.effective_path = f"{store_prefix}/{slug}{tail}"
        logger.debug("Rewrote %s to %s for vendor %r", ctx.path, ctx.effective_path, slug)
