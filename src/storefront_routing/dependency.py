"""FastAPI dependencies exposing routing decisions to request handlers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import HTTPException
from starlette.requests import Request

from storefront_routing._types import VendorLookupCallback
from storefront_routing.config import DEFAULT_LOCALE
from storefront_routing.context import RoutingDecision
from storefront_routing.exceptions import RoutingAbort, VendorNotFound

logger = logging.getLogger(__name__)


def get_routing(request: Request) -> RoutingDecision:
    """Return the routing decision stored by StorefrontRoutingMiddleware.

    Apps without the middleware get a main-site decision in the default
    locale of the recorded config, or the built-in default when none is set.
    """
    decision = getattr(request.state, "routing", None)
    if isinstance(decision, RoutingDecision):
        return decision
    config = getattr(request.state, "routing_config", None)
    locale = config.default_locale if config is not None else DEFAULT_LOCALE
    return RoutingDecision.passthrough(request.url.path, locale)


def vendor_dependency(
    lookup: VendorLookupCallback,
) -> Callable[..., Awaitable[Any]]:
    """Return a FastAPI dependency resolving the storefront's vendor.

    Responds with 404 when the request is not a storefront or ``lookup``
    finds no vendor for the slug.
    """

    async def dependency(request: Request) -> Any:
        decision = get_routing(request)
        try:
            return await _find_vendor(lookup, decision)
        except RoutingAbort as exc:
            raise HTTPException(status_code=exc.status_code, detail=exc.detail) from exc

    return dependency


async def _find_vendor(lookup: VendorLookupCallback, decision: RoutingDecision) -> Any:
    if not decision.vendor_slug:
        raise VendorNotFound()

    try:
        vendor = await lookup(decision.vendor_slug)
    except Exception as exc:
        logger.exception("Vendor lookup failed for %r", decision.vendor_slug)
        raise VendorNotFound() from exc

    if vendor is None:
        raise VendorNotFound()
    return vendor
