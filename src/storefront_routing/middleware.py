"""StorefrontRoutingMiddleware: applies routing decisions at the HTTP boundary."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from urllib.parse import quote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from storefront_routing.config import RoutingConfig, load_config
from storefront_routing.context import RoutingDecision
from storefront_routing.exceptions import RoutingInternalError
from storefront_routing.matcher import is_excluded
from storefront_routing.pipeline import RoutingPipeline, build_context, default_pipeline

logger = logging.getLogger(__name__)


class StorefrontRoutingMiddleware(BaseHTTPMiddleware):
    """Resolve tenant and locale for every routed request.

    The effective path is rewritten in place (the client URL is unchanged).
    The decision is exposed as ``request.state.routing`` and
    ``request.state.locale``, the config as ``request.state.routing_config``.
    The storefront signal headers are set on both the downstream request and
    the response. Excluded paths only get a pass-through decision.
    """

    def __init__(
        self,
        app: ASGIApp,
        config: RoutingConfig | None = None,
        pipeline: RoutingPipeline | None = None,
    ) -> None:
        super().__init__(app)
        self.config = config or load_config()
        self.pipeline = pipeline or default_pipeline(self.config)

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request.state.routing_config = self.config
        if is_excluded(request.scope["path"], self.config):
            # Static and API paths get no locale or tenant processing.
            request.state.routing = RoutingDecision.passthrough(
                request.scope["path"], self.config.default_locale
            )
            return await call_next(request)

        decision = self.route(request)
        self._apply(request, decision)

        response = await call_next(request)
        for name, value in self.signal_headers(decision).items():
            response.headers[name] = value
        response.headers["content-language"] = decision.locale
        return response

    def route(self, request: Request) -> RoutingDecision:
        ctx = build_context(
            self.config,
            request.headers.get("host", ""),
            request.scope["path"],
            request.cookies.get(self.config.locale_cookie),
        )
        try:
            return self.pipeline.run(ctx)
        except RoutingInternalError as exc:
            logger.warning(
                "Routing failed for %s%s, serving main site: %r",
                ctx.hostname,
                ctx.path,
                exc.cause,
                exc_info=exc,
            )
            return RoutingDecision.passthrough(ctx.path, self.config.default_locale)

    def signal_headers(self, decision: RoutingDecision) -> dict[str, str]:
        headers = {
            self.config.storefront_header: "true" if decision.is_storefront else "false"
        }
        if decision.vendor_slug:
            headers[self.config.vendor_header] = decision.vendor_slug
        return headers

    def _apply(self, request: Request, decision: RoutingDecision) -> None:
        scope = request.scope
        if decision.effective_path != scope["path"]:
            scope["path"] = decision.effective_path
            scope["raw_path"] = quote(decision.effective_path).encode("ascii")

        # Client-supplied signal headers are never trusted.
        reserved = {
            self.config.storefront_header.encode("latin-1"),
            self.config.vendor_header.encode("latin-1"),
        }
        headers = [(k, v) for k, v in scope["headers"] if k.lower() not in reserved]
        for name, value in self.signal_headers(decision).items():
            headers.append((name.encode("latin-1"), value.encode("latin-1")))
        scope["headers"] = headers

        request.state.routing = decision
        request.state.locale = decision.locale
