"""RoutingHook base and convenience hook classes."""

from __future__ import annotations

import logging
from collections.abc import Callable

from storefront_routing.component import RoutingComponent
from storefront_routing.context import RoutingContext


class RoutingHook:
    """Base abstraction for lifecycle hooks. All methods are no-op by default."""

    def on_start(self, ctx: RoutingContext) -> None:
        pass

    def on_end(self, ctx: RoutingContext) -> None:
        pass

    def on_component(
        self,
        ctx: RoutingContext,
        component: RoutingComponent,
        error: Exception | None,
    ) -> None:
        pass


class BeforeRouting(RoutingHook):
    """Convenience hook that only fires on pipeline start."""

    def __init__(self, callback: Callable[[RoutingContext], None]) -> None:
        self._callback = callback

    def on_start(self, ctx: RoutingContext) -> None:
        self._callback(ctx)


class AfterRouting(RoutingHook):
    """Convenience hook that only fires on pipeline end."""

    def __init__(self, callback: Callable[[RoutingContext], None]) -> None:
        self._callback = callback

    def on_end(self, ctx: RoutingContext) -> None:
        self._callback(ctx)


class AfterComponent(RoutingHook):
    """Convenience hook that fires after each component."""

    def __init__(
        self,
        callback: Callable[
            [RoutingContext, RoutingComponent, Exception | None], None
        ],
    ) -> None:
        self._callback = callback

    def on_component(
        self,
        ctx: RoutingContext,
        component: RoutingComponent,
        error: Exception | None,
    ) -> None:
        self._callback(ctx, component, error)


class LoggingHook(RoutingHook):
    """Logs every routing decision and failing component."""

    def __init__(
        self, logger: logging.Logger | None = None, *, level: int = logging.DEBUG
    ) -> None:
        self._logger = logger or logging.getLogger("storefront_routing")
        self._level = level

    def on_component(
        self,
        ctx: RoutingContext,
        component: RoutingComponent,
        error: Exception | None,
    ) -> None:
        if error is not None:
            self._logger.warning(
                "%s failed for %s%s: %s",
                type(component).__name__,
                ctx.hostname,
                ctx.path,
                error,
            )

    def on_end(self, ctx: RoutingContext) -> None:
        self._logger.log(
            self._level,
            "Routed %s%s -> %s (locale=%s, vendor=%s)",
            ctx.hostname,
            ctx.path,
            ctx.effective_path,
            ctx.locale,
            ctx.vendor_slug,
        )
