"""RoutingPipeline: ordered container and execution engine for RoutingComponents."""

from __future__ import annotations

import time
from dataclasses import dataclass

from storefront_routing.component import RoutingComponent
from storefront_routing.components.locale import LocaleResolver
from storefront_routing.components.tenant import TenantResolver, normalize_host
from storefront_routing.config import RoutingConfig
from storefront_routing.context import RoutingContext, RoutingDecision
from storefront_routing.exceptions import RoutingInternalError
from storefront_routing.hooks import RoutingHook
from storefront_routing.trace import RoutingTrace, TraceEntry


@dataclass(frozen=True)
class ResolvedPipeline:
    """Immutable, pre-computed execution plan."""

    components: tuple[RoutingComponent, ...]
    hooks: tuple[RoutingHook, ...] = ()
    debug: bool = False


class RoutingPipeline:
    """Ordered container of RoutingComponent instances."""

    def __init__(
        self,
        *components: RoutingComponent | RoutingPipeline,
        debug: bool = False,
    ) -> None:
        self._items: list[RoutingComponent | RoutingPipeline] = list(components)
        self._hooks: list[RoutingHook] = []
        self._debug = debug
        self._resolved: ResolvedPipeline | None = None

    def add(self, *components: RoutingComponent | RoutingPipeline) -> RoutingPipeline:
        self._items.extend(components)
        self._resolved = None
        return self

    def add_hook(self, hook: RoutingHook) -> RoutingPipeline:
        self._hooks.append(hook)
        self._resolved = None
        return self

    def resolve(self) -> ResolvedPipeline:
        if self._resolved is not None:
            return self._resolved

        flat: list[RoutingComponent] = []
        self._flatten(self._items, flat)

        sorted_components = sorted(flat, key=lambda c: c.category.order)

        self._resolved = ResolvedPipeline(
            components=tuple(sorted_components),
            hooks=tuple(self._hooks),
            debug=self._debug,
        )
        return self._resolved

    @staticmethod
    def _flatten(
        items: list[RoutingComponent | RoutingPipeline],
        out: list[RoutingComponent],
    ) -> None:
        for item in items:
            if isinstance(item, RoutingPipeline):
                RoutingPipeline._flatten(item._items, out)
            else:
                out.append(item)

    def run(self, ctx: RoutingContext) -> RoutingDecision:
        """Execute every component against ``ctx`` and return the decision.

        Any exception raised by a component or hook is wrapped in
        :class:`RoutingInternalError`. End hooks always run, and the first
        failure wins. In debug mode a :class:`RoutingTrace` is stored in
        ``ctx.state["trace"]``.
        """
        plan = self.resolve()
        trace = (
            RoutingTrace(hostname=ctx.hostname, path=ctx.path) if plan.debug else None
        )
        started = time.perf_counter()
        failure: Exception | None = None

        try:
            for hook in plan.hooks:
                hook.on_start(ctx)

            for component in plan.components:
                comp_started = time.perf_counter()
                try:
                    component.resolve(ctx)
                except Exception as exc:
                    if trace is not None:
                        trace.entries.append(
                            _entry(component, ctx, comp_started, "FAILED", str(exc))
                        )
                    for hook in plan.hooks:
                        hook.on_component(ctx, component, exc)
                    raise
                if trace is not None:
                    trace.entries.append(_entry(component, ctx, comp_started, "OK"))
                for hook in plan.hooks:
                    hook.on_component(ctx, component, None)
        except Exception as exc:
            failure = exc

        for hook in plan.hooks:
            try:
                hook.on_end(ctx)
            except Exception as exc:
                failure = failure or exc

        wrapped = (
            RoutingInternalError("Internal routing error", cause=failure)
            if failure is not None
            else None
        )
        if trace is not None:
            trace.host_kind = ctx.state.get("host_kind")
            trace.total_duration_ms = (time.perf_counter() - started) * 1000
            if wrapped is not None:
                trace.outcome = "ERROR"
                trace.error = wrapped
            ctx.state["trace"] = trace

        if wrapped is not None:
            raise wrapped from failure
        return ctx.decision()


def _entry(
    component: RoutingComponent,
    ctx: RoutingContext,
    started: float,
    outcome: str,
    reason: str | None = None,
) -> TraceEntry:
    return TraceEntry(
        component_name=type(component).__name__,
        category=component.category,
        duration_ms=(time.perf_counter() - started) * 1000,
        outcome=outcome,  # type: ignore[arg-type]
        locale=ctx.locale,
        effective_path=ctx.effective_path,
        vendor_slug=ctx.vendor_slug,
        reason=reason,
    )


def default_pipeline(config: RoutingConfig, *, debug: bool = False) -> RoutingPipeline:
    """Tenant resolution followed by locale negotiation."""
    return RoutingPipeline(TenantResolver(config), LocaleResolver(config), debug=debug)


def build_context(
    config: RoutingConfig,
    host: str,
    path: str,
    locale_cookie: str | None = None,
) -> RoutingContext:
    return RoutingContext(
        hostname=normalize_host(host),
        path=path,
        locale=config.default_locale,
        locale_cookie=locale_cookie,
    )


def resolve_request(
    config: RoutingConfig,
    host: str,
    path: str,
    locale_cookie: str | None = None,
) -> RoutingDecision:
    """Route a single request with the default pipeline."""
    ctx = build_context(config, host, path, locale_cookie)
    return default_pipeline(config).run(ctx)
