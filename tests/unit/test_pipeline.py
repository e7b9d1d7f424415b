"""Tests for RoutingPipeline, ResolvedPipeline and resolve_request."""

from __future__ import annotations

from typing import Any

import pytest

from storefront_routing.component import ComponentCategory, RoutingComponent
from storefront_routing.components.locale import LocaleResolver
from storefront_routing.components.tenant import TenantResolver
from storefront_routing.config import RoutingConfig
from storefront_routing.context import RoutingContext
from storefront_routing.exceptions import RoutingInternalError
from storefront_routing.pipeline import (
    ResolvedPipeline,
    RoutingPipeline,
    build_context,
    default_pipeline,
    resolve_request,
)

MAIN = "jeepoo.test"


class _CustomStub(RoutingComponent):
    category = ComponentCategory.CUSTOM

    def resolve(self, ctx: RoutingContext) -> None:
        ctx.state["order"] = [*ctx.state.get("order", []), "custom"]


class _TenantStub(RoutingComponent):
    category = ComponentCategory.TENANT

    def resolve(self, ctx: RoutingContext) -> None:
        ctx.state["order"] = [*ctx.state.get("order", []), "tenant"]


class _LocaleStub(RoutingComponent):
    category = ComponentCategory.LOCALE

    def resolve(self, ctx: RoutingContext) -> None:
        ctx.state["order"] = [*ctx.state.get("order", []), "locale"]


class _Boom(RoutingComponent):
    category = ComponentCategory.CUSTOM

    def resolve(self, ctx: RoutingContext) -> None:
        raise ValueError("boom")


class TestPipelineInit:
    def test_init_with_components(self) -> None:
        resolved = RoutingPipeline(_TenantStub(), _LocaleStub()).resolve()
        assert len(resolved.components) == 2

    def test_init_empty(self) -> None:
        assert RoutingPipeline().resolve().components == ()

    def test_add_returns_self(self) -> None:
        pipeline = RoutingPipeline()
        assert pipeline.add(_TenantStub()) is pipeline


class TestPipelineResolve:
    def test_components_sorted_by_category_order(self) -> None:
        resolved = RoutingPipeline(_CustomStub(), _LocaleStub(), _TenantStub()).resolve()
        categories = [c.category for c in resolved.components]
        assert categories == [
            ComponentCategory.TENANT,
            ComponentCategory.LOCALE,
            ComponentCategory.CUSTOM,
        ]

    def test_resolve_is_cached(self) -> None:
        pipeline = RoutingPipeline(_TenantStub())
        assert pipeline.resolve() is pipeline.resolve()

    def test_add_invalidates_cache(self) -> None:
        pipeline = RoutingPipeline(_TenantStub())
        first = pipeline.resolve()
        pipeline.add(_LocaleStub())
        assert pipeline.resolve() is not first
        assert len(pipeline.resolve().components) == 2

    def test_nested_pipelines_flatten(self) -> None:
        inner = RoutingPipeline(_LocaleStub())
        resolved = RoutingPipeline(_CustomStub(), inner, _TenantStub()).resolve()
        assert [type(c) for c in resolved.components] == [
            _TenantStub,
            _LocaleStub,
            _CustomStub,
        ]

    def test_resolved_is_immutable(self) -> None:
        resolved = RoutingPipeline().resolve()
        assert isinstance(resolved, ResolvedPipeline)
        with pytest.raises(AttributeError):
            resolved.debug = True  # type: ignore[misc]


class TestPipelineRun:
    def test_runs_in_category_order(self, make_context: Any) -> None:
        ctx = make_context()
        RoutingPipeline(_CustomStub(), _LocaleStub(), _TenantStub()).run(ctx)
        assert ctx.state["order"] == ["tenant", "locale", "custom"]

    def test_returns_decision(self, make_context: Any) -> None:
        decision = RoutingPipeline().run(make_context(path="/about"))
        assert decision.effective_path == "/about"
        assert decision.locale == "ar"

    def test_component_error_is_wrapped(self, make_context: Any) -> None:
        with pytest.raises(RoutingInternalError) as exc_info:
            RoutingPipeline(_Boom()).run(make_context())
        assert isinstance(exc_info.value.cause, ValueError)

    def test_tenant_rewrite_feeds_locale(
        self, config: RoutingConfig, make_context: Any
    ) -> None:
        ctx = make_context(hostname=f"acme.{MAIN}", path="/ar/shoes")
        decision = RoutingPipeline(LocaleResolver(config), TenantResolver(config)).run(ctx)
        # Locale sees the rewritten storefront path, which carries no prefix.
        assert decision.effective_path == "/store/acme/ar/shoes"


class TestDefaultPipeline:
    def test_contains_tenant_then_locale(self, config: RoutingConfig) -> None:
        resolved = default_pipeline(config).resolve()
        assert [type(c) for c in resolved.components] == [TenantResolver, LocaleResolver]

    def test_debug_flag(self, config: RoutingConfig) -> None:
        assert default_pipeline(config, debug=True).resolve().debug is True


class TestBuildContext:
    def test_normalises_host(self, config: RoutingConfig) -> None:
        ctx = build_context(config, "ACME.Jeepoo.test:443", "/x", "en")
        assert ctx.hostname == "acme.jeepoo.test"
        assert ctx.locale == "ar"
        assert ctx.locale_cookie == "en"


class TestResolveRequest:
    def test_subdomain_extraction(self, config: RoutingConfig) -> None:
        decision = resolve_request(config, f"acme.{MAIN}", "/shoes")
        assert decision.vendor_slug == "acme"
        assert decision.is_storefront is True
        assert decision.effective_path == "/store/acme/shoes"

    def test_main_domain_pass_through(self, config: RoutingConfig) -> None:
        decision = resolve_request(config, MAIN, "/register")
        assert decision.effective_path == "/register"
        assert decision.is_storefront is False

    def test_www_matches_main_domain(self, config: RoutingConfig) -> None:
        bare = resolve_request(config, MAIN, "/pricing")
        www = resolve_request(config, f"www.{MAIN}", "/pricing")
        assert bare == www
        assert www.is_storefront is False

    def test_store_path_is_idempotent(self, config: RoutingConfig) -> None:
        decision = resolve_request(config, f"acme.{MAIN}", "/store/acme/shoes")
        assert decision.effective_path == "/store/acme/shoes"

    def test_dev_simulated_subdomain(self, config: RoutingConfig) -> None:
        decision = resolve_request(config, "acme.localhost:3000", "/")
        assert decision.is_storefront is True
        assert decision.vendor_slug == "acme"
        assert decision.effective_path == "/"

    def test_unknown_host(self, config: RoutingConfig) -> None:
        decision = resolve_request(config, "totallyunrelated.example", "/x")
        assert decision.is_storefront is False
        assert decision.vendor_slug is None
        assert decision.effective_path == "/x"

    @pytest.mark.parametrize("cookie", [None, "", "fr", "AR-jo", "<script>"])
    def test_locale_default_safety(self, config: RoutingConfig, cookie: str | None) -> None:
        assert resolve_request(config, MAIN, "/", cookie).locale == "ar"

    @pytest.mark.parametrize(
        "host",
        [
            MAIN,
            f"www.{MAIN}",
            f"acme.{MAIN}",
            "localhost",
            "acme.localhost",
            "www.localhost",
            "unrelated.example",
            "",
        ],
    )
    def test_storefront_iff_vendor_slug(self, config: RoutingConfig, host: str) -> None:
        decision = resolve_request(config, host, "/")
        assert decision.is_storefront == bool(decision.vendor_slug)

    def test_english_with_prefix(self, config: RoutingConfig) -> None:
        decision = resolve_request(config, MAIN, "/en/about", "en")
        assert decision.locale == "en"
        assert decision.effective_path == "/en/about"
