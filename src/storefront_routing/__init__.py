"""Storefront Routing - tenant resolution and locale negotiation for storefronts."""

from storefront_routing.component import ComponentCategory, RoutingComponent
from storefront_routing.components.locale import (
    LocaleResolver,
    localized_path,
    split_locale_prefix,
    text_direction,
)
from storefront_routing.components.tenant import (
    HostKind,
    TenantResolver,
    classify_host,
    normalize_host,
)
from storefront_routing.config import RoutingConfig, RoutingSettings, load_config
from storefront_routing.context import RoutingContext, RoutingDecision
from storefront_routing.dependency import get_routing, vendor_dependency
from storefront_routing.exceptions import (
    ConfigurationError,
    RoutingAbort,
    RoutingException,
    RoutingInternalError,
    VendorNotFound,
)
from storefront_routing.hooks import (
    AfterComponent,
    AfterRouting,
    BeforeRouting,
    LoggingHook,
    RoutingHook,
)
from storefront_routing.matcher import is_excluded
from storefront_routing.middleware import StorefrontRoutingMiddleware
from storefront_routing.pipeline import (
    RoutingPipeline,
    build_context,
    default_pipeline,
    resolve_request,
)
from storefront_routing.trace import RoutingTrace, TraceEntry

__all__ = [
    "AfterComponent",
    "AfterRouting",
    "BeforeRouting",
    "ComponentCategory",
    "ConfigurationError",
    "HostKind",
    "LocaleResolver",
    "LoggingHook",
    "RoutingAbort",
    "RoutingComponent",
    "RoutingConfig",
    "RoutingContext",
    "RoutingDecision",
    "RoutingException",
    "RoutingHook",
    "RoutingInternalError",
    "RoutingPipeline",
    "RoutingSettings",
    "RoutingTrace",
    "StorefrontRoutingMiddleware",
    "TenantResolver",
    "TraceEntry",
    "VendorNotFound",
    "build_context",
    "classify_host",
    "default_pipeline",
    "get_routing",
    "is_excluded",
    "load_config",
    "localized_path",
    "normalize_host",
    "resolve_request",
    "split_locale_prefix",
    "text_direction",
    "vendor_dependency",
]
