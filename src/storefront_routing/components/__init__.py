"""Built-in routing components."""

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

__all__ = [
    "HostKind",
    "LocaleResolver",
    "TenantResolver",
    "classify_host",
    "localized_path",
    "normalize_host",
    "split_locale_prefix",
    "text_direction",
]
