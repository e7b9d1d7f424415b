"""Route matcher deciding which paths bypass routing entirely."""

from __future__ import annotations

from storefront_routing.config import RoutingConfig


def is_excluded(path: str, config: RoutingConfig) -> bool:
    """Return True for API, framework-internal and static file paths.

    Any path containing a dot (``/favicon.ico``, ``/img/logo.png``) counts as
    a static file.
    """
    for prefix in config.excluded_prefixes:
        if path == prefix or path.startswith(f"{prefix}/"):
            return True
    return "." in path
