"""
Basic usage example of storefront-routing.

Demonstrates:
- Building an explicit RoutingConfig
- Routing hosts and paths with resolve_request()
- Reading the typed RoutingDecision
"""

from storefront_routing import RoutingConfig, resolve_request

config = RoutingConfig(main_domain="jeepoo.com")

REQUESTS = [
    # (host, path, locale cookie)
    ("jeepoo.com", "/register", None),
    ("www.jeepoo.com", "/register", None),
    ("acme.jeepoo.com", "/shoes", None),
    ("acme.jeepoo.com", "/store/acme/shoes", None),
    ("acme.localhost:3000", "/", None),
    ("jeepoo.com", "/en/about", "en"),
    ("jeepoo.com", "/ar/about", "ar"),
    ("totallyunrelated.example", "/x", "fr"),
]


if __name__ == "__main__":
    for host, path, cookie in REQUESTS:
        decision = resolve_request(config, host, path, cookie)
        print(
            f"{host + path:<40} -> {decision.effective_path:<22} "
            f"locale={decision.locale} storefront={decision.is_storefront} "
            f"vendor={decision.vendor_slug}"
        )
