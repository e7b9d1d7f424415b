"""
Multi-vendor storefront application example.

Demonstrates:
- Installing StorefrontRoutingMiddleware on a FastAPI app
- Resolving the current vendor with vendor_dependency()
- Locale-aware links and text direction for bilingual pages
- A custom component and LoggingHook on the routing pipeline

Run with ``uvicorn 02_storefront_app:app`` and try
``curl -H "Host: acme.localhost" http://127.0.0.1:8000/shop`` or
``curl http://acme.localhost:8000/`` when STOREFRONT_MAIN_DOMAIN points
at a domain you control.
"""

import logging
from dataclasses import dataclass

from fastapi import Depends, FastAPI

from storefront_routing import (
    ComponentCategory,
    LoggingHook,
    RoutingComponent,
    RoutingContext,
    RoutingDecision,
    StorefrontRoutingMiddleware,
    default_pipeline,
    get_routing,
    load_config,
    localized_path,
    text_direction,
    vendor_dependency,
)

logging.basicConfig(level=logging.DEBUG)

# ========== Domain Models ==========


@dataclass
class Vendor:
    slug: str
    store_name_ar: str
    store_name_en: str | None
    whatsapp_number: str


# ========== Mock Database ==========

VENDORS = {
    "acme": Vendor("acme", "مخبز أكمي", "Acme Bakery", "962790000000"),
    "roses": Vendor("roses", "ورود", None, "962791111111"),
}


async def find_vendor(slug: str) -> Vendor | None:
    """Look up a vendor by slug (replace with a real database query)."""
    return VENDORS.get(slug)


# ========== Custom Component ==========


class PreviewMode(RoutingComponent):
    """Flags preview requests so pages can render unpublished products."""

    category = ComponentCategory.CUSTOM

    def resolve(self, ctx: RoutingContext) -> None:
        ctx.state["preview"] = ctx.hostname.startswith("preview-")


# ========== Application ==========

config = load_config()
pipeline = default_pipeline(config).add(PreviewMode()).add_hook(LoggingHook())

app = FastAPI(title="Storefront Routing Example")
app.add_middleware(StorefrontRoutingMiddleware, config=config, pipeline=pipeline)

current_vendor = vendor_dependency(find_vendor)


@app.get("/")
async def landing(routing: RoutingDecision = Depends(get_routing)):
    """Marketing landing page for the main domain."""
    return {
        "page": "landing",
        "locale": routing.locale,
        "dir": text_direction(routing.locale),
        "links": {
            "register": localized_path("/register", routing.locale, config),
            "english": localized_path("/", "en", config),
            "arabic": localized_path("/", "ar", config),
        },
    }


@app.get("/en")
async def landing_en(routing: RoutingDecision = Depends(get_routing)):
    return await landing(routing)


@app.get("/store/{slug}")
async def storefront(
    vendor: Vendor = Depends(current_vendor),
    routing: RoutingDecision = Depends(get_routing),
):
    """Storefront home for the vendor resolved from the subdomain."""
    name = vendor.store_name_ar
    if routing.locale == "en" and vendor.store_name_en:
        name = vendor.store_name_en
    return {
        "page": "storefront",
        "store": name,
        "dir": text_direction(routing.locale),
        "contact": f"https://wa.me/{vendor.whatsapp_number}",
    }


@app.get("/shop")
async def dev_storefront(vendor: Vendor = Depends(current_vendor)):
    """Local development entry point for simulated subdomains."""
    return {"page": "storefront", "store": vendor.store_name_ar}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
