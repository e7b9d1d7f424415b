"""RoutingContext and RoutingDecision: per-request routing state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RoutingDecision:
    """Immutable outcome of routing a single request."""

    locale: str
    effective_path: str
    vendor_slug: str | None = None

    @property
    def is_storefront(self) -> bool:
        return bool(self.vendor_slug)

    @classmethod
    def passthrough(cls, path: str, locale: str) -> RoutingDecision:
        """Main-domain decision that leaves the path untouched."""
        return cls(locale=locale, effective_path=path)


@dataclass
class RoutingContext:
    """Lightweight per-request state container mutated by routing components."""

    hostname: str
    path: str
    locale: str
    locale_cookie: str | None = None
    vendor_slug: str | None = None
    effective_path: str = ""
    state: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.effective_path:
            self.effective_path = self.path

    @property
    def is_storefront(self) -> bool:
        return bool(self.vendor_slug)

    def mark_storefront(self, vendor_slug: str) -> None:
        if vendor_slug:
            self.vendor_slug = vendor_slug

    def decision(self) -> RoutingDecision:
        return RoutingDecision(
            locale=self.locale,
            effective_path=self.effective_path,
            vendor_slug=self.vendor_slug,
        )
