"""RoutingComponent abstract base class and ComponentCategory enum."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from storefront_routing.context import RoutingContext


class ComponentCategory(Enum):
    """Routing component categories, defining strict execution order."""

    TENANT = "tenant"
    LOCALE = "locale"
    CUSTOM = "custom"

    @property
    def order(self) -> int:
        # Tenant rewrites must be visible to locale prefix handling.
        _ORDER = {
            "tenant": 1,
            "locale": 2,
            "custom": 3,
        }
        return _ORDER[self.value]


class RoutingComponent(ABC):
    """Base abstraction for all processing units in a routing pipeline."""

    category: ClassVar[ComponentCategory]

    @abstractmethod
    def resolve(self, ctx: RoutingContext) -> None: ...
