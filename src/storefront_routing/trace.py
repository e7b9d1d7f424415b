"""RoutingTrace and TraceEntry: debug record of how a request was routed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from storefront_routing.component import ComponentCategory
from storefront_routing.components.tenant import HostKind
from storefront_routing.exceptions import RoutingException


@dataclass(frozen=True)
class TraceEntry:
    """Routing state as left by a single component."""

    component_name: str
    category: ComponentCategory
    duration_ms: float
    outcome: Literal["OK", "FAILED"]
    locale: str
    effective_path: str
    vendor_slug: str | None = None
    reason: str | None = None


@dataclass
class RoutingTrace:
    """Step-by-step record of one request passing through the pipeline."""

    hostname: str = ""
    path: str = ""
    host_kind: HostKind | None = None
    entries: list[TraceEntry] = field(default_factory=list)
    total_duration_ms: float = 0.0
    outcome: Literal["OK", "ERROR"] = "OK"
    error: RoutingException | None = None

    @property
    def rewritten_by(self) -> str | None:
        """Name of the first component that changed the effective path."""
        previous = self.path
        for entry in self.entries:
            if entry.effective_path != previous:
                return entry.component_name
            previous = entry.effective_path
        return None

    @property
    def final_path(self) -> str:
        return self.entries[-1].effective_path if self.entries else self.path
