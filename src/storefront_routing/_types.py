"""Shared type aliases and protocols."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any

# Vendor persistence is external: routing only needs "find vendor by slug".
VendorLookupCallback = Callable[[str], Awaitable[Any]]
