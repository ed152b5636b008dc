"""
In-memory query caches.

Two stores, both owned by the service instance and living exactly as long
as it does:

- CatalogStore: absent until the first successful catalog scan, then fixed.
- DetailStore: component name → ComponentDetail, one write per name.

Neither store evicts, expires or overwrites.  A put() for something already
stored keeps the existing value and returns it, so every caller sees the
same instance.
"""

import threading
from typing import Optional, Sequence

from .schemas import ComponentDetail, ComponentSummary
from .logger import get_module_logger

logger = get_module_logger("cache")


class CatalogStore:
    """Single-entry store for the full component catalog."""

    def __init__(self):
        self._components: Optional[tuple[ComponentSummary, ...]] = None
        self._lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._components is not None

    def get(self) -> Optional[tuple[ComponentSummary, ...]]:
        """The cached catalog, or None if it was never loaded."""
        return self._components

    def put(self, components: Sequence[ComponentSummary]) -> tuple[ComponentSummary, ...]:
        """Store the catalog unless one is already stored. Returns the stored catalog."""
        with self._lock:
            if self._components is None:
                self._components = tuple(components)
                logger.info(f"Cached catalog with {len(self._components)} components")
            return self._components


class DetailStore:
    """Write-once map from component name to ComponentDetail."""

    def __init__(self):
        self._details: dict[str, ComponentDetail] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> Optional[ComponentDetail]:
        detail = self._details.get(name)
        if detail is None:
            logger.debug(f"Cache miss for component: {name}")
        else:
            logger.debug(f"Cache hit for component: {name}")
        return detail

    def put(self, name: str, detail: ComponentDetail) -> ComponentDetail:
        """Store a detail unless the name is already present. Returns the stored detail."""
        with self._lock:
            existing = self._details.get(name)
            if existing is not None:
                return existing
            self._details[name] = detail
            logger.info(f"Cached detail for component: {name}")
            return detail

    def names(self) -> list[str]:
        """Cached component names in insertion order."""
        with self._lock:
            return list(self._details)

    def __contains__(self, name: str) -> bool:
        return name in self._details

    def __len__(self) -> int:
        return len(self._details)
