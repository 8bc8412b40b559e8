"""
In-Memory Top Sites Storage Adapter.

Keeps pinned sites in process memory for development and tests.
Implements TopSitesStoragePort.

Key behaviors:
- Pinned and default sites get incrementing ids in creation order
- Count covers pinned and default sites only
- Frecent sites are managed elsewhere; removing one hides its url
- Observers are notified after every successful mutation
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from topsites.domain.entities import PinnedSite, TopSite

logger = logging.getLogger(__name__)


class TopSitesObserver(Protocol):
    """Receives a callback whenever storage changes."""

    def on_storage_updated(self) -> None:
        ...


class InMemoryTopSitesStorage:
    """In-memory top sites storage."""

    def __init__(self, pinned_sites: list[PinnedSite] | None = None) -> None:
        self._lock = threading.RLock()
        self._pinned: dict[int, PinnedSite] = {}
        self._next_id = 1
        self._removed_urls: set[str] = set()
        self._observers: list[TopSitesObserver] = []

        for site in pinned_sites or []:
            self._insert(site.title, site.url, site.is_default)

    # --- TopSitesStoragePort ---

    def add_top_site(self, title: str, url: str, is_default: bool = False) -> None:
        with self._lock:
            site = self._insert(title, url, is_default)
        logger.debug("Stored pinned site %d: %s", site.id, url)
        self._notify()

    def remove_top_site(self, top_site: TopSite) -> None:
        with self._lock:
            if top_site.is_pinned:
                if top_site.id is None or self._pinned.pop(top_site.id, None) is None:
                    return
            elif top_site.kind == "frecent":
                self._removed_urls.add(top_site.url)
            else:
                return
        self._notify()

    def update_top_site(self, top_site: TopSite, title: str, url: str) -> None:
        if not top_site.is_pinned:
            return

        with self._lock:
            site = self._pinned.get(top_site.id) if top_site.id is not None else None
            if site is None:
                raise TopSiteNotFoundError(top_site.id)
            self._pinned[site.id] = site.model_copy(update={"title": title, "url": url})
        self._notify()

    def get_top_sites_count(self) -> int:
        with self._lock:
            return len(self._pinned)

    # --- Queries ---

    def get_pinned_sites(self) -> list[PinnedSite]:
        """Pinned and default sites in creation order."""
        with self._lock:
            return [self._pinned[key] for key in sorted(self._pinned)]

    def get_top_sites(self, total_sites: int) -> list[TopSite]:
        """Up to total_sites top sites, pinned sites first."""
        return [site.to_top_site() for site in self.get_pinned_sites()[:total_sites]]

    def is_removed(self, url: str) -> bool:
        """Whether a frecent url has been removed from top sites."""
        with self._lock:
            return url in self._removed_urls

    # --- Observers ---

    def register(self, observer: TopSitesObserver) -> None:
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def unregister(self, observer: TopSitesObserver) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def _notify(self) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            observer.on_storage_updated()

    def _insert(self, title: str, url: str, is_default: bool) -> PinnedSite:
        site = PinnedSite(id=self._next_id, title=title, url=url, is_default=is_default)
        self._pinned[site.id] = site
        self._next_id += 1
        return site


# Error types


class TopSitesStorageError(Exception):
    """Base exception for top sites storage errors."""

    pass


class TopSiteNotFoundError(TopSitesStorageError):
    """Referenced top site is not stored."""

    def __init__(self, site_id: int | None) -> None:
        self.site_id = site_id
        super().__init__(f"Top site not found: {site_id}")
