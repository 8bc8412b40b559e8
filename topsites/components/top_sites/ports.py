"""
Top sites component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from topsites.domain.entities import TopSite


class TopSitesStoragePort(Protocol):
    """Storage interface for pinned and computed top sites."""

    def add_top_site(self, title: str, url: str, is_default: bool = False) -> None:
        """Add a pinned site."""
        ...

    def remove_top_site(self, top_site: TopSite) -> None:
        """Remove a top site."""
        ...

    def update_top_site(self, top_site: TopSite, title: str, url: str) -> None:
        """Update a top site's title and url."""
        ...

    def get_top_sites_count(self) -> int:
        """Count of top sites currently stored."""
        ...


class TopSitesTelemetryPort(Protocol):
    """Best-effort sink for top sites facts."""

    def record_top_sites_count(self, count: int) -> None:
        """Record the current top sites count."""
        ...
