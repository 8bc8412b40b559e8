"""
Top sites component - Pinned and top site use cases.

Add, remove and update go straight to storage on the caller's thread.
Add also reports the new top sites count from a background task.

Invariants:
- Storage errors propagate to the caller unchanged
- The count is read only after the add has been written
- Count reporting never fails or delays the add
- Each facade builds at most one instance of each use case
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future

from topsites.adapters.facts import DevFactsAdapter
from topsites.adapters.task_runner import ThreadPoolTaskRunner
from topsites.core.ports.tasks import TaskRunnerError, TaskRunnerPort
from topsites.domain.entities import TopSite

from ._impl import EMIT_COUNT_TASK, emit_top_sites_count
from .ports import TopSitesStoragePort, TopSitesTelemetryPort

logger = logging.getLogger(__name__)


class AddPinnedSiteUseCase:
    """Add a pinned site use case."""

    def __init__(
        self,
        storage: TopSitesStoragePort,
        telemetry: TopSitesTelemetryPort,
        runner: TaskRunnerPort,
    ) -> None:
        self._storage = storage
        self._telemetry = telemetry
        # Exposed for tests that need to await or cancel the count task.
        self.runner = runner
        self.last_task: Future[None] | None = None

    def __call__(self, title: str, url: str, is_default: bool = False) -> None:
        """
        Adds a new pinned site.

        Args:
            title: The title string.
            url: The URL string.
            is_default: Whether the site is a built-in default pin.
        """
        self._storage.add_top_site(title, url, is_default)
        logger.debug("Added pinned site %s (default=%s)", url, is_default)

        try:
            self.last_task = self.runner.submit(EMIT_COUNT_TASK, self._emit_count)
        except TaskRunnerError:
            logger.warning("Could not schedule top sites count report", exc_info=True)

    def _emit_count(self) -> None:
        emit_top_sites_count(self._storage, self._telemetry)


class RemoveTopSiteUseCase:
    """Remove a top site use case."""

    def __init__(self, storage: TopSitesStoragePort) -> None:
        self._storage = storage

    def __call__(self, top_site: TopSite) -> None:
        """
        Removes the given top site.

        Args:
            top_site: The top site.
        """
        self._storage.remove_top_site(top_site)
        logger.debug("Removed top site %s", top_site.url)


class UpdateTopSiteUseCase:
    """Update a top site use case."""

    def __init__(self, storage: TopSitesStoragePort) -> None:
        self._storage = storage

    def __call__(self, top_site: TopSite, title: str, url: str) -> None:
        """
        Updates the given top site.

        Args:
            top_site: The top site.
            title: The new title for the top site.
            url: The new url for the top site.
        """
        self._storage.update_top_site(top_site, title, url)
        logger.debug("Updated top site %s -> %s", top_site.url, url)


class TopSitesUseCases:
    """
    Use cases related to the top sites feature.

    Builds each use case on first access and reuses it afterwards.
    Construction does no I/O and starts no threads.
    """

    def __init__(
        self,
        storage: TopSitesStoragePort,
        telemetry: TopSitesTelemetryPort | None = None,
        runner: TaskRunnerPort | None = None,
    ) -> None:
        """
        Initialize use cases.

        Args:
            storage: Top sites storage shared by all use cases
            telemetry: Fact sink (defaults to DevFactsAdapter)
            runner: Background runner (defaults to a thread pool owned
                by this facade and released by close())
        """
        self._storage = storage
        self._telemetry = telemetry
        self._runner = runner
        self._owns_runner = False
        self._lock = threading.Lock()
        self._add_pinned_sites: AddPinnedSiteUseCase | None = None
        self._remove_top_sites: RemoveTopSiteUseCase | None = None
        self._update_top_sites: UpdateTopSiteUseCase | None = None

    @property
    def add_pinned_sites(self) -> AddPinnedSiteUseCase:
        if self._add_pinned_sites is None:
            with self._lock:
                if self._add_pinned_sites is None:
                    if self._telemetry is None:
                        self._telemetry = DevFactsAdapter()
                    if self._runner is None:
                        self._runner = ThreadPoolTaskRunner()
                        self._owns_runner = True
                    self._add_pinned_sites = AddPinnedSiteUseCase(
                        self._storage, self._telemetry, self._runner
                    )
        return self._add_pinned_sites

    @property
    def remove_top_sites(self) -> RemoveTopSiteUseCase:
        if self._remove_top_sites is None:
            with self._lock:
                if self._remove_top_sites is None:
                    self._remove_top_sites = RemoveTopSiteUseCase(self._storage)
        return self._remove_top_sites

    @property
    def update_top_sites(self) -> UpdateTopSiteUseCase:
        if self._update_top_sites is None:
            with self._lock:
                if self._update_top_sites is None:
                    self._update_top_sites = UpdateTopSiteUseCase(self._storage)
        return self._update_top_sites

    def close(self) -> None:
        """
        Shut down the background runner if this facade created it.

        A runner passed in by the caller is left to its owner.
        """
        with self._lock:
            runner = self._runner if self._owns_runner else None
        if runner is not None:
            runner.shutdown(wait=True)
