"""
Top sites count reporting.

Runs on the background task runner after a pinned site is added.
Failures are logged and dropped; fact emission never reaches the
caller that triggered it.
"""

from __future__ import annotations

import logging

from .ports import TopSitesStoragePort, TopSitesTelemetryPort

logger = logging.getLogger(__name__)

EMIT_COUNT_TASK = "emit-top-sites-count"


def emit_top_sites_count(
    storage: TopSitesStoragePort,
    telemetry: TopSitesTelemetryPort,
) -> int | None:
    """
    Read the current count from storage and forward it to telemetry.

    Returns:
        The count that was recorded, or None if reading or recording failed
    """
    try:
        count = storage.get_top_sites_count()
        telemetry.record_top_sites_count(count)
    except Exception:
        logger.exception("Failed to emit top sites count")
        return None

    logger.debug("Emitted top sites count: %d", count)
    return count
