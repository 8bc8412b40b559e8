"""
Top sites component - Pinned and top site management use cases.
"""

from topsites.core.facts import (
    TOP_SITES_COMPONENT,
    TOP_SITES_COUNT_ITEM,
    Fact,
    FactAction,
    build_top_sites_count_fact,
)

from ._impl import emit_top_sites_count
from .component import (
    AddPinnedSiteUseCase,
    RemoveTopSiteUseCase,
    TopSitesUseCases,
    UpdateTopSiteUseCase,
)
from .ports import TopSitesStoragePort, TopSitesTelemetryPort

__all__ = [
    # Entry points
    "TopSitesUseCases",
    "AddPinnedSiteUseCase",
    "RemoveTopSiteUseCase",
    "UpdateTopSiteUseCase",
    # Facts
    "Fact",
    "FactAction",
    "TOP_SITES_COMPONENT",
    "TOP_SITES_COUNT_ITEM",
    "build_top_sites_count_fact",
    "emit_top_sites_count",
    # Ports
    "TopSitesStoragePort",
    "TopSitesTelemetryPort",
]
