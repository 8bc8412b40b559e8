"""
Dev Facts Adapter.

Logs facts instead of shipping them to an analytics backend.
Used for local development and testing.

Key behaviors:
- Builds a Fact for each observation and logs it
- Stores facts in memory for test assertions
- Supports configurable log level
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from topsites.core.facts import Fact, build_top_sites_count_fact

logger = logging.getLogger(__name__)


@dataclass
class DevFactsAdapter:
    """
    Dev facts adapter that logs instead of reporting.

    Implements TopSitesTelemetryPort.
    """

    # In-memory storage for test assertions
    facts: list[Fact] = field(default_factory=list)

    # Configuration
    log_level: int = logging.INFO

    def record_top_sites_count(self, count: int) -> None:
        """Record the current top sites count as a fact."""
        self.emit(build_top_sites_count_fact(count))

    def emit(self, fact: Fact) -> None:
        """Store and log a fact."""
        self.facts.append(fact)
        logger.log(
            self.log_level,
            "Fact %s/%s: %s=%s",
            fact.component,
            fact.action.value,
            fact.item,
            fact.value,
        )

    def facts_for(self, item: str) -> list[Fact]:
        """Facts recorded for an item, oldest first."""
        return [fact for fact in self.facts if fact.item == item]

    def clear(self) -> None:
        self.facts.clear()


class DisabledTelemetry:
    """Telemetry sink used when facts are switched off."""

    def record_top_sites_count(self, count: int) -> None:
        pass
