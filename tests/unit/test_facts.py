"""
Facts model and dev facts adapter tests.
"""

from __future__ import annotations

import logging

import pytest

from topsites.adapters.facts import DevFactsAdapter, DisabledTelemetry
from topsites.core.facts import (
    TOP_SITES_COMPONENT,
    TOP_SITES_COUNT_ITEM,
    Fact,
    FactAction,
    build_top_sites_count_fact,
)


class TestTopSitesCountFact:
    def test_fact_fields(self) -> None:
        fact = build_top_sites_count_fact(7)

        assert fact.component == TOP_SITES_COMPONENT == "feature-top-sites"
        assert fact.action is FactAction.INTERACTION
        assert fact.item == TOP_SITES_COUNT_ITEM == "top_sites_count"
        assert fact.value == "7"
        assert fact.metadata == {}


class TestDevFactsAdapter:
    """Tests for DevFactsAdapter."""

    def test_records_count_fact(self) -> None:
        adapter = DevFactsAdapter()

        adapter.record_top_sites_count(3)

        assert adapter.facts == [build_top_sites_count_fact(3)]

    def test_logs_fact(self, caplog: pytest.LogCaptureFixture) -> None:
        adapter = DevFactsAdapter(log_level=logging.WARNING)

        with caplog.at_level(logging.WARNING, logger="topsites.adapters.facts"):
            adapter.record_top_sites_count(4)

        assert "top_sites_count=4" in caplog.text
        assert caplog.records[0].levelno == logging.WARNING

    def test_facts_for_and_clear(self) -> None:
        adapter = DevFactsAdapter()
        adapter.emit(Fact(component="other", action=FactAction.INTERACTION, item="button"))
        adapter.record_top_sites_count(1)
        adapter.record_top_sites_count(2)

        assert [fact.value for fact in adapter.facts_for(TOP_SITES_COUNT_ITEM)] == ["1", "2"]

        adapter.clear()
        assert adapter.facts == []


class TestDisabledTelemetry:
    def test_accepts_counts(self) -> None:
        DisabledTelemetry().record_top_sites_count(10)
