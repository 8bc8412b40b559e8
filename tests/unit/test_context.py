"""
Service context wiring tests.

Runs the use cases end to end against in-memory storage and a
real thread pool.
"""

from __future__ import annotations

from topsites.adapters.facts import DevFactsAdapter, DisabledTelemetry
from topsites.adapters.memory_storage import InMemoryTopSitesStorage
from topsites.context import ServiceContext
from topsites.rules.models import Rules, TelemetryRules, TopSitesRules


class TestServiceContext:
    def test_wires_from_rules(self, test_ctx: ServiceContext) -> None:
        assert isinstance(test_ctx.telemetry, DevFactsAdapter)
        assert test_ctx.use_cases.add_pinned_sites.runner is test_ctx.runner

    def test_default_storage(self, rules: Rules) -> None:
        ctx = ServiceContext.create(rules)

        assert isinstance(ctx.storage, InMemoryTopSitesStorage)
        ctx.close()

    def test_disabled_telemetry(self) -> None:
        rules = Rules(top_sites=TopSitesRules(telemetry=TelemetryRules(enabled=False)))
        ctx = ServiceContext.create(rules)

        ctx.use_cases.add_pinned_sites("Example", "https://example.com")

        assert isinstance(ctx.telemetry, DisabledTelemetry)
        ctx.close()
        assert ctx.storage.get_top_sites_count() == 1


class TestTopSitesFlow:
    """Add, update and remove through the wired context."""

    def test_add_update_remove(
        self, test_ctx: ServiceContext, memory_storage: InMemoryTopSitesStorage
    ) -> None:
        telemetry = test_ctx.telemetry
        assert isinstance(telemetry, DevFactsAdapter)
        use_cases = test_ctx.use_cases
        memory_storage.add_top_site("Existing", "https://existing.example")
        n = memory_storage.get_top_sites_count()

        use_cases.add_pinned_sites("Example", "https://example.com")
        assert test_ctx.runner.wait_idle(timeout=5)

        assert memory_storage.get_top_sites_count() == n + 1
        assert [fact.value for fact in telemetry.facts] == [str(n + 1)]

        added = memory_storage.get_top_sites(10)[-1]
        use_cases.update_top_sites(added, "Example Domain", "https://example.org")
        updated = memory_storage.get_top_sites(10)[-1]
        assert (updated.title, updated.url) == ("Example Domain", "https://example.org")

        use_cases.remove_top_sites(updated)
        assert test_ctx.runner.wait_idle(timeout=5)

        assert memory_storage.get_top_sites_count() == n
        assert [site.url for site in memory_storage.get_top_sites(10)] == [
            "https://existing.example"
        ]
        assert len(telemetry.facts) == 1

    def test_close_stops_runner(self, rules: Rules) -> None:
        ctx = ServiceContext.create(rules)
        ctx.use_cases.add_pinned_sites("Example", "https://example.com")

        ctx.close()

        assert ctx.runner.pending_count == 0
