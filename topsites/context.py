from __future__ import annotations

import logging
from dataclasses import dataclass

from topsites.adapters.facts import DevFactsAdapter, DisabledTelemetry
from topsites.adapters.memory_storage import InMemoryTopSitesStorage
from topsites.adapters.task_runner import ThreadPoolTaskRunner, create_task_runner
from topsites.components.top_sites import (
    TopSitesStoragePort,
    TopSitesTelemetryPort,
    TopSitesUseCases,
)
from topsites.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    use_cases: TopSitesUseCases
    storage: TopSitesStoragePort
    telemetry: TopSitesTelemetryPort
    runner: ThreadPoolTaskRunner
    rules: Rules

    @classmethod
    def create(
        cls,
        rules: Rules,
        storage: TopSitesStoragePort | None = None,
    ) -> ServiceContext:
        storage = storage if storage is not None else InMemoryTopSitesStorage()

        telemetry_rules = rules.top_sites.telemetry
        telemetry: TopSitesTelemetryPort
        if telemetry_rules.enabled:
            telemetry = DevFactsAdapter(log_level=telemetry_rules.log_level_value)
        else:
            telemetry = DisabledTelemetry()

        background = rules.top_sites.background
        runner = create_task_runner(
            max_workers=background.max_workers,
            thread_name_prefix=background.thread_name_prefix,
        )

        use_cases = TopSitesUseCases(storage, telemetry=telemetry, runner=runner)
        return cls(
            use_cases=use_cases,
            storage=storage,
            telemetry=telemetry,
            runner=runner,
            rules=rules,
        )

    def close(self) -> None:
        """Let pending fact reports finish, then stop the runner."""
        timeout = self.rules.top_sites.background.shutdown_timeout_seconds
        finished = self.runner.wait_idle(timeout=timeout)
        if not finished:
            logger.warning("Background tasks still running after %.1fs", timeout)
        self.runner.shutdown(wait=finished)
