from collections.abc import Iterator
from pathlib import Path

import pytest

from topsites.adapters.memory_storage import InMemoryTopSitesStorage
from topsites.context import ServiceContext
from topsites.rules.loader import load_rules
from topsites.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules() -> Rules:
    """Rules loaded from the real project rules file."""
    rules_path = PROJECT_ROOT / "rules.yaml"
    if not rules_path.exists():
        raise FileNotFoundError(f"Rules not found at {rules_path}")
    return load_rules(rules_path)


@pytest.fixture
def memory_storage() -> InMemoryTopSitesStorage:
    return InMemoryTopSitesStorage()


@pytest.fixture
def test_ctx(rules: Rules, memory_storage: InMemoryTopSitesStorage) -> Iterator[ServiceContext]:
    """
    Creates a full ServiceContext backed by in-memory storage.
    """
    ctx = ServiceContext.create(rules, storage=memory_storage)
    yield ctx
    ctx.close()
