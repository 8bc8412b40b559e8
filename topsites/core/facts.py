"""
Facts - one-way analytics observations emitted by features.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# --- Fact Constants ---

TOP_SITES_COMPONENT = "feature-top-sites"
TOP_SITES_COUNT_ITEM = "top_sites_count"


class FactAction(Enum):
    """Kind of interaction a fact describes."""

    INTERACTION = "interaction"


# --- Models ---


@dataclass(frozen=True)
class Fact:
    """One-way analytics observation."""

    component: str
    action: FactAction
    item: str
    value: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


def build_top_sites_count_fact(count: int) -> Fact:
    """Fact reporting how many top sites are stored."""
    return Fact(
        component=TOP_SITES_COMPONENT,
        action=FactAction.INTERACTION,
        item=TOP_SITES_COUNT_ITEM,
        value=str(count),
    )
