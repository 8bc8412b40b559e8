from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, Field

# --- Enums / Literals ---
TopSiteKind = Literal["default", "pinned", "frecent", "provided"]

# Kinds the user (or the browser defaults) placed explicitly.
PINNED_KINDS: frozenset[str] = frozenset({"default", "pinned"})


def _utcnow() -> datetime:
    return datetime.now(UTC)


# --- Top Sites ---

class PinnedSite(BaseModel):
    id: int | None = None
    title: str
    url: str
    is_default: bool = False
    created_at: datetime = Field(default_factory=_utcnow)

    def to_top_site(self) -> "TopSite":
        return TopSite(
            id=self.id,
            title=self.title,
            url=self.url,
            created_at=self.created_at,
            kind="default" if self.is_default else "pinned",
        )

class TopSite(BaseModel):
    id: int | None = None
    title: str | None = None
    url: str
    created_at: datetime | None = None
    kind: TopSiteKind = "pinned"

    @property
    def is_pinned(self) -> bool:
        return self.kind in PINNED_KINDS

    @property
    def is_default(self) -> bool:
        return self.kind == "default"
