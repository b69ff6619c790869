"""
Catalog item model.

``CatalogItem`` describes one competitive event.  Matching is tag-based: a
student's skills, experience areas, preparation style and team preference are
all compared against ``tags``.

Tags are stored as an order-preserving tuple so display output follows the
catalog file, while ``tag_set`` gives set semantics for matching.  A record
with no ``tags`` key (or ``null``) is treated as having no tags rather than
being rejected.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from event_ranker.taxonomy.preference_taxonomy import POPULARITY_ALIASES, Popularity


class CatalogItem(BaseModel):
    """An immutable competitive-event description.

    Attributes:
        name: Unique display name, e.g. ``"Principles of Finance"``.
        category: Grouping label, e.g. ``"Finance"``.  The reserved remote
            category (``"Virtual"`` by default) marks online-only events.
        tags: Matching labels in display order, e.g.
            ``("Finance", "Team", "Written Event/Report")``.
        popularity: Typical field size.
        description: One-sentence summary shown next to the result.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    category: str
    tags: tuple[str, ...] = ()
    popularity: Popularity
    description: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Catalog item name must be non-empty.")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def coerce_tags(cls, v: Any) -> Any:
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v

    @field_validator("popularity", mode="before")
    @classmethod
    def resolve_popularity_alias(cls, v: Any) -> Any:
        if isinstance(v, str) and v in POPULARITY_ALIASES:
            return POPULARITY_ALIASES[v]
        return v

    @property
    def tag_set(self) -> frozenset[str]:
        """Tags as a set, for membership checks."""
        return frozenset(self.tags)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags
