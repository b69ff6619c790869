"""
Event ranker: filters the catalog, scores every remaining item against the
user's preferences, and returns them best-first.

Usage flow
----------
1. filter_catalog(catalog, include_remote, remote_category)
   -> list[CatalogItem]  (virtual events dropped unless requested)

2. rank_items(catalog, preferences, settings=None)
   -> list[ScoredItem]   (every filtered item, sorted by raw score desc)

Ordering
--------
Sorted by ``raw_score`` descending, not by the clamped percentage, so two
items that both clamp to 100 % keep their true relative order.  Equal raw
scores keep catalog order (``sorted`` is stable).

Remote filter
-------------
Only the ``category`` field marks an event as remote.  Names are never
inspected.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from event_ranker.config import RankingConfig
from event_ranker.models.catalog import CatalogItem
from event_ranker.models.preferences import UserPreferences, check_ranked_skills
from event_ranker.recommendations.scorer import (
    ScoreComponents,
    build_reasoning,
    compute_score,
    match_percent,
    max_possible_score,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoredItem:
    """A catalog item with its match data.

    Attributes:
        item:           The underlying CatalogItem.
        match_percent:  Normalised, clamped display score (0–100).
        raw_score:      Unclamped weighted sum; the sort key.
        components:     Detailed score breakdown.
        reasoning:      Human-readable explanation string.
    """

    item:          CatalogItem
    match_percent: int
    raw_score:     float
    components:    ScoreComponents
    reasoning:     str

    @property
    def name(self) -> str:
        return self.item.name

    @property
    def matched_skills(self) -> tuple[int, ...]:
        """1-based rank positions of the user's skills found in the tags."""
        return self.components.matched_ranks


def filter_catalog(
    catalog:         Sequence[CatalogItem],
    include_remote:  bool,
    remote_category: str = "Virtual",
) -> list[CatalogItem]:
    """Drop remote events unless the user opted in.

    Args:
        catalog:         All catalog items.
        include_remote:  Keep remote events when ``True``.
        remote_category: Category value that marks a remote event.

    Returns:
        Filtered items in catalog order.
    """
    if include_remote:
        return list(catalog)
    return [item for item in catalog if item.category != remote_category]


def rank_items(
    catalog:     Sequence[CatalogItem],
    preferences: UserPreferences,
    settings:    RankingConfig | None = None,
) -> list[ScoredItem]:
    """Score and rank catalog items for one submission.

    Neither input is mutated; calling twice with the same inputs returns
    equal results.

    Args:
        catalog:     Catalog items (see ``load_catalog``).
        preferences: The user's submission.
        settings:    Scoring weights; ``RankingConfig()`` when omitted.

    Returns:
        Every item that survives filtering, highest raw score first.

    Raises:
        PreferenceValidationError: If ``ranked_skills`` is empty, too long
            or contains duplicates.
    """
    check_ranked_skills(preferences.ranked_skills)
    settings = settings or RankingConfig()

    candidates = filter_catalog(
        catalog,
        include_remote=preferences.include_remote_events,
        remote_category=settings.remote_category,
    )
    max_possible = max_possible_score(len(preferences.ranked_skills), settings)

    scored: list[ScoredItem] = []
    for item in candidates:
        components = compute_score(item, preferences, settings)
        raw = components.total
        scored.append(
            ScoredItem(
                item=item,
                match_percent=match_percent(raw, max_possible),
                raw_score=raw,
                components=components,
                reasoning=build_reasoning(item, components, preferences),
            )
        )

    ranked = sorted(scored, key=lambda s: -s.raw_score)

    log.debug(
        "Ranked %d of %d catalog items for %d skill(s); top=%s",
        len(ranked),
        len(catalog),
        len(preferences.ranked_skills),
        ranked[0].name if ranked else None,
    )
    return ranked
