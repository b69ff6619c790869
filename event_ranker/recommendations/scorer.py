"""
Event scoring: converts one ``CatalogItem`` + ``UserPreferences`` into a
weighted-sum score with a component breakdown.

Score formula (weighted sum, default weights)
---------------------------------------------
    total = (
        skill_score          # sum of (1.5 - 0.15 * rank) per matched skill
        + experience_score   # 0.8 per matched experience tag
        + prep_style_score   # 0.7 when the preparation style matches
        + popularity_score   # +1.5 Low / -0.8 High, only for "fewer competitors"
        + team_score         # +1.0 when team/solo preference is satisfied
    )

Component notes
---------------
skill_score:
    Rank 0 → 1.50, 1 → 1.35, 2 → 1.20, 3 → 1.05, 4 → 0.90.

experience_score / prep_style_score:
    A tag already credited by a ranked skill (or an earlier experience area)
    is never credited again.  Experience labels go through the tag map first.

popularity_score:
    Zero unless the user asked for fewer competitors.

team_score:
    "Team" rewards items tagged with the team marker; "Solo" rewards items
    without it.

Normalisation
-------------
    max_possible  = n_skills * 1.5 + 3
    match_percent = clamp(round(total / max_possible * 100), 0, 100)

The ``+ 3`` allowance approximates the non-skill bonuses.  The true maximum
can be higher (0.8 per experience area is unbounded in count), so the
percentage is a display value, not a probability.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from event_ranker.config import RankingConfig
from event_ranker.models.catalog import CatalogItem
from event_ranker.models.preferences import UserPreferences
from event_ranker.taxonomy.preference_taxonomy import (
    Popularity,
    PopularityPreference,
    TeamPreference,
)

_DEFAULT_SETTINGS = RankingConfig()


@dataclass(frozen=True)
class ScoreComponents:
    """All components of an event score.

    Attributes:
        skill_score:       Sum of rank-weighted skill matches.
        experience_score:  Sum of experience-area matches.
        prep_style_score:  Preparation-style match bonus.
        popularity_score:  Competition-level bonus or penalty (may be negative).
        team_score:        Team/solo preference bonus.
        matched_ranks:     1-based rank positions of matched skills.
        matched_tags:      Tags credited by skills or experience, in credit order.
    """

    skill_score:      float
    experience_score: float
    prep_style_score: float
    popularity_score: float
    team_score:       float
    matched_ranks:    tuple[int, ...] = ()
    matched_tags:     tuple[str, ...] = ()

    @property
    def total(self) -> float:
        """Raw weighted score.  Can be negative when only the penalty applies."""
        return (
            self.skill_score
            + self.experience_score
            + self.prep_style_score
            + self.popularity_score
            + self.team_score
        )


def skill_weight(position: int, settings: RankingConfig = _DEFAULT_SETTINGS) -> float:
    """Weight of a skill at 0-based rank ``position``."""
    return settings.skill_base_weight - settings.skill_rank_decay * position


def resolve_experience_tag(area: str, tag_map: dict[str, str]) -> str:
    """Map an experience label to its catalog tag, falling back to the label."""
    return tag_map.get(area, area)


def compute_score(
    item:        CatalogItem,
    preferences: UserPreferences,
    settings:    RankingConfig = _DEFAULT_SETTINGS,
) -> ScoreComponents:
    """Compute all score components for one catalog item.

    Args:
        item:        Catalog item to score.
        preferences: The user's submission.
        settings:    Weights, markers and the experience tag map.

    Returns:
        ScoreComponents with all fields populated.
    """
    tags = item.tag_set
    matched: dict[str, None] = {}

    # ── Ranked skills ─────────────────────────────────────────────────────────
    skill_score = 0.0
    ranks: list[int] = []
    for position, skill in enumerate(preferences.ranked_skills):
        if skill in tags and skill not in matched:
            skill_score += skill_weight(position, settings)
            matched[skill] = None
            ranks.append(position + 1)

    # ── Experience areas ──────────────────────────────────────────────────────
    experience_score = 0.0
    for area in preferences.experience_areas:
        tag = resolve_experience_tag(area, settings.experience_tag_map)
        if tag in tags and tag not in matched:
            experience_score += settings.experience_weight
            matched[tag] = None

    # ── Preparation style ─────────────────────────────────────────────────────
    prep_style_score = 0.0
    style = preferences.preparation_style
    if style and style in tags and style not in matched:
        prep_style_score = settings.prep_style_weight

    # ── Popularity ────────────────────────────────────────────────────────────
    popularity_score = 0.0
    if preferences.popularity_preference == PopularityPreference.FEWER_COMPETITORS:
        if item.popularity == Popularity.LOW:
            popularity_score = settings.low_popularity_bonus
        elif item.popularity == Popularity.HIGH:
            popularity_score = -settings.high_popularity_penalty

    # ── Team preference ───────────────────────────────────────────────────────
    team_score = 0.0
    is_team = settings.team_tag in tags
    if preferences.team_preference == TeamPreference.TEAM and is_team:
        team_score = settings.team_bonus
    elif preferences.team_preference == TeamPreference.SOLO and not is_team:
        team_score = settings.team_bonus

    return ScoreComponents(
        skill_score=skill_score,
        experience_score=experience_score,
        prep_style_score=prep_style_score,
        popularity_score=popularity_score,
        team_score=team_score,
        matched_ranks=tuple(ranks),
        matched_tags=tuple(matched),
    )


def max_possible_score(n_skills: int, settings: RankingConfig = _DEFAULT_SETTINGS) -> float:
    """Approximate maximum score used to normalise to a percentage."""
    return n_skills * settings.skill_base_weight + settings.bonus_allowance


def match_percent(raw_score: float, max_possible: float) -> int:
    """Convert a raw score into a clamped 0–100 integer percentage.

    Halves round up (12.5 → 13), not to even.
    """
    if max_possible <= 0:
        return 0
    pct = math.floor(raw_score / max_possible * 100 + 0.5)
    return int(_clamp(pct, 0, 100))


def build_reasoning(
    item:        CatalogItem,
    components:  ScoreComponents,
    preferences: UserPreferences,
) -> str:
    """Assemble a human-readable explanation from score components.

    Returns a semicolon-separated list such as::

        "Matches Finance #1; Experience fit: Presentation; Fewer competitors"
    """
    reasons: list[str] = []

    if components.matched_ranks:
        labels = [
            f"{preferences.ranked_skills[rank - 1]} #{rank}"
            for rank in components.matched_ranks
        ]
        reasons.append("Matches " + ", ".join(labels))

    skill_set = set(preferences.ranked_skills)
    experience_tags = [t for t in components.matched_tags if t not in skill_set]
    if experience_tags:
        reasons.append("Experience fit: " + ", ".join(experience_tags))

    if components.prep_style_score > 0:
        reasons.append(f"Preferred format: {preferences.preparation_style}")

    if components.popularity_score > 0:
        reasons.append("Fewer competitors")
    elif components.popularity_score < 0:
        reasons.append("Crowded event")

    if components.team_score > 0:
        if preferences.team_preference == TeamPreference.TEAM:
            reasons.append("Team event")
        else:
            reasons.append("Individual event")

    return "; ".join(reasons) or "No matching preferences"


# ── Helper ────────────────────────────────────────────────────────────────────

def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))
