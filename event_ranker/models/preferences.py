"""
User preference model and ranked-skill validation.

``UserPreferences`` is the single input the ranking engine needs besides the
catalog.  It is frozen; form layers build one with
``PreferenceForm.to_preferences()`` or construct it directly.

Validation split
----------------
``check_ranked_skills()`` enforces the three ranked-list rules:

    1. at least one skill (only when ``allow_empty=False``)
    2. at most ``MAX_RANKED_SKILLS`` skills
    3. no duplicates

The model runs rules 2 and 3 on construction, so an oversized or duplicated
list fails early as ``pydantic.ValidationError``.  An empty list is a valid
*form state* (nothing picked yet); ``rank_items()`` rejects it with
``PreferenceValidationError`` before any scoring happens.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from event_ranker.taxonomy.preference_taxonomy import (
    MAX_RANKED_SKILLS,
    PopularityPreference,
    TeamPreference,
)


class PreferenceValidationError(ValueError):
    """Raised when a ranked-skill list cannot be used for ranking."""


def check_ranked_skills(skills: tuple[str, ...] | list[str], allow_empty: bool = False) -> None:
    """Validate a ranked-skill sequence.

    Args:
        skills:      Skills in priority order (most important first).
        allow_empty: If ``True``, an empty sequence passes.

    Raises:
        PreferenceValidationError: On an empty, oversized or duplicated list.
    """
    if not skills and not allow_empty:
        raise PreferenceValidationError(
            "Select at least one skill to get recommendations."
        )
    if len(skills) > MAX_RANKED_SKILLS:
        raise PreferenceValidationError(
            f"At most {MAX_RANKED_SKILLS} ranked skills are allowed, got {len(skills)}."
        )
    seen: set[str] = set()
    for position, skill in enumerate(skills, start=1):
        if skill in seen:
            raise PreferenceValidationError(
                f"Duplicate skill '{skill}' at rank {position}."
            )
        seen.add(skill)


class UserPreferences(BaseModel):
    """A student's submission to the ranking engine.

    Attributes:
        ranked_skills: Up to five distinct skills, most important first.
        preparation_style: Preferred event format tag, or ``None``.
        experience_areas: Experience labels; each is resolved to a catalog tag
            through the experience tag map (unmapped labels match literally).
        popularity_preference: Requested competition level.
        team_preference: Team, solo, or no preference.
        include_remote_events: Whether virtual events stay in the results.
    """

    model_config = ConfigDict(frozen=True)

    ranked_skills: tuple[str, ...] = ()
    preparation_style: Optional[str] = None
    experience_areas: tuple[str, ...] = ()
    popularity_preference: PopularityPreference = PopularityPreference.NO_PREFERENCE
    team_preference: TeamPreference = TeamPreference.NO_PREFERENCE
    include_remote_events: bool = False

    @field_validator("ranked_skills")
    @classmethod
    def validate_ranked_skills(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        check_ranked_skills(v, allow_empty=True)
        return v

    @field_validator("preparation_style", mode="before")
    @classmethod
    def blank_style_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("experience_areas")
    @classmethod
    def dedupe_experience(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        # Experience is a set; keep first-seen order for display.
        return tuple(dict.fromkeys(v))
