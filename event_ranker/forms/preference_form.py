"""
Explicit form state for building a ``UserPreferences`` submission.

``PreferenceForm`` replaces ambient UI state with an object the caller owns.
It enforces the ranked-skill rules incrementally: ``add_skill`` refuses a
duplicate or a sixth skill and returns ``False`` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from event_ranker.models.preferences import UserPreferences
from event_ranker.taxonomy.preference_taxonomy import (
    MAX_RANKED_SKILLS,
    SKILL_OPTIONS,
    PopularityPreference,
    TeamPreference,
)


@dataclass
class PreferenceForm:
    """Mutable form state; convert with ``to_preferences()`` on submit."""

    ranked_skills: list[str] = field(default_factory=list)
    preparation_style: Optional[str] = None
    experience_areas: list[str] = field(default_factory=list)
    popularity_preference: PopularityPreference = PopularityPreference.NO_PREFERENCE
    team_preference: TeamPreference = TeamPreference.NO_PREFERENCE
    include_remote_events: bool = False

    @property
    def is_full(self) -> bool:
        return len(self.ranked_skills) >= MAX_RANKED_SKILLS

    def add_skill(self, skill: str) -> bool:
        """Append ``skill`` at the lowest priority.  Returns ``False`` if refused."""
        if skill in self.ranked_skills or self.is_full:
            return False
        self.ranked_skills.append(skill)
        return True

    def remove_skill(self, skill: str) -> bool:
        """Remove ``skill``; lower-ranked skills move up one position."""
        if skill not in self.ranked_skills:
            return False
        self.ranked_skills.remove(skill)
        return True

    def available_skills(self, options: tuple[str, ...] = SKILL_OPTIONS) -> list[str]:
        """Options not yet ranked, or none when the list is full."""
        if self.is_full:
            return []
        return [s for s in options if s not in self.ranked_skills]

    def toggle_experience(self, area: str) -> bool:
        """Select or deselect an experience area.  Returns the new state."""
        if area in self.experience_areas:
            self.experience_areas.remove(area)
            return False
        self.experience_areas.append(area)
        return True

    def clear(self) -> None:
        """Reset every field to its default."""
        self.ranked_skills.clear()
        self.preparation_style = None
        self.experience_areas.clear()
        self.popularity_preference = PopularityPreference.NO_PREFERENCE
        self.team_preference = TeamPreference.NO_PREFERENCE
        self.include_remote_events = False

    def to_preferences(self) -> UserPreferences:
        """Snapshot the form into a frozen ``UserPreferences``."""
        return UserPreferences(
            ranked_skills=tuple(self.ranked_skills),
            preparation_style=self.preparation_style,
            experience_areas=tuple(self.experience_areas),
            popularity_preference=self.popularity_preference,
            team_preference=self.team_preference,
            include_remote_events=self.include_remote_events,
        )
