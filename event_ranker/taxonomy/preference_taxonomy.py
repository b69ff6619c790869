"""
Preference taxonomy for the DECA event ranker.

Three enumerations describe the non-skill dimensions of a submission:
  - ``Popularity``           — how crowded an event is (a catalog attribute).
  - ``PopularityPreference`` — the competition level a student asks for.
  - ``TeamPreference``       — team vs. individual events.

The option tuples below are the choices offered by the recommendation form.
They are display vocabulary only: the ranking engine matches on tags, so any
string can be submitted as a skill or preparation style.

Usage example::

    from event_ranker.taxonomy.preference_taxonomy import Popularity, TeamPreference

    popularity = Popularity.LOW
    team       = TeamPreference.SOLO

This module has NO imports from any other ``event_ranker`` package.
"""

from enum import StrEnum


class Popularity(StrEnum):
    """How many competitors an event typically draws."""

    LOW = "Low"
    """Few entrants; easier to place."""

    MODERATE = "Moderate"
    """Average field size."""

    HIGH = "High"
    """Crowded events with the largest fields."""


# Labels found in legacy catalog data that map onto a canonical level.
POPULARITY_ALIASES: dict[str, Popularity] = {
    "Lower": Popularity.LOW,
    "Medium": Popularity.MODERATE,
}


class PopularityPreference(StrEnum):
    """Competition level requested by the user.

    Only ``FEWER_COMPETITORS`` changes scores; the other values are recorded
    for display but are neutral.
    """

    HIGH_COMPETITION = "High Competition"
    MODERATE_COMPETITION = "Moderate Competition"
    FEWER_COMPETITORS = "Lower Competition"
    NO_PREFERENCE = "I don't care"


class TeamPreference(StrEnum):
    """Team vs. individual event preference."""

    TEAM = "Team"
    SOLO = "Solo"
    NO_PREFERENCE = "I don't care"


# ── Form vocabulary ───────────────────────────────────────────────────────────

SKILL_OPTIONS: tuple[str, ...] = (
    "Marketing",
    "Finance",
    "Hospitality",
    "Business Management",
    "Entrepreneurship",
    "Sales",
    "Presentation",
    "Research",
    "Leadership",
)

PREP_STYLE_OPTIONS: tuple[str, ...] = (
    "Roleplay Performance",
    "Written Event/Report",
    "Exam Only",
    "Combined Event",
)

EXPERIENCE_OPTIONS: tuple[str, ...] = (
    "Marketing Plans",
    "Financial Analysis",
    "Public Speaking",
    "Business Plans",
    "Data Analysis",
    "Project Management",
    "Customer Service",
    "None",
)

# Experience label → canonical catalog tag.  Labels missing from the map are
# matched literally.
DEFAULT_EXPERIENCE_TAG_MAP: dict[str, str] = {
    "Marketing Plans":    "Marketing",
    "Financial Analysis": "Finance",
    "Public Speaking":    "Presentation",
    "Business Plans":     "Entrepreneurship",
    "Data Analysis":      "Research",
    "Project Management": "Business Management",
    "Customer Service":   "Hospitality",
}

MAX_RANKED_SKILLS: int = 5
"""Upper bound on the number of ranked skills in one submission."""
