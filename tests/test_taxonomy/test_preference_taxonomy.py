"""Tests for the preference taxonomy enums and form vocabulary."""

from __future__ import annotations

from event_ranker.taxonomy.preference_taxonomy import (
    DEFAULT_EXPERIENCE_TAG_MAP,
    EXPERIENCE_OPTIONS,
    MAX_RANKED_SKILLS,
    POPULARITY_ALIASES,
    PREP_STYLE_OPTIONS,
    SKILL_OPTIONS,
    Popularity,
    PopularityPreference,
    TeamPreference,
)


class TestPopularity:
    def test_three_levels(self):
        assert [p.value for p in Popularity] == ["Low", "Moderate", "High"]

    def test_string_comparison(self):
        assert Popularity.HIGH == "High"

    def test_aliases_resolve_to_members(self):
        assert POPULARITY_ALIASES["Lower"] is Popularity.LOW
        assert all(isinstance(v, Popularity) for v in POPULARITY_ALIASES.values())


class TestPreferenceEnums:
    def test_fewer_competitors_value(self):
        assert PopularityPreference("Lower Competition") is PopularityPreference.FEWER_COMPETITORS

    def test_no_preference_shared_label(self):
        assert PopularityPreference.NO_PREFERENCE.value == TeamPreference.NO_PREFERENCE.value

    def test_team_values(self):
        assert {t.value for t in TeamPreference} == {"Team", "Solo", "I don't care"}


class TestVocabulary:
    def test_no_duplicate_options(self):
        for options in (SKILL_OPTIONS, PREP_STYLE_OPTIONS, EXPERIENCE_OPTIONS):
            assert len(options) == len(set(options))

    def test_experience_map_keys_are_offered(self):
        assert set(DEFAULT_EXPERIENCE_TAG_MAP) <= set(EXPERIENCE_OPTIONS)

    def test_experience_map_targets_are_skills(self):
        assert set(DEFAULT_EXPERIENCE_TAG_MAP.values()) <= set(SKILL_OPTIONS)

    def test_max_ranked_skills(self):
        assert MAX_RANKED_SKILLS == 5
