"""
Shared pytest fixtures for the DECA event ranker test suite.

Provides:
  - ``small_catalog``: a hand-built catalog covering every scoring branch
    (team/solo, each popularity level, a virtual event, an untagged event,
    and a non-virtual event whose name starts with "V").
  - ``catalog_path``: path to the committed ``config/catalog/deca_events.json``.
  - ``finance_preferences``: a two-skill submission with no extras.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from event_ranker.models.catalog import CatalogItem
from event_ranker.models.preferences import UserPreferences
from event_ranker.taxonomy.preference_taxonomy import Popularity

PROJECT_ROOT = Path(__file__).resolve().parent.parent


# ── Catalog fixtures ──────────────────────────────────────────────────────────

@pytest.fixture
def catalog_path() -> Path:
    """The committed DECA event catalog."""
    return PROJECT_ROOT / "config" / "catalog" / "deca_events.json"


@pytest.fixture
def small_catalog() -> list[CatalogItem]:
    """Seven events, in a fixed order, for ranking tests."""
    return [
        CatalogItem(
            name="Principles of Finance",
            category="Principles",
            tags=("Finance", "Exam Only"),
            popularity=Popularity.HIGH,
            description="Finance exam.",
        ),
        CatalogItem(
            name="Financial Analyst Team",
            category="Finance",
            tags=("Finance", "Team", "Presentation", "Written Event/Report"),
            popularity=Popularity.HIGH,
        ),
        CatalogItem(
            name="Marketing Operations Research",
            category="Marketing",
            tags=("Marketing", "Research", "Written Event/Report"),
            popularity=Popularity.LOW,
        ),
        CatalogItem(
            name="Retail Merchandising",
            category="Marketing",
            tags=("Marketing", "Presentation", "Roleplay Performance"),
            popularity=Popularity.MODERATE,
        ),
        CatalogItem(
            name="Venture Pitch",
            category="Entrepreneurship",
            tags=("Entrepreneurship", "Presentation"),
            popularity=Popularity.MODERATE,
        ),
        CatalogItem(
            name="Virtual Business Challenge - Accounting",
            category="Virtual",
            tags=("Finance", "Research"),
            popularity=Popularity.MODERATE,
        ),
        CatalogItem(
            name="Untagged Event",
            category="Misc",
            tags=None,
            popularity=Popularity.MODERATE,
        ),
    ]


# ── Preference fixtures ───────────────────────────────────────────────────────

@pytest.fixture
def finance_preferences() -> UserPreferences:
    """Finance-first submission with no auxiliary preferences."""
    return UserPreferences(ranked_skills=("Finance", "Presentation"))
