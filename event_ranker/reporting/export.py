"""
Export helpers for ranked results.

All functions write to disk and return the written ``Path``.

CSV exports are flat (no nested values) so they open directly in Excel or a
spreadsheet app.  ``scored_items_to_records()`` is the adapter from
``ScoredItem`` objects to flat row dicts used by both writers.
"""

from __future__ import annotations

import csv
import json
from collections.abc import Sequence
from pathlib import Path

from event_ranker.models.preferences import UserPreferences
from event_ranker.recommendations.ranker import ScoredItem

EXPORT_FIELDS: list[str] = [
    "rank",
    "name",
    "category",
    "popularity",
    "match_percent",
    "raw_score",
    "matched_skills",
    "tags",
    "sc_skill",
    "sc_experience",
    "sc_prep_style",
    "sc_popularity",
    "sc_team",
    "reasoning",
    "description",
]


def scored_items_to_records(
    results:     Sequence[ScoredItem],
    preferences: UserPreferences,
) -> list[dict]:
    """Flatten ranked results into one row dict per event.

    List-valued fields (tags, matched skills) are joined with ``"; "``.
    """
    rows: list[dict] = []
    for rank, scored in enumerate(results, start=1):
        comps = scored.components
        rows.append(
            {
                "rank":           rank,
                "name":           scored.item.name,
                "category":       scored.item.category,
                "popularity":     scored.item.popularity.value,
                "match_percent":  scored.match_percent,
                "raw_score":      round(scored.raw_score, 4),
                "matched_skills": "; ".join(
                    f"{preferences.ranked_skills[r - 1]} #{r}" for r in scored.matched_skills
                ),
                "tags":           "; ".join(scored.item.tags),
                "sc_skill":       round(comps.skill_score, 4),
                "sc_experience":  round(comps.experience_score, 4),
                "sc_prep_style":  round(comps.prep_style_score, 4),
                "sc_popularity":  round(comps.popularity_score, 4),
                "sc_team":        round(comps.team_score, 4),
                "reasoning":      scored.reasoning,
                "description":    scored.item.description,
            }
        )
    return rows


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.  With no records the file holds only the header
        row, or nothing at all when no ``fieldnames`` were given.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    cols = fieldnames or (list(records[0]) if records else [])
    if not cols:
        path.write_text("", encoding="utf-8")
        return path
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Write ``data`` as indented UTF-8 JSON (parent dirs created).

    Non-ASCII event names are written as-is; the file ends with a newline.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
    path.write_text(text + "\n", encoding="utf-8")
    return path


def export_results(
    results:     Sequence[ScoredItem],
    preferences: UserPreferences,
    path:        Path,
) -> Path:
    """Export ranked results, choosing CSV or JSON by file extension.

    The JSON form wraps the rows with the submitted preferences so the file
    is self-describing.

    Raises:
        ValueError: For extensions other than ``.csv`` / ``.json``.
    """
    records = scored_items_to_records(results, preferences)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return export_to_csv(records, path, fieldnames=EXPORT_FIELDS)
    if suffix == ".json":
        payload = {
            "preferences": preferences.model_dump(mode="json"),
            "results":     records,
        }
        return export_to_json(payload, path)
    raise ValueError(f"Unsupported export format '{suffix}'. Use .csv or .json.")
