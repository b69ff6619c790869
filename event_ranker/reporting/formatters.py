"""
ASCII terminal formatters for CLI commands.

All formatters accept model objects and return plain multi-line strings
suitable for ``typer.echo()``.

No third-party dependencies (no ``rich``, no ``colorama``).

Recommendation layout
---------------------
One block per event::

     1. Principles of Finance                                  87% match
        High Competition | Principles
        Test knowledge of financial principles, banking, ...
        Your skills: Finance #1
        Tags: Finance, Exam Only
        Why: Matches Finance #1; Crowded event
"""

from __future__ import annotations

from collections.abc import Sequence

from event_ranker.models.catalog import CatalogItem
from event_ranker.models.preferences import UserPreferences
from event_ranker.recommendations.ranker import ScoredItem
from event_ranker.taxonomy.preference_taxonomy import Popularity

_BAR_WIDTH = 20


def popularity_label(popularity: Popularity) -> str:
    """Display label, e.g. ``"Low Competition"``."""
    return f"{popularity.value} Competition"


def match_bar(percent: int, width: int = _BAR_WIDTH) -> str:
    """Fixed-width ASCII bar for a 0–100 percentage."""
    filled = round(max(0, min(100, percent)) / 100 * width)
    return "[" + "#" * filled + "." * (width - filled) + "]"


def format_recommendations_table(
    results:     Sequence[ScoredItem],
    preferences: UserPreferences,
    start_rank:  int = 1,
    total:       int | None = None,
) -> str:
    """Format a page of ranked events.

    Args:
        results:     The page to show (already ordered by the ranker).
        preferences: The submission, for the header and matched-skill labels.
        start_rank:  Rank number of the first row (for later pages).
        total:       Total ranked events, shown in the header when given.

    Returns:
        Multi-line string.
    """
    lines: list[str] = []
    lines.append("")
    lines.append("=== Your DECA Event Recommendations ===")
    skills = ", ".join(
        f"{i}. {s}" for i, s in enumerate(preferences.ranked_skills, start=1)
    )
    lines.append(f"  Ranked skills: {skills}")
    if total is not None:
        lines.append(f"  Events ranked: {total}")

    if not results:
        lines.append("")
        lines.append("  (no events to show)")
        return "\n".join(lines)

    for offset, scored in enumerate(results):
        rank = start_rank + offset
        item = scored.item
        lines.append("")
        lines.append(f"  {rank:>2}. {item.name[:52]:<52}  {scored.match_percent:>3}% match")
        lines.append(f"      {match_bar(scored.match_percent)}")
        lines.append(f"      {popularity_label(item.popularity)} | {item.category}")
        if item.description:
            lines.append(f"      {item.description}")
        if scored.matched_skills:
            labels = ", ".join(
                f"{preferences.ranked_skills[r - 1]} #{r}" for r in scored.matched_skills
            )
            lines.append(f"      Your skills: {labels}")
        if item.tags:
            lines.append(f"      Tags: {', '.join(item.tags)}")
        lines.append(f"      Why: {scored.reasoning}")

    return "\n".join(lines)


def format_catalog_summary(
    catalog: Sequence[CatalogItem],
    counts:  dict[str, int],
    source:  str = "",
) -> str:
    """Format per-category item counts for ``validate-catalog``."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Event Catalog ===")
    if source:
        lines.append(f"  Source: {source}")
    lines.append(f"  Events: {len(catalog)}")
    lines.append("")
    lines.append(f"    {'Category':<28}  {'Events':>6}")
    lines.append("    " + "-" * 36)
    for category, count in counts.items():
        lines.append(f"    {category[:28]:<28}  {count:>6}")

    untagged = [item.name for item in catalog if not item.tags]
    if untagged:
        lines.append("")
        lines.append(f"  [WARN] {len(untagged)} event(s) without tags:")
        for name in untagged:
            lines.append(f"    - {name}")
    return "\n".join(lines)


def format_options(sections: dict[str, Sequence[str]]) -> str:
    """Format titled option lists for ``list-options``."""
    lines: list[str] = []
    for title, options in sections.items():
        lines.append("")
        lines.append(f"  {title}:")
        for option in options:
            lines.append(f"    - {option}")
    return "\n".join(lines)
