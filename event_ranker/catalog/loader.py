"""
Catalog loader: JSON → validated ``CatalogItem`` tuple.

The catalog is static configuration.  It is loaded once by the caller and
passed to ``rank_items()`` explicitly, so tests can substitute their own list.

File format
-----------
A JSON array of objects::

    [
      {"name": "Principles of Finance", "category": "Principles",
       "tags": ["Finance", "Exam Only"], "popularity": "High",
       "description": "..."},
      ...
    ]

Entries without a ``name`` key (e.g. ``{"_comment": "..."}``) are skipped.

Validation rules
----------------
- The root must be an array.
- Duplicate names are rejected.
- ``popularity`` must be a ``Popularity`` value or a known legacy alias
  (``"Lower"`` → ``Low``).
- Missing ``tags`` is allowed and yields an empty tag set.

Usage
-----
    from event_ranker.catalog.loader import load_catalog

    catalog = load_catalog(Path("config/catalog/deca_events.json"))
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from event_ranker.models.catalog import CatalogItem

log = logging.getLogger(__name__)


def parse_catalog(records: list[dict[str, Any]]) -> tuple[CatalogItem, ...]:
    """Validate raw catalog records and build ``CatalogItem`` objects.

    Args:
        records: Parsed JSON array.

    Returns:
        Items in file order.

    Raises:
        ValueError: On duplicate names or records failing model validation.
    """
    items: list[CatalogItem] = []
    seen_names: set[str] = set()

    for i, rec in enumerate(records):
        if not isinstance(rec, dict):
            raise ValueError(f"Catalog entry at index {i} is not an object.")
        if "name" not in rec:
            continue

        try:
            item = CatalogItem(**rec)
        except ValidationError as exc:
            raise ValueError(f"Catalog entry at index {i} is invalid: {exc}") from exc

        if item.name in seen_names:
            raise ValueError(f"Duplicate catalog item name '{item.name}' at index {i}.")
        seen_names.add(item.name)

        if not item.tags:
            log.warning("Catalog item '%s' has no tags; it can only score on popularity/team.", item.name)

        items.append(item)

    return tuple(items)


def load_catalog(path: Path) -> tuple[CatalogItem, ...]:
    """Load and validate a catalog JSON file.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the JSON is malformed or fails validation.
    """
    log.info("Loading catalog from %s", path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Catalog file {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list):
        raise ValueError(f"Catalog file {path} must contain a JSON array.")

    items = parse_catalog(raw)
    log.info("Loaded %d catalog items.", len(items))
    return items


def category_counts(catalog: tuple[CatalogItem, ...] | list[CatalogItem]) -> dict[str, int]:
    """Return item counts per category, in first-seen order."""
    return dict(Counter(item.category for item in catalog))
