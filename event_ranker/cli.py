"""
DECA Event Ranker — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (load catalog, rank, export).
  5. Report result to stdout.

Install and run::

    pip install -e .
    event-ranker --help
    event-ranker validate-config
    event-ranker validate-catalog
    event-ranker list-options
    event-ranker recommend --skill Finance --skill Presentation --team Solo
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="event-ranker",
    help="DECA Event Ranker — find competitive events that fit your skills.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from pydantic import ValidationError

    from event_ranker.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except (ValidationError, ValueError) as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config) -> None:
    from event_ranker.config import find_project_root
    from event_ranker.utils.logging import configure_logging

    configure_logging(config.logging, base_dir=find_project_root())


def _load_catalog_or_exit(config, catalog_file: Optional[str] = None):
    """Load the catalog, printing a friendly error and exiting on failure."""
    from event_ranker.catalog.loader import load_catalog
    from event_ranker.config import resolve_catalog_path

    path = resolve_catalog_path(config, catalog_file)
    try:
        return path, load_catalog(path)
    except FileNotFoundError:
        typer.echo(f"[ERROR] Catalog file not found: {path}", err=True)
        raise typer.Exit(code=1)
    except ValueError as exc:
        typer.echo(f"[ERROR] Catalog validation failed:\n{exc}", err=True)
        raise typer.Exit(code=1)


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)
    ranking = config.ranking

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Catalog file:      {config.catalog.catalog_file}")
    typer.echo(f"  Skill weights:     {ranking.skill_base_weight} - {ranking.skill_rank_decay} x rank")
    typer.echo(f"  Experience weight: {ranking.experience_weight}")
    typer.echo(f"  Prep style weight: {ranking.prep_style_weight}")
    typer.echo(f"  Remote category:   {ranking.remote_category}")
    typer.echo(f"  Page size:         {config.display.page_size}")
    typer.echo(f"  Log level:         {config.logging.level}")
    typer.echo(f"  Debug mode:        {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("validate-catalog")
def validate_catalog(
    catalog_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        help="Path to catalog JSON. Defaults to config.catalog.catalog_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Load and validate the event catalog, then print per-category counts."""
    from event_ranker.catalog.loader import category_counts
    from event_ranker.reporting.formatters import format_catalog_summary

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    path, catalog = _load_catalog_or_exit(config, catalog_file)
    if not catalog:
        typer.echo(f"[ERROR] Catalog {path} contains no events.", err=True)
        raise typer.Exit(code=1)

    typer.echo(format_catalog_summary(catalog, category_counts(catalog), source=str(path)))
    typer.echo("")
    typer.echo("[OK] Catalog valid.")


@app.command("list-options")
def list_options() -> None:
    """Print the choices offered for each preference."""
    from event_ranker.reporting.formatters import format_options
    from event_ranker.taxonomy.preference_taxonomy import (
        EXPERIENCE_OPTIONS,
        PREP_STYLE_OPTIONS,
        SKILL_OPTIONS,
        PopularityPreference,
        TeamPreference,
    )

    typer.echo(
        format_options(
            {
                "Skills (--skill, up to 5, most important first)": SKILL_OPTIONS,
                "Preparation styles (--prep-style)": PREP_STYLE_OPTIONS,
                "Experience (--experience, repeatable)": EXPERIENCE_OPTIONS,
                "Competition level (--popularity)": [p.value for p in PopularityPreference],
                "Team preference (--team)": [t.value for t in TeamPreference],
            }
        )
    )


@app.command("recommend")
def recommend(
    skills: list[str] = typer.Option(
        ...,
        "--skill",
        "-s",
        help="A skill, repeat in priority order (most important first, max 5).",
    ),
    prep_style: Optional[str] = typer.Option(
        None,
        "--prep-style",
        help="Preferred event format, e.g. 'Roleplay Performance'.",
    ),
    experience: Optional[list[str]] = typer.Option(
        None,
        "--experience",
        "-e",
        help="Business experience area. Repeatable.",
    ),
    popularity: str = typer.Option(
        "I don't care",
        "--popularity",
        help="Competition level: 'Lower Competition' favours less crowded events.",
    ),
    team: str = typer.Option(
        "I don't care",
        "--team",
        help="Team, Solo, or \"I don't care\".",
    ),
    include_virtual: bool = typer.Option(
        False,
        "--include-virtual",
        help="Include online (virtual) events.",
    ),
    page_number: int = typer.Option(
        1,
        "--page",
        min=1,
        help="Result page to show.",
    ),
    page_size: Optional[int] = typer.Option(
        None,
        "--page-size",
        min=1,
        help="Events per page (default from config).",
    ),
    export_path: Optional[str] = typer.Option(
        None,
        "--export",
        help="Also write all ranked events to a .csv or .json file.",
    ),
    catalog_file: Optional[str] = typer.Option(
        None,
        "--catalog",
        help="Path to catalog JSON. Defaults to config.catalog.catalog_file.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Rank the event catalog against your skills and preferences.

    \b
    Example:
      event-ranker recommend -s Finance -s Presentation \\
          --experience "Public Speaking" --team Solo \\
          --popularity "Lower Competition"
    """
    from pydantic import ValidationError

    from event_ranker.models.preferences import PreferenceValidationError, UserPreferences
    from event_ranker.recommendations.ranker import rank_items
    from event_ranker.reporting.export import export_results
    from event_ranker.reporting.formatters import format_recommendations_table
    from event_ranker.reporting.pagination import page, page_count

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    try:
        preferences = UserPreferences(
            ranked_skills=tuple(skills),
            preparation_style=prep_style,
            experience_areas=tuple(experience or ()),
            popularity_preference=popularity,
            team_preference=team,
            include_remote_events=include_virtual,
        )
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid preferences:\n{exc}", err=True)
        raise typer.Exit(code=1)

    _, catalog = _load_catalog_or_exit(config, catalog_file)

    try:
        results = rank_items(catalog, preferences, config.ranking)
    except PreferenceValidationError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    size = page_size or config.display.page_size
    pages = page_count(len(results), size)
    if page_number > pages:
        typer.echo(
            f"[ERROR] Page {page_number} is out of range; {len(results)} event(s) "
            f"fill {pages} page(s) of {size}.",
            err=True,
        )
        raise typer.Exit(code=1)
    shown = page(results, page_number, size)

    typer.echo(
        format_recommendations_table(
            shown,
            preferences,
            start_rank=(page_number - 1) * size + 1,
            total=len(results),
        )
    )
    typer.echo("")
    typer.echo(f"  Page {page_number} of {pages}")
    if page_number < pages:
        typer.echo(f"  More results: --page {page_number + 1}")

    if export_path:
        try:
            written = export_results(results, preferences, Path(export_path))
        except ValueError as exc:
            typer.echo(f"[ERROR] {exc}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"  Exported {len(results)} event(s) to {written}")


if __name__ == "__main__":
    app()
