"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local env overrides (gitignored)
  4. Environment variables        — ``EVENT_RANKER_*`` prefix
     (CATALOG_FILE, LOG_LEVEL, PAGE_SIZE, DEBUG)

Entry point: ``load_config(config_path=None) -> AppConfig``

The ranking engine itself only needs a ``RankingConfig``; its defaults
reproduce the published scoring weights, so library callers and tests can
rank without loading any file.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

from event_ranker.taxonomy.preference_taxonomy import DEFAULT_EXPERIENCE_TAG_MAP

# ── Sub-config models ─────────────────────────────────────────────────────────


class RankingConfig(BaseModel):
    """Scoring weights and matching markers for the ranking engine.

    Skill weight at 0-based rank ``i`` is
    ``skill_base_weight - skill_rank_decay * i``.

    ``bonus_allowance`` is the constant added to the skill maximum when
    normalising to a percentage.  It approximates the combined experience,
    preparation, popularity and team bonuses; it is not a tight bound, which
    is why percentages are clamped.
    """

    model_config = ConfigDict(frozen=True)

    skill_base_weight: float = 1.5
    skill_rank_decay: float = 0.15
    experience_weight: float = 0.8
    prep_style_weight: float = 0.7
    low_popularity_bonus: float = 1.5
    high_popularity_penalty: float = 0.8
    team_bonus: float = 1.0
    bonus_allowance: float = 3.0
    team_tag: str = "Team"
    remote_category: str = "Virtual"
    experience_tag_map: dict[str, str] = dict(DEFAULT_EXPERIENCE_TAG_MAP)

    @field_validator(
        "skill_base_weight",
        "skill_rank_decay",
        "experience_weight",
        "prep_style_weight",
        "low_popularity_bonus",
        "high_popularity_penalty",
        "team_bonus",
    )
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError(f"Scoring weights must be >= 0, got {v}.")
        return v

    @field_validator("bonus_allowance")
    @classmethod
    def validate_allowance(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"bonus_allowance must be > 0, got {v}.")
        return v


class CatalogConfig(BaseModel):
    """Location of the static event catalog."""

    model_config = ConfigDict(frozen=True)

    catalog_file: str = "config/catalog/deca_events.json"


class DisplayConfig(BaseModel):
    """Result presentation settings."""

    model_config = ConfigDict(frozen=True)

    page_size: int = 5

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"page_size must be >= 1, got {v}.")
        return v


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = ""
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class AppConfig(BaseModel):
    """Complete application configuration.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    ranking: RankingConfig = RankingConfig()
    catalog: CatalogConfig = CatalogConfig()
    display: DisplayConfig = DisplayConfig()
    logging: LoggingConfig = LoggingConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

_PROJECT_ROOT = Path(__file__).parent.parent


def find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return _PROJECT_ROOT


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``.  A ``local.toml`` beside
            it is merged on top when present.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the config file does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = find_project_root()
    load_dotenv(dotenv_path=root / ".env", override=False)

    config_path = Path(config_path) if config_path else root / "config" / "default.toml"
    if not config_path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Create config/default.toml or pass --config."
        )

    raw = _read_toml(config_path)
    local_path = config_path.parent / "local.toml"
    if local_path.exists():
        raw = _deep_merge(raw, _read_toml(local_path))

    return _build_app_config(_deep_merge(raw, _env_overrides()))


def _read_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Return ``base`` with ``override`` merged in; nested tables merge key by key."""
    result = dict(base)
    for key, val in override.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(val, dict):
            result[key] = _deep_merge(current, val)
        else:
            result[key] = val
    return result


# Environment variable → (config section, key).  Values are passed through as
# strings; pydantic coerces them (e.g. "10" → 10 for page_size).
_ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "EVENT_RANKER_CATALOG_FILE": ("catalog", "catalog_file"),
    "EVENT_RANKER_LOG_LEVEL":    ("logging", "level"),
    "EVENT_RANKER_PAGE_SIZE":    ("display", "page_size"),
}

_TRUTHY = ("1", "true", "yes")


def _env_overrides() -> dict[str, Any]:
    """Collect EVENT_RANKER_* variables into a raw-config-shaped dict.

    ``EVENT_RANKER_DEBUG`` sets the top-level ``debug`` flag; the rest are
    listed in ``_ENV_OVERRIDES``.  Unset or empty variables are ignored.
    """
    overrides: dict[str, Any] = {}
    for var, (section, key) in _ENV_OVERRIDES.items():
        if value := os.environ.get(var):
            overrides.setdefault(section, {})[key] = value

    if debug := os.environ.get("EVENT_RANKER_DEBUG"):
        overrides["debug"] = debug.lower() in _TRUTHY

    return overrides


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Validate the merged dict.  ``[project] debug`` is the fallback for ``debug``."""
    sections = {k: v for k, v in raw.items() if k != "project"}
    sections.setdefault("debug", raw.get("project", {}).get("debug", False))
    return AppConfig.model_validate(sections)


def resolve_catalog_path(config: AppConfig, override: Optional[str] = None) -> Path:
    """Return the catalog path to load.

    A user-supplied ``override`` is used as given, so a relative path is read
    from the current directory.  The configured ``catalog_file`` is resolved
    against the project root.
    """
    if override:
        return Path(override)
    path = Path(config.catalog.catalog_file)
    if not path.is_absolute():
        path = find_project_root() / path
    return path
