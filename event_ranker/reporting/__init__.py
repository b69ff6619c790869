"""
event_ranker.reporting — Presentation helpers around ranked results.

Nothing here affects scores or ordering; the ranker's output is shown,
paged or written to disk as-is.

Modules:
  pagination — ResultWindow ("show 5, load 5 more") and fixed-size pages.
  formatters — ASCII terminal formatters for Typer CLI commands.
  export     — CSV/JSON flat-file export helpers.
"""
