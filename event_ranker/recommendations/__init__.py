"""
Ranking engine: turns a student's ranked skills and preferences into an
ordered list of DECA events with match percentages.

Modules
-------
scorer : ScoreComponents dataclass + compute_score() + match_percent()
         + build_reasoning() — pure functions, no I/O.
ranker : ScoredItem dataclass + filter_catalog() + rank_items().
"""
