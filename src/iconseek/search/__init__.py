"""
Query resolution for the icon catalog.

Synonym expansion, fuzzy subsequence scoring and ranking of icon names
and collections.
"""

from iconseek.search.aliases import ALIAS_GROUPS, expand_aliases, expand_query
from iconseek.search.fuzzy import fuzzy_score, fuzzy_score_multi
from iconseek.search.ranking import (
    RankedResult,
    drop_unmatched,
    rank_collections,
    rank_icons,
    rank_results,
    score_candidates,
    search_collections,
    search_icons,
)

__all__ = [
    # Aliases
    "ALIAS_GROUPS",
    "expand_aliases",
    "expand_query",
    # Scoring
    "fuzzy_score",
    "fuzzy_score_multi",
    # Ranking
    "RankedResult",
    "score_candidates",
    "drop_unmatched",
    "rank_results",
    "rank_icons",
    "rank_collections",
    "search_icons",
    "search_collections",
]
