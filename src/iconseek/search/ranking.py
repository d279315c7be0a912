"""
Ranking of icon names and collections against a free-text query.

The query is trimmed, lower-cased and expanded with synonyms. Every
candidate is scored against every expansion (and, for collections, every
text field); the best score wins. Candidates that match nothing are
dropped, the rest are sorted by score with ties kept in input order.

The pipeline has three stages that can be used on their own:

1. ``score_candidates`` - best score per candidate, None for no match
2. ``drop_unmatched`` - remove the None entries
3. ``rank_results`` - stable sort by score, best first
"""

from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Iterable,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from iconseek.core.logging import logger
from iconseek.search.aliases import expand_query
from iconseek.search.fuzzy import fuzzy_score_multi

T = TypeVar("T")

COLLECTION_FIELDS: Tuple[str, ...] = ("name", "id", "category")


class RankedResult(NamedTuple):
    """A candidate with the best score it reached for one search call."""

    candidate: Any
    score: int


def normalize_query(query: str) -> str:
    """Trim and lower-case a raw query."""
    return query.strip().lower()


def best_score(expansions: Sequence[str], fields: Sequence[str]) -> Optional[int]:
    """
    Best multi-word score across every (expansion, field) combination.

    Returns None when no combination matches.
    """
    best: Optional[int] = None
    for expansion in expansions:
        for text in fields:
            score = fuzzy_score_multi(expansion, text)
            if score is not None and (best is None or score > best):
                best = score
    return best


def score_candidates(
    candidates: Iterable[T],
    expansions: Sequence[str],
    fields_of: Callable[[T], Sequence[str]],
) -> List[Optional[RankedResult]]:
    """
    Score each candidate; the output lines up with the input.

    Args:
        candidates: Items in caller order
        expansions: Expanded query strings
        fields_of: Returns the texts to match for one candidate

    Returns:
        One entry per candidate: a RankedResult, or None when nothing matched
    """
    scored: List[Optional[RankedResult]] = []
    for candidate in candidates:
        score = best_score(expansions, fields_of(candidate))
        scored.append(None if score is None else RankedResult(candidate, score))
    return scored


def drop_unmatched(scored: Iterable[Optional[RankedResult]]) -> List[RankedResult]:
    """Remove candidates that did not match. A score of 0 is a match."""
    return [result for result in scored if result is not None]


def rank_results(results: Iterable[RankedResult]) -> List[RankedResult]:
    """Sort by score, best first. Equal scores keep their input order."""
    return sorted(results, key=lambda result: result.score, reverse=True)


def _rank(
    candidates: Sequence[T],
    query: str,
    fields_of: Callable[[T], Sequence[str]],
    kind: str,
) -> List[RankedResult]:
    """Shared pipeline for a non-empty normalized query."""
    expansions = expand_query(query)
    ranked = rank_results(drop_unmatched(score_candidates(candidates, expansions, fields_of)))
    logger.debug(
        "Search ranked",
        kind=kind,
        query=query,
        expansions=len(expansions),
        candidates=len(candidates),
        matched=len(ranked),
    )
    return ranked


def _icon_fields(name: str) -> Tuple[str]:
    return (name,)


def _collection_fields(collection: Any) -> Tuple[str, ...]:
    """Name, id and category of a collection record or mapping."""
    if isinstance(collection, Mapping):
        return tuple(str(collection.get(field) or "") for field in COLLECTION_FIELDS)
    return tuple(str(getattr(collection, field, "") or "") for field in COLLECTION_FIELDS)


def rank_icons(candidates: Sequence[str], query: str) -> List[RankedResult]:
    """
    Score and rank icon names.

    An empty or whitespace-only query returns every name with score 0,
    in input order, without expanding anything.
    """
    normalized = normalize_query(query)
    if not normalized:
        return [RankedResult(name, 0) for name in candidates]
    return _rank(candidates, normalized, _icon_fields, "icons")


def rank_collections(candidates: Sequence[T], query: str) -> List[RankedResult]:
    """
    Score and rank collections by name, id and category.

    A collection's score is its best field for the best expansion.
    An empty or whitespace-only query returns every collection with
    score 0, in input order.
    """
    normalized = normalize_query(query)
    if not normalized:
        return [RankedResult(collection, 0) for collection in candidates]
    return _rank(candidates, normalized, _collection_fields, "collections")


def search_icons(candidates: Sequence[str], query: str) -> List[str]:
    """
    Fuzzy-search icon names, most relevant first.

    Args:
        candidates: Icon names, in the order to use for ties
        query: Free-text query; synonyms are tried automatically

    Returns:
        The matching names. An empty query returns all names unchanged.
    """
    return [result.candidate for result in rank_icons(candidates, query)]


def search_collections(candidates: Sequence[T], query: str) -> List[T]:
    """
    Fuzzy-search collections by name, id and category, most relevant first.

    Args:
        candidates: CollectionInfo models, objects with ``name``/``id``/
            ``category`` attributes, or mappings with those keys
        query: Free-text query

    Returns:
        The matching records themselves (not copies). An empty query
        returns all records unchanged.
    """
    return [result.candidate for result in rank_collections(candidates, query)]
