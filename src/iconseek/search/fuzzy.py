"""
Fuzzy subsequence scoring for identifier-like names.

A pattern matches a text when its characters appear in the text in order,
not necessarily adjacent: ``arw`` matches ``arrow``. Matches earn bonuses
for landing at the start of the text, right after a ``-``/``_`` separator,
or right after the previous match; skipped characters cost one point each.
Scores are not normalized by length.
"""

from typing import Optional

CONSECUTIVE_BONUS = 4
WORD_BOUNDARY_BONUS = 8
PREFIX_BONUS = 12
GAP_PENALTY = -1
EXACT_MATCH_BONUS = 20

WORD_SEPARATORS = frozenset("-_")


def fuzzy_score(pattern: str, text: str) -> Optional[int]:
    """
    Score how well ``pattern`` fuzzy-matches ``text``.

    Comparison is case-insensitive using full Unicode case folding.

    Args:
        pattern: Characters to find, in order
        text: Candidate string

    Returns:
        The score, higher is better, or None when ``pattern`` is not a
        subsequence of ``text``. An empty pattern scores 0.
    """
    if not pattern:
        return 0

    pattern_folded = pattern.casefold()
    text_folded = text.casefold()
    pattern_len = len(pattern_folded)

    score = 0
    pi = 0
    prev_match: Optional[int] = None

    for ti, tc in enumerate(text_folded):
        if pi == pattern_len:
            break
        if tc != pattern_folded[pi]:
            continue

        if prev_match is not None:
            if ti == prev_match + 1:
                score += CONSECUTIVE_BONUS
            else:
                score += GAP_PENALTY * (ti - prev_match - 1)

        if ti == 0:
            score += PREFIX_BONUS
        elif text_folded[ti - 1] in WORD_SEPARATORS:
            score += WORD_BOUNDARY_BONUS

        prev_match = ti
        pi += 1

    if pi < pattern_len:
        return None

    if pattern_len == len(text_folded):
        score += EXACT_MATCH_BONUS

    return score


def fuzzy_score_multi(query: str, text: str) -> Optional[int]:
    """
    Score a whitespace-separated query against a single text.

    Every word must match ``text`` on its own; the result is the sum of
    the word scores. Word order in the query does not matter. A query
    with no words scores 0.
    """
    total = 0
    for word in query.split():
        word_score = fuzzy_score(word, text)
        if word_score is None:
            return None
        total += word_score
    return total
