"""
Synonym expansion for icon search queries.

Icon sets name the same glyph differently: one calls it ``trash``,
another ``delete``, a third ``remove``. A query is expanded into alternate
query strings where a single word is swapped for one of its synonyms, so
``trash can`` also tries ``delete can`` and ``remove can``.

Only one word is substituted per alternate string. Two words with
synonyms each produce their own alternates, never a combination of both.
"""

from typing import Dict, List, Set, Tuple

# Disjoint synonym groups. A word appears in at most one group.
ALIAS_GROUPS: Tuple[Tuple[str, ...], ...] = (
    ("account", "person", "profile", "user"),
    ("add", "create", "new", "plus"),
    ("alert", "bell", "notification", "notify", "reminder"),
    ("approve", "like", "recommend", "thumbs-up"),
    ("left", "previous"),
    ("next", "right"),
    ("attach", "connect", "link"),
    ("bag", "basket", "cart"),
    ("bookmark", "tag", "label"),
    ("building", "home", "house"),
    ("calendar", "date", "event"),
    ("cancel", "close"),
    ("delete", "remove", "trash"),
    ("chat", "conversation", "message"),
    ("clock", "time", "timer", "alarm"),
    ("cog", "gear", "preferences", "settings"),
    ("directory", "folder"),
    ("disapprove", "dislike", "thumbs-down"),
    ("document", "file", "paper"),
    ("earth", "globe", "world", "planet", "global"),
    ("email", "envelope", "mail"),
    ("eye", "view", "visible"),
    ("favorite", "heart", "love"),
    ("feed", "rss", "subscribe", "subscription"),
    ("list", "menu"),
    ("lock", "secure", "security"),
    ("unlock", "lock-open"),
    ("log-in", "login", "sign-in"),
    ("log-out", "logout", "sign-out"),
    ("magnifier", "search", "find", "magnify"),
    ("photo", "picture", "image"),
    ("refresh", "reload", "update", "sync"),
    ("speaker", "audio", "volume", "sound"),
    ("speed", "fast"),
    ("accessibility", "ally", "a11y"),
    ("edit", "pen", "pencil", "write"),
    ("moon", "night", "dark"),
    ("sun", "day"),
    ("bulb", "idea"),
    ("pin", "location", "map", "marker"),
    ("bot", "robot", "android"),
    ("db", "database"),
    ("external", "launch"),
    ("airplane", "flight"),
    ("chart", "graph"),
    ("monitor", "screen"),
    ("video", "film"),
    ("support", "help", "question"),
    ("mute", "silence", "sound-off", "volume-off"),
    ("code", "development", "program", "terminal", "braces"),
    ("phone", "call"),
    ("car", "vehicle", "transport", "taxi"),
)


def _build_index(groups: Tuple[Tuple[str, ...], ...]) -> Dict[str, int]:
    """Map every word to the index of its group."""
    index: Dict[str, int] = {}
    for group_idx, group in enumerate(groups):
        for word in group:
            if word in index:
                raise ValueError(f"Alias '{word}' appears in more than one group")
            index[word] = group_idx
    return index


_WORD_TO_GROUP: Dict[str, int] = _build_index(ALIAS_GROUPS)


def _synonyms_in_order(word: str) -> List[str]:
    """Other members of ``word``'s group, in table order."""
    group_idx = _WORD_TO_GROUP.get(word)
    if group_idx is None:
        return []
    return [alias for alias in ALIAS_GROUPS[group_idx] if alias != word]


def expand_aliases(word: str) -> Set[str]:
    """
    Return the synonyms of ``word``, excluding ``word`` itself.

    Lookup is an exact string match, so callers pass lower-cased words.
    Unknown words give an empty set.
    """
    return set(_synonyms_in_order(word))


def expand_query(query: str) -> List[str]:
    """
    Expand a query into alternate query strings.

    Args:
        query: Query text, already trimmed and lower-cased

    Returns:
        The original words joined by single spaces, followed by one string
        per (word position, synonym) pair with only that word replaced.
        Empty list when the query has no words.
    """
    words = query.split()
    if not words:
        return []

    candidates = [" ".join(words)]

    for i, word in enumerate(words):
        for alias in _synonyms_in_order(word):
            replaced = list(words)
            replaced[i] = alias
            candidates.append(" ".join(replaced))

    return candidates
