from __future__ import annotations

from .outline.types import OutlineEntry

_WORD_BOUNDARIES = "/_- ."
NAME_MATCH_BONUS = 60
DEPTH_PENALTY = 5


def _is_word_start(candidate: str, idx: int) -> bool:
    if idx == 0:
        return True
    previous = candidate[idx - 1]
    if previous in _WORD_BOUNDARIES:
        return True
    # camelCase humps (`nNonOrthogonalCorrectors`) start words too.
    return candidate[idx].isupper() and not previous.isupper()


def fuzzy_score(query: str, candidate: str) -> int | None:
    """Subsequence score of ``query`` in ``candidate``, ``None`` when absent."""
    if not query:
        return 0
    folded = candidate.casefold()

    score = 0
    last = -1
    streak = 0
    for char in query.casefold():
        idx = folded.find(char, last + 1)
        if idx < 0:
            return None
        if idx == last + 1:
            streak += 1
            score += 20 + min(16, streak * 4)
        else:
            streak = 0
            score -= min(40, (idx - last - 1) * 2)
        if _is_word_start(candidate, idx):
            score += 35
        last = idx

    return score - len(folded) // 5


def entry_score(query: str, entry: OutlineEntry) -> int | None:
    """Score an outline entry, preferring hits inside the symbol's own name.

    The name is scored on its own with a bonus, the full path without one; the
    better of the two wins. Deeper entries lose a little per nesting level.
    """
    scores = []
    own = fuzzy_score(query, entry.name)
    if own is not None:
        scores.append(own + NAME_MATCH_BONUS)
    full = fuzzy_score(query, entry.path)
    if full is not None:
        scores.append(full)
    if not scores:
        return None
    return max(scores) - entry.depth * DEPTH_PENALTY


def substring_index(query: str, candidate: str) -> int | None:
    if not query:
        return 0
    idx = candidate.casefold().find(query.casefold())
    if idx < 0:
        return None
    return idx


def match_entries(query: str, entries: list[OutlineEntry], limit: int = 200) -> list[tuple[OutlineEntry, int]]:
    """Rank outline entries by their path for the symbol palette.

    Substring hits win outright (earlier, then shorter); otherwise entries are
    ranked by ``entry_score``.
    """
    substring_scored: list[tuple[int, int, int, OutlineEntry]] = []
    for order, entry in enumerate(entries):
        idx = substring_index(query, entry.path)
        if idx is None:
            continue
        substring_scored.append((idx, len(entry.path), order, entry))
    if substring_scored:
        substring_scored.sort(key=lambda item: (item[0], item[1], item[2]))
        return [
            (entry, 10_000 - (idx * 50) - path_len)
            for idx, path_len, _order, entry in substring_scored[: max(1, limit)]
        ]

    scored: list[tuple[int, int, int, OutlineEntry]] = []
    for order, entry in enumerate(entries):
        score = entry_score(query, entry)
        if score is None:
            continue
        scored.append((score, len(entry.path), order, entry))
    scored.sort(key=lambda item: (-item[0], item[1], item[2]))
    return [(entry, score) for score, _path_len, _order, entry in scored[: max(1, limit)]]
