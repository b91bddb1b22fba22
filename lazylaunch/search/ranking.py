from __future__ import annotations

from collections.abc import Iterable

from ..items.types import CandidateItem, ScoredItem

APPLICATION_BONUS = 50
EXACT_MATCH_SCORE = 2000
NAME_PREFIX_SCORE = 1500
COMMAND_PREFIX_SCORE = 1400
NAME_SUBSTRING_SCORE = 1000
COMMAND_SUBSTRING_SCORE = 900
DESCRIPTION_SUBSTRING_SCORE = 600
SUBSEQUENCE_BASE_SCORE = 200
CONSECUTIVE_STEP_BONUS = 10


def type_bonus(item: CandidateItem) -> int:
    return APPLICATION_BONUS if item.is_application else 0


def subsequence_score(query: str, target: str) -> int | None:
    """Score ``query`` as an in-order, possibly gapped subsequence of ``target``.

    Both strings are expected to be lowercased already. Returns ``None`` when
    some query character cannot be matched after the previous one.

    Gaps are measured from the previously matched index, which starts at 0.
    A gap of exactly one grows the consecutive run and adds ``10 * run``;
    any other gap resets the run and subtracts the gap.
    """
    if not query:
        return None

    score = SUBSEQUENCE_BASE_SCORE
    prev_idx = 0
    run = 0
    search_from = 0
    for needle in query:
        idx = target.find(needle, search_from)
        if idx < 0:
            return None
        gap = idx - prev_idx
        if gap == 1:
            run += 1
            score += CONSECUTIVE_STEP_BONUS * run
        else:
            run = 0
            score -= gap
        prev_idx = idx
        search_from = idx + 1
    return score


def score_item(query: str, item: CandidateItem) -> int | None:
    """Return the match score of ``item`` for ``query`` or ``None`` to exclude it.

    Tiers are tried in order and the first match wins:
    exact name/command, name prefix, command prefix, name substring,
    command substring, description substring, then subsequence match on
    name or command. Applications get a flat bonus in every tier.
    """
    if not query:
        return 0

    needle = query.lower()
    name = item.display_name.lower()
    command = item.command.lower()
    bonus = type_bonus(item)
    length = len(needle)

    if name == needle or command == needle:
        return EXACT_MATCH_SCORE + bonus
    if name.startswith(needle):
        return NAME_PREFIX_SCORE - length + bonus
    if command.startswith(needle):
        return COMMAND_PREFIX_SCORE - length + bonus
    if needle in name:
        return NAME_SUBSTRING_SCORE - length + bonus
    if needle in command:
        return COMMAND_SUBSTRING_SCORE - length + bonus
    if item.description is not None and needle in item.description.lower():
        return DESCRIPTION_SUBSTRING_SCORE - length + bonus

    best: int | None = None
    for target in (name, command):
        score = subsequence_score(needle, target)
        if score is None:
            continue
        if best is None or score > best:
            best = score
    if best is None:
        return None
    return best + bonus


def rank(query: str, items: Iterable[CandidateItem], limit: int) -> list[ScoredItem]:
    """Rank ``items`` for ``query``, best first, keeping input order on ties."""
    if limit <= 0:
        return []
    scored: list[ScoredItem] = []
    for item in items:
        score = score_item(query, item)
        if score is None:
            continue
        scored.append(ScoredItem(item=item, score=score))
    # list.sort is stable, so equal scores keep snapshot order.
    scored.sort(key=lambda entry: -entry.score)
    return scored[:limit]


__all__ = [
    "APPLICATION_BONUS",
    "rank",
    "score_item",
    "subsequence_score",
    "type_bonus",
]
