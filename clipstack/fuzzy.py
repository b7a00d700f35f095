"""Fuzzy matching and ranking of clipboard entries."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum, auto

from clipstack.history import ClipboardEntry

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1
BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL123 = BONUS_BOUNDARY + SCORE_GAP_EXTENSION
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2


class _CharClass(Enum):
    LOWER = auto()
    UPPER = auto()
    NUMBER = auto()
    LETTER = auto()
    NON_WORD = auto()


def _classify(ch: str) -> _CharClass:
    if ch.islower():
        return _CharClass.LOWER
    if ch.isupper():
        return _CharClass.UPPER
    if ch.isdigit():
        return _CharClass.NUMBER
    if ch.isalpha():
        return _CharClass.LETTER
    return _CharClass.NON_WORD


def _bonus(prev: _CharClass, cur: _CharClass) -> int:
    if prev is _CharClass.NON_WORD and cur is not _CharClass.NON_WORD:
        return BONUS_BOUNDARY
    if (prev is _CharClass.LOWER and cur is _CharClass.UPPER) or (
        prev is not _CharClass.NUMBER and cur is _CharClass.NUMBER
    ):
        return BONUS_CAMEL123
    if cur is _CharClass.NON_WORD:
        return BONUS_NON_WORD
    return 0


def _best(*candidates: int | None) -> int | None:
    present = [c for c in candidates if c is not None]
    return max(present) if present else None


def fuzzy_match(choice: str, pattern: str) -> int | None:
    """Score ``pattern`` as a subsequence of ``choice``; None if it does not occur.

    Matching ignores case unless the pattern holds an upper-case letter.
    Consecutive runs and matches at word starts score higher; gaps cost.
    """
    if not pattern:
        return 0

    case_sensitive = any(ch.isupper() for ch in pattern)
    fold = (lambda ch: ch) if case_sensitive else str.lower
    hay = [fold(ch) for ch in choice]
    pat = [fold(ch) for ch in pattern]

    remaining = iter(hay)
    if not all(p in remaining for p in pat):
        return None

    bonuses = []
    prev = _CharClass.NON_WORD
    for ch in choice:
        cur = _classify(ch)
        bonuses.append(_bonus(prev, cur))
        prev = cur

    row: list[int | None] = [
        SCORE_MATCH + bonus * BONUS_FIRST_CHAR_MULTIPLIER if c == pat[0] else None
        for c, bonus in zip(hay, bonuses)
    ]
    for p in pat[1:]:
        prev_row, row = row, []
        gap_best: int | None = None
        for j, (c, bonus) in enumerate(zip(hay, bonuses)):
            if gap_best is not None:
                gap_best += SCORE_GAP_EXTENSION
            if j >= 2 and prev_row[j - 2] is not None:
                gap_best = _best(gap_best, prev_row[j - 2] + SCORE_GAP_START)
            if c != p:
                row.append(None)
                continue
            consecutive = None
            if j >= 1 and prev_row[j - 1] is not None:
                consecutive = prev_row[j - 1] + max(bonus, BONUS_CONSECUTIVE)
            gapped = gap_best + bonus if gap_best is not None else None
            best = _best(consecutive, gapped)
            row.append(SCORE_MATCH + best if best is not None else None)

    return _best(*row)


def search(
    query: str, entries: Sequence[ClipboardEntry]
) -> list[tuple[ClipboardEntry, int]]:
    """Filter and rank entries by fuzzy match.

    An empty query yields every entry in order with score 0; otherwise only
    matching entries are returned, best score first, ties in original order.
    """
    if not query:
        return [(entry, 0) for entry in entries]

    scored = (
        (entry, score)
        for entry in entries
        if (score := fuzzy_match(entry.content, query)) is not None
    )
    return sorted(scored, key=lambda pair: pair[1], reverse=True)