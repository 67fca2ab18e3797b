# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Candidate filtering and the early-exit resolvers of the AceKey engine.

The filter narrows the pool to labels compatible with the typed buffer. The
resolvers short-circuit allocation when the typed buffer already identifies a
single label:

- match_whole_label: the typed buffer is an entire label.
- match_exact_case: exactly one label starts with the buffer in original case.
- match_base_full_key: replays the greedy one-character-per-label claim the
  allocator would have shown and checks whether the buffer spells one of them.
- filter_exact_matches: prefers labels equal to the buffer when no other label
  extends it.

All functions take case-folded typed input unless the parameter says `clean`.
"""
from __future__ import annotations

from typing import Sequence

from acekey.runes import MARKER, Candidate, by_length, matches_left_unit


def base_pool(candidates: Sequence[Candidate], typed_left_unit: str) -> list[Candidate]:
    """Candidates anchored on the typed left unit."""
    return [
        candidate
        for candidate in candidates
        if matches_left_unit(candidate.left_unit, typed_left_unit)
    ]


def filter_candidates(
    candidates: Sequence[Candidate], typed_lower: str, typed_left_unit: str
) -> list[Candidate]:
    """
    Select candidates compatible with the typed buffer.

    A lone marker matches every marker-anchored label, single or doubled.
    Otherwise the left units must agree and the case-folded label (or its
    collapsed form) must start with the typed buffer.
    """
    if typed_lower == MARKER:
        return base_pool(candidates, MARKER)

    return [
        candidate
        for candidate in candidates
        if candidate.left_unit.lower() == typed_left_unit
        and candidate.startswith(typed_lower)
    ]


def match_whole_label(
    candidates: Sequence[Candidate],
    typed_clean: str,
    typed_lower: str,
    typed_left_unit: str,
) -> Candidate | None:
    """
    Return the candidate whose clean form equals the typed buffer.

    A buffer that is only a left unit shared by several labels (`c` with `c`,
    `cp`, `cat`) stays ambiguous so the others can still be reached.
    """
    match = next((c for c in candidates if c.clean == typed_clean), None)
    if match is None:
        return None
    if typed_lower == typed_left_unit:
        sharing = [c for c in candidates if c.left_unit.lower() == typed_left_unit]
        if len(sharing) > 1:
            return None
    return match


def match_exact_case(
    candidates: Sequence[Candidate], typed_clean: str
) -> Candidate | None:
    """Original-case precedence: exactly one label starts with the buffer as typed."""
    if not typed_clean:
        return None
    exact = [c for c in candidates if c.clean.startswith(typed_clean)]
    if len(exact) == 1:
        return exact[0]
    return None


def filter_exact_matches(
    candidates: Sequence[Candidate], typed_lower: str
) -> list[Candidate]:
    """
    Keep only labels equal to the typed buffer, unless another label extends it.

    A collapsed form only counts when it did not shorten the label.
    """
    if not typed_lower:
        return list(candidates)

    exact_matches = [
        c
        for c in candidates
        if c.lower == typed_lower
        or (c.match_lower == typed_lower and len(c.lower) == len(c.match_lower))
    ]
    if not exact_matches:
        return list(candidates)

    other_starts = any(
        c.lower != typed_lower and c.lower.startswith(typed_lower) for c in candidates
    )
    if other_starts:
        return list(candidates)
    return exact_matches


def _claim_walk(
    base: Sequence[Candidate],
    typed_left_unit: str,
    target: str,
    *,
    folded: bool,
) -> Candidate | None:
    used: set[str] = set()
    for candidate in base:
        start = len(candidate.left_unit)
        body = candidate.lower if folded else candidate.clean
        claimed = next(
            (
                char
                for char in body[start:]
                if char not in used and not (folded and char == MARKER)
            ),
            None,
        )
        if claimed is None:
            continue
        used.add(claimed)
        if f"{typed_left_unit}{claimed}" == target:
            return candidate
    return None


def match_base_full_key(
    candidates: Sequence[Candidate],
    typed_left_unit: str,
    typed_clean: str,
    typed_lower: str,
    *,
    fallback: bool = False,
) -> Candidate | None:
    """
    Resolve `left unit + key` buffers against the keys a user would have seen.

    When exactly one character follows the left unit and only one base-anchored
    label contains it, that label wins outright. Otherwise every base-anchored
    label, shortest first, claims the next unused character of its own body,
    first in original case and then case-folded; the label whose claim spells
    the typed buffer is the answer.

    With `fallback`, used once literal filtering found nothing, only the
    case-folded claim walk runs.
    """
    if not typed_left_unit or len(typed_lower) <= len(typed_left_unit):
        return None

    base = by_length(base_pool(candidates, typed_left_unit))
    if fallback:
        return _claim_walk(base, typed_left_unit, typed_lower, folded=True)

    if len(typed_lower) - len(typed_left_unit) == 1:
        extra = typed_lower[len(typed_left_unit)]
        holders = [c for c in base if extra in c.lower[len(c.left_unit) :]]
        if len(holders) == 1:
            return holders[0]

    return _claim_walk(
        base, typed_left_unit, typed_clean, folded=False
    ) or _claim_walk(base, typed_left_unit, typed_lower, folded=True)
