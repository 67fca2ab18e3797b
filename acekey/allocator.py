# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Disambiguator allocation for an ambiguous candidate pool.

Every candidate receives one character which, typed after the shared left
unit, selects it. Allocation runs three passes over candidates ordered by
(length, original index), so the shortest labels get the most natural keys:

1. Offset pass: walk character offsets after each left unit; a character
   occurring exactly once at an offset goes to its owner.
2. Contiguous pass: each unassigned candidate claims the first unused
   character of its own body.
3. Last resort: the rightmost character of the body, shared if necessary, or
   the candidate's own left unit. A candidate never becomes unselectable.

The anchor (left unit of the typed buffer) is never handed out while any
alternative exists, and hyphens are never keys.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Sequence

from acekey.runes import DOUBLE_MARKER, MARKER, Candidate, by_length, leftmost_unit


@dataclass(frozen=True)
class Assignment:
    """A candidate index paired with the key(s) that select it.

    An empty `prefix` means the typed buffer already selects the candidate.
    """

    index: int
    prefix: str


@dataclass
class _Round:
    """Local tables of one allocation call, keyed by original index."""

    order: list[Candidate]
    anchor: str
    assigned: dict[int, str]
    used: set[str]
    remaining: list[int]

    def eligible(self, char: str) -> bool:
        return char != MARKER and char not in self.used and char != self.anchor

    def claim(self, candidate: Candidate, pos: int, char: str) -> None:
        self.assigned[candidate.index] = _prefer_original_case(candidate, pos, char)
        self.used.add(char)


def _prefer_original_case(candidate: Candidate, pos: int, char: str) -> str:
    if pos < len(candidate.clean):
        original = candidate.clean[pos]
        if original != MARKER and original.lower() == char:
            return original
    return char


def _offset_pass(state: _Round) -> None:
    max_len = max((len(c.match_lower) for c in state.order), default=0)
    for offset in range(max_len):
        if not state.remaining:
            break
        pending = [c for c in state.order if c.index in state.remaining]
        at_offset: dict[int, tuple[int, str]] = {}
        for candidate in pending:
            pos = len(candidate.left_unit) + offset
            if pos < len(candidate.match_lower):
                at_offset[candidate.index] = (pos, candidate.match_lower[pos])
        frequency = Counter(
            char for _, char in at_offset.values() if state.eligible(char)
        )

        newly_assigned = []
        for candidate in pending:
            if candidate.index not in at_offset:
                continue
            pos, char = at_offset[candidate.index]
            if state.eligible(char) and frequency[char] == 1:
                state.claim(candidate, pos, char)
                newly_assigned.append(candidate.index)
        state.remaining = [i for i in state.remaining if i not in newly_assigned]


def _contiguous_pass(state: _Round) -> None:
    newly_assigned = []
    for candidate in state.order:
        if candidate.index not in state.remaining:
            continue
        match_lower = candidate.match_lower
        for pos in range(len(candidate.left_unit), len(match_lower)):
            char = match_lower[pos]
            if state.eligible(char):
                state.claim(candidate, pos, char)
                newly_assigned.append(candidate.index)
                break
    state.remaining = [i for i in state.remaining if i not in newly_assigned]


def _last_resort_pass(state: _Round) -> None:
    by_index = {c.index: c for c in state.order}
    for index in state.remaining:
        candidate = by_index[index]
        match_lower = candidate.match_lower
        tail = [char for char in reversed(match_lower) if char != MARKER]
        if not tail:
            left_unit = candidate.left_unit
            state.assigned[index] = MARKER if left_unit == DOUBLE_MARKER else left_unit
            continue

        char = tail[0]
        if char != state.anchor:
            pos = match_lower.rindex(char)
            state.assigned[index] = _prefer_original_case(candidate, pos, char)
        else:
            state.assigned[index] = next(
                (other for other in tail if other != state.anchor), char
            )


def allocate_disambiguators(
    candidates: Sequence[Candidate], typed: str
) -> list[Assignment]:
    """
    Assign one distinguishing key per candidate.

    Args:
        candidates (Sequence[Candidate]): Pool sharing the left unit of `typed`.
        typed (str): Case-folded buffer whose left unit is the anchor.

    Returns:
        list[Assignment]: One entry per candidate, ordered by original index.
    """
    order = by_length(candidates)
    state = _Round(
        order=order,
        anchor=leftmost_unit(typed),
        assigned={},
        used=set(),
        remaining=[c.index for c in order],
    )

    _offset_pass(state)
    if state.remaining:
        _contiguous_pass(state)
    if state.remaining:
        _last_resort_pass(state)

    return [
        Assignment(index=index, prefix=state.assigned[index])
        for index in sorted(state.assigned)
    ]
