# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry point of the AceKey incremental ambiguity-resolution engine.

`assign_ace_keys(labels, typed)` is a pure function of the label list and the
typed buffer. It is called from scratch on every keystroke and returns either
one `Assignment` per surviving label or `None` when the buffer matches nothing.

Evaluation order:
1. Nothing significant typed: every label shows its left unit.
2. `--` selects the one label that was shown the key `-` after `-`.
3. The buffer is a whole label.
4. Exactly one label starts with the buffer in original case.
5. Keys after the left unit narrow the pool (see `acekey.narrowing`).
6. Literal prefix filtering, with a greedy full-key fallback when it is empty.
7. Original-case precedence inside the filtered pool.
8. A bare left unit allocates keys across its pool.
9. Labels equal to the buffer win when nothing else extends it.
10. Keys are allocated across whatever remains.

No state is kept between calls, so concurrent callers need no locking.
"""
from __future__ import annotations

from typing import Sequence

from acekey.allocator import Assignment, allocate_disambiguators
from acekey.logger import logger
from acekey.matching import (
    filter_candidates,
    filter_exact_matches,
    match_base_full_key,
    match_exact_case,
    match_whole_label,
)
from acekey.narrowing import is_token_sequence, narrow_by_tokens
from acekey.runes import (
    DOUBLE_MARKER,
    MARKER,
    Candidate,
    build_candidates,
    clean_string,
    leftmost_unit,
)


def _selected(candidate: Candidate) -> list[Assignment]:
    return [Assignment(index=candidate.index, prefix="")]


def initial_assignments(labels: Sequence[str]) -> list[Assignment]:
    """Prefixes shown before anything is typed: each label's own left unit."""
    assignments = []
    for candidate in build_candidates(labels):
        left_unit = candidate.left_unit
        if left_unit == DOUBLE_MARKER:
            left_unit = MARKER
        assignments.append(Assignment(index=candidate.index, prefix=left_unit))
    return assignments


def assign_ace_keys(labels: Sequence[str], typed: str) -> list[Assignment] | None:
    """
    Compute the disambiguators for `labels` given the `typed` buffer.

    Args:
        labels (Sequence[str]): Candidate labels, already flattened by the caller.
        typed (str): Everything typed since the last selection. Characters that
            are not ACE runes are ignored.

    Returns:
        list[Assignment] | None: One assignment per surviving label, ordered by
        index; a single assignment with an empty prefix when the buffer
        selects one label; `None` when nothing matches.
    """
    candidates = build_candidates(labels)
    typed_clean = clean_string(typed)
    typed_lower = typed_clean.lower()
    typed_left_unit = leftmost_unit(typed_lower)

    if not typed_lower:
        return initial_assignments(labels)

    if typed_lower == DOUBLE_MARKER:
        # `--` reads as `-` plus the key `-`, which only labels without a body get.
        marker_key = narrow_by_tokens(candidates, typed_lower, MARKER)
        if marker_key.selected:
            logger.debug(
                "'%s' is the marker key of label #%d.", typed, marker_key.selected.index
            )
            return _selected(marker_key.selected)

    whole = match_whole_label(candidates, typed_clean, typed_lower, typed_left_unit)
    if whole:
        logger.debug("'%s' is the whole label #%d.", typed, whole.index)
        return _selected(whole)

    exact = match_exact_case(candidates, typed_clean)
    if exact:
        logger.debug("'%s' is a unique prefix of label #%d.", typed, exact.index)
        return _selected(exact)

    narrowed = None
    if is_token_sequence(typed_lower, typed_left_unit):
        narrowing = narrow_by_tokens(candidates, typed_lower, typed_left_unit)
        if narrowing.selected:
            logger.debug(
                "'%s' narrowed to label #%d.", typed, narrowing.selected.index
            )
            return _selected(narrowing.selected)
        if narrowing.narrowed:
            narrowed = narrowing.pool

    pool = (
        narrowed
        if narrowed is not None
        else filter_candidates(candidates, typed_lower, typed_left_unit)
    )

    if not pool:
        fallback = match_base_full_key(
            candidates, typed_left_unit, typed_clean, typed_lower, fallback=True
        )
        if fallback:
            logger.debug("'%s' resolved by full key to label #%d.", typed, fallback.index)
            return _selected(fallback)
        logger.debug("'%s' matches no label.", typed)
        return None

    exact = match_exact_case(pool, typed_clean)
    if exact:
        return _selected(exact)

    if typed_lower == typed_left_unit and len(pool) > 1:
        return allocate_disambiguators(pool, typed_lower)

    pool = filter_exact_matches(pool, typed_lower)
    if len(pool) == 1:
        return _selected(pool[0])

    return allocate_disambiguators(pool, typed_left_unit)
