# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token narrowing for buffers of the form `left unit + keys`.

Each character typed after the left unit is read as a key the user saw on
screen, not as a literal substring. The first key is matched against the
allocation of the full left-unit pool (the snapshot displayed before it was
typed); each later key is matched against a fresh allocation of the pool
narrowed so far. This lets several labels that shared one key be separated by
the next one.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from acekey.allocator import Assignment, allocate_disambiguators
from acekey.logger import logger
from acekey.matching import base_pool
from acekey.runes import Candidate


@dataclass
class NarrowingResult:
    """
    Outcome of token narrowing.

    Attributes:
        pool (list[Candidate]): Candidates left after the consumed keys.
        consumed (int): Number of keys that matched a displayed disambiguator.
        selected (Candidate | None): Set when a key isolated a single candidate.
    """

    pool: list[Candidate] = field(default_factory=list)
    consumed: int = 0
    selected: Candidate | None = None

    @property
    def narrowed(self) -> bool:
        return self.consumed > 0


def is_token_sequence(typed_lower: str, typed_left_unit: str) -> bool:
    return (
        bool(typed_left_unit)
        and typed_lower.startswith(typed_left_unit)
        and len(typed_lower) > len(typed_left_unit)
    )


def _holders(assignments: Sequence[Assignment], token: str) -> set[int]:
    return {a.index for a in assignments if a.prefix.lower() == token}


def narrow_by_tokens(
    candidates: Sequence[Candidate], typed_lower: str, typed_left_unit: str
) -> NarrowingResult:
    """
    Consume the keys typed after the left unit, narrowing the pool per key.

    Stops at the first key that no candidate was shown; the caller then falls
    back to literal prefix filtering.
    """
    pool = base_pool(candidates, typed_left_unit)
    result = NarrowingResult(pool=pool)
    if not pool:
        return result

    snapshot = allocate_disambiguators(pool, typed_left_unit)
    tokens = typed_lower[len(typed_left_unit) :]
    for position, token in enumerate(tokens):
        if len(result.pool) <= 1:
            break
        if position == 0:
            assignments = snapshot
        else:
            assignments = allocate_disambiguators(result.pool, typed_left_unit)

        holders = _holders(assignments, token)
        if not holders:
            logger.debug("Key '%s' matched no displayed disambiguator.", token)
            break

        result.consumed += 1
        if len(holders) == 1:
            (index,) = holders
            result.selected = next(c for c in result.pool if c.index == index)
            return result
        result.pool = [c for c in result.pool if c.index in holders]

    return result
