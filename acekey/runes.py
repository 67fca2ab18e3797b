# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Label normalization primitives for the AceKey engine.

Only "ACE runes" (alphanumeric characters and the hyphen) take part in
matching. Every other character of a label is ignored, so `"git-log"`,
`"git log"` and `"git_log"` normalize to `git-log`, `gitlog` and `gitlog`.

Functions:
- is_ace_rune / is_single_ace_rune: rune classification.
- clean_string: strip a label down to its ACE runes.
- leftmost_unit: the anchor shared by every candidate of one allocation round.
- collapse_leading: fold a leading run of the anchor character into one.
- build_candidates: turn raw labels into `Candidate` records for a single call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MARKER = "-"
DOUBLE_MARKER = "--"


def is_ace_rune(char: str) -> bool:
    """Return True for characters allowed in ACE keys (alphanumeric or hyphen)."""
    return char.isalnum() or char == MARKER


def is_single_ace_rune(text: str) -> bool:
    return len(text) == 1 and is_ace_rune(text)


def clean_string(text: str) -> str:
    return "".join(char for char in text if is_ace_rune(char))


def leftmost_unit(clean: str) -> str:
    """
    Return the leading grouping unit of a clean string.

    A doubled leading marker (`--long`) is a unit of its own so long flags group
    apart from short flags and bare words. Otherwise the unit is the first
    character, or the empty string for an empty input.
    """
    if clean.startswith(DOUBLE_MARKER):
        return DOUBLE_MARKER
    return clean[:1]


def collapse_leading(lower: str, left_unit: str) -> str:
    """
    Collapse a leading run of the left-unit character down to one occurrence.

    `collapse_leading("jjui", "j") == "jui"`. The doubled marker is never
    collapsed since it is a unit in its own right.
    """
    if left_unit == DOUBLE_MARKER or not left_unit:
        return lower
    first = left_unit[0]
    count = len(lower) - len(lower.lstrip(first))
    if count > 1:
        return first + lower[count:]
    return lower


def matches_left_unit(left_unit: str, typed_left_unit: str) -> bool:
    """Compare a candidate's left unit with the typed one, treating `-` as `--` too."""
    lu_lower = left_unit.lower()
    if typed_left_unit == MARKER:
        return lu_lower in (MARKER, DOUBLE_MARKER)
    return lu_lower == typed_left_unit


@dataclass(frozen=True)
class Candidate:
    """
    Per-call view of one label.

    Attributes:
        index (int): Position of the label in the caller's list.
        clean (str): ACE runes of the label in original case.
        lower (str): Case-folded `clean`.
        left_unit (str): Anchor computed from `clean`.
        rune_count (int): Number of significant characters.
    """

    index: int
    clean: str
    lower: str
    left_unit: str
    rune_count: int

    @property
    def match_lower(self) -> str:
        """Case-folded form with a repeated leading anchor collapsed."""
        lu_lower = self.left_unit.lower()
        if lu_lower != DOUBLE_MARKER and lu_lower:
            return collapse_leading(self.lower, lu_lower)
        return self.lower

    @property
    def sort_key(self) -> tuple[int, int]:
        return self.rune_count, self.index

    def startswith(self, typed_lower: str) -> bool:
        return self.lower.startswith(typed_lower) or self.match_lower.startswith(
            typed_lower
        )


def build_candidates(labels: Sequence[str]) -> list[Candidate]:
    """Build candidates for every label that keeps at least one ACE rune."""
    candidates = []
    for index, label in enumerate(labels):
        clean = clean_string(label)
        if not clean:
            continue
        candidates.append(
            Candidate(
                index=index,
                clean=clean,
                lower=clean.lower(),
                left_unit=leftmost_unit(clean),
                rune_count=len(clean),
            )
        )
    return candidates


def by_length(candidates: Sequence[Candidate]) -> list[Candidate]:
    """Shorter candidates first, ties broken by original order."""
    return sorted(candidates, key=lambda candidate: candidate.sort_key)
