# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Input validators backed by the AceKey engine.

- ace_key_validator: the buffer must still match at least one label.
- unique_key_validator: the buffer must select exactly one label.
"""
from typing import Sequence

from prompt_toolkit.validation import Validator

from acekey.engine import assign_ace_keys


def ace_key_validator(labels: Sequence[str]) -> Validator:
    """Validator rejecting buffers that match no label."""

    def validate(text: str) -> bool:
        return assign_ace_keys(labels, text.strip()) is not None

    return Validator.from_callable(
        validate, error_message="No candidates match this input."
    )


def selected_index(labels: Sequence[str], text: str) -> int | None:
    """Index of the label `text` selects on its own, if any."""
    assignments = assign_ace_keys(labels, text.strip())
    if assignments and len(assignments) == 1 and not assignments[0].prefix:
        return assignments[0].index
    return None


def unique_key_validator(labels: Sequence[str]) -> Validator:
    """Validator accepting only buffers that select a single label."""

    def validate(text: str) -> bool:
        return selected_index(labels, text) is not None

    return Validator.from_callable(
        validate, error_message="Keep typing: more than one candidate matches."
    )
