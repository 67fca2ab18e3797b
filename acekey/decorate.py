# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Stateless highlighting of labels from an engine assignment.

`decorate_form(form, typed, prefix)` returns a `rich.text.Text` in which the
characters of `prefix` are located among the label's ACE runes, in order, and
styled as:

- typed: keys of the prefix the user has already entered,
- next key: the key to type next,
- unused: everything else.

Positions are found by walking the label's significant characters, never by
byte offset, so punctuation inside a label does not shift the highlight.
`rich_text_to_prompt_text` converts the result for prompt_toolkit.
"""
from __future__ import annotations

from prompt_toolkit.formatted_text import StyleAndTextTuples
from rich.console import Console
from rich.text import Text

from acekey.runes import DOUBLE_MARKER, MARKER, is_ace_rune
from acekey.themes import OneColors

STYLE_KEY = OneColors.MAGENTA_b
STYLE_TYPED = OneColors.BLUE_b
STYLE_LABEL = OneColors.WHITE


def leading_marker_count(text: str) -> int:
    return len(text) - len(text.lstrip(MARKER))


def _rune_positions(form: str) -> list[int]:
    return [pos for pos, char in enumerate(form) if is_ace_rune(char)]


def _prefix_ordinals(form: str, runes: list[int], prefix: str) -> dict[int, int]:
    """Map rune ordinal -> position within `prefix`, or {} if it cannot be placed."""
    ordinals: dict[int, int] = {}
    cursor = 0
    for order, key in enumerate(prefix.lower()):
        found = next(
            (
                ordinal
                for ordinal in range(cursor, len(runes))
                if form[runes[ordinal]].lower() == key
            ),
            None,
        )
        if found is None:
            return {}
        ordinals[found] = order
        cursor = found + 1
    return ordinals


def _typed_keys(form: str, typed: str, prefix: str) -> int:
    """How many keys of `prefix` the typed buffer already contains."""
    if not typed or not prefix:
        return 0
    typed_markers = leading_marker_count(typed)
    if typed_markers >= 2 and leading_marker_count(prefix) < typed_markers:
        return 0

    left_unit_len = 2 if form.startswith(DOUBLE_MARKER) else 1
    typed_keys = typed.lower().lstrip(MARKER)
    typed_keys = typed_keys[left_unit_len:] if left_unit_len <= len(typed_keys) else ""
    count = 0
    for typed_key, key in zip(typed_keys, prefix.lower()):
        if typed_key != key:
            break
        count += 1
    return count


def decorate_form(form: str, typed: str, prefix: str) -> Text:
    """
    Style one label for display.

    Args:
        form (str): The label as shown to the user.
        typed (str): The raw typed buffer.
        prefix (str): The disambiguator the engine assigned to this label.

    Returns:
        Text: The label with typed keys and the next key highlighted.
    """
    text = Text(form, style=STYLE_LABEL)
    runes = _rune_positions(form)
    ordinals = _prefix_ordinals(form, runes, prefix) if prefix else {}
    typed_len = _typed_keys(form, typed, prefix)

    for ordinal, order in ordinals.items():
        pos = runes[ordinal]
        if not typed:
            if order == 0:
                text.stylize(STYLE_KEY, pos, pos + 1)
        elif order < typed_len:
            text.stylize(STYLE_TYPED, pos, pos + 1)
        elif order == typed_len:
            text.stylize(STYLE_KEY, pos, pos + 1)
    return text


def rich_text_to_prompt_text(text: Text | str) -> StyleAndTextTuples:
    """
    Convert a Rich Text object to a list of (style, text) tuples
    compatible with prompt_toolkit.
    """
    if isinstance(text, str):
        text = Text.from_markup(text)

    console = Console(color_system=None, file=None, width=999, legacy_windows=False)
    segments = text.render(console)

    prompt_fragments: StyleAndTextTuples = []
    for segment in segments:
        style = segment.style or ""
        string = segment.text
        if string:
            prompt_fragments.append((str(style), string))
    return prompt_fragments
