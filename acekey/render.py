# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""render.py"""
from __future__ import annotations

from typing import Sequence

from prompt_toolkit.formatted_text import StyleAndTextTuples
from rich import box
from rich.table import Table
from rich.text import Text

from acekey.decorate import decorate_form, leading_marker_count, rich_text_to_prompt_text
from acekey.items import ChooseItem, ItemKind
from acekey.themes import OneColors

STYLE_DESC = f"dim {OneColors.COMMENT_GREY}"
STYLE_SELECTED = OneColors.GREEN_b


def build_item_label(
    item: ChooseItem, assigned: dict[str, str], typed: str
) -> Text | None:
    """
    Decorate every form of `item`, joined by commas.

    Once two or more markers are typed, forms with fewer leading markers (short
    flags under `--`) are hidden. Returns None when nothing is left to show.
    """
    typed_markers = leading_marker_count(typed)
    parts = [
        decorate_form(form, typed, assigned.get(form, ""))
        for form in item.forms
        if not (typed_markers >= 2 and leading_marker_count(form) < typed_markers)
    ]
    if not parts:
        return None
    owner, _, _ = item.label.rpartition(": ")
    label = Text(f"{owner}: ", style=STYLE_DESC) if owner else Text()
    label.append(Text(", ").join(parts))
    return label


def item_suffix(item: ChooseItem) -> Text:
    suffix = Text()
    if item.kind is ItemKind.FLAG and item.flag and item.flag.requires_value:
        placeholder = (item.flag.long or item.flag.short).upper()
        suffix.append(f" {placeholder}", style=STYLE_DESC)
    if item.short:
        suffix.append(f"  {item.short}", style=STYLE_DESC)
    return suffix


def build_item_line(
    item: ChooseItem,
    assigned: dict[str, str],
    typed: str,
    selected: bool = False,
) -> Text | None:
    label = build_item_label(item, assigned, typed)
    if label is None:
        return None
    marker = Text("* " if selected else "  ", style=STYLE_SELECTED)
    return Text.assemble(marker, label, item_suffix(item))


def render_items_table(
    title: str,
    items: Sequence[ChooseItem],
    assigned: dict[str, str],
    typed: str,
    *,
    selected: Sequence[ChooseItem] = (),
    box_style: box.Box = box.SIMPLE,
    caption: str = "",
) -> Table:
    """Create a numbered table of the visible items with their keys highlighted."""
    table = Table(
        title=title,
        caption=caption,
        box=box_style,
        show_header=False,
        highlight=False,
    )
    table.add_column(style="dim", justify="right")
    table.add_column()

    for number, item in enumerate(items, start=1):
        line = build_item_line(item, assigned, typed, item in selected)
        if line is not None:
            table.add_row(str(number), line)
    return table


def render_items_toolbar(
    items: Sequence[ChooseItem],
    assigned: dict[str, str],
    typed: str,
    *,
    selected: Sequence[ChooseItem] = (),
    limit: int = 20,
) -> StyleAndTextTuples:
    """The visible items as prompt_toolkit fragments, one item per line."""
    lines = []
    for item in items:
        line = build_item_line(item, assigned, typed, item in selected)
        if line is not None:
            lines.append(line)
    hidden = len(lines) - limit
    lines = lines[:limit]
    if hidden > 0:
        lines.append(Text(f"  … {hidden} more", style=STYLE_DESC))
    if not lines:
        lines.append(Text("  no candidates", style=OneColors.DARK_RED_b))
    return rich_text_to_prompt_text(Text("\n").join(lines))
