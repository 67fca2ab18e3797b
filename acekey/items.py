# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flattens commands and flags into the plain label list the engine works on.

A `ChooseItem` is one row of the selection list. It may expose several forms
(`--verbose` and `-v`, or a command and its aliases); every form is a separate
label for the engine, and `FormIndex` maps an engine index back to its item.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from acekey.catalog import CommandSpec, FlagSpec


class ItemKind(Enum):
    COMMAND = "cmd"
    FLAG = "flag"


@dataclass
class ChooseItem:
    """A selectable command or flag with the forms the user may type."""

    kind: ItemKind
    label: str
    forms: list[str]
    short: str = ""
    depth: int = 0
    command: CommandSpec | None = None
    flag: FlagSpec | None = None

    def __post_init__(self):
        if not self.forms:
            raise ValueError(f"ChooseItem '{self.label}' needs at least one form.")


@dataclass
class FormIndex:
    """Flat form list plus the item position of every form."""

    forms: list[str] = field(default_factory=list)
    owners: list[int] = field(default_factory=list)

    def item_for(self, form_index: int) -> int:
        return self.owners[form_index]


def command_item(command: CommandSpec, depth: int = 0) -> ChooseItem:
    return ChooseItem(
        kind=ItemKind.COMMAND,
        label=command.name,
        forms=command.forms,
        short=command.description,
        depth=depth,
        command=command,
    )


def flag_item(flag: FlagSpec, depth: int = 0, owner: str = "") -> ChooseItem:
    label = flag.label
    if owner:
        label = f"{owner}: {label}"
    return ChooseItem(
        kind=ItemKind.FLAG,
        label=label,
        forms=flag.forms,
        short=flag.usage,
        depth=depth,
        flag=flag,
    )


def sort_items(items: Sequence[ChooseItem]) -> list[ChooseItem]:
    """Flags first, then commands; each group by label length, then label."""

    def key(item: ChooseItem) -> tuple[int, str]:
        return len(item.label), item.label

    flags = sorted((i for i in items if i.kind is ItemKind.FLAG), key=key)
    commands = sorted((i for i in items if i.kind is ItemKind.COMMAND), key=key)
    return flags + commands


def items_for_stack(stack: Sequence[CommandSpec]) -> list[ChooseItem]:
    """
    Items offered once `stack` has been selected.

    Flags of every command on the stack are offered, labelled with their owner
    when inherited, followed by the subcommands of the innermost command.
    """
    if not stack:
        return []
    top = len(stack) - 1
    items = []
    for depth, command in enumerate(stack):
        owner = command.name if depth < top else ""
        items.extend(flag_item(flag, depth, owner) for flag in command.flags)
    items.extend(command_item(sub, top) for sub in stack[-1].subcommands)
    return sort_items(items)


def flatten_forms(items: Sequence[ChooseItem]) -> FormIndex:
    index = FormIndex()
    for position, item in enumerate(items):
        for form in item.forms:
            index.forms.append(form)
            index.owners.append(position)
    return index
