# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Caller-side state for keystroke-driven selection.

The engine is a pure function; `SelectionSession` owns everything that lives
between keystrokes: the typed buffer, the list of items on screen and the
commands selected so far. Each call to `push()` re-runs the engine over the
full buffer. When exactly one item remains and its assignment is empty the
session commits it, clears the buffer, and moves on:

- committing a command descends into its flags and subcommands,
- committing a flag toggles it on the command that owns it.

`backspace()` trims the buffer, or steps back out of the last command when the
buffer is already empty.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from acekey.allocator import Assignment
from acekey.catalog import Catalog, CommandSpec
from acekey.engine import assign_ace_keys
from acekey.exceptions import SelectionError
from acekey.items import (
    ChooseItem,
    FormIndex,
    ItemKind,
    command_item,
    flatten_forms,
    items_for_stack,
    sort_items,
)
from acekey.logger import logger
from acekey.runes import is_single_ace_rune


@dataclass
class Selection:
    """An item committed by the session and the form that was typed for it."""

    item: ChooseItem
    form: str


@dataclass
class SelectionSession:
    """
    Typed-buffer and navigation state for one interactive selection.

    Args:
        catalog (Catalog): Commands offered at the top level.
    """

    catalog: Catalog
    typed: str = ""
    stack: list[CommandSpec] = field(default_factory=list)
    flags: dict[int, list[str]] = field(default_factory=dict)
    items: list[ChooseItem] = field(default_factory=list)
    history: list[Selection] = field(default_factory=list)

    def __post_init__(self):
        if not self.items:
            self.items = self._items_for_current_level()

    def _items_for_current_level(self) -> list[ChooseItem]:
        if self.stack:
            return items_for_stack(self.stack)
        return sort_items([command_item(command) for command in self.catalog.commands])

    @property
    def form_index(self) -> FormIndex:
        return flatten_forms(self.items)

    @property
    def is_complete(self) -> bool:
        """True once a command with nothing left to choose has been selected."""
        return bool(self.stack) and not self.items

    def assignments(self) -> list[Assignment] | None:
        return assign_ace_keys(self.form_index.forms, self.typed)

    def assigned_map(self) -> dict[str, str]:
        """Disambiguator per form; forms the engine dropped map to ''."""
        forms = self.form_index.forms
        assigned = {form: "" for form in forms}
        for assignment in self.assignments() or []:
            assigned[forms[assignment.index]] = assignment.prefix
        return assigned

    def visible_items(self) -> list[ChooseItem]:
        index = self.form_index
        assignments = assign_ace_keys(index.forms, self.typed)
        if assignments is None:
            return [] if self.typed else list(self.items)
        owners = {index.item_for(a.index) for a in assignments}
        return [item for position, item in enumerate(self.items) if position in owners]

    def push(self, char: str) -> Selection | None:
        """
        Append one keystroke and commit the item it isolates, if any.

        Characters that are not ACE runes are ignored.
        """
        if not is_single_ace_rune(char):
            return None
        self.typed += char

        index = self.form_index
        assignments = assign_ace_keys(index.forms, self.typed)
        if not assignments or len(assignments) != 1 or assignments[0].prefix:
            return None

        form_position = assignments[0].index
        item = self.items[index.item_for(form_position)]
        return self.commit(item, index.forms[form_position])

    def backspace(self) -> None:
        if self.typed:
            self.typed = self.typed[:-1]
            return
        if self.stack:
            popped = self.stack.pop()
            self.flags.pop(len(self.stack), None)
            self.items = self._items_for_current_level()
            logger.debug("Stepped back out of '%s'.", popped.name)

    def commit(self, item: ChooseItem, form: str) -> Selection:
        """Apply `item` as if `form` had been typed in full."""
        if item not in self.items:
            raise SelectionError(f"'{item.label}' is not offered at this level.")
        if form not in item.forms:
            raise SelectionError(f"'{form}' is not a form of '{item.label}'.")

        if item.kind is ItemKind.COMMAND:
            if item.command is None:
                raise SelectionError(f"Command item '{item.label}' has no definition.")
            self.stack.append(item.command)
            self.items = self._items_for_current_level()
        else:
            self._toggle_flag(item, form)

        self.typed = ""
        selection = Selection(item=item, form=form)
        self.history.append(selection)
        logger.info("Selected %s '%s'.", item.kind.value, form)
        return selection

    def _toggle_flag(self, item: ChooseItem, form: str) -> None:
        chosen = self.flags.setdefault(item.depth, [])
        present = [f for f in chosen if f in item.forms]
        if present:
            for existing in present:
                chosen.remove(existing)
        else:
            chosen.append(form)

    def is_flag_selected(self, item: ChooseItem) -> bool:
        return any(form in item.forms for form in self.flags.get(item.depth, []))

    def selection_path(self) -> list[str]:
        """Selected command names, each followed by its selected flags."""
        path = []
        for depth, command in enumerate(self.stack):
            path.append(command.name)
            path.extend(self.flags.get(depth, []))
        return path

    def reset(self) -> None:
        self.typed = ""
        self.stack.clear()
        self.flags.clear()
        self.history.clear()
        self.items = self._items_for_current_level()
