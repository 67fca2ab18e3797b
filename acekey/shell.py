# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Interactive keystroke-driven selection shell.

`AceShell` wraps a `SelectionSession` in a Prompt Toolkit prompt. Every
printable key is fed to the session instead of being inserted directly, the
candidate list is redrawn in the bottom toolbar with the next key of every
label highlighted, and an item is committed as soon as the keys typed isolate
it. No Enter is needed to pick an item; Enter accepts the command built so far.

Key bindings:
- any ACE rune: type a key
- Backspace: remove a key, or step back out of the last command
- Escape: clear the typed keys, or quit when nothing is typed at the top level
- Enter: accept and return the selected command path
"""
from __future__ import annotations

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import FormattedText, StyleAndTextTuples
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.key_binding.key_processor import KeyPressEvent
from rich.console import Console

from acekey.catalog import Catalog
from acekey.console import console
from acekey.logger import logger
from acekey.render import render_items_table, render_items_toolbar
from acekey.runes import is_single_ace_rune
from acekey.session import SelectionSession
from acekey.signals import QuitSignal
from acekey.themes import OneColors


class AceShell:
    """
    Prompt Toolkit front end for a `SelectionSession`.

    Args:
        catalog (Catalog): Commands offered at the top level.
        title (str): Title shown above the candidate list.
        max_rows (int): Maximum number of candidates drawn in the toolbar.
    """

    def __init__(
        self,
        catalog: Catalog,
        title: str = "acekey",
        max_rows: int = 20,
    ) -> None:
        self.title = title
        self.max_rows = max_rows
        self.console: Console = console
        self.session = SelectionSession(catalog)
        self.key_bindings = self._build_key_bindings()
        self.prompt_session: PromptSession | None = None

    def _selected_flags(self):
        return [item for item in self.session.items if self.session.is_flag_selected(item)]

    def message(self) -> StyleAndTextTuples:
        path = " ".join(self.session.selection_path())
        fragments = [(OneColors.CYAN_b, self.title)]
        if path:
            fragments.append((OneColors.GREEN, f" {path}"))
        fragments.append((OneColors.LIGHT_YELLOW_b, " > "))
        return FormattedText(fragments)

    def toolbar(self) -> StyleAndTextTuples:
        return render_items_toolbar(
            self.session.visible_items(),
            self.session.assigned_map(),
            self.session.typed,
            selected=self._selected_flags(),
            limit=self.max_rows,
        )

    def render_table(self):
        return render_items_table(
            self.title,
            self.session.visible_items(),
            self.session.assigned_map(),
            self.session.typed,
            selected=self._selected_flags(),
        )

    def handle_char(self, char: str) -> bool:
        """Feed one key to the session. Returns True when nothing is left to pick."""
        if not is_single_ace_rune(char):
            return False
        self.session.push(char)
        return self.session.is_complete

    def handle_backspace(self) -> None:
        self.session.backspace()

    def handle_escape(self) -> None:
        if self.session.typed:
            self.session.typed = ""
        elif not self.session.stack:
            raise QuitSignal()
        else:
            self.session.backspace()

    def _build_key_bindings(self) -> KeyBindings:
        bindings = KeyBindings()

        def sync(event: KeyPressEvent) -> None:
            buffer = event.current_buffer
            buffer.text = self.session.typed
            buffer.cursor_position = len(buffer.text)

        @bindings.add("<any>")
        def _(event: KeyPressEvent) -> None:
            if self.handle_char(event.data):
                event.app.exit(result=self.session.selection_path())
                return
            sync(event)

        @bindings.add("backspace")
        def _(event: KeyPressEvent) -> None:
            self.handle_backspace()
            sync(event)

        @bindings.add("escape", eager=True)
        def _(event: KeyPressEvent) -> None:
            try:
                self.handle_escape()
            except QuitSignal as signal:
                event.app.exit(exception=signal)
                return
            sync(event)

        @bindings.add("enter")
        def _(event: KeyPressEvent) -> None:
            event.app.exit(result=self.session.selection_path())

        return bindings

    async def run(self) -> list[str] | None:
        """Run the shell until a command is accepted. Returns None on quit."""
        logger.info("Starting shell: %s", self.title)
        self.prompt_session = PromptSession(
            message=self.message,
            bottom_toolbar=self.toolbar,
            key_bindings=self.key_bindings,
            erase_when_done=True,
        )
        try:
            result = await self.prompt_session.prompt_async()
        except (EOFError, KeyboardInterrupt):
            logger.info("EOF or KeyboardInterrupt. Exiting shell.")
            return None
        except QuitSignal:
            logger.info("[QuitSignal]. <- Exiting shell.")
            return None
        logger.info("Accepted: %s", " ".join(result))
        return result
