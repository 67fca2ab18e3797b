# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides `AceKeyCompleter`, a Prompt Toolkit completer driven by the AceKey
engine.

Instead of plain prefix matching, the word under the cursor is passed to
`assign_ace_keys`, so the completion menu lists exactly the labels the engine
still considers live, each annotated with the key that selects it:

- `c` over `chcpu`, `chgrp`, `chroot` lists all three with keys `p`, `g`, `r`
- `cg` resolves to `chgrp` alone
"""

from __future__ import annotations

import shlex
from typing import Callable, Iterable, Sequence

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from acekey.decorate import decorate_form, rich_text_to_prompt_text
from acekey.engine import assign_ace_keys


class AceKeyCompleter(Completer):
    """
    Prompt Toolkit completer over a list of labels.

    Args:
        labels (Sequence[str] | Callable[[], Sequence[str]]): The labels to offer,
            or a callable returning them so the list can change between prompts.
    """

    def __init__(self, labels: Sequence[str] | Callable[[], Sequence[str]]):
        self._labels = labels

    @property
    def labels(self) -> Sequence[str]:
        if callable(self._labels):
            return self._labels()
        return self._labels

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        text = document.text_before_cursor
        try:
            tokens = shlex.split(text)
        except ValueError:
            return
        if text.endswith((" ", "\t")) or not tokens:
            stub = ""
        else:
            stub = tokens[-1]

        labels = list(self.labels)
        assignments = assign_ace_keys(labels, stub)
        if not assignments:
            return

        for assignment in assignments:
            label = labels[assignment.index]
            yield Completion(
                self._ensure_quote(label),
                start_position=-len(stub),
                display=rich_text_to_prompt_text(
                    decorate_form(label, stub, assignment.prefix)
                ),
                display_meta=assignment.prefix,
            )

    def _ensure_quote(self, text: str) -> str:
        if " " in text or "\t" in text:
            return f'"{text}"'
        return text
