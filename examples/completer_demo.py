#!/usr/bin/env python
from prompt_toolkit import PromptSession

from acekey import AceKeyCompleter
from acekey.utils import setup_logging
from acekey.validators import selected_index, unique_key_validator

setup_logging(log_filename=None)

labels = [
    "chcpu", "chgrp", "chmod", "chown", "chroot", "chpasswd", "chsh",
    "cal", "cat", "cut", "cp", "curl", "cargo", "cargo-fmt", "cargo-clippy",
]  # fmt: skip

session: PromptSession = PromptSession(
    "pick > ",
    completer=AceKeyCompleter(labels),
    validator=unique_key_validator(labels),
    complete_while_typing=True,
    validate_while_typing=False,
)

text = session.prompt()
index = selected_index(labels, text)
if index is not None:
    print(f"You picked {labels[index]}")
