"""
AceKey Selection Shell

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .allocator import Assignment
from .completer import AceKeyCompleter
from .engine import assign_ace_keys, initial_assignments
from .logger import logger
from .session import SelectionSession

__all__ = [
    "AceKeyCompleter",
    "Assignment",
    "SelectionSession",
    "assign_ace_keys",
    "initial_assignments",
    "logger",
]
