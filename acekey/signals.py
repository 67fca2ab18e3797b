# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the interactive AceKey shell.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
bypass ordinary `except Exception` blocks.

Signals:
- QuitSignal: Leave the shell without a result.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in AceKey.

    These are not errors. They're used to control flow like quitting from
    user input.
    """


class QuitSignal(FlowSignal):
    """Raised to leave the shell immediately."""

    def __init__(self, message: str = "Quit signal received."):
        super().__init__(message)
