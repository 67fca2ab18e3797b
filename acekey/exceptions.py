# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the custom exception classes used by AceKey.

The engine itself never raises: a typed buffer that matches nothing yields
`None`. These exceptions cover the surrounding layers, such as loading a
command catalog or driving a selection session.

Exception Hierarchy:
- AceKeyError
    ├── CatalogError
    └── SelectionError
"""


class AceKeyError(Exception):
    """Base exception for AceKey."""


class CatalogError(AceKeyError):
    """Exception raised when a command catalog cannot be read or validated."""


class SelectionError(AceKeyError):
    """Exception raised when a selection session is driven into an invalid state."""
