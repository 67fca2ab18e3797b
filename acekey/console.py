# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for AceKey."""
from rich.console import Console

from acekey.themes import get_ace_theme

console = Console(color_system="truecolor", theme=get_ace_theme())
