# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Color constants and the Rich theme used across AceKey.

`OneColors` follows the One Dark palette. Every base color also has a bold
variant with a `_b` suffix, generated by `ColorsMeta`, so both
`OneColors.MAGENTA` and `OneColors.MAGENTA_b` are valid Rich and
prompt_toolkit style strings.
"""
from rich.theme import Theme


class ColorsMeta(type):
    """Adds a bold `<NAME>_b` attribute for every uppercase color constant."""

    def __new__(mcs, name, bases, namespace):
        bold = {
            f"{key}_b": f"bold {value}"
            for key, value in namespace.items()
            if key.isupper() and isinstance(value, str)
        }
        namespace.update(bold)
        return super().__new__(mcs, name, bases, namespace)


class OneColors(metaclass=ColorsMeta):
    BLACK = "#282C34"
    WHITE = "#ABB2BF"
    COMMENT_GREY = "#5C6370"
    LIGHT_RED = "#E06C75"
    DARK_RED = "#BE5046"
    GREEN = "#98C379"
    LIGHT_YELLOW = "#E5C07B"
    DARK_YELLOW = "#D19A66"
    BLUE = "#61AFEF"
    MAGENTA = "#C678DD"
    CYAN = "#56B6C2"


def get_ace_theme() -> Theme:
    """Named styles for console markup, e.g. `[ace.key]x[/]`."""
    return Theme(
        {
            "ace.key": OneColors.MAGENTA_b,
            "ace.typed": OneColors.BLUE_b,
            "ace.label": OneColors.WHITE,
            "ace.desc": f"dim {OneColors.COMMENT_GREY}",
            "ace.linenum": "dim",
            "ace.selected": OneColors.GREEN_b,
            "ace.error": OneColors.DARK_RED_b,
            "ace.warning": OneColors.LIGHT_YELLOW,
        }
    )
