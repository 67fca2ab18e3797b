# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argument parser infrastructure for the AceKey CLI.

This module defines the `AceKeyParsers` dataclass and related utilities for
building the `acekey` command line. Subcommands:

- `assign`: print the disambiguators for a list of labels and a typed buffer.
- `pick`: choose one label through a completing prompt.
- `shell`: launch the keystroke-driven selection shell over a catalog.
- `version`: print the program version.

Key Components:
- `AceKeyParsers`: Container for all CLI subparsers.
- `get_arg_parsers()`: Factory for generating the full parser suite.
- `get_root_parser()`: Creates the root-level CLI parser with global options.
- `get_subparsers()`: Helper to attach subcommand parsers to the root parser.
"""

from argparse import ArgumentParser, Namespace, _SubParsersAction
from dataclasses import asdict, dataclass
from typing import Sequence


@dataclass
class AceKeyParsers:
    """Defines the argument parsers for the AceKey CLI."""

    root: ArgumentParser
    subparsers: _SubParsersAction
    assign: ArgumentParser
    pick: ArgumentParser
    shell: ArgumentParser
    version: ArgumentParser

    def parse_args(self, args: Sequence[str] | None = None) -> Namespace:
        """Parse the command line arguments."""
        return self.root.parse_args(args)

    def as_dict(self) -> dict[str, ArgumentParser]:
        """Convert the AceKeyParsers instance to a dictionary."""
        return asdict(self)

    def get_parser(self, name: str) -> ArgumentParser | None:
        """Get the parser by name."""
        return self.as_dict().get(name)


def get_root_parser(
    prog: str | None = "acekey",
    description: str | None = "AceKey - pick commands and flags with the fewest keys.",
    epilog: str | None = "Tip: Use 'acekey assign LABEL... --typed KEYS' to try the engine.",
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the AceKey CLI.

    Includes the following arguments:
        -v / --verbose       : Enable debug logging on the console.
        --debug-log FILE     : Also write debug logs to FILE.
        --json-log           : Format the log file as JSON.
        --version            : Print the AceKey version.
    """
    parser = ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--debug-log",
        metavar="FILE",
        default=None,
        help="Write debug logs to FILE.",
    )
    parser.add_argument(
        "--json-log",
        action="store_true",
        help="Format the debug log file as JSON.",
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "AceKey Commands",
    description: str | None = "Available commands for the AceKey CLI.",
) -> _SubParsersAction:
    """
    Create and return a subparsers object for registering AceKey CLI subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    return parser.add_subparsers(title=title, description=description, dest="command")


def get_arg_parsers(prog: str | None = "acekey") -> AceKeyParsers:
    """
    Create and return the full suite of argument parsers used by the AceKey CLI.

    Example:
        ```python
        >>> parsers = get_arg_parsers()
        >>> args = parsers.parse_args(["assign", "chsh", "chcpu", "--typed", "c"])
        ```
    """
    parser = get_root_parser(prog=prog)
    subparsers = get_subparsers(parser)

    assign_parser = subparsers.add_parser(
        "assign",
        help="Show the keys that select each label",
        description="Run the engine over LABELS with the typed buffer and print "
        "the disambiguator of every live label.",
    )
    assign_parser.add_argument("labels", nargs="+", metavar="LABEL", help="Candidate labels")
    assign_parser.add_argument(
        "-t", "--typed", default="", help="Keys typed so far (default: nothing)"
    )
    assign_parser.add_argument(
        "--json", action="store_true", help="Print assignments as JSON"
    )

    pick_parser = subparsers.add_parser(
        "pick",
        help="Pick one label with a completing prompt",
        description="Prompt for one of LABELS; completions show the key of each label.",
    )
    pick_parser.add_argument("labels", nargs="+", metavar="LABEL", help="Candidate labels")
    pick_parser.add_argument("--message", default="> ", help="Prompt message")

    shell_parser = subparsers.add_parser(
        "shell",
        help="Launch the selection shell",
        description="Pick a command and its flags one key at a time.",
        epilog="Without --config the catalog is looked up in ./acekey.yaml, "
        "$ACEKEY_CONFIG and ~/.config/acekey/.",
    )
    shell_parser.add_argument(
        "-c", "--config", default=None, help="Path to a YAML or TOML catalog"
    )
    shell_parser.add_argument(
        "labels",
        nargs="*",
        metavar="LABEL",
        help="Offer these labels as bare commands instead of a catalog",
    )
    shell_parser.add_argument(
        "--title", default=prog, help="Title shown in the prompt"
    )

    version_parser = subparsers.add_parser("version", help=f"Show {prog} version")

    return AceKeyParsers(
        root=parser,
        subparsers=subparsers,
        assign=assign_parser,
        pick=pick_parser,
        shell=shell_parser,
        version=version_parser,
    )
