import pytest

from acekey.catalog import Catalog, CommandSpec, FlagSpec
from acekey.exceptions import SelectionError
from acekey.items import ItemKind, flag_item
from acekey.session import SelectionSession


@pytest.fixture
def catalog():
    return Catalog(
        commands=[
            CommandSpec(
                name="git",
                flags=[FlagSpec(long="version"), FlagSpec(long="help", short="h")],
                subcommands=[
                    CommandSpec(
                        name="commit",
                        aliases=["ci"],
                        flags=[FlagSpec(long="message", short="m", requires_value=True)],
                    ),
                    CommandSpec(name="clone"),
                ],
            ),
            CommandSpec(name="grep"),
            CommandSpec(name="ls"),
        ]
    )


def labels(items):
    return [item.label for item in items]


def test_initial_items_sorted(catalog):
    session = SelectionSession(catalog)
    assert labels(session.items) == ["ls", "git", "grep"]
    assert session.form_index.forms == ["ls", "git", "grep"]


def test_unique_key_commits_leaf_command(catalog):
    session = SelectionSession(catalog)
    selection = session.push("l")
    assert selection is not None
    assert selection.form == "ls"
    assert session.is_complete
    assert session.selection_path() == ["ls"]
    assert session.typed == ""


def test_ambiguous_key_waits(catalog):
    session = SelectionSession(catalog)
    assert session.push("g") is None
    assert session.typed == "g"
    assert session.assigned_map() == {"ls": "", "git": "i", "grep": "r"}
    assert labels(session.visible_items()) == ["git", "grep"]


def test_non_ace_input_is_ignored(catalog):
    session = SelectionSession(catalog)
    assert session.push(" ") is None
    assert session.push("ab") is None
    assert session.typed == ""


def test_unmatched_buffer_hides_everything(catalog):
    session = SelectionSession(catalog)
    session.push("z")
    assert session.visible_items() == []
    assert session.assignments() is None


def test_descend_into_command(catalog):
    session = SelectionSession(catalog)
    session.push("g")
    session.push("i")
    assert session.selection_path() == ["git"]
    assert not session.is_complete
    assert labels(session.items) == ["--version", "--help, -h", "clone", "commit"]
    assert session.form_index.forms == [
        "--version",
        "--help",
        "-h",
        "clone",
        "commit",
        "ci",
    ]


def test_flags_toggle(catalog):
    session = SelectionSession(catalog)
    session.push("g")
    session.push("i")

    session.push("-")
    assert session.assigned_map()["-h"] == "h"
    selection = session.push("h")
    assert selection.item.kind is ItemKind.FLAG
    assert session.selection_path() == ["git", "-h"]
    help_item = selection.item
    assert session.is_flag_selected(help_item)

    session.push("-")
    session.push("h")
    assert session.selection_path() == ["git"]
    assert not session.is_flag_selected(help_item)


def test_subcommand_inherits_flags(catalog):
    session = SelectionSession(catalog)
    for char in "gi":
        session.push(char)
    session.push("c")
    assert session.assigned_map()["commit"] == "o"
    session.push("o")
    assert session.selection_path() == ["git", "commit"]
    assert labels(session.items) == [
        "--message, -m",
        "git: --version",
        "git: --help, -h",
    ]


def test_backspace_trims_then_steps_back(catalog):
    session = SelectionSession(catalog)
    for char in "gi":
        session.push(char)
    session.push("-")
    session.push("h")
    session.push("c")

    session.backspace()
    assert session.typed == ""
    assert session.selection_path() == ["git", "-h"]

    session.backspace()
    assert session.stack == []
    assert session.flags == {}
    assert labels(session.items) == ["ls", "git", "grep"]

    session.backspace()
    assert session.stack == []


def test_commit_rejects_unknown_item(catalog):
    session = SelectionSession(catalog)
    stray = flag_item(FlagSpec(long="stray"))
    with pytest.raises(SelectionError):
        session.commit(stray, "--stray")


def test_commit_rejects_unknown_form(catalog):
    session = SelectionSession(catalog)
    with pytest.raises(SelectionError):
        session.commit(session.items[0], "lsx")


def test_reset(catalog):
    session = SelectionSession(catalog)
    for char in "gi":
        session.push(char)
    session.reset()
    assert session.stack == []
    assert session.history == []
    assert labels(session.items) == ["ls", "git", "grep"]
