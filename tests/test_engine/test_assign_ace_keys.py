import pytest

from acekey import Assignment, assign_ace_keys, initial_assignments

COMMANDS = [
    "hello", "test", "cp", "cal", "cat", "cut", "chsh", "code",
    "comm", "curl", "cargo", "chcpu", "chgrp", "chmod", "chown", "cksum",
    "cfdisk", "chroot", "csplit", "carapace", "chpasswd", "cargo-fmt",
    "coredumpctl", "cargo-clippy",
]  # fmt: skip


def selected(labels, typed):
    result = assign_ace_keys(labels, typed)
    assert result is not None and len(result) == 1 and result[0].prefix == ""
    return labels[result[0].index]


def test_initial_assignments_show_left_units():
    assert initial_assignments(["--long", "-s", "git"]) == [
        Assignment(0, "-"),
        Assignment(1, "-"),
        Assignment(2, "g"),
    ]


@pytest.mark.parametrize("typed", ["", "   ", "!?"])
def test_nothing_typed_returns_initial(typed):
    labels = ["git", "", "grep"]
    assert assign_ace_keys(labels, typed) == [Assignment(0, "g"), Assignment(2, "g")]


def test_left_unit_allocates_keys():
    assert assign_ace_keys(["chcpu", "chpasswd", "chsh"], "c") == [
        Assignment(0, "u"),
        Assignment(1, "p"),
        Assignment(2, "s"),
    ]


@pytest.mark.parametrize(
    "typed, expected", [("cs", "chsh"), ("cp", "chpasswd"), ("cu", "chcpu")]
)
def test_key_after_left_unit_selects(typed, expected):
    assert selected(["chcpu", "chpasswd", "chsh"], typed) == expected


def test_whole_label_wins():
    assert assign_ace_keys(["jjui", "ju"], "ju") == [Assignment(1, "")]
    assert selected(["jjui", "ju"], "jjui") == "jjui"


def test_collapsed_leading_run():
    assert assign_ace_keys(["jjui", "ju"], "j") == [Assignment(0, "i"), Assignment(1, "u")]
    assert selected(["jjui", "ju"], "ji") == "jjui"


def test_original_case_prefix():
    assert selected(["Git", "gitk"], "G") == "Git"
    assert selected(["Git", "gitk"], "g") == "gitk"


def test_literal_prefix_selects():
    assert selected(["chcpu", "chpasswd", "chsh"], "chs") == "chsh"


def test_literal_prefix_reallocates():
    assert assign_ace_keys(["chcpu", "chpasswd", "chsh"], "ch") == [
        Assignment(0, "u"),
        Assignment(1, "p"),
        Assignment(2, "s"),
    ]


def test_no_match_returns_none():
    assert assign_ace_keys(["chsh", "cat"], "z") is None
    assert assign_ace_keys(["cat", "cut"], "cx") is None
    assert assign_ace_keys([], "a") is None


def test_long_and_short_flags():
    labels = ["--long", "-s"]
    assert assign_ace_keys(labels, "-") == [Assignment(0, "l"), Assignment(1, "s")]
    assert selected(labels, "-l") == "--long"
    assert selected(labels, "-s") == "-s"
    assert selected(labels, "--") == "--long"


def test_hyphen_is_never_offered():
    result = assign_ace_keys(["a-b", "ab"], "a")
    assert result is not None
    assert all(a.prefix != "-" for a in result)


def test_bare_double_marker_gets_marker_key():
    assert assign_ace_keys(["--", "-a"], "-") == [Assignment(0, "-"), Assignment(1, "a")]


def test_label_punctuation_is_ignored():
    assert selected(["git log", "grep"], "gitl") == "git log"


def test_shared_keys_narrow_with_next_key():
    result = assign_ace_keys(COMMANDS, "c")
    assert result is not None
    keys = {COMMANDS[a.index]: a.prefix for a in result}
    assert keys["cp"] == "p"
    assert keys["chsh"] == "h"
    assert keys["chroot"] == "t"
    assert keys["cat"] == keys["cut"] == keys["cargo-fmt"] == "t"
    assert "hello" not in keys and "test" not in keys

    narrowed = assign_ace_keys(COMMANDS, "ct")
    assert {COMMANDS[a.index]: a.prefix for a in narrowed} == {
        "cat": "t",
        "cut": "u",
        "chroot": "h",
        "cargo-fmt": "r",
    }


@pytest.mark.parametrize(
    "typed, expected",
    [("ctt", "cat"), ("ctu", "cut"), ("cth", "chroot"), ("ctr", "cargo-fmt")],
)
def test_every_label_is_reachable(typed, expected):
    assert selected(COMMANDS, typed) == expected


def test_idempotent():
    assert assign_ace_keys(COMMANDS, "ct") == assign_ace_keys(COMMANDS, "ct")


def test_marker_label_among_flags():
    labels = ["-", "-s", "--long"]
    assert assign_ace_keys(labels, "-") == [
        Assignment(0, "-"),
        Assignment(1, "s"),
        Assignment(2, "l"),
    ]
    assert selected(labels, "--") == "-"
    assert selected(labels, "-s") == "-s"
    assert selected(labels, "-l") == "--long"


def test_anchor_label_gets_anchor_key():
    labels = ["c", "cp", "cat"]
    assert assign_ace_keys(labels, "c") == [
        Assignment(0, "c"),
        Assignment(1, "p"),
        Assignment(2, "a"),
    ]
    assert selected(labels, "cc") == "c"
    assert selected(labels, "cp") == "cp"
    assert selected(labels, "ca") == "cat"


def test_bare_double_marker_selected_by_its_key():
    assert selected(["--", "-a"], "--") == "--"
    assert selected(["--", "-a"], "-a") == "-a"


def test_no_prefix_no_key_returns_none():
    assert assign_ace_keys(["cab", "cut"], "cb") is None
