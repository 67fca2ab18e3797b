import pytest
from pydantic import ValidationError

from acekey.catalog import Catalog, CommandSpec, FlagSpec, find_catalog, load_catalog
from acekey.exceptions import AceKeyError, CatalogError

YAML_CATALOG = """
commands:
  - name: git
    description: the stupid content tracker
    flags:
      - long: --version
      - long: help
        short: h
    subcommands:
      - name: commit
        aliases: [ci, ""]
        flags:
          - long: message
            short: m
            requires_value: true
  - name: grep
"""

TOML_CATALOG = """
[[commands]]
name = "git"

[[commands.flags]]
long = "verbose"
short = "v"

[[commands]]
name = "ls"
"""


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ACEKEY_CONFIG", raising=False)
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr("pathlib.Path.home", lambda: home)
    return tmp_path


def test_flag_spec_strips_markers():
    flag = FlagSpec(long="--verbose", short="-v")
    assert flag.long == "verbose"
    assert flag.short == "v"
    assert flag.forms == ["--verbose", "-v"]
    assert flag.label == "--verbose, -v"


def test_flag_spec_requires_a_form():
    with pytest.raises(ValidationError):
        FlagSpec()


def test_flag_spec_short_is_one_character():
    with pytest.raises(ValidationError):
        FlagSpec(short="ab")


def test_command_spec_forms_and_subcommands():
    command = CommandSpec(
        name=" git ",
        aliases=["g", " "],
        subcommands=[CommandSpec(name="commit", aliases=["ci"])],
    )
    assert command.name == "git"
    assert command.forms == ["git", "g"]
    assert command.subcommands[0].forms == ["commit", "ci"]


def test_command_spec_rejects_empty_name():
    with pytest.raises(ValidationError):
        CommandSpec(name="  ")


def test_catalog_from_labels():
    catalog = Catalog.from_labels(["ls", "", "grep"])
    assert [c.name for c in catalog.commands] == ["ls", "grep"]


def test_load_yaml(tmp_path):
    path = tmp_path / "acekey.yaml"
    path.write_text(YAML_CATALOG)
    catalog = load_catalog(path)
    git, grep = catalog.commands
    assert git.flags[0].long == "version"
    assert git.subcommands[0].aliases == ["ci"]
    assert git.subcommands[0].flags[0].requires_value
    assert grep.flags == []


def test_load_toml(tmp_path):
    path = tmp_path / "acekey.toml"
    path.write_text(TOML_CATALOG)
    catalog = load_catalog(path)
    assert [c.name for c in catalog.commands] == ["git", "ls"]
    assert catalog.commands[0].flags[0].forms == ["--verbose", "-v"]


def test_load_bare_list(tmp_path):
    path = tmp_path / "acekey.yml"
    path.write_text("- name: ls\n- name: cat\n")
    assert [c.name for c in load_catalog(path).commands] == ["ls", "cat"]


def test_load_empty_file(tmp_path):
    path = tmp_path / "acekey.yaml"
    path.write_text("")
    assert load_catalog(path).commands == []


@pytest.mark.parametrize(
    "name, content",
    [
        ("bad.yaml", "commands: [\n"),
        ("bad.toml", "[[commands]\nname = 'x'\n"),
        ("scalar.yaml", "42\n"),
        ("invalid.yaml", "commands:\n  - name: git\n    flags:\n      - short: ab\n"),
        ("catalog.json", "{}"),
    ],
)
def test_load_errors(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content)
    with pytest.raises(CatalogError):
        load_catalog(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(AceKeyError):
        load_catalog(tmp_path / "missing.yaml")


def test_find_catalog_in_cwd(isolated):
    path = isolated / "acekey.toml"
    path.touch()
    assert find_catalog().resolve() == path.resolve()


def test_find_catalog_from_env(isolated, monkeypatch):
    path = isolated / "custom.yaml"
    path.touch()
    monkeypatch.setenv("ACEKEY_CONFIG", str(path))
    assert find_catalog().resolve() == path.resolve()


def test_find_catalog_global(isolated):
    path = isolated / "home" / ".config" / "acekey" / "acekey.yaml"
    path.parent.mkdir(parents=True)
    path.touch()
    assert find_catalog().resolve() == path.resolve()


def test_find_catalog_none(isolated):
    assert find_catalog() is None
