# AceKey Selection Shell — (c) 2025 rtj.dev LLC — MIT Licensed
"""catalog.py
Command catalog loader for the AceKey shell.

A catalog describes the commands a user can pick from, with their flags and
nested subcommands. It is read from YAML or TOML and validated with pydantic:

    commands:
      - name: git
        description: the stupid content tracker
        flags:
          - long: version
          - long: help
            short: h
        subcommands:
          - name: commit
            aliases: [ci]
            flags:
              - long: message
                short: m
                requires_value: true
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from acekey.exceptions import CatalogError
from acekey.logger import logger


class FlagSpec(BaseModel):
    """A flag with a long form (`--long`), a short form (`-s`), or both."""

    long: str = ""
    short: str = ""
    usage: str = ""
    requires_value: bool = False

    @field_validator("long", "short")
    @classmethod
    def strip_markers(cls, value: str) -> str:
        return value.strip().lstrip("-")

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str) -> str:
        if len(value) > 1:
            raise ValueError(f"Short flag '{value}' must be a single character.")
        return value

    @model_validator(mode="after")
    def require_a_form(self) -> "FlagSpec":
        if not self.long and not self.short:
            raise ValueError("A flag needs a long or a short form.")
        return self

    @property
    def forms(self) -> list[str]:
        forms = []
        if self.long:
            forms.append(f"--{self.long}")
        if self.short:
            forms.append(f"-{self.short}")
        return forms

    @property
    def label(self) -> str:
        return ", ".join(self.forms)


class CommandSpec(BaseModel):
    """A command or subcommand, with the flags it accepts."""

    name: str
    description: str = ""
    aliases: list[str] = Field(default_factory=list)
    flags: list[FlagSpec] = Field(default_factory=list)
    subcommands: list[CommandSpec] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Command name cannot be empty.")
        return value

    @field_validator("aliases")
    @classmethod
    def drop_empty_aliases(cls, value: list[str]) -> list[str]:
        return [alias.strip() for alias in value if alias.strip()]

    @property
    def forms(self) -> list[str]:
        return [self.name, *self.aliases]


CommandSpec.model_rebuild()


class Catalog(BaseModel):
    """Top-level commands offered by the shell."""

    commands: list[CommandSpec] = Field(default_factory=list)

    @classmethod
    def from_labels(cls, labels: Sequence[str]) -> Catalog:
        """Build a flat catalog with one bare command per label."""
        return cls(commands=[CommandSpec(name=label) for label in labels if label.strip()])


def find_catalog() -> Path | None:
    candidates = [
        Path.cwd() / "acekey.yaml",
        Path.cwd() / "acekey.toml",
        Path.cwd() / ".acekey.yaml",
        Path.cwd() / ".acekey.toml",
        Path(os.environ.get("ACEKEY_CONFIG", "acekey.yaml")),
        Path.home() / ".config" / "acekey" / "acekey.yaml",
        Path.home() / ".config" / "acekey" / "acekey.toml",
    ]
    return next((p for p in candidates if p.exists()), None)


def _read(path: Path) -> Any:
    suffix = path.suffix.lower()
    with path.open(encoding="UTF-8") as file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(file)
        if suffix == ".toml":
            return toml.load(file)
    raise CatalogError(f"Unsupported catalog format '{suffix}' for {path}.")


def load_catalog(path: Path | str) -> Catalog:
    """
    Load and validate a YAML or TOML command catalog.

    Accepts either a mapping with a `commands` list or a bare list of commands.

    Raises:
        CatalogError: If the file is missing, malformed or fails validation.
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogError(f"Catalog file not found: {path}")

    try:
        raw = _read(path)
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise CatalogError(f"Could not parse {path}: {error}") from error

    if raw is None:
        raw = {}
    if isinstance(raw, list):
        raw = {"commands": raw}
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog {path} must be a mapping or a list of commands.")

    try:
        catalog = Catalog.model_validate(raw)
    except ValidationError as error:
        raise CatalogError(f"Invalid catalog {path}:\n{error}") from error

    logger.debug("Loaded %d command(s) from %s", len(catalog.commands), path)
    return catalog
