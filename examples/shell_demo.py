#!/usr/bin/env python
import asyncio
from pathlib import Path

from acekey.catalog import load_catalog
from acekey.console import console
from acekey.shell import AceShell
from acekey.utils import setup_logging

setup_logging(log_filename=None)

catalog = load_catalog(Path(__file__).parent / "acekey.yaml")
shell = AceShell(catalog, title="demo")

result = asyncio.run(shell.run())
if result:
    console.print(f"[ace.selected]{' '.join(result)}[/]")
