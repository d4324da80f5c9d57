from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_site.cli.commands.browse import DATA_DIR_OPTION
from family_site.cli.utils import console, open_dataset
from family_site.query import find_missing_inverses


def check_command(
    data_dir: Optional[Path] = DATA_DIR_OPTION,
):
    """
    Report relationship edges that have no matching edge on the other person.
    """
    dataset = open_dataset(data_dir)
    findings = find_missing_inverses(dataset.people)

    if not findings:
        console.print("[green]All relationship edges have their inverse.[/green]")
        return

    for finding in findings:
        console.print(f"[yellow]missing[/yellow] {finding.describe()}")
    console.print(f"{len(findings)} edge(s) without an inverse")
    raise typer.Exit(code=1)
