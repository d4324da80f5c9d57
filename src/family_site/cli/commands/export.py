from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_site.cli.commands.browse import DATA_DIR_OPTION
from family_site.cli.utils import console, open_dataset
from family_site.exporter import export_dataset


def export_command(
    out_dir: Path = typer.Argument(..., help="Directory to write the documents into"),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Write family.json, places.json and stories.json to OUT_DIR.
    """
    dataset = open_dataset(data_dir, verbose=verbose)

    if verbose:
        console.log("Exporting JSON documents")

    for path in export_dataset(dataset, out_dir):
        console.print(f"wrote {path}")

    if verbose:
        console.log("Export complete")
