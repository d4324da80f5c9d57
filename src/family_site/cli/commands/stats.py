
from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.table import Table

from family_site.cli.commands.browse import DATA_DIR_OPTION
from family_site.cli.utils import console, open_dataset
from family_site.query import count_by_branch
from family_site.taxonomy import branch_label


def stats_command(
    data_dir: Optional[Path] = DATA_DIR_OPTION,
):
    """
    Show summary counts for the dataset.
    """
    dataset = open_dataset(data_dir)

    table = Table(title="Family Dataset")
    table.add_column("Collection", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("People", str(len(dataset.people)))
    table.add_row("Places", str(len(dataset.places)))
    table.add_row("Stories", str(len(dataset.stories)))
    console.print(table)

    branches = Table(title="People by Branch")
    branches.add_column("Branch", style="bold")
    branches.add_column("People", justify="right")
    for branch, count in count_by_branch(dataset.people).items():
        branches.add_row(branch_label(branch), str(count))
    console.print(branches)
