
from __future__ import annotations

import time
from pathlib import Path
from typing import Any, Iterable, Optional

from rich.console import Console
from rich.table import Table

from family_site.dataset import FamilyDataset, load_dataset
from family_site.display import display_name, lifespan
from family_site.entities.models import Person, Place, Story
from family_site.exporter import serialize_json
from family_site.taxonomy import branch_label, category_label, place_type_label

console = Console()


def open_dataset(data_dir: Optional[Path], *, verbose: bool = False) -> FamilyDataset:
    """
    Load the shared dataset for a command.
    """
    t0 = time.perf_counter()
    dataset = load_dataset(data_dir)
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Loaded {len(dataset.people)} people, {len(dataset.places)} places, "
            f"{len(dataset.stories)} stories in {elapsed:.3f}s"
        )

    return dataset


def write_json(data: Any, *, pretty: bool = True) -> None:
    """
    Print query results as JSON on stdout.
    """
    print(serialize_json(data, indent=2 if pretty else None))


# ---------------------------------------------------------
# Tables
# ---------------------------------------------------------
def people_table(people: Iterable[Person], title: str = "People") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Years")
    table.add_column("Branch")
    table.add_column("Gen", justify="right")

    for p in people:
        table.add_row(p.id, display_name(p), lifespan(p), branch_label(p.branch), str(p.generation))
    return table


def places_table(places: Iterable[Place]) -> Table:
    table = Table(title="Places")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Location")
    table.add_column("Type")
    table.add_column("Branch")

    for pl in places:
        table.add_row(pl.id, pl.name, pl.location, place_type_label(pl.type), branch_label(pl.branch))
    return table


def stories_table(stories: Iterable[Story]) -> Table:
    table = Table(title="Stories")
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Category")
    table.add_column("Branches")
    table.add_column("Date")

    for s in stories:
        table.add_row(
            s.id,
            s.title,
            category_label(s.category),
            ", ".join(branch_label(b) for b in s.related_branches),
            s.date or "",
        )
    return table
