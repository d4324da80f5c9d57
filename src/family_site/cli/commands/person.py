from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.panel import Panel

from family_site.cli.commands.browse import DATA_DIR_OPTION, JSON_OPTION
from family_site.cli.utils import console, open_dataset, people_table, write_json
from family_site.display import display_name, lifespan
from family_site.taxonomy import GROUP_LABELS, branch_label


def person_command(
    person_id: str = typer.Argument(..., help="Person identifier, e.g. jeff-kerr"),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    as_json: bool = JSON_OPTION,
):
    """
    Show one profile with parents, siblings, spouses and children.
    """
    dataset = open_dataset(data_dir)
    profile = dataset.profile(person_id)

    if profile is None:
        console.print(f"[red]Person not found:[/red] {person_id}")
        raise typer.Exit(code=1)

    if as_json:
        write_json(profile)
        return

    person = profile.person
    details = [
        f"Branch: {branch_label(person.branch)}",
        f"Generation: {person.generation}",
    ]
    years = lifespan(person)
    if years:
        details.append(f"Years: {years}")
    if person.nickname:
        details.append(f"Nickname: {person.nickname}")
    if person.location:
        details.append(f"Location: {person.location}")
    if person.bio:
        details.append("")
        details.append(person.bio)

    console.print(Panel("\n".join(details), title=display_name(person)))

    for rel_type, label in GROUP_LABELS.items():
        members = profile.groups.get(rel_type, ())
        if members:
            console.print(people_table([m.person for m in members], title=label))
