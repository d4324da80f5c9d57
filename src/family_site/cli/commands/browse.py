from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from family_site.cli.utils import (
    console,
    open_dataset,
    people_table,
    places_table,
    stories_table,
    write_json,
)
from family_site.query import ALL, search_people, search_places, search_stories

DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    "-d",
    help="Directory holding family.json, places.json and stories.json",
)
JSON_OPTION = typer.Option(False, "--json", help="Print results as JSON")


def _generation(value: str):
    if value == ALL:
        return ALL
    try:
        generation = int(value)
    except ValueError:
        raise typer.BadParameter(f"expected an integer or '{ALL}', got {value!r}") from None
    if generation < 1:
        raise typer.BadParameter("generation must be positive")
    return generation


def _report_empty(kind: str) -> None:
    console.print(f"[yellow]No {kind} match your filters.[/yellow]")


def people_command(
    query: str = typer.Argument("", help="Search first, last and maiden names"),
    branch: str = typer.Option(ALL, "--branch", "-b", help="Branch filter"),
    generation: str = typer.Option(ALL, "--generation", "-g", help="Generation filter"),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    as_json: bool = JSON_OPTION,
):
    """
    Search family members.
    """
    dataset = open_dataset(data_dir)
    results = search_people(dataset.people, query, branch=branch, generation=_generation(generation))

    if as_json:
        write_json(results)
    elif results:
        console.print(people_table(results))
    else:
        _report_empty("people")


def places_command(
    query: str = typer.Argument("", help="Search name, location and significance"),
    place_type: str = typer.Option(ALL, "--type", "-t", help="Place type filter"),
    branch: str = typer.Option(ALL, "--branch", "-b", help="Branch filter"),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    as_json: bool = JSON_OPTION,
):
    """
    Search family places.
    """
    dataset = open_dataset(data_dir)
    results = search_places(dataset.places, query, place_type=place_type, branch=branch)

    if as_json:
        write_json(results)
    elif results:
        console.print(places_table(results))
    else:
        _report_empty("places")


def stories_command(
    query: str = typer.Argument("", help="Search titles and excerpts"),
    category: str = typer.Option(ALL, "--category", "-c", help="Story category filter"),
    branch: str = typer.Option(ALL, "--branch", "-b", help="Related branch filter"),
    data_dir: Optional[Path] = DATA_DIR_OPTION,
    as_json: bool = JSON_OPTION,
):
    """
    Search family stories.
    """
    dataset = open_dataset(data_dir)
    results = search_stories(dataset.stories, query, category=category, branch=branch)

    if as_json:
        write_json(results)
    elif results:
        console.print(stories_table(results))
    else:
        _report_empty("stories")
