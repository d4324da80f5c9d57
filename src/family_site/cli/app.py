
from __future__ import annotations

import typer

from family_site.cli.commands import (
    check_command,
    export_command,
    people_command,
    person_command,
    places_command,
    stats_command,
    stories_command,
)

app = typer.Typer(
    name="family-site",
    help="Browse and export the family dataset",
    add_completion=False,
)

app.command("people")(people_command)
app.command("places")(places_command)
app.command("stories")(stories_command)
app.command("person")(person_command)
app.command("stats")(stats_command)
app.command("check")(check_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
