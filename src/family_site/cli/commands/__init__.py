
"""
CLI command modules for family_site.

Each command module defines Typer-compatible command functions.
"""

from family_site.cli.commands.browse import people_command, places_command, stories_command
from family_site.cli.commands.check import check_command
from family_site.cli.commands.export import export_command
from family_site.cli.commands.person import person_command
from family_site.cli.commands.stats import stats_command

__all__ = [
    "check_command",
    "export_command",
    "people_command",
    "person_command",
    "places_command",
    "stats_command",
    "stories_command",
]
