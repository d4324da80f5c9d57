"""
Formatting helpers the presentation layer uses for person cards and
profile headers.
"""

from __future__ import annotations

from family_site.dates import format_year, parse_display_date
from family_site.entities.models import Person


def display_name(person: Person) -> str:
    """'Debby Kerr (née Mowry)'"""
    name = f"{person.first_name} {person.last_name}"
    if person.maiden_name:
        name += f" (née {person.maiden_name})"
    return name


def initials(person: Person) -> str:
    """Placeholder text shown when a person has no photo."""
    return f"{person.first_name[:1]}{person.last_name[:1]}".upper()


def lifespan(person: Person) -> str:
    """
    Year range for a card: '1927–1955', 'c. 1950–', '–1989'.

    Empty when neither date carries a year.
    """
    born = format_year(parse_display_date(person.birth_date))
    died = format_year(parse_display_date(person.death_date))

    if not born and not died:
        return ""
    return f"{born}–{died}"
