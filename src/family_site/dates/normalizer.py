# src/family_site/dates/normalizer.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Month helpers
# ---------------------------------------------------------------------------

MONTHS: Dict[str, int] = {
    "jan": 1, "january": 1,
    "feb": 2, "february": 2,
    "mar": 3, "march": 3,
    "apr": 4, "april": 4,
    "may": 5,
    "jun": 6, "june": 6,
    "jul": 7, "july": 7,
    "aug": 8, "august": 8,
    "sep": 9, "sept": 9, "september": 9,
    "oct": 10, "october": 10,
    "nov": 11, "november": 11,
    "dec": 12, "december": 12,
}


# ---------------------------------------------------------------------------
# Qualifiers
# ---------------------------------------------------------------------------

# alias (lowercase) -> qualifier code
QUALIFIER_ALIASES: Dict[str, str] = {}

def _add_qualifier_aliases(aliases: List[str], code: str) -> None:
    for a in aliases:
        QUALIFIER_ALIASES[a.lower()] = code


_add_qualifier_aliases(
    ["abt", "abt.", "about", "approx", "approx.", "approximately",
     "circa", "c.", "ca", "ca.", "around", "est", "est.", "estimated"],
    "ABT",
)
_add_qualifier_aliases(["before", "bef", "bef.", "prior to"], "BEF")
_add_qualifier_aliases(["after", "aft", "aft.", "later than"], "AFT")


@dataclass(frozen=True)
class DisplayDate:
    """
    Lenient reading of a free-text display date.

    Only the parts that could be recognized are filled in; ``raw`` always
    keeps the original text for display.
    """
    raw: str
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    qualifier: Optional[str] = None   # ABT, BEF, AFT

    @property
    def approximate(self) -> bool:
        return self.qualifier is not None

    @property
    def known(self) -> bool:
        return self.year is not None

    def sort_key(self) -> Tuple[int, int, int, int]:
        """Chronological key; dates without a year sort last."""
        if self.year is None:
            return (1, 0, 0, 0)
        return (0, self.year, self.month or 0, self.day or 0)


# ---------------------------------------------------------------------------
# Core parsing helpers
# ---------------------------------------------------------------------------

def _parse_year(token: str) -> Optional[int]:
    token = token.strip()
    if len(token) in (3, 4) and token.isdigit():
        return int(token)
    return None


def _parse_day(token: str) -> Optional[int]:
    digits = token.rstrip(".").lower()
    for suffix in ("st", "nd", "rd", "th"):
        if digits.endswith(suffix):
            digits = digits[: -len(suffix)]
            break
    if digits.isdigit() and 1 <= int(digits) <= 31:
        return int(digits)
    return None


def _tokenize(text: str) -> List[str]:
    return [t for t in text.replace(",", " ").split() if t]


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def parse_display_date(raw: Optional[str]) -> DisplayDate:
    """
    Parse a display date such as the ones kept on person records.

    Handles:
        - 'August 6, 1977'          -> year/month/day
        - 'December 8, circa 1950'  -> qualifier may sit before the year
        - 'circa 1984'              -> qualifier + year
        - 'December 13'             -> month/day, no year
        - '1927', '6 AUG 1977'

    Unrecognized tokens are ignored; this never raises.
    """
    s = "" if raw is None else str(raw).strip()
    if not s:
        return DisplayDate(raw=s)

    tokens = _tokenize(s)
    year: Optional[int] = None
    month: Optional[int] = None
    day: Optional[int] = None
    qualifier: Optional[str] = None

    i = 0
    while i < len(tokens):
        tok = tokens[i]
        low = tok.lower()

        # two-word qualifiers ("prior to", "later than")
        if i + 1 < len(tokens):
            pair = f"{low} {tokens[i + 1].lower()}"
            if pair in QUALIFIER_ALIASES:
                qualifier = qualifier or QUALIFIER_ALIASES[pair]
                i += 2
                continue

        if low in QUALIFIER_ALIASES:
            qualifier = qualifier or QUALIFIER_ALIASES[low]
        elif low in MONTHS and month is None:
            month = MONTHS[low]
        elif year is None and _parse_year(tok) is not None:
            year = _parse_year(tok)
        elif day is None and _parse_day(tok) is not None:
            day = _parse_day(tok)
        i += 1

    return DisplayDate(raw=s, year=year, month=month, day=day, qualifier=qualifier)


def format_year(date: DisplayDate) -> str:
    """Short year form used in lifespans: '1950', 'c. 1950', 'bef. 1800'."""
    if date.year is None:
        return ""
    prefix = {"ABT": "c. ", "BEF": "bef. ", "AFT": "aft. "}.get(date.qualifier or "", "")
    return f"{prefix}{date.year}"
