from .normalizer import DisplayDate, format_year, parse_display_date

__all__ = ["DisplayDate", "format_year", "parse_display_date"]
