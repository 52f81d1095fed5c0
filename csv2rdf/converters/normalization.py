"""
Value Normalization Helpers

Pure helpers used by converters while building triples: turning names into
URI path components and parsing the German-locale numbers and yes/no flags
found in the source spreadsheets.
"""

import re
from typing import Union

from unidecode import unidecode

from csv2rdf.converters.errors import InvalidNumberError

SEPARATOR = "-"

# The German word for "yes" as it appears in boolean spreadsheet columns
YES_TOKEN = "ja"

_INVALID_CHARS = re.compile(r"[^a-z0-9\-_]+")
_REPEATED_SEPARATORS = re.compile(r"-{2,}")
_DECIMAL = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)\Z")


def name_to_uri(name: str, capitalize: bool = False) -> str:
    """Turn any string into a URI component.

    Useful for creating URIs from names and titles. Non-ASCII characters are
    transliterated, everything outside ``[a-z0-9_-]`` becomes a hyphen.

    Examples:
        >>> name_to_uri("Knud Möller")
        'knud-moller'
        >>> name_to_uri("Knud Möller", capitalize=True)
        'Knud-Moller'
    """
    slug = unidecode(name).lower()
    slug = _INVALID_CHARS.sub(SEPARATOR, slug)
    slug = _REPEATED_SEPARATORS.sub(SEPARATOR, slug)
    slug = slug.strip(SEPARATOR)

    if capitalize:
        slug = SEPARATOR.join(part.capitalize() for part in slug.split(SEPARATOR))

    return slug


def german_to_english_float(value: Union[str, int, float]) -> float:
    """Convert a German-style decimal ("1,59") into a float.

    Numbers are passed through as floats. Strings must be plain decimals
    (digits with an optional sign and one separator); anything else, such as
    "nan", "inf", "1_5" or "1e3", raises ``InvalidNumberError``.
    """
    # bool is an int subclass but never a meaningful price or rating
    if isinstance(value, bool):
        raise InvalidNumberError(f"'{value}' is not a number")

    if isinstance(value, (int, float)):
        return float(value)

    if not isinstance(value, str):
        raise InvalidNumberError(f"cannot convert {type(value).__name__} '{value}' to float")

    normalized = value.strip().replace(",", ".")
    if not _DECIMAL.match(normalized):
        raise InvalidNumberError(f"'{value}' is not a valid number")

    return float(normalized)


def parse_yes_no(value) -> bool:
    """Return True only for the German "ja" (any case)."""
    if not isinstance(value, str):
        return False
    return value.casefold() == YES_TOKEN
