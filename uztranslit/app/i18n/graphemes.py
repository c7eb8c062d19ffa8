"""
Static grapheme tables for Uzbek Latin <-> Cyrillic transliteration.

Tables are built once at import time from literal pair lists and exposed
read-only. A duplicate source grapheme is a defect in the data below and
aborts the import with GraphemeTableError.
"""
from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple, Union

from ..exceptions import GraphemeTableError, ValidationError
from ..utils.logger import get_logger

logger = get_logger("i18n.graphemes")


class Direction(str, Enum):
    """Which script is the source for a transliteration call."""

    LATIN_TO_CYRILLIC = "latin-to-cyrillic"
    CYRILLIC_TO_LATIN = "cyrillic-to-latin"

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """
        Resolve a direction from an enum member, its value or a short alias.

        Args:
            value: Direction, 'latin-to-cyrillic', 'cyrillic-to-latin', 'l2c' or 'c2l'

        Returns:
            The matching Direction

        Raises:
            ValidationError: value names no known direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            if key in _DIRECTION_ALIASES:
                return _DIRECTION_ALIASES[key]
            try:
                return cls(key)
            except ValueError:
                pass
        raise ValidationError(f"Unknown transliteration direction: {value!r}", code="direction")

    @property
    def source(self) -> "Script":
        return Script.LATIN if self is Direction.LATIN_TO_CYRILLIC else Script.CYRILLIC


class Script(str, Enum):
    """Script detected in a piece of text."""

    LATIN = "latin"
    CYRILLIC = "cyrillic"

    @property
    def target_direction(self) -> Direction:
        """Direction that converts text away from this script."""
        if self is Script.LATIN:
            return Direction.LATIN_TO_CYRILLIC
        return Direction.CYRILLIC_TO_LATIN


_DIRECTION_ALIASES = {
    "l2c": Direction.LATIN_TO_CYRILLIC,
    "c2l": Direction.CYRILLIC_TO_LATIN,
}


# Latin -> Cyrillic, single letters
LATIN_LETTERS = [
    # Lowercase
    ('a', 'а'), ('b', 'б'), ('d', 'д'), ('e', 'е'), ('f', 'ф'), ('g', 'г'),
    ('h', 'ҳ'), ('i', 'и'), ('j', 'ж'), ('k', 'к'), ('l', 'л'), ('m', 'м'),
    ('n', 'н'), ('o', 'о'), ('p', 'п'), ('q', 'қ'), ('r', 'р'), ('s', 'с'),
    ('t', 'т'), ('u', 'у'), ('v', 'в'), ('x', 'х'), ('y', 'й'), ('z', 'з'),
    # Uppercase
    ('A', 'А'), ('B', 'Б'), ('D', 'Д'), ('E', 'Е'), ('F', 'Ф'), ('G', 'Г'),
    ('H', 'Ҳ'), ('I', 'И'), ('J', 'Ж'), ('K', 'К'), ('L', 'Л'), ('M', 'М'),
    ('N', 'Н'), ('O', 'О'), ('P', 'П'), ('Q', 'Қ'), ('R', 'Р'), ('S', 'С'),
    ('T', 'Т'), ('U', 'У'), ('V', 'В'), ('X', 'Х'), ('Y', 'Й'), ('Z', 'З'),
    # Tutuq belgisi (apostrophe) on its own is the hard sign
    ("'", 'ъ'),
]

# Latin -> Cyrillic, multi-character graphemes in first-pass order:
# uppercase digraphs, then capitalized, then lowercase.
LATIN_DIGRAPHS = [
    ('SH', 'Ш'), ('CH', 'Ч'), ('YO', 'Ё'), ('YU', 'Ю'), ('YA', 'Я'),
    ('Sh', 'Ш'), ('Ch', 'Ч'), ('Yo', 'Ё'), ('Yu', 'Ю'), ('Ya', 'Я'),
    ("O'", 'Ў'), ("G'", 'Ғ'),
    ('sh', 'ш'), ('ch', 'ч'), ('yo', 'ё'), ('yu', 'ю'), ('ya', 'я'),
    ("o'", 'ў'), ("g'", 'ғ'),
]

# Cyrillic -> Latin, always keyed by a single letter
CYRILLIC_LETTERS = [
    # Lowercase
    ('а', 'a'), ('б', 'b'), ('д', 'd'), ('е', 'e'), ('ф', 'f'), ('г', 'g'),
    ('ҳ', 'h'), ('и', 'i'), ('ж', 'j'), ('к', 'k'), ('л', 'l'), ('м', 'm'),
    ('н', 'n'), ('о', 'o'), ('п', 'p'), ('қ', 'q'), ('р', 'r'), ('с', 's'),
    ('т', 't'), ('у', 'u'), ('в', 'v'), ('х', 'x'), ('й', 'y'), ('з', 'z'),
    ('ш', 'sh'), ('ч', 'ch'), ('ё', 'yo'), ('ю', 'yu'), ('я', 'ya'),
    ('ў', "o'"), ('ғ', "g'"), ('ъ', "'"),
    # Uppercase
    ('А', 'A'), ('Б', 'B'), ('Д', 'D'), ('Е', 'E'), ('Ф', 'F'), ('Г', 'G'),
    ('Ҳ', 'H'), ('И', 'I'), ('Ж', 'J'), ('К', 'K'), ('Л', 'L'), ('М', 'M'),
    ('Н', 'N'), ('О', 'O'), ('П', 'P'), ('Қ', 'Q'), ('Р', 'R'), ('С', 'S'),
    ('Т', 'T'), ('У', 'U'), ('В', 'V'), ('Х', 'X'), ('Й', 'Y'), ('З', 'Z'),
    ('Ш', 'Sh'), ('Ч', 'Ch'), ('Ё', 'Yo'), ('Ю', 'Yu'), ('Я', 'Ya'),
    ('Ў', "O'"), ('Ғ', "G'"),
]


def build_table(pairs: Iterable[Tuple[str, str]], name: str, max_source: int = 2) -> Mapping[str, str]:
    """
    Build a read-only lookup table from (source, target) pairs.

    Raises:
        GraphemeTableError: a source grapheme is empty, too long or repeated
    """
    table = {}
    for source, target in pairs:
        if not source or len(source) > max_source:
            raise GraphemeTableError(
                f"Invalid source grapheme {source!r} in {name} table", code="table"
            )
        if source in table:
            raise GraphemeTableError(
                f"Duplicate source grapheme {source!r} in {name} table", code="table"
            )
        table[source] = target
    return MappingProxyType(table)


LATIN_TO_CYRILLIC = build_table(LATIN_LETTERS + LATIN_DIGRAPHS, "latin-to-cyrillic")
CYRILLIC_TO_LATIN = build_table(CYRILLIC_LETTERS, "cyrillic-to-latin", max_source=1)

# Ordered for the first Latin pass; the table itself does not keep this order
# once single letters are mixed in.
MULTI_CHAR_GRAPHEMES: Tuple[Tuple[str, str], ...] = tuple(LATIN_DIGRAPHS)

# Uppercase Cyrillic letters whose Latin form is a two-letter digraph
CYRILLIC_DIGRAPH_CAPITALS = frozenset(
    letter for letter, latin in CYRILLIC_LETTERS
    if letter.isupper() and len(latin) == 2 and latin[1].isalpha()
)

_TABLES = {
    Direction.LATIN_TO_CYRILLIC: LATIN_TO_CYRILLIC,
    Direction.CYRILLIC_TO_LATIN: CYRILLIC_TO_LATIN,
}

logger.debug(
    f"Grapheme tables built: {len(LATIN_TO_CYRILLIC)} latin-to-cyrillic, "
    f"{len(CYRILLIC_TO_LATIN)} cyrillic-to-latin entries"
)


def get_table(direction: Union[Direction, str]) -> Mapping[str, str]:
    return _TABLES[Direction.parse(direction)]


def lookup(direction: Union[Direction, str], candidate: str) -> Optional[str]:
    """Return the target grapheme for candidate, or None if it is unmapped."""
    return get_table(direction).get(candidate)


def multi_char_graphemes() -> Tuple[Tuple[str, str], ...]:
    """Latin multi-character graphemes, uppercase forms first."""
    return MULTI_CHAR_GRAPHEMES
