"""Uzbek Latin <-> Cyrillic transliteration engine."""
from typing import Callable, List, Optional, Union

from ..exceptions import ValidationError
from ..utils.logger import get_logger
from .detector import detect_script
from .graphemes import (
    CYRILLIC_DIGRAPH_CAPITALS,
    CYRILLIC_TO_LATIN,
    LATIN_TO_CYRILLIC,
    Direction,
    multi_char_graphemes,
)
from .shield import shield, unshield

logger = get_logger("i18n.translit")

DirectionArg = Optional[Union[Direction, str]]


def latin_to_cyrillic(text: str) -> str:
    """
    Convert Latin Uzbek to Cyrillic.

    Multi-character graphemes are replaced first, uppercase forms before
    capitalized before lowercase, then the remaining characters one by one.
    Cyrillic output never matches a Latin pattern, so nothing is converted twice.
    """
    for grapheme, letter in multi_char_graphemes():
        text = text.replace(grapheme, letter)
    return ''.join(LATIN_TO_CYRILLIC.get(char, char) for char in text)


def cyrillic_to_latin(text: str) -> str:
    """
    Convert Cyrillic Uzbek to Latin.

    Non-Cyrillic characters are passed through unchanged.
    """
    result: List[str] = []
    for i, char in enumerate(text):
        mapped = CYRILLIC_TO_LATIN.get(char)
        if mapped is None:
            result.append(char)
        elif char in CYRILLIC_DIGRAPH_CAPITALS and _in_uppercase_run(text, i):
            result.append(mapped.upper())
        else:
            result.append(mapped)
    return ''.join(result)


def _in_uppercase_run(text: str, index: int) -> bool:
    """True when the letter at index sits in an all-caps word (ШАҲАР, ТОШ)."""
    if index + 1 < len(text) and text[index + 1].isalpha():
        return text[index + 1].isupper()
    if index > 0 and text[index - 1].isalpha():
        return text[index - 1].isupper()
    return False


_CONVERTERS = {
    Direction.LATIN_TO_CYRILLIC: latin_to_cyrillic,
    Direction.CYRILLIC_TO_LATIN: cyrillic_to_latin,
}


def get_converter(direction: Union[Direction, str]) -> Callable[[str], str]:
    """Substitution function for one direction, without shielding or detection."""
    return _CONVERTERS[Direction.parse(direction)]


class Transliterator:
    """
    Transliteration pipeline: resolve direction, shield markup, substitute, unshield.

    Instances hold only immutable policy and may be shared between threads.
    """

    def __init__(self, shield_markup: bool = True, default_direction: DirectionArg = None):
        self.shield_markup = shield_markup
        self.default_direction = (
            Direction.parse(default_direction) if default_direction is not None else None
        )

    @classmethod
    def from_config(cls, config) -> "Transliterator":
        """
        Create a transliterator from application config.

        Args:
            config: Config with a transliteration section

        Returns:
            Transliterator using the configured policy
        """
        settings = config.transliteration
        return cls(
            shield_markup=settings.shield_markup,
            default_direction=settings.default_direction,
        )

    def resolve_direction(self, text: str, direction: DirectionArg = None) -> Direction:
        """Explicit direction, else the default, else detected from text."""
        if direction is not None:
            return Direction.parse(direction)
        if self.default_direction is not None:
            return self.default_direction
        return detect_script(text).target_direction

    def transliterate(self, text: str, direction: DirectionArg = None) -> str:
        """
        Transliterate text between Uzbek Latin and Cyrillic.

        Args:
            text: Text to convert, optionally containing inline markup
            direction: 'latin-to-cyrillic' or 'cyrillic-to-latin'; detected when omitted

        Returns:
            Converted text with markup spans preserved verbatim
        """
        # Detection runs on the original text, markup included
        resolved = self.resolve_direction(text, direction)
        convert = get_converter(resolved)

        if not self.shield_markup:
            return convert(text)

        shielded = shield(text)
        logger.debug(f"Transliterating {len(text)} chars {resolved.value}, {len(shielded.spans)} spans shielded")
        return unshield(shielded.map_chunks(convert))

    def to_cyrillic(self, text: str) -> str:
        return self.transliterate(text, Direction.LATIN_TO_CYRILLIC)

    def to_latin(self, text: str) -> str:
        return self.transliterate(text, Direction.CYRILLIC_TO_LATIN)

    def transliterate_selection(
        self, text: str, start: int, end: int, direction: DirectionArg = None
    ) -> str:
        """
        Transliterate only text[start:end], leaving the rest untouched.

        When direction is omitted it is resolved from the selection alone.

        Raises:
            ValidationError: bounds are outside text or start > end
        """
        if not 0 <= start <= end <= len(text):
            raise ValidationError(
                f"Invalid selection [{start}:{end}] for text of length {len(text)}",
                code="selection",
            )
        selected = self.transliterate(text[start:end], direction)
        return text[:start] + selected + text[end:]


default_transliterator = Transliterator()


def transliterate(text: str, direction: DirectionArg = None) -> str:
    """Transliterate text with the default policy (markup shielded, auto-detect)."""
    return default_transliterator.transliterate(text, direction)
