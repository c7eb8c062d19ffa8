"""
Jinja2 filters for transliterating rendered content
"""
from typing import Any, Optional

from jinja2 import Environment
from markupsafe import Markup, escape

from ..i18n import Direction, Transliterator
from ..i18n.shield import shield, unshield
from ..i18n.translit import default_transliterator, get_converter
from ..utils.logger import get_logger

logger = get_logger("templates.filters")


class TranslitFilters:
    """Filter callables bound to one transliterator"""

    def __init__(self, transliterator: Optional[Transliterator] = None):
        self.transliterator = transliterator or default_transliterator

    def _apply(self, value: Any, direction: Optional[str]) -> Any:
        if value is None:
            return ''
        if isinstance(value, Markup):
            if self.transliterator.shield_markup:
                return self._apply_markup(value, direction)
            return Markup(self.transliterator.transliterate(str(value), direction))
        return self.transliterator.transliterate(str(value), direction)

    def _apply_markup(self, value: Markup, direction: Optional[str]) -> Markup:
        """
        Convert safe markup without touching tags or character references.

        Each text run between tags is unescaped, converted and escaped again,
        so &#39; and &amp; reach the tables as real characters.
        """
        resolved = self.transliterator.resolve_direction(value.unescape(), direction)
        convert = get_converter(resolved)
        shielded = shield(str(value)).map_chunks(
            lambda chunk: str(escape(convert(Markup(chunk).unescape())))
        )
        return Markup(unshield(shielded))

    def transliterate(self, value: Any, direction: Optional[str] = None) -> Any:
        return self._apply(value, direction)

    def to_cyrillic(self, value: Any) -> Any:
        return self._apply(value, Direction.LATIN_TO_CYRILLIC)

    def to_latin(self, value: Any) -> Any:
        return self._apply(value, Direction.CYRILLIC_TO_LATIN)


def register_filters(env: Environment, transliterator: Optional[Transliterator] = None) -> Environment:
    """
    Register transliteration filters on a Jinja2 environment

    Args:
        env: Environment to extend
        transliterator: Engine to use instead of the default

    Returns:
        The same environment, for chaining
    """
    filters = TranslitFilters(transliterator)
    env.filters['transliterate'] = filters.transliterate
    env.filters['to_cyrillic'] = filters.to_cyrillic
    env.filters['to_latin'] = filters.to_latin
    logger.debug("Registered transliteration filters")
    return env
