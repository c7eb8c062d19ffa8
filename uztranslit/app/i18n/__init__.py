"""
Uzbek Latin <-> Cyrillic transliteration
Grapheme tables, script detection, markup shielding and the engine
"""

from .detector import detect_script
from .fields import transliterate_fields
from .graphemes import Direction, Script, lookup
from .shield import ShieldedSpan, ShieldedText, shield, unshield
from .translit import Transliterator, cyrillic_to_latin, latin_to_cyrillic, transliterate

__all__ = [
    'transliterate',
    'Transliterator',
    'Direction',
    'Script',
    'detect_script',
    'lookup',
    'shield',
    'unshield',
    'ShieldedSpan',
    'ShieldedText',
    'latin_to_cyrillic',
    'cyrillic_to_latin',
    'transliterate_fields',
]
