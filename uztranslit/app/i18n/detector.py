"""Script detection for Uzbek text."""
import re
from typing import Tuple

from .graphemes import Script

# Cyrillic letters used in Uzbek, including the extended ў, қ, ғ, ҳ
CYRILLIC_LETTER = re.compile(r"[а-яА-ЯёЁўЎқҚғҒҳҲ]")
LATIN_LETTER = re.compile(r"[a-zA-Z]")


def count_letters(text: str) -> Tuple[int, int]:
    """
    Count Cyrillic and Latin letters in text.

    Digits, punctuation, whitespace and letters of other scripts are ignored.

    Returns:
        Tuple of (cyrillic_count, latin_count)
    """
    cyrillic = len(CYRILLIC_LETTER.findall(text))
    latin = len(LATIN_LETTER.findall(text))
    return cyrillic, latin


def detect_script(text: str) -> Script:
    """
    Decide which script text is written in.

    Cyrillic wins only with strictly more letters than Latin; ties and
    text without letters resolve to Latin.
    """
    cyrillic, latin = count_letters(text)
    return Script.CYRILLIC if cyrillic > latin else Script.LATIN
