"""
Template integration

Jinja2 filters that transliterate rendered values:
- transliterate (auto-detect or explicit direction)
- to_cyrillic
- to_latin
"""

from .filters import TranslitFilters, register_filters

__all__ = [
    'TranslitFilters',
    'register_filters'
]
