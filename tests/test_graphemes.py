"""
Tests for the static grapheme tables
"""

import pytest

from uztranslit.app.exceptions import GraphemeTableError, ValidationError
from uztranslit.app.i18n.graphemes import (
    CYRILLIC_DIGRAPH_CAPITALS,
    CYRILLIC_TO_LATIN,
    LATIN_TO_CYRILLIC,
    Direction,
    Script,
    build_table,
    lookup,
    multi_char_graphemes,
)


class TestLookup:
    """Lookup against both directions"""

    def test_single_letters(self):
        assert lookup(Direction.LATIN_TO_CYRILLIC, "q") == "қ"
        assert lookup(Direction.LATIN_TO_CYRILLIC, "H") == "Ҳ"
        assert lookup(Direction.CYRILLIC_TO_LATIN, "ҳ") == "h"

    def test_digraphs(self):
        assert lookup("latin-to-cyrillic", "sh") == "ш"
        assert lookup("latin-to-cyrillic", "Ch") == "Ч"
        assert lookup("latin-to-cyrillic", "YA") == "Я"
        assert lookup("latin-to-cyrillic", "g'") == "ғ"

    def test_cyrillic_letter_to_multi_char_latin(self):
        assert lookup(Direction.CYRILLIC_TO_LATIN, "ш") == "sh"
        assert lookup(Direction.CYRILLIC_TO_LATIN, "Ў") == "O'"

    def test_standalone_apostrophe_is_hard_sign(self):
        assert lookup(Direction.LATIN_TO_CYRILLIC, "'") == "ъ"
        assert lookup(Direction.CYRILLIC_TO_LATIN, "ъ") == "'"

    def test_unmapped_characters(self):
        for char in ["1", " ", ",", "w", "c", "щ", "😀"]:
            assert lookup(Direction.LATIN_TO_CYRILLIC, char) is None
            assert lookup(Direction.CYRILLIC_TO_LATIN, char) is None

    def test_lookup_accepts_aliases(self):
        assert lookup("c2l", "я") == "ya"


class TestTableShape:
    """Structural properties of the built tables"""

    def test_cyrillic_keys_are_single_characters(self):
        assert all(len(key) == 1 for key in CYRILLIC_TO_LATIN)

    def test_multi_char_graphemes_are_latin_only(self):
        multi = [key for key in LATIN_TO_CYRILLIC if len(key) > 1]
        assert sorted(multi) == sorted(grapheme for grapheme, _ in multi_char_graphemes())

    def test_apostrophe_letters_have_no_separate_uppercase(self):
        graphemes = [grapheme for grapheme, _ in multi_char_graphemes()]
        assert "O'" in graphemes and "o'" in graphemes
        assert graphemes.count("O'") == 1

    def test_uppercase_before_capitalized_before_lowercase(self):
        graphemes = [grapheme for grapheme, _ in multi_char_graphemes()]
        for upper, capital, lower in [("SH", "Sh", "sh"), ("CH", "Ch", "ch"), ("YO", "Yo", "yo")]:
            assert graphemes.index(upper) < graphemes.index(capital) < graphemes.index(lower)
        assert graphemes.index("G'") < graphemes.index("g'")

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            LATIN_TO_CYRILLIC["w"] = "в"
        with pytest.raises(TypeError):
            CYRILLIC_TO_LATIN["щ"] = "sh"

    def test_digraph_capitals(self):
        assert CYRILLIC_DIGRAPH_CAPITALS == {"Ш", "Ч", "Ё", "Ю", "Я"}


class TestBuildTable:
    """Fail-fast table construction"""

    def test_duplicate_source_rejected(self):
        with pytest.raises(GraphemeTableError) as exc_info:
            build_table([("a", "а"), ("b", "б"), ("a", "я")], "test")
        assert "'a'" in str(exc_info.value)
        assert str(exc_info.value).startswith("[table]")

    def test_empty_source_rejected(self):
        with pytest.raises(GraphemeTableError):
            build_table([("", "а")], "test")

    def test_overlong_source_rejected(self):
        with pytest.raises(GraphemeTableError):
            build_table([("shc", "щ")], "test")
        with pytest.raises(GraphemeTableError):
            build_table([("ab", "x")], "test", max_source=1)

    def test_valid_pairs(self):
        table = build_table([("a", "а"), ("sh", "ш")], "test")
        assert dict(table) == {"a": "а", "sh": "ш"}


class TestDirection:
    """Direction and Script enums"""

    def test_parse_values_and_aliases(self):
        assert Direction.parse("latin-to-cyrillic") is Direction.LATIN_TO_CYRILLIC
        assert Direction.parse("C2L") is Direction.CYRILLIC_TO_LATIN
        assert Direction.parse(" l2c ") is Direction.LATIN_TO_CYRILLIC
        assert Direction.parse(Direction.CYRILLIC_TO_LATIN) is Direction.CYRILLIC_TO_LATIN

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValidationError):
            Direction.parse("latin-to-greek")
        with pytest.raises(ValueError):
            Direction.parse(42)

    def test_script_target_direction(self):
        assert Script.LATIN.target_direction is Direction.LATIN_TO_CYRILLIC
        assert Script.CYRILLIC.target_direction is Direction.CYRILLIC_TO_LATIN
        assert Direction.CYRILLIC_TO_LATIN.source is Script.CYRILLIC
