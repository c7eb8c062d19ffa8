"""
Tests for markup shielding
"""

import pytest

from uztranslit.app.i18n import ShieldedSpan, shield, unshield


class TestShield:
    """Extracting tag-like spans"""

    def test_simple_tags(self):
        shielded = shield("<b>test</b>")
        assert shielded.chunks == ["", "test", ""]
        assert shielded.spans == [ShieldedSpan(0, "<b>"), ShieldedSpan(7, "</b>")]

    def test_span_geometry(self):
        span = shield("ab<i class=\"x\">cd").spans[0]
        assert span.offset == 2
        assert span.length == 13
        assert span.end == 15

    def test_working_text_has_no_markup(self):
        shielded = shield("<p>Salom <a href=\"/uz\">dunyo</a></p>")
        assert shielded.working_text == "Salom dunyo"
        assert "<" not in shielded.working_text and ">" not in shielded.working_text

    def test_no_markup(self):
        shielded = shield("oddiy matn")
        assert shielded.chunks == ["oddiy matn"]
        assert shielded.spans == []

    def test_unterminated_tag_is_literal_text(self):
        shielded = shield("a <b c")
        assert shielded.spans == []
        assert shielded.chunks == ["a <b c"]

    def test_first_open_to_next_close(self):
        shielded = shield("<<a>>")
        assert [span.text for span in shielded.spans] == ["<<a>"]
        assert shielded.chunks == ["", ">"]

    def test_map_chunks_leaves_spans(self):
        shielded = shield("x<y>z").map_chunks(str.upper)
        assert shielded.chunks == ["X", "Z"]
        assert unshield(shielded) == "X<y>Z"


class TestUnshield:
    """Reassembling text"""

    @pytest.mark.parametrize("text", [
        "",
        "<b>test</b>",
        "a <b c",
        "<<a>>",
        "<br/><br/>",
        "1 < 2 and 3 > 2",
        "<p>Salom</p> <i>dunyo</i>!",
    ])
    def test_identity(self, text):
        assert unshield(shield(text)) == text
