"""Tests for the value constructors."""

from segbar.bar import Markup, Output
from segbar.outputs import empty, error, pango_unsafe, text


def test_empty_has_default_fields():
    output = empty()
    assert output.text == ""
    assert output.short_text == ""
    assert output.markup is Markup.NONE
    assert output.urgent is False
    assert output.is_empty()


def test_error_uses_description_and_is_urgent():
    output = error(RuntimeError("boom"))
    assert output.text == "boom"
    assert output.short_text == "Error"
    assert output.urgent is True
    assert output.markup is Markup.NONE


def test_error_accepts_any_described_value():
    output = error("disk not mounted")
    assert output.text == "disk not mounted"
    assert output.short_text == "Error"


class TestText:
    """Tests for text()."""

    def test_literal_without_arguments(self):
        """A string without arguments is never formatted."""
        assert text("hello") == Output(text="hello")
        assert text("100%").text == "100%"
        assert text("%d %s").text == "%d %s"

    def test_printf_substitution(self):
        assert text("count: %d", 5).text == "count: 5"
        assert text("%s/%s", "up", "down").text == "up/down"
        assert text("%.1f GiB", 3.14159).text == "3.1 GiB"

    def test_only_text_is_set(self):
        output = text("count: %d", 5)
        assert output.short_text == ""
        assert output.markup is Markup.NONE
        assert output.urgent is False

    def test_mapping_argument(self):
        output = text("%(used)d/%(total)d", {"used": 3, "total": 8})
        assert output.text == "3/8"

    def test_mapping_with_positional_directive(self):
        assert text("%s", {"a": 1}).text == "{'a': 1}"

    def test_bad_directive_is_reported_inline(self, log_records):
        output = text("count: %d", "five")
        assert output.text.startswith("count: %d %!(TypeError: ")
        assert output.urgent is False
        assert any(record["level"].name == "WARNING" for record in log_records)

    def test_missing_argument_is_reported_inline(self):
        output = text("%s and %s", "one")
        assert output.text.startswith("%s and %s %!(TypeError: ")

    def test_missing_mapping_key_is_reported_inline(self):
        output = text("%(missing)s", {"present": 1})
        assert output.text == "%(missing)s %!(KeyError: 'missing')"


def test_pango_unsafe_keeps_markup_verbatim():
    output = pango_unsafe("<b>x</b>")
    assert output.text == "<b>x</b>"
    assert output.markup is Markup.PANGO
    assert output.urgent is False


def test_pango_unsafe_does_not_escape():
    assert pango_unsafe("a & b <i>").text == "a & b <i>"


class BrokenStr:
    def __str__(self):
        raise RuntimeError("bad str")

    def __repr__(self):
        raise RuntimeError("bad repr")


class TestTextNeverRaises:
    """Formatter failures of any kind end up inline."""

    def test_integer_directive_with_infinity(self):
        output = text("%d", float("inf"))
        assert output.text.startswith("%d %!(OverflowError: ")

    def test_character_out_of_range(self):
        output = text("cpu %c", 10**9)
        assert output.text.startswith("cpu %c %!(OverflowError: ")

    def test_argument_with_failing_str(self, log_records):
        output = text("%s", BrokenStr())
        assert output.text == "%s %!(RuntimeError: bad str)"
        assert any(record["level"].name == "WARNING" for record in log_records)
