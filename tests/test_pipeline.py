import pytest

from chordpro2html import ConversionOptions, chordpro_to_chordpro, chordpro_to_html, parse, render
from chordpro2html.exceptions import InvalidOptionError
from chordpro2html.models import AccidentalPreference, Notation

# ---------------------------------------------------------------------------
# chordpro_to_html
# ---------------------------------------------------------------------------


def test_defaults_match_parse_then_render():
    text = "{title: Foo}\n[C]Hello [Am]world"
    assert chordpro_to_html(text) == render(parse(text))


def test_transposes_chords():
    html = chordpro_to_html("[C]Hello [Am]world", ConversionOptions(transpose=2))
    assert ">D<" in html
    assert ">Bm<" in html
    assert ">C<" not in html
    assert ">Am<" not in html


def test_transpose_zero_is_identical():
    assert chordpro_to_html("[G]Hello", ConversionOptions(transpose=0)) == chordpro_to_html("[G]Hello")


def test_notation_and_accidentals_threaded_through():
    options = ConversionOptions(transpose=1, notation=Notation.GERMAN, accidental_preference="sharp")
    assert ">A#<" in chordpro_to_html("[A]Hi", options)
    options = ConversionOptions(transpose=1, notation="german")
    assert ">B<" in chordpro_to_html("[A]Hi", options)


def test_full_page_and_columns_threaded_through():
    html = chordpro_to_html("{title: Foo}", ConversionOptions(full_page=True, columns=2))
    assert html.startswith("<!DOCTYPE html>")
    assert "column-count: 2;" in html


def test_empty_input_is_empty_output():
    assert chordpro_to_html("  \n", ConversionOptions(full_page=True)) == ""


# ---------------------------------------------------------------------------
# chordpro_to_chordpro
# ---------------------------------------------------------------------------


def test_chordpro_output_transposed():
    text = "{title: Foo}\n{key: G}\n{soc}\n[G]Hello [D/F#]world\n{eoc}"
    assert chordpro_to_chordpro(text, ConversionOptions(transpose=2)) == (
        "{title: Foo}\n{key: A}\n{start_of_chorus}\n[A]Hello [E/G#]world\n{end_of_chorus}\n"
    )


def test_chordpro_output_without_options():
    assert chordpro_to_chordpro("{t: Foo}") == "{title: Foo}\n"


# ---------------------------------------------------------------------------
# ConversionOptions.validate
# ---------------------------------------------------------------------------


def test_validate_coerces_strings_to_enums():
    options = ConversionOptions(notation="german", accidental_preference="flat").validate()
    assert options.notation is Notation.GERMAN
    assert options.accidental_preference is AccidentalPreference.FLAT


def test_validate_returns_defaults_unchanged():
    assert ConversionOptions().validate() == ConversionOptions()


@pytest.mark.parametrize("columns", [0, -1])
def test_validate_rejects_columns_below_one(columns):
    with pytest.raises(InvalidOptionError) as exc_info:
        ConversionOptions(columns=columns).validate()
    assert exc_info.value.option == "columns"
    assert "at least 1" in str(exc_info.value)


@pytest.mark.parametrize("columns", [1.5, "2", True])
def test_validate_rejects_non_integer_columns(columns):
    with pytest.raises(InvalidOptionError):
        ConversionOptions(columns=columns).validate()


def test_validate_rejects_non_integer_transpose():
    with pytest.raises(InvalidOptionError) as exc_info:
        ConversionOptions(transpose=1.5).validate()
    assert exc_info.value.option == "transpose"


def test_validate_rejects_unknown_notation():
    with pytest.raises(InvalidOptionError) as exc_info:
        ConversionOptions(notation="solfege").validate()
    assert exc_info.value.value == "solfege"


def test_validate_rejects_unknown_accidental():
    with pytest.raises(InvalidOptionError):
        ConversionOptions(accidental_preference="natural").validate()
