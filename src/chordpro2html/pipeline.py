"""parse → transpose → render in one call.

Usage::

    from chordpro2html import ConversionOptions, chordpro_to_html
    options = ConversionOptions(transpose=2, full_page=True).validate()
    html = chordpro_to_html(Path("song.cho").read_text(), options)
"""

from dataclasses import dataclass, replace

from .chordpro import ChordProFormatter
from .exceptions import InvalidOptionError
from .models import AccidentalPreference, Notation, Song
from .parser import parse
from .renderer import HtmlRenderer
from .transposer import transpose


@dataclass(frozen=True)
class ConversionOptions:
    """Options threaded through the pipeline, all optional."""

    transpose: int = 0  # semitones, negative = down
    notation: Notation | None = None  # None = detect from the song
    accidental_preference: AccidentalPreference | None = None  # None = detect
    full_page: bool = False
    columns: int = 1

    def validate(self) -> "ConversionOptions":
        """Return a copy with enum values coerced.

        Raises InvalidOptionError for values the pipeline cannot use.
        The pipeline itself assumes validated options.
        """
        if not _is_int(self.transpose):
            raise InvalidOptionError("transpose", self.transpose, "must be an integer")
        if not _is_int(self.columns):
            raise InvalidOptionError("columns", self.columns, "must be an integer")
        if self.columns < 1:
            raise InvalidOptionError("columns", self.columns, "must be at least 1")

        notation = self.notation
        if notation is not None:
            try:
                notation = Notation(notation)
            except ValueError:
                raise InvalidOptionError(
                    "notation", notation, "expected 'standard' or 'german'"
                ) from None

        accidental_preference = self.accidental_preference
        if accidental_preference is not None:
            try:
                accidental_preference = AccidentalPreference(accidental_preference)
            except ValueError:
                raise InvalidOptionError(
                    "accidental_preference", accidental_preference, "expected 'sharp' or 'flat'"
                ) from None

        return replace(
            self,
            notation=notation,
            accidental_preference=accidental_preference,
            full_page=bool(self.full_page),
        )


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_and_transpose(text: str, options: ConversionOptions) -> Song:
    """Parse *text*, transposed when ``options.transpose`` is non-zero."""
    song = parse(text)
    if options.transpose:
        song = transpose(
            song,
            options.transpose,
            notation=options.notation,
            accidental_preference=options.accidental_preference,
        )
    return song


def chordpro_to_html(text: str, options: ConversionOptions | None = None) -> str:
    """Convert ChordPro *text* to HTML."""
    options = options or ConversionOptions()
    song = parse_and_transpose(text, options)
    return HtmlRenderer(full_page=options.full_page, columns=options.columns).render(song)


def chordpro_to_chordpro(text: str, options: ConversionOptions | None = None) -> str:
    """Re-emit ChordPro *text*, transposed when ``options.transpose`` is set.

    Rendering options (``full_page``, ``columns``) do not apply here.
    """
    options = options or ConversionOptions()
    return ChordProFormatter().render(parse_and_transpose(text, options))
