"""Convert ChordPro songs to print-ready HTML.

The pipeline is three pure steps over a shared data model::

    song = parse(text)
    song = transpose(song, 2)
    html = render(song, full_page=True)

or in one call: ``chordpro_to_html(text, ConversionOptions(transpose=2))``.
"""

from .models import (
    AccidentalPreference,
    AstNode,
    Chord,
    Directive,
    EmptyLine,
    LyricLine,
    Notation,
    Section,
    Song,
)
from .parser import parse
from .pipeline import ConversionOptions, chordpro_to_chordpro, chordpro_to_html
from .renderer import HtmlRenderer, render
from .transposer import transpose

__all__ = [
    "AccidentalPreference",
    "AstNode",
    "Chord",
    "ConversionOptions",
    "Directive",
    "EmptyLine",
    "HtmlRenderer",
    "LyricLine",
    "Notation",
    "Section",
    "Song",
    "chordpro_to_chordpro",
    "chordpro_to_html",
    "parse",
    "render",
    "transpose",
]
