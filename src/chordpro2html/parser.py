"""ChordPro text → :class:`~chordpro2html.models.Song`.

Line classification, in order:

  1. ``# ...``          — comment, skipped
  2. blank              — :class:`EmptyLine`
  3. ``{name: value}``  — directive (section start/end or :class:`Directive`)
  4. anything else      — :class:`LyricLine` with inline ``[chord]`` brackets

Short directive names are expanded to their long form (``{t: X}`` is
``{title: X}``) so consumers only ever see canonical names.
"""

import logging
import re

from .models import AstNode, Chord, Directive, EmptyLine, LyricLine, Section, Song

logger = logging.getLogger(__name__)

# Short directive names → canonical long forms.
DIRECTIVE_ALIASES = {
    "t": "title",
    "st": "subtitle",
    "c": "comment",
    "ci": "comment_italic",
    "cb": "comment_box",
    "soc": "start_of_chorus",
    "eoc": "end_of_chorus",
    "sov": "start_of_verse",
    "eov": "end_of_verse",
    "sot": "start_of_tab",
    "eot": "end_of_tab",
    "sob": "start_of_bridge",
    "eob": "end_of_bridge",
    "sog": "start_of_grid",
    "eog": "end_of_grid",
}

SECTION_NAMES = ("chorus", "verse", "tab", "bridge", "grid")

SECTION_START = {f"start_of_{name}": name for name in SECTION_NAMES}
SECTION_END = {f"end_of_{name}": name for name in SECTION_NAMES}

# Whole line is {content} with no "}" inside, surrounding whitespace allowed.
DIRECTIVE_LINE_RE = re.compile(r"^\s*\{([^}]+)\}\s*$")

# [chord]: content is everything up to the next "]"
_CHORD_RE = re.compile(r"\[([^\]]*)\]")

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_directive(content: str) -> tuple[str, str]:
    """Split directive *content* (text between the braces) into (name, value).

    Only the first ``:`` separates name from value, so
    ``comment: Note: softly`` → ``("comment", "Note: softly")``.
    """
    name, _, value = content.partition(":")
    name = name.strip().lower()
    name = DIRECTIVE_ALIASES.get(name, name)
    return name, value.strip()


def parse_lyric_line(line: str) -> LyricLine:
    """Parse a line like ``Well [Am]hello [G]world`` into chord/lyric pairs."""
    pairs: list[list[str]] = []  # [chord, lyric], merged into Chord at the end
    last = 0

    for match in _CHORD_RE.finditer(line):
        before = line[last:match.start()]
        if before:
            if pairs:
                pairs[-1][1] += before
            else:
                pairs.append(["", before])  # leading text, no chord
        pairs.append([match.group(1), ""])
        last = match.end()

    trailing = line[last:]
    if pairs:
        pairs[-1][1] += trailing
    else:
        pairs.append(["", trailing])

    return LyricLine(chords=tuple(Chord(chord=chord, lyric=lyric) for chord, lyric in pairs))


class _SectionBuilder:
    """Collects child nodes for the section currently open during a parse."""

    def __init__(self, name: str, label: str | None):
        self.name = name
        self.label = label
        self.lines: list[AstNode] = []

    def build(self) -> Section:
        return Section(name=self.name, label=self.label, lines=tuple(self.lines))


def parse(text: str) -> Song:
    """Parse ChordPro *text* into a :class:`Song`.

    Never raises on textual input: unknown directives become generic
    :class:`Directive` nodes and an unterminated section is closed at the
    end of input.
    """
    text = text.rstrip()
    if not text:
        return Song()

    nodes: list[AstNode] = []
    current: _SectionBuilder | None = None

    def emit(node: AstNode) -> None:
        if current is not None:
            current.lines.append(node)
        else:
            nodes.append(node)

    for raw_line in _LINE_SPLIT_RE.split(text):
        line = raw_line.rstrip()

        if line.lstrip().startswith("#"):
            continue

        if not line.strip():
            emit(EmptyLine())
            continue

        directive = DIRECTIVE_LINE_RE.match(line)
        if directive:
            name, value = parse_directive(directive.group(1))

            if name in SECTION_START:
                if current is not None:
                    logger.debug("Closing %s section: new %s section started", current.name, name)
                    nodes.append(current.build())
                current = _SectionBuilder(SECTION_START[name], value or None)
                continue

            if name in SECTION_END:
                if current is not None:
                    nodes.append(current.build())
                    current = None
                else:
                    logger.debug("Ignoring {%s} with no open section", name)
                continue

            emit(Directive(name=name, value=value))
            continue

        emit(parse_lyric_line(line))

    if current is not None:
        logger.debug("Closing unterminated %s section at end of input", current.name)
        nodes.append(current.build())

    return Song(nodes=tuple(nodes))
