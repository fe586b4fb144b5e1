"""Pitch-shift every chord in a :class:`~chordpro2html.models.Song`.

Two note-naming conventions are supported:

+------------+-------------------------------+-------------------------------+
| Notation   | Natural note names            | Spelling of B flat / B        |
+============+===============================+===============================+
| standard   | C D E F G A B                 | ``Bb`` / ``B``                |
+------------+-------------------------------+-------------------------------+
| german     | C D E F G A B H               | ``B`` / ``H``                 |
+------------+-------------------------------+-------------------------------+

When the caller does not choose, the notation and the sharp/flat spelling are
detected from the song first (a pure scan), then applied in a second pass that
rebuilds the song. The input song is never modified.
"""

import logging
import re
from collections.abc import Iterator

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

logger = logging.getLogger(__name__)

NOTE_MAPS: dict[Notation, dict[str, int]] = {
    Notation.STANDARD: {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 11},
    Notation.GERMAN: {"C": 0, "D": 2, "E": 4, "F": 5, "G": 7, "A": 9, "B": 10, "H": 11},
}

# Root name for each semitone 0..11.
NOTE_TABLES: dict[tuple[Notation, AccidentalPreference], list[str]] = {
    (Notation.STANDARD, AccidentalPreference.SHARP):
        ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"],
    (Notation.STANDARD, AccidentalPreference.FLAT):
        ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"],
    (Notation.GERMAN, AccidentalPreference.SHARP):
        ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "H"],
    (Notation.GERMAN, AccidentalPreference.FLAT):
        ["C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "B", "H"],
}

ACCIDENTAL_OFFSETS = {"": 0, "#": 1, "##": 2, "b": -1, "bb": -2}

# Root letter, optional accidental, then the quality suffix carried verbatim.
# Examples: "F#m7" → ("F", "#", "m7"), "Bbmaj7" → ("B", "b", "maj7")
_ROOT_RE = re.compile(r"^([A-Ha-h])(#{1,2}|b{1,2})?(.*)$", re.DOTALL)


def transpose_chord(
    chord: str,
    semitones: int,
    notation: Notation | str = Notation.STANDARD,
    accidental_preference: AccidentalPreference | str = AccidentalPreference.SHARP,
) -> str:
    """Return *chord* shifted by *semitones*.

    Slash chords have both halves transposed (``Am/E`` +2 → ``Bm/F#``).
    Anything that does not start with a note name valid in *notation*
    (``N.C.``, ``H7`` in standard notation) is returned unchanged.
    """
    notation = Notation(notation)
    table = NOTE_TABLES[(notation, AccidentalPreference(accidental_preference))]
    return _transpose_token(chord, semitones, NOTE_MAPS[notation], table)


def _transpose_token(chord: str, semitones: int, note_map: dict[str, int], table: list[str]) -> str:
    main, slash, bass = chord.partition("/")
    if slash:
        return (
            _transpose_token(main, semitones, note_map, table)
            + "/"
            + _transpose_token(bass, semitones, note_map, table)
        )

    match = _ROOT_RE.match(chord)
    if not match:
        return chord

    root, accidental, quality = match.groups()
    root = root.upper()
    if root not in note_map:
        return chord

    semitone = (note_map[root] + ACCIDENTAL_OFFSETS[accidental or ""] + semitones) % 12
    return table[semitone] + quality


# ---------------------------------------------------------------------------
# Detection
# ---------------------------------------------------------------------------


def iter_chords(song: Song) -> Iterator[str]:
    """Yield every non-empty chord token in *song*, including inside sections."""
    for node in song.nodes:
        yield from _iter_node_chords(node)


def _iter_node_chords(node: AstNode) -> Iterator[str]:
    if isinstance(node, LyricLine):
        for pair in node.chords:
            if pair.chord:
                yield pair.chord
    elif isinstance(node, Section):
        for child in node.lines:
            yield from _iter_node_chords(child)


def detect_notation(song: Song) -> Notation:
    """German if any chord root is ``H``, standard otherwise."""
    for chord in iter_chords(song):
        match = _ROOT_RE.match(chord)
        if match and match.group(1).upper() == "H":
            return Notation.GERMAN
    return Notation.STANDARD


def detect_accidental_preference(song: Song, notation: Notation | str) -> AccidentalPreference:
    """Pick the accidental used most often by chord roots in *song*.

    Ties (including no accidentals at all) fall back to flats for German
    notation, where ``B`` is already a flat note name, and sharps otherwise.
    """
    sharps = flats = 0
    for chord in iter_chords(song):
        match = _ROOT_RE.match(chord)
        if match and match.group(2):
            if "#" in match.group(2):
                sharps += 1
            else:
                flats += 1

    if sharps == flats:
        if Notation(notation) is Notation.GERMAN:
            return AccidentalPreference.FLAT
        return AccidentalPreference.SHARP
    return AccidentalPreference.FLAT if flats > sharps else AccidentalPreference.SHARP


# ---------------------------------------------------------------------------
# Reconstruction
# ---------------------------------------------------------------------------


def _transpose_node(node: AstNode, semitones: int, note_map: dict[str, int], table: list[str]) -> AstNode:
    if isinstance(node, LyricLine):
        return LyricLine(chords=tuple(
            Chord(
                chord=_transpose_token(pair.chord, semitones, note_map, table) if pair.chord else "",
                lyric=pair.lyric,
            )
            for pair in node.chords
        ))
    if isinstance(node, Directive):
        if node.name == "key" and node.value:
            return Directive(name=node.name, value=_transpose_token(node.value, semitones, note_map, table))
        return Directive(name=node.name, value=node.value)
    if isinstance(node, Section):
        return Section(
            name=node.name,
            label=node.label,
            lines=tuple(_transpose_node(child, semitones, note_map, table) for child in node.lines),
        )
    if isinstance(node, EmptyLine):
        return EmptyLine()
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def transpose(
    song: Song,
    semitones: int,
    notation: Notation | str | None = None,
    accidental_preference: AccidentalPreference | str | None = None,
) -> Song:
    """Return a new song with every chord shifted by *semitones*.

    ``{key: ...}`` directive values are transposed as chords; lyrics, labels
    and other directives are copied unchanged. With ``semitones == 0`` the
    input *song* itself is returned.
    """
    if semitones == 0:
        return song

    notation = Notation(notation) if notation else detect_notation(song)
    if accidental_preference:
        accidental_preference = AccidentalPreference(accidental_preference)
    else:
        accidental_preference = detect_accidental_preference(song, notation)
    logger.debug(
        "Transposing by %d semitones (notation=%s, accidentals=%s)",
        semitones, notation.value, accidental_preference.value,
    )

    note_map = NOTE_MAPS[notation]
    table = NOTE_TABLES[(notation, accidental_preference)]
    return Song(nodes=tuple(_transpose_node(node, semitones, note_map, table) for node in song.nodes))
