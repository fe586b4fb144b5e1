from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class Notation(str, Enum):
    STANDARD = "standard"  # B = B natural
    GERMAN = "german"  # H = B natural, B = B flat


class AccidentalPreference(str, Enum):
    SHARP = "sharp"
    FLAT = "flat"


@dataclass(frozen=True)
class Chord:
    """A chord annotation and the lyric text that follows it.

    ``chord`` is empty for plain text before the first bracket.
    Example: ``[Am]Hello `` → ``Chord(chord="Am", lyric="Hello ")``
    """

    chord: str
    lyric: str


@dataclass(frozen=True)
class LyricLine:
    """One printable line of lyrics with inline chords (at least one pair)."""

    type: ClassVar[str] = "line"

    chords: tuple[Chord, ...]


@dataclass(frozen=True)
class Directive:
    """A ``{name: value}`` directive; name is lowercase, long-form."""

    type: ClassVar[str] = "directive"

    name: str
    value: str = ""


@dataclass(frozen=True)
class EmptyLine:
    type: ClassVar[str] = "empty"


@dataclass(frozen=True)
class Section:
    """A chorus, verse, tab, bridge or grid block. Sections never nest."""

    type: ClassVar[str] = "section"

    name: str
    label: str | None = None  # e.g. "Chorus 2"
    lines: tuple["AstNode", ...] = ()


AstNode = Union[LyricLine, Directive, Section, EmptyLine]


@dataclass(frozen=True)
class Song:
    """A parsed ChordPro document: top-level nodes in source order."""

    nodes: tuple[AstNode, ...] = field(default_factory=tuple)


def node_to_dict(node: AstNode) -> dict:
    """Return a JSON-ready dict for *node*, tagged with its ``type``."""
    if isinstance(node, LyricLine):
        return {
            "type": node.type,
            "chords": [{"chord": c.chord, "lyric": c.lyric} for c in node.chords],
        }
    if isinstance(node, Directive):
        return {"type": node.type, "name": node.name, "value": node.value}
    if isinstance(node, Section):
        data = {"type": node.type, "name": node.name}
        if node.label:
            data["label"] = node.label
        data["lines"] = [node_to_dict(child) for child in node.lines]
        return data
    if isinstance(node, EmptyLine):
        return {"type": node.type}
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def song_to_dict(song: Song) -> dict:
    return {"nodes": [node_to_dict(node) for node in song.nodes]}
