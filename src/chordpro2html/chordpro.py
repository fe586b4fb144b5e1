"""ChordPro writer.

Renders a :class:`~chordpro2html.models.Song` back to ChordPro (``.cho``)
text, so a transposed song can be saved in its source format.

Node → ChordPro mapping
-----------------------

+-------------------------------+------------------------------------------+
| Node                          | Output                                   |
+===============================+==========================================+
| ``Directive("key", "G")``     | ``{key: G}``                             |
| ``Directive("new_page")``     | ``{new_page}``                           |
+-------------------------------+------------------------------------------+
| ``LyricLine``                 | ``Well [Am]hello [G]world``              |
+-------------------------------+------------------------------------------+
| ``Section("chorus", "Ch 2")`` | ``{start_of_chorus: Ch 2}`` ...          |
|                               | ``{end_of_chorus}``                      |
+-------------------------------+------------------------------------------+
| ``EmptyLine``                 | blank line                               |
+-------------------------------+------------------------------------------+

Directives are always written in long form; parsing the output yields the
same song.
"""

from .models import AstNode, Directive, EmptyLine, LyricLine, Section, Song
from .parser import DIRECTIVE_LINE_RE


class ChordProFormatter:
    """Render a :class:`~chordpro2html.models.Song` to ChordPro text."""

    def render(self, song: Song) -> str:
        """Return ChordPro text for *song*.

        Non-empty output ends with a single newline and uses Unix line
        endings (``\\n``) throughout. An empty song renders as ``""``.
        """
        parts: list[str] = []
        for node in song.nodes:
            parts.extend(_render_node(node))
        if not parts:
            return ""
        return "\n".join(parts) + "\n"


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _directive(name: str, value: str = "") -> str:
    return f"{{{name}: {value}}}" if value else f"{{{name}}}"


def _render_line(node: LyricLine) -> str:
    rest = "".join(f"[{pair.chord}]{pair.lyric}" for pair in node.chords[1:])
    first = node.chords[0]
    if first.chord:
        return f"[{first.chord}]{first.lyric}{rest}"

    # Leading text before the first chord is written bare unless it would
    # read back as something else: a dropped pair, a blank line, a comment
    # or a directive.
    bare = first.lyric + rest
    if (
        not first.lyric
        or not bare.strip()
        or bare.lstrip().startswith("#")
        or DIRECTIVE_LINE_RE.match(bare)
    ):
        return f"[]{bare}"
    return bare


def _render_node(node: AstNode) -> list[str]:
    """Return the output lines for one node."""
    if isinstance(node, LyricLine):
        return [_render_line(node)]
    if isinstance(node, Directive):
        return [_directive(node.name, node.value)]
    if isinstance(node, EmptyLine):
        return [""]
    if isinstance(node, Section):
        lines = [_directive(f"start_of_{node.name}", node.label or "")]
        for child in node.lines:
            lines.extend(_render_node(child))
        lines.append(_directive(f"end_of_{node.name}"))
        return lines
    raise TypeError(f"Unknown node type: {type(node).__name__}")
