"""HTML renderer for :class:`~chordpro2html.models.Song`.

Node → HTML mapping
-------------------

+------------------------------+--------------------------------------------+
| Node                         | HTML                                       |
+==============================+============================================+
| ``{title}``                  | ``<h1 class="song-title">``                |
| ``{subtitle}``               | ``<h2 class="song-subtitle">``             |
| ``{comment}``                | ``<p class="comment">``                    |
| ``{comment_italic}``         | ``<p class="comment comment-italic"><i>``  |
| ``{comment_box}``            | ``<p class="comment comment-box">``        |
| any other directive          | ``<div class="meta meta-<name>">``         |
+------------------------------+--------------------------------------------+
| lyric line, no chords        | ``<div class="line">text</div>``           |
| lyric line with chords       | ``<div class="line">`` of                  |
|                              | ``<span class="chord-lyric">`` pairs       |
+------------------------------+--------------------------------------------+
| section                      | ``<div class="section section-<name>">``   |
| empty line                   | ``<div class="empty-line"></div>``         |
+------------------------------+--------------------------------------------+

Usage::

    from chordpro2html.renderer import HtmlRenderer
    html = HtmlRenderer(full_page=True, columns=2).render(song)
    Path("song.html").write_text(html)
"""

from .models import AstNode, Chord, Directive, EmptyLine, LyricLine, Section, Song

_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
})

# Directive name → (tag, class) for directives with dedicated markup.
_DIRECTIVE_TAGS = {
    "title": ("h1", "song-title"),
    "subtitle": ("h2", "song-subtitle"),
    "comment": ("p", "comment"),
    "comment_italic": ("p", "comment comment-italic"),
    "comment_box": ("p", "comment comment-box"),
}

DEFAULT_STYLES = """
.song-title { margin: 0 0 0.25em; }
.song-subtitle { margin: 0 0 0.5em; font-weight: normal; }
.comment { font-style: italic; margin: 0.5em 0; }
.comment-box { border: 1px solid #000; padding: 0.25em 0.5em; font-style: normal; }
.section { margin: 1em 0; }
.section-chorus { border-left: 3px solid #000; padding-left: 0.75em; }
.section-tab { font-family: monospace; white-space: pre; font-weight: bold; line-height: 0.5; }
.section-tab .line { display: block; }
.section-grid { font-family: monospace; white-space: pre; }
.section-label { font-weight: bold; margin-bottom: 0.25em; }
.line { display: flex; flex-wrap: wrap; margin: 0; line-height: 1.1; }
.chord-lyric { display: inline-flex; flex-direction: column; margin-right: 0; }
.chord { font-weight: bold; color: #d00; font-size: 0.9em; min-height: 1.2em; white-space: pre; }
.lyric { white-space: pre; }
.empty-line { height: 1em; }
.meta { color: #666; margin: 0.25em 0; }
.song-columns { column-fill: balance; column-gap: 2em; }
.song-columns .section, .song-columns .line { break-inside: avoid; page-break-inside: avoid; }
@media print {
  .chord { color: #000; }
  .song-columns .song-title, .song-columns .song-subtitle { column-span: all; }
}
""".strip()

_PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<style>
{styles}
</style>
</head>
<body>
{song}
</body>
</html>"""


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` for use in HTML text and attributes."""
    return text.translate(_ESCAPES)


class HtmlRenderer:
    """Render a :class:`~chordpro2html.models.Song` to HTML.

    ``full_page`` wraps the body in a standalone document with the print
    stylesheet. ``columns`` greater than 1 lays the song out in balanced
    columns; callers validate the value, anything below 2 is one column.
    """

    def __init__(self, full_page: bool = False, columns: int = 1):
        self.full_page = full_page
        self.columns = columns

    def render(self, song: Song) -> str:
        """Return the HTML for *song*, or ``""`` for a song with no nodes."""
        if not song.nodes:
            return ""

        body = "\n".join(render_node(node) for node in song.nodes)

        if self.full_page:
            return _PAGE_TEMPLATE.format(styles=DEFAULT_STYLES, song=self._wrap(body))
        if self.columns > 1:
            return self._wrap(body)
        return body

    def _wrap(self, body: str) -> str:
        if self.columns > 1:
            opening = f'<div class="song song-columns" style="column-count: {self.columns};">'
        else:
            opening = '<div class="song">'
        return f"{opening}\n{body}\n</div>"


def render(song: Song, full_page: bool = False, columns: int = 1) -> str:
    """Module-level shortcut for ``HtmlRenderer(full_page, columns).render(song)``."""
    return HtmlRenderer(full_page=full_page, columns=columns).render(song)


# ---------------------------------------------------------------------------
# Node renderers
# ---------------------------------------------------------------------------


def render_node(node: AstNode) -> str:
    """Return the HTML fragment for a single node."""
    if isinstance(node, LyricLine):
        return _render_line(node)
    if isinstance(node, Directive):
        return _render_directive(node)
    if isinstance(node, Section):
        return _render_section(node)
    if isinstance(node, EmptyLine):
        return '<div class="empty-line"></div>'
    raise TypeError(f"Unknown node type: {type(node).__name__}")


def _render_pair(pair: Chord) -> str:
    chord = f'<span class="chord">{escape_html(pair.chord)}</span>'
    # &nbsp; keeps the lyric row from collapsing under a chord
    lyric = f'<span class="lyric">{escape_html(pair.lyric) or "&nbsp;"}</span>'
    return f'<span class="chord-lyric">{chord}{lyric}</span>'


def _render_line(node: LyricLine) -> str:
    if not any(pair.chord for pair in node.chords):
        text = "".join(pair.lyric for pair in node.chords)
        return f'<div class="line">{escape_html(text)}</div>'
    pairs = "".join(_render_pair(pair) for pair in node.chords)
    return f'<div class="line">{pairs}</div>'


def _render_directive(node: Directive) -> str:
    value = escape_html(node.value)
    if node.name not in _DIRECTIVE_TAGS:
        return f'<div class="meta meta-{escape_html(node.name)}">{value}</div>'

    tag, css_class = _DIRECTIVE_TAGS[node.name]
    if node.name == "comment_italic":
        value = f"<i>{value}</i>"
    return f'<{tag} class="{css_class}">{value}</{tag}>'


def _render_section(node: Section) -> str:
    label = f'<div class="section-label">{escape_html(node.label)}</div>\n' if node.label else ""
    inner = "\n".join(render_node(child) for child in node.lines)
    return f'<div class="section section-{escape_html(node.name)}">\n{label}{inner}\n</div>'
