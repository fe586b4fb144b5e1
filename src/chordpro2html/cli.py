import json
import logging
import sys
from pathlib import Path

import click

from .exceptions import FetchError, InvalidOptionError, SourceReadError, UnsupportedSourceError
from .models import song_to_dict
from .pipeline import ConversionOptions, chordpro_to_chordpro, chordpro_to_html, parse_and_transpose
from .sources import get_source

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.argument("source", default="-")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: print to stdout).")
@click.option("-t", "--transpose", "semitones", default=0, show_default=True,
              help="Transpose chords by N semitones (negative = down).")
@click.option("--notation", type=click.Choice(["standard", "german"]), default=None,
              help="Note naming for transposition (default: detect from chords).")
@click.option("--accidentals", type=click.Choice(["sharp", "flat"]), default=None,
              help="Spell transposed chords with sharps or flats (default: detect).")
@click.option("--full-page", is_flag=True, default=False,
              help="Emit a complete HTML document with print styles.")
@click.option("--columns", default=1, show_default=True,
              help="Lay the song out in N balanced columns.")
@click.option("--format", "output_format", type=click.Choice(["html", "chordpro", "json"]),
              default="html", show_default=True,
              help="html, transposed ChordPro text, or the parsed (and transposed) song as JSON.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
def main(
    source: str,
    output_path: str | None,
    semitones: int,
    notation: str | None,
    accidentals: str | None,
    full_page: bool,
    columns: int,
    output_format: str,
    verbose: bool,
) -> None:
    """Convert a ChordPro song to HTML.

    \b
    SOURCE may be:
      - a path to a .cho / .chordpro file
      - an http:// or https:// URL
      - "-" to read standard input (default)
    """
    _configure_logging(verbose)

    # --- Validate options ---
    try:
        options = ConversionOptions(
            transpose=semitones,
            notation=notation,
            accidental_preference=accidentals,
            full_page=full_page,
            columns=columns,
        ).validate()
    except InvalidOptionError as exc:
        _fail(str(exc))

    # --- Read input ---
    try:
        text = get_source(source).read(source)
    except UnsupportedSourceError as exc:
        _fail(f"{exc}. Use a file path, an http(s) URL or '-' for stdin")
    except FetchError as exc:
        msg = f"Could not fetch {exc.url}"
        if exc.status_code:
            msg += f" (HTTP {exc.status_code})"
        _fail(msg)
    except SourceReadError as exc:
        _fail(str(exc))

    # --- Convert ---
    if output_format == "json":
        song = parse_and_transpose(text, options)
        result = json.dumps(song_to_dict(song), indent=2, ensure_ascii=False) + "\n"
    elif output_format == "chordpro":
        result = chordpro_to_chordpro(text, options)
    else:
        result = chordpro_to_html(text, options)
        if result:
            result += "\n"
    logger.debug("Converted %s to %d characters of %s", source, len(result), output_format)

    # --- Output ---
    if output_path is None:
        click.echo(result, nl=False)
        return

    dest = Path(output_path)
    dest.write_text(result, encoding="utf-8")
    click.echo(f"Written to {dest}")
