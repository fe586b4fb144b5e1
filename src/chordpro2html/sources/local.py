"""Reader for local ChordPro files and standard input."""

import sys
from pathlib import Path

from ..exceptions import SourceReadError
from .base import SourceReader

STDIN = "-"


class LocalFileSource(SourceReader):
    """Read a UTF-8 file from disk, or stdin when the location is ``-``."""

    @classmethod
    def can_handle(cls, location: str) -> bool:
        return "://" not in location

    def read(self, location: str) -> str:
        if location == STDIN:
            return sys.stdin.read()
        try:
            return Path(location).read_text(encoding="utf-8")
        except OSError as exc:
            raise SourceReadError(location, exc.strerror or str(exc)) from exc
        except UnicodeDecodeError as exc:
            raise SourceReadError(location, "not valid UTF-8") from exc
