from ..exceptions import UnsupportedSourceError
from .base import SourceReader
from .remote import HttpSource
from .local import LocalFileSource

_READERS: list[type[SourceReader]] = [
    HttpSource,
    LocalFileSource,
]


def get_source(location: str) -> SourceReader:
    """Return an instantiated reader for the given location.

    Raises UnsupportedSourceError if no reader matches.
    """
    for cls in _READERS:
        if cls.can_handle(location):
            return cls()
    raise UnsupportedSourceError(location)
