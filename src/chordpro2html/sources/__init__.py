from .base import SourceReader
from .remote import HttpSource
from .local import LocalFileSource
from .registry import get_source

__all__ = ["HttpSource", "LocalFileSource", "SourceReader", "get_source"]
