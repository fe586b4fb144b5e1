from abc import ABC, abstractmethod


class SourceReader(ABC):
    """Abstract base class for the places ChordPro text can be read from."""

    @classmethod
    @abstractmethod
    def can_handle(cls, location: str) -> bool:
        """Return True if this reader can handle the given location."""

    @abstractmethod
    def read(self, location: str) -> str:
        """Return the ChordPro text at location.

        Raises a Chordpro2HtmlError subclass when the text cannot be read.
        """
