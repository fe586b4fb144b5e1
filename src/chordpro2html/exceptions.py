class Chordpro2HtmlError(Exception):
    """Base exception for chordpro2html."""


class InvalidOptionError(Chordpro2HtmlError):
    """Raised when a conversion option has an unusable value."""

    def __init__(self, option: str, value: object, reason: str):
        self.option = option
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value for {option}: {value!r} ({reason})")


class FetchError(Chordpro2HtmlError):
    """Raised when an HTTP request fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class SourceReadError(Chordpro2HtmlError):
    """Raised when a local file cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class UnsupportedSourceError(Chordpro2HtmlError):
    """Raised when no source reader matches the given location."""

    def __init__(self, location: str):
        self.location = location
        super().__init__(f"No reader found for source: {location}")
