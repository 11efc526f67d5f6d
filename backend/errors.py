"""Scrape failure types raised by the source readers."""


class ScrapeError(Exception):
    """A source reader could not produce its metrics."""

    def __init__(self, source: str, message: str):
        super().__init__(f'{source}: {message}')
        self.source = source
        self.message = message


class SourceUnavailable(ScrapeError):
    """An OS file or call could not be read."""


class MalformedData(ScrapeError):
    """A kernel table did not have the expected shape."""


class InvalidParameter(ScrapeError):
    """A configured value, such as a mount path, does not exist."""
