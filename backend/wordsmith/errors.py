"""Error taxonomy shared by the parsers, the importers and the tool sessions."""

from __future__ import annotations


class WordsmithError(Exception):
    """Base class for all errors raised by the package."""


class ValidationError(WordsmithError):
    """Too few input terms; raised before any request or parse attempt."""


class UpstreamError(WordsmithError):
    """The completion service failed. The message is passed through verbatim."""


class EmptyResponseError(UpstreamError):
    """The completion service answered with empty text."""


class FormatError(WordsmithError):
    """An export file failed the header check or contained no usable entries."""


class ExtractionWarning(WordsmithError):
    """A non-empty response produced zero records.

    Never raised by the package itself. Sessions attach it to their outcome
    together with the raw response so the text can still be inspected.
    """

    def __init__(self, message: str, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text
