from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every failure that aborts a generation run."""


class SourceError(GeneratorError):
    """The markdown source could not be read or decoded."""


class FetchError(SourceError):
    """The markdown source could not be fetched from its URL."""


class ExtractionError(GeneratorError):
    """The document no longer has the shape the extractor relies on."""


class EmitError(GeneratorError):
    """The generated module could not be formatted or written."""
