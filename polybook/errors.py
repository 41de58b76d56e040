"""Exceptions raised while loading, parsing and building a book."""

from __future__ import annotations

from pathlib import Path


class PolybookError(Exception):
    """Base class for every error polybook raises on purpose."""

    pass


class ConfigError(PolybookError):
    """Error loading or validating book.yaml."""

    pass


class ParseError(PolybookError):
    """A single source file could not be turned into a chapter.

    Recoverable: the scanner reports it and moves on to the next file.
    """

    def __init__(self, message: str, source: Path | str | None = None):
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


class EmptyFileError(ParseError):
    """A plain-text source file has no lines to take a title from."""

    pass


class ScanError(PolybookError):
    """A language directory could not be scanned."""

    pass


class DirectoryReadError(ScanError):
    pass


class FileReadError(ScanError):
    pass


class RenderError(PolybookError):
    """One or more pages failed to render or be written."""

    def __init__(self, message: str, failed: list[str] | None = None):
        self.failed = list(failed or [])
        super().__init__(message)


class BuildError(PolybookError):
    """Fatal build failure; nothing useful can be produced."""

    pass


class OutputDirError(BuildError):
    pass


class AssetWriteError(BuildError):
    pass
