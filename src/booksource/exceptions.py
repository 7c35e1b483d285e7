#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/booksource/exceptions.py
"""Custom exceptions for booksource.

Every failure the conversion pipeline can report is raised as one of the
classes below. Core modules never terminate the process; the command-line
entry point maps each kind to a diagnostic and an exit status.

Exception Hierarchy
-------------------
- BookSourceError (base exception)

  - UsageError (bad invocation, exit status 1)
    - MissingSourceError (no source argument)
    - UnsupportedExtensionError (source is not .bks/.kfg/.json)
    - UnsupportedFormatError (unknown output format)
    - EmptyPackageError (descriptor lists no sources)
    - InvalidPackageError (descriptor content is unusable)

  - SourceIOError (file system failures, exit status 1)
    - SourceReadError (a source document could not be read)
    - StylesheetReadError (a CSS file could not be read)
    - OutputWriteError (the destination could not be written)

  - ContentError (malformed content, exit status 2)
    - ConfigSyntaxError (descriptor or metadata text does not parse)
    - ParsingError (markup could not be turned into a document)

"""

from __future__ import annotations


class BookSourceError(Exception):
    """Base exception class for all booksource-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class UsageError(BookSourceError):
    """Exception raised when the invocation itself is invalid.

    Parameters
    ----------
    message : str
        Description of the problem
    show_help : bool, default False
        Whether the command-line help should be displayed after the message
    original_error : Exception, optional
        Underlying exception, if any

    """

    def __init__(self, message: str, show_help: bool = False, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.show_help = show_help


class MissingSourceError(UsageError):
    """Raised when no source file was given on the command line."""

    def __init__(self) -> None:
        super().__init__("No source file specified.", show_help=True)


class UnsupportedExtensionError(UsageError):
    """Raised when the source file extension is not one booksource can load.

    Parameters
    ----------
    extension : str
        The extension as found on the source path, without the leading dot
        (possibly empty)

    """

    def __init__(self, extension: str):
        super().__init__(f"Cannot load file with extension .{extension}", show_help=True)
        self.extension = extension


class UnsupportedFormatError(UsageError):
    """Raised when the requested output format has no renderer."""

    def __init__(self, format_name: str):
        super().__init__(f"Unsupported format '{format_name}'.", show_help=True)
        self.format_name = format_name


class EmptyPackageError(UsageError):
    """Raised when a package lists no sources."""

    def __init__(self) -> None:
        super().__init__("No source specified in the package.")


class InvalidPackageError(UsageError):
    """Raised when a package descriptor holds values of the wrong kind."""


class SourceIOError(BookSourceError):
    """Base class for file system failures.

    Parameters
    ----------
    message : str
        Description of the failure
    file_path : str, optional
        The path as the user supplied it
    original_error : Exception, optional
        The underlying ``OSError``

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.file_path = file_path

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} {self.original_error}"
        return self.message


class SourceReadError(SourceIOError):
    """Raised when a source document cannot be read.

    The reported path is the entry as it appears in the package (or on the
    command line), before it is joined with the base directory.
    """

    def __init__(self, file_path: str, original_error: Exception | None = None):
        super().__init__(f"Error reading source file '{file_path}':", file_path, original_error)


class StylesheetReadError(SourceIOError):
    """Raised when a CSS file named by the package cannot be read."""

    def __init__(self, file_path: str, section: str, original_error: Exception | None = None):
        super().__init__(f"Error reading {section} CSS file '{file_path}':", file_path, original_error)
        self.section = section


class OutputWriteError(SourceIOError):
    """Raised when the rendered output cannot be written."""

    def __init__(self, file_path: str, original_error: Exception | None = None):
        super().__init__(f"Error writing destination file '{file_path}':", file_path, original_error)


class ContentError(BookSourceError):
    """Base class for malformed document or descriptor content."""


class ConfigSyntaxError(ContentError):
    """Raised when KFG or JSON text cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the syntax problem
    file_path : str, optional
        File the text came from, when known
    original_error : Exception, optional
        The parser's own exception

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.file_path = file_path


class ParsingError(ContentError):
    """Raised when Book Source markup cannot be parsed into a document."""

    def __init__(self, message: str, line: int | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.line = line
