#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2bbcode library.

This module defines specialized exception classes for the error conditions
that can occur while turning Markdown into BBCode.

Exception Hierarchy
-------------------
- Md2BBCodeError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a converter)
    - UnknownDialectError (dialect not in the tag table)

  - FileError (file access and I/O)
    - InputReadError (input cannot be read)
    - OutputWriteError (output cannot be written)

  - ParsingError (Markdown parsing failures)

  - RenderingError (BBCode generation failures)
    - MalformedEventStreamError (unbalanced Start/End events)

  - MissingTagMappingError (incomplete dialect tag table)

"""

from __future__ import annotations

from typing import Any, Sequence


class Md2BBCodeError(Exception):
    """Base exception class for all md2bbcode-specific errors.

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


class ValidationError(Md2BBCodeError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when the wrong options class is handed to a converter.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class UnknownDialectError(ValidationError):
    """Exception raised for a dialect name the tag table does not know."""

    def __init__(self, dialect: str, supported: Sequence[str]):
        """Initialize with the rejected dialect and the supported ones."""
        message = f"Unknown BBCode dialect {dialect!r}; expected one of: {', '.join(supported)}"
        super().__init__(message, parameter_name="dialect", parameter_value=dialect)
        self.dialect = dialect


class FileError(Md2BBCodeError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the file that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with the path involved."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class InputReadError(FileError):
    """Exception raised when the Markdown input cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the input read error."""
        if message is None:
            message = f"Could not read input: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class OutputWriteError(FileError):
    """Exception raised when the BBCode output cannot be written."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Could not write output: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Md2BBCodeError):
    """Exception raised when the Markdown source cannot be turned into events.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage of parsing where the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2BBCodeError):
    """Exception raised when BBCode output cannot be produced.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage of rendering where the error occurred

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class MalformedEventStreamError(RenderingError):
    """Exception raised for an event stream whose Start/End events do not balance.

    Covers an End whose kind differs from the innermost open context, an End
    with nothing open, a Start carrying a kind of the wrong category, and a
    stream that finishes with contexts still open. The conversion produces no
    output when this is raised.

    Parameters
    ----------
    message : str
        Description of the imbalance
    event : object, optional
        The event at which the imbalance was detected (None at end of stream)
    open_contexts : sequence of str, optional
        Names of the kinds still open when the error was detected

    """

    def __init__(self, message: str, event: Any = None, open_contexts: Sequence[str] = ()):
        """Initialize with the offending event and a snapshot of the stack."""
        super().__init__(message, rendering_stage="event-stream")
        self.event = event
        self.open_contexts = list(open_contexts)


class MissingTagMappingError(Md2BBCodeError):
    """Exception raised when the dialect tag table lacks an entry.

    This is an internal invariant violation. The table is checked when it is
    built, so this surfaces at import time rather than during a conversion.
    """

    def __init__(self, kind_name: str, dialect: str):
        """Initialize with the unmapped kind and dialect."""
        super().__init__(f"No {dialect} tag mapping for {kind_name}")
        self.kind_name = kind_name
        self.dialect = dialect


__all__ = [
    "Md2BBCodeError",
    "ValidationError",
    "InvalidOptionsError",
    "UnknownDialectError",
    "FileError",
    "InputReadError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "MalformedEventStreamError",
    "MissingTagMappingError",
]
