#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Input and output helpers for Markdown sources and BBCode results."""

from __future__ import annotations

import sys
from io import TextIOBase
from pathlib import Path
from typing import IO, Union

from md2bbcode.exceptions import InputReadError, OutputWriteError

TextDestination = Union[str, Path, IO[bytes], IO[str]]


def read_text_input(source: Union[str, Path, IO[str], IO[bytes], None], encoding: str = "utf-8") -> str:
    """Read Markdown text from a path, a stream, or standard input.

    Parameters
    ----------
    source : str, Path, IO[str], IO[bytes] or None
        Where to read from. ``None`` and ``"-"`` mean standard input.
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Returns
    -------
    str
        The text read

    Raises
    ------
    InputReadError
        If the source cannot be opened or decoded

    """
    if source is None or source == "-":
        source = sys.stdin

    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return path.read_text(encoding=encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(path), original_error=e) from e

    name = getattr(source, "name", "<stream>")
    try:
        data = source.read()
    except (OSError, UnicodeDecodeError) as e:
        raise InputReadError(str(name), original_error=e) from e
    if isinstance(data, bytes):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as e:
            raise InputReadError(str(name), original_error=e) from e
    return data


def write_text(text: str, output: TextDestination, encoding: str = "utf-8") -> None:
    """Write text to a path or a text or binary stream.

    Parameters
    ----------
    text : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. ``"-"`` means standard output.
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    TypeError
        If the destination is not a path or a writable stream

    Examples
    --------
        >>> from io import StringIO, BytesIO
        >>> buffer = StringIO()
        >>> write_text("[b]hi[/b]", buffer)
        >>> buffer.getvalue()
        '[b]hi[/b]'
        >>> raw = BytesIO()
        >>> write_text("[b]hi[/b]", raw)
        >>> raw.getvalue()
        b'[b]hi[/b]'

    """
    if output == "-":
        output = sys.stdout

    if isinstance(output, (str, Path)):
        path = Path(output)
        try:
            path.write_text(text, encoding=encoding)
        except OSError as e:
            raise OutputWriteError(str(path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    name = str(getattr(output, "name", "<stream>"))
    try:
        if isinstance(output, TextIOBase) or "b" not in getattr(output, "mode", ""):
            try:
                output.write(text)  # type: ignore[arg-type]
            except TypeError:
                output.write(text.encode(encoding))  # type: ignore[arg-type]
        else:
            output.write(text.encode(encoding))  # type: ignore[arg-type]
    except OSError as e:
        raise OutputWriteError(name, original_error=e) from e


__all__ = ["read_text_input", "write_text", "TextDestination"]
