"""Utilities for uniform input handling.

``html_to_markdown`` accepts HTML as a string, a path, or a file-like object.
These helpers decide which one was given and return the document text.

Functions
---------
- is_path_like: Check if input is path-like (string or Path object)
- is_file_like: Check if input is a file-like object
- read_html_input: Resolve any supported input to HTML text
"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import IO, Any, Union

from .exceptions import FileAccessError, FileNotFoundError, ParsingError, ValidationError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
HtmlInput = Union[str, Path, IO[str], IO[bytes], bytes]


def is_path_like(obj: Any) -> bool:
    """Check if an object is path-like (string or pathlib.Path).

    Examples
    --------
    >>> is_path_like("document.html")
    True
    >>> is_path_like(Path("document.html"))
    True
    """
    return isinstance(obj, (str, Path))


def is_file_like(obj: Any) -> bool:
    """Check if an object is file-like (has read method)."""
    return hasattr(obj, "read") and callable(obj.read)


def _looks_like_file_path(text: str) -> bool:
    # Markup is never a path; short single-line strings that exist on disk are
    if "<" in text or "\n" in text:
        return False
    try:
        return os.path.isfile(text)
    except (OSError, ValueError):
        return False


def _decode(data: bytes, source: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParsingError(
            f"Input from {source} is not valid UTF-8: {e}", parsing_stage="decoding", original_error=e
        ) from e


def read_html_file(path: PathLike) -> str:
    """Read a whole HTML file as UTF-8 text.

    Raises
    ------
    FileNotFoundError
        If the path does not exist
    FileAccessError
        If the path is not a readable file
    ParsingError
        If the content is not valid UTF-8

    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(str(file_path))
    if not file_path.is_file():
        raise FileAccessError(str(file_path), message=f"Not a regular file: {file_path}")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e

    logger.debug("Read %d bytes from %s", len(data), file_path)
    return _decode(data, str(file_path))


def read_html_input(input_data: HtmlInput) -> str:
    """Return HTML text for any supported input.

    Parameters
    ----------
    input_data : str, pathlib.Path, bytes, or file-like object
        - ``str``: path to an existing file, otherwise HTML content
        - ``pathlib.Path``: HTML file to read
        - ``bytes``: UTF-8 encoded HTML
        - file-like: text or binary stream; binary is decoded as UTF-8

    Returns
    -------
    str
        The HTML document text

    Raises
    ------
    ValidationError
        If the input type is not supported

    """
    if isinstance(input_data, Path):
        return read_html_file(input_data)

    if isinstance(input_data, str):
        if _looks_like_file_path(input_data):
            return read_html_file(input_data)
        return input_data

    if isinstance(input_data, (bytes, bytearray)):
        return _decode(bytes(input_data), "bytes input")

    if is_file_like(input_data):
        try:
            content = input_data.read()
        except OSError as e:
            name = getattr(input_data, "name", "<stream>")
            raise FileAccessError(str(name), message=f"Failed to read from stream: {e}", original_error=e) from e
        if isinstance(content, bytes):
            return _decode(content, "stream")
        return content

    raise ValidationError(
        f"Unsupported input type for HTML conversion: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=input_data,
    )
