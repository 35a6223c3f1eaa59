#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Errors raised while turning an HTML source into Markdown.

Rendering a parsed tree cannot fail; every tag has a rule. What can fail is
everything around it: finding and decoding the HTML, handing it to a
BeautifulSoup tree builder, and writing the Markdown out.

Exception Hierarchy
-------------------
- Html2MdError

  - ValidationError: an input object or option value html2md cannot use

  - FileError: the HTML source on disk
    - FileNotFoundError: the path does not exist
    - FileAccessError: the path exists but is not a readable regular file

  - ParsingError: bytes that are not UTF-8, or a tree builder that gave up

  - RenderingError: Markdown that could not be delivered
    - OutputWriteError: the ``--out`` file could not be written

  - DependencyError: the selected tree builder is not installed

"""

from typing import Any


class Html2MdError(Exception):
    """Root of every error html2md raises on purpose.

    Parameters
    ----------
    message : str
        Text shown to the user, e.g. after ``Error:`` on the command line
    original_error : Exception, optional
        Lower-level exception this one was raised from

    Attributes
    ----------
    message : str
        Same text as ``str(error)``
    original_error : Exception or None
        The lower-level exception, if there was one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Html2MdError):
    """An argument html2md cannot work with.

    Raised for input objects that are neither text, bytes, a path nor a
    readable stream.

    Parameters
    ----------
    message : str
        What was wrong with the argument
    parameter_name : str, optional
        Name of the offending argument, e.g. ``"input_data"``
    parameter_value : any, optional
        The rejected value
    original_error : Exception, optional
        Lower-level exception, if any

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileError(Html2MdError):
    """A problem with the HTML source file.

    Parameters
    ----------
    message : str
        What went wrong
    file_path : str, optional
        The HTML path involved
    original_error : Exception, optional
        Lower-level exception, usually an ``OSError``

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """The HTML path does not exist."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"HTML input not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """The HTML path exists but its bytes could not be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"HTML input is not readable: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Html2MdError):
    """The input could not be turned into a document tree.

    Parameters
    ----------
    message : str
        What went wrong
    parsing_stage : str, optional
        ``"decoding"`` for non-UTF-8 bytes, ``"html_parsing"`` when the tree
        builder raised
    original_error : Exception, optional
        The decoder or tree builder exception

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Html2MdError):
    """Finished Markdown could not be delivered to its destination."""

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """The Markdown file named by ``--out`` could not be written."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        if message is None:
            message = f"Could not write Markdown to {file_path}"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Html2MdError):
    """The requested BeautifulSoup tree builder is not installed.

    Parameters
    ----------
    component : str
        What needs the packages, e.g. ``"lxml parser"``
    missing_packages : list[str]
        Distribution names to install
    message : str, optional
        Replaces the generated message, which ends with a ``pip install`` line
    original_error : Exception, optional
        Usually the ``bs4.FeatureNotFound`` raised by BeautifulSoup

    """

    def __init__(
        self,
        component: str,
        missing_packages: list[str],
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = f"The {component} is not available"
            if missing_packages:
                message += f"; install it with: pip install {' '.join(missing_packages)}"
        super().__init__(message, original_error=original_error)
        self.component = component
        self.missing_packages = missing_packages
