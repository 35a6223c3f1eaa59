"""Unit tests for the exception hierarchy."""

import pytest

from html2md.exceptions import (
    DependencyError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    Html2MdError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    ValidationError,
)


@pytest.mark.unit
class TestExceptions:
    """Test messages and attributes."""

    def test_hierarchy(self):
        assert issubclass(FileNotFoundError, FileError)
        assert issubclass(FileAccessError, FileError)
        assert issubclass(OutputWriteError, RenderingError)
        for cls in (ValidationError, FileError, ParsingError, RenderingError, DependencyError):
            assert issubclass(cls, Html2MdError)

    def test_default_file_messages(self):
        assert str(FileNotFoundError("a.html")) == "HTML input not found: a.html"
        assert str(FileAccessError("a.html")) == "HTML input is not readable: a.html"
        assert FileAccessError("a.html").file_path == "a.html"

    def test_output_write_error(self):
        error = OutputWriteError("out.md")
        assert error.rendering_stage == "file_write"
        assert error.file_path == "out.md"

    def test_dependency_error_message(self):
        error = DependencyError("html5lib parser", ["html5lib"])
        assert str(error).startswith("The html5lib parser is not available")
        assert "pip install html5lib" in str(error)

    def test_original_error_is_kept(self):
        cause = OSError("disk")
        error = ParsingError("failed", parsing_stage="decoding", original_error=cause)
        assert error.original_error is cause
        assert error.message == "failed"

    def test_dependency_error_without_packages_has_no_install_hint(self):
        error = DependencyError("lxml parser", [])
        assert str(error) == "The lxml parser is not available"
        assert error.missing_packages == []

    def test_output_write_error_message(self):
        assert str(OutputWriteError("out.md")) == "Could not write Markdown to out.md"
