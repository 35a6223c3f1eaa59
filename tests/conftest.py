"""Pytest configuration and shared fixtures for the html2md test suite."""

from pathlib import Path
from typing import Callable

import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture
def html_file(tmp_path: Path) -> Callable[..., Path]:
    """Provide a factory that writes HTML to a temporary file.

    Returns
    -------
    Callable[..., Path]
        ``make(content, name="page.html")`` returning the written path.

    """

    def make(content: str, name: str = "page.html") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return make


@pytest.fixture
def sample_html() -> str:
    """Provide a small pretty-printed HTML document.

    Returns
    -------
    str
        Document with head content, scripts and common body elements.

    """
    return """<!DOCTYPE html>
<html>
<head>
  <title>Ignored Title</title>
  <style>body { color: red; }</style>
</head>
<body>
  <h1>Guide</h1>
  <p>Install it first.</p>
  <ul>
    <li>One</li>
    <li>Two</li>
  </ul>
  <script>var tracking = "*secret*";</script>
  <blockquote>
    <p>Quoted text</p>
  </blockquote>
</body>
</html>
"""
