"""Pytest configuration and shared fixtures for the md2bbcode test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from typing import Callable

import pytest
from hypothesis import Phase, Verbosity, settings

from md2bbcode.events import MarkdownEvent
from md2bbcode.logging_utils import PACKAGE_LOGGER_NAME
from md2bbcode.options import BBCodeRendererOptions
from md2bbcode.renderers.bbcode import BBCodeRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any logging configuration a test applied to the package logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    saved = (package_logger.level, list(package_logger.handlers), package_logger.propagate)
    yield
    for handler in package_logger.handlers:
        if handler not in saved[1]:
            handler.close()
    package_logger.setLevel(saved[0])
    package_logger.handlers[:] = saved[1]
    package_logger.propagate = saved[2]


@pytest.fixture
def render() -> Callable[..., str]:
    """Render a list of events and return the output text.

    Returns
    -------
    callable
        ``render(events, dialect="xenforo", **option_flags) -> str``

    """

    def _render(events: list[MarkdownEvent], dialect: str = "xenforo", **flags: bool) -> str:
        renderer = BBCodeRenderer(dialect, BBCodeRendererOptions(**flags))
        return renderer.render_to_string(events)

    return _render


@pytest.fixture
def sample_markdown() -> str:
    """Provide a Markdown document exercising most block and inline kinds.

    Returns
    -------
    str
        Standard sample document used across multiple tests.

    """
    return """# Sample Post

This is a **sample post** with *italic text* and some `inline code`.

## Lists

- Item 1
- Item 2

1. First item
2. Second item

> Quoted text

```python
print("Hello, World!")
```

| Header 1 | Header 2 |
|----------|----------|
| Row 1    | Data 1   |

Text with a note[^1] and ~~struck~~ words.

- [x] done
- [ ] todo

[^1]: The note.
"""
