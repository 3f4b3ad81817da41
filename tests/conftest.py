"""Pytest configuration and shared fixtures for the md2adf test suite.

This module provides shared fixtures, test configuration, and helpers
that are used across the entire test suite.
"""

import json
import logging
from typing import Any, Generator

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)

    import os

    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def sample_markdown() -> str:
    """Provide Markdown made only of constructs the converter supports.

    Returns
    -------
    str
        Two paragraphs (one with links) followed by a fenced code block.

    """
    return """First paragraph with a [link](https://example.com/docs) in it.

Second paragraph spans
two lines and ends with <https://example.org>.

```python
def hello():
    return "Hello, World!"
```
"""


@pytest.fixture
def parse_json():
    """Return a helper that parses JSON text into Python objects."""

    def _parse(text: str) -> Any:
        return json.loads(text)

    return _parse


@pytest.fixture
def isolated_md2adf_logger() -> Generator[logging.Logger, None, None]:
    """Restore the md2adf logger configuration after a test changes it."""
    logger = logging.getLogger("md2adf")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    saved_propagate = logger.propagate
    try:
        yield logger
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            if handler not in saved_handlers:
                handler.close()
        for handler in saved_handlers:
            logger.addHandler(handler)
        logger.setLevel(saved_level)
        logger.propagate = saved_propagate
