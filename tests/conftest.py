"""
Shared fixtures for rule engine tests.
"""

import pytest
import structlog

from rule_engine import and_, or_, string_equals, int_equals, int_range
from rule_engine.shared.logging import clear_context


@pytest.fixture
def example_rule():
    """Name must match and the favourite number must be 10 or within 11-16."""
    return and_([
        string_equals("Name is John Doe", "name", "John Doe"),
        or_([
            int_equals("Favorite number is 10", "fav_number", 10),
            int_range("Fav number between 11 and 16", "fav_number", 11, 16),
        ]),
    ])


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()
    clear_context()
