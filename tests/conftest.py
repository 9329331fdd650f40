"""
Pytest configuration for xfa_attrs
"""

import pytest
import logging
import sys


@pytest.fixture(autouse=True)
def configure_logging():
    """Keep root logging on a quiet console handler for every test."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def layout_node():
    """Stand-in for a layout tree node handed to HTMLResult.break_at."""
    return {"name": "subform", "attributes": {"layout": "tb"}, "children": []}
