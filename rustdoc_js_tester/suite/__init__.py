"""Suite module - fixed test cases and tool layout."""

from .schema import TEST_NAMES, TestCase, ToolLayout, default_test_cases
from .parser import parse_layout, parse_layout_data

__all__ = [
    "TEST_NAMES",
    "TestCase",
    "ToolLayout",
    "default_test_cases",
    "parse_layout",
    "parse_layout_data",
]
