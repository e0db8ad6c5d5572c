"""Assertion system for checking the theme package."""

from phoenix_check.assertions.base import AssertionResult
from phoenix_check.assertions.deterministic import (
    check_file_exists,
    check_text_contains,
)

__all__ = ["AssertionResult", "check_file_exists", "check_text_contains"]
