"""Base data structures for the assertion system."""

from dataclasses import dataclass


@dataclass
class AssertionResult:
    """Result of evaluating a single check.

    Attributes:
        name: Identifier for the assertion (e.g. "file_exists:README.md").
        passed: Whether the condition held.
        message: Human-readable label printed next to the pass/fail glyph.
            The label is the same whether the check passed or failed.
    """

    name: str
    passed: bool
    message: str
