"""Deterministic assertion checks (file existence, literal content)."""

from __future__ import annotations

import logging
from pathlib import Path

from phoenix_check.assertions.base import AssertionResult


def check_file_exists(
    root: str | Path, filename: str, logger: logging.Logger | None = None
) -> AssertionResult:
    """Check that a file exists under the theme root."""
    if logger is None:
        logger = logging.getLogger(__name__)

    path = Path(root) / filename
    logger.info(f"Checking file_exists: {filename}")

    passed = path.exists()
    logger.info(f"File {filename} exists={passed}")

    return AssertionResult(
        name=f"file_exists:{filename}",
        passed=passed,
        message=f"{filename} exists",
    )


def check_text_contains(
    text: str,
    needle: str,
    label: str,
    *,
    source: str = "<text>",
    logger: logging.Logger | None = None,
) -> AssertionResult:
    """Check that ``text`` contains ``needle`` as an exact substring.

    No case folding or whitespace normalization is applied, so ``#ff1a1a``
    does not satisfy a check for ``#FF1A1A``.
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    passed = needle in text
    logger.info(f"Literal '{needle}' found={passed} in {source}")

    return AssertionResult(
        name=f"contains:{source}:{needle}",
        passed=passed,
        message=label,
    )
