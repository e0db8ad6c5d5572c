from __future__ import annotations

import logging
from pathlib import Path

from phoenix_check.assertions.deterministic import (
    check_file_exists,
    check_text_contains,
)
from phoenix_check.config import SectionConfig, ThemeCheckConfig, default_config
from phoenix_check.reporter import ExitCode, Reporter


class ContentReadError(Exception):
    """A content source could not be read; the run cannot continue."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"cannot read {path}: {reason}")


class Runner:
    """Runs the check catalogue against a theme package on disk."""

    def __init__(
        self,
        root: Path,
        config: ThemeCheckConfig | None = None,
        reporter: Reporter | None = None,
        logger: logging.Logger | None = None,
    ):
        self.root = Path(root)
        self.config = config if config is not None else default_config()
        self.reporter = reporter if reporter is not None else Reporter()
        self.logger = logger if logger is not None else logging.getLogger(__name__)
        self._contents: dict[str, str] = {}

    def run(self) -> ExitCode:
        """Evaluate every section in order and return the exit code.

        Raises ContentReadError if a content source cannot be read. Nothing
        after the failing read is reported, including the summary.
        """
        self.reporter.reset()
        self._contents = {}
        self.logger.debug(f"Validating theme package at {self.root}")

        for index, section in enumerate(self.config.sections, start=1):
            self.reporter.section(index, section.title)
            self._run_section(section)

        self.reporter.summary()
        self.logger.info(f"Run finished with {self.reporter.failures} failure(s)")
        return self.reporter.exit_code

    def _run_section(self, section: SectionConfig) -> None:
        self.logger.debug(f"Section: {section.title}")

        for filename in section.required_files:
            self.reporter.record(
                check_file_exists(self.root, filename, logger=self.logger)
            )

        if not section.contains:
            return

        text = self._read(section.source)
        for item in section.contains:
            self.reporter.record(
                check_text_contains(
                    text,
                    item.needle,
                    item.label,
                    source=section.source,
                    logger=self.logger,
                )
            )

    def _read(self, relpath: str) -> str:
        if relpath in self._contents:
            return self._contents[relpath]

        path = self.root / relpath
        self.logger.debug(f"Reading {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.error(f"Failed to read {relpath}: {e}")
            raise ContentReadError(relpath, str(e)) from e

        self._contents[relpath] = text
        return text
