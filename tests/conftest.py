"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

VALID_HTML = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Phoenix Electric SharePoint Theme</title>
  <style>
    :root { --red: #FF1A1A; --gold: #D4AF37; --bg: #0a0a0a; }
  </style>
</head>
<body>
  <header><h1>PHOENIX ELECTRIC</h1></header>
  <main><p>Theme preview</p></main>
  <footer><p>Phoenix Electric</p></footer>
</body>
</html>
"""

VALID_PS1 = """\
$themes = @{
    "PhoenixElectric-Dark"  = @{ themePrimary = "#FF1A1A"; accent = "#D4AF37" }
    "PhoenixElectric-Gold"  = @{ themePrimary = "#D4AF37"; accent = "#FF1A1A" }
    "PhoenixElectric-Light" = @{ themePrimary = "#FF1A1A"; accent = "#D4AF37" }
}
"""


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up phoenix_check loggers after each test."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("phoenix_check")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def theme_root(tmp_path: Path) -> Path:
    """A complete, valid theme package on disk."""
    root = tmp_path / "theme"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text(VALID_HTML, encoding="utf-8")
    (root / "Phoenix-SharePoint-Theme.ps1").write_text(VALID_PS1, encoding="utf-8")
    (root / "assets" / "Phoenix_Transparent.png").write_bytes(b"\x89PNG\r\n")
    (root / "assets" / "Phoenix_Black_Background.jpg").write_bytes(b"\xff\xd8\xff")
    (root / "README.md").write_text("# Phoenix theme\n", encoding="utf-8")
    return root
