from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

MARKUP_FILE = "index.html"
INSTALLER_SCRIPT = "Phoenix-SharePoint-Theme.ps1"

PHOENIX_RED = "#FF1A1A"
PHOENIX_GOLD = "#D4AF37"
DEEP_BLACK = "#0a0a0a"


class ContainsCheck(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    needle: str
    label: str

    @field_validator("needle", "label")
    @classmethod
    def not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v


class SectionConfig(BaseModel):
    """One console section: a header plus the checks reported under it.

    ``required_files`` are existence checks relative to the theme root.
    ``contains`` checks run against the text of ``source``, which is read
    once per run and shared with any later section naming the same file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)
    title: str
    source: str | None = None
    required_files: list[str] = []
    contains: list[ContainsCheck] = []

    @model_validator(mode="after")
    def validate_source(self) -> "SectionConfig":
        if self.contains and not self.source:
            raise ValueError(
                f"Section '{self.title}' has content checks but no source file"
            )
        return self


class ThemeCheckConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    sections: list[SectionConfig]


def _contains(pairs: list[tuple[str, str]]) -> list[ContainsCheck]:
    return [ContainsCheck(needle=needle, label=label) for needle, label in pairs]


def default_config() -> ThemeCheckConfig:
    """The check catalogue for the Phoenix SharePoint theme package."""
    return ThemeCheckConfig(
        sections=[
            SectionConfig(
                title="Required files",
                required_files=[
                    MARKUP_FILE,
                    INSTALLER_SCRIPT,
                    "assets/Phoenix_Transparent.png",
                    "assets/Phoenix_Black_Background.jpg",
                    "README.md",
                ],
            ),
            SectionConfig(
                title="HTML structure",
                source=MARKUP_FILE,
                contains=_contains(
                    [
                        ("<!DOCTYPE html>", "Has DOCTYPE"),
                        ('<html lang="en">', "Has html lang attribute"),
                        ("<meta charset", "Has charset meta"),
                        ('name="viewport"', "Has viewport meta"),
                        ("</header>", "Has header element"),
                        ("</main>", "Has main element"),
                        ("</footer>", "Has footer element"),
                        ("PHOENIX", "Contains Phoenix branding"),
                    ]
                ),
            ),
            SectionConfig(
                title="Brand colours in HTML",
                source=MARKUP_FILE,
                contains=_contains(
                    [
                        (PHOENIX_RED, f"Phoenix Red ({PHOENIX_RED}) present"),
                        (PHOENIX_GOLD, f"Phoenix Gold ({PHOENIX_GOLD}) present"),
                        (DEEP_BLACK, f"Deep Black ({DEEP_BLACK}) present"),
                    ]
                ),
            ),
            SectionConfig(
                title="PowerShell theme definitions",
                source=INSTALLER_SCRIPT,
                contains=_contains(
                    [
                        ("PhoenixElectric-Dark", "Dark theme defined"),
                        ("PhoenixElectric-Gold", "Gold theme defined"),
                        ("PhoenixElectric-Light", "Light theme defined"),
                        (PHOENIX_RED, "PS1 uses Phoenix Red"),
                        (PHOENIX_GOLD, "PS1 uses Phoenix Gold"),
                    ]
                ),
            ),
        ]
    )
