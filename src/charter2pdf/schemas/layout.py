"""Layout, table of contents and validation models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from charter2pdf.schemas.sections import SectionType


class TocEntry(BaseModel):
    """One line of the table of contents."""

    section_id: str
    display_label: str
    page_number: int
    section_type: SectionType
    indent_level: int = 0


class TableOfContents(BaseModel):
    """Ordered TOC entries plus the page arithmetic they were built with."""

    entries: list[TocEntry] = Field(default_factory=list)
    toc_pages: int = 0
    content_start_page: int = 2
    total_pages: int = 1

    def page_map(self) -> dict[str, int]:
        """Map section ids to their page numbers."""
        return {entry.section_id: entry.page_number for entry in self.entries}


class ValidationReport(BaseModel):
    """Advisory consistency report."""

    is_valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)


class PreviewNode(BaseModel):
    """A node of the interactive preview component tree."""

    component: str
    section_id: str | None = None
    text: str | None = None
    props: dict[str, Any] = Field(default_factory=dict)
    style: dict[str, str] = Field(default_factory=dict)
    children: list["PreviewNode"] = Field(default_factory=list)
