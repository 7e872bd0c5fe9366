"""Search result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel

from charter2pdf.schemas.sections import SectionType


class MatchType(str, Enum):
    """Where the query matched."""

    TITLE = "title"
    CONTENT = "content"


class SearchResult(BaseModel):
    """One section matching a search query."""

    section_id: str
    section_type: SectionType
    match_type: MatchType
    match_text: str
    display_label: str
    page_number: int | None = None
