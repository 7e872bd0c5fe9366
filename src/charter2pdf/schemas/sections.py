"""Section models."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SectionType(str, Enum):
    """Closed set of section kinds."""

    PREAMBLE = "preamble"
    ARTICLE = "article"
    SECTION = "section"
    SUBSECTION = "subsection"
    AMENDMENT = "amendment"


TOP_LEVEL_TYPES = frozenset({SectionType.PREAMBLE, SectionType.ARTICLE, SectionType.AMENDMENT})


class Section(BaseModel):
    """A node of the document tree, as supplied by the document store.

    ``parent_id`` is a weak reference used for grouping only; it may point at
    an id that does not exist in the snapshot.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    type: SectionType
    title: str = ""
    content: str = ""
    order: float | None = None
    parent_id: str | None = Field(default=None, alias="parentId")
    last_modified: datetime | None = Field(default=None, alias="lastModified")

    @property
    def sort_order(self) -> float:
        """Order used for sorting; a missing order sorts as zero."""
        return self.order or 0
