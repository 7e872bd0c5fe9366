"""Content block models produced by the markup parser."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """Kinds of content blocks."""

    PARAGRAPH = "paragraph"
    NUMBERED_LIST = "numbered_list"
    BULLET_LIST = "bullet_list"
    DIAGRAM = "diagram"
    IMAGE = "image"


class ContentBlock(BaseModel):
    """A typed unit of section content.

    ``text`` and ``items`` hold escaped HTML with inline emphasis already
    converted; diagram text is escaped but otherwise verbatim. ``description``
    is only set for image blocks; it is the raw (unescaped) text and may be
    empty.
    """

    model_config = ConfigDict(frozen=True)

    type: BlockType
    text: str = ""
    items: list[str] = Field(default_factory=list)
    description: str | None = None
