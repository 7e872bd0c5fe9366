"""Analytic height estimation for sections.

No rendering pass is available when pages are laid out, so every section is
assigned an estimated height in points from its type and raw content.
"""

from __future__ import annotations

import math
from typing import Final

from charter2pdf.schemas import Section, SectionType

TITLE_HEIGHT_PT: Final[dict[SectionType, float]] = {
    SectionType.PREAMBLE: 30.0,
    SectionType.ARTICLE: 30.0,
    SectionType.AMENDMENT: 30.0,
    SectionType.SECTION: 24.0,
    SectionType.SUBSECTION: 20.0,
}
WORDS_PER_LINE: Final[int] = 12
LINE_HEIGHT_PT: Final[float] = 16.5
ARTICLE_BOTTOM_MARGIN_PT: Final[float] = 12.0
BOTTOM_MARGIN_PT: Final[float] = 20.0


def estimate_body_lines(content: str) -> int:
    """Estimate rendered line count: explicit lines vs. wrapped word count."""
    if not content:
        return 0
    explicit_lines = len(content.split("\n"))
    wrapped_lines = math.ceil(len(content.split()) / WORDS_PER_LINE)
    return max(explicit_lines, wrapped_lines)


def estimate_height(section: Section) -> float:
    """Return the estimated vertical extent of ``section`` in points."""
    height = TITLE_HEIGHT_PT[section.type]
    if section.type != SectionType.ARTICLE:
        height += estimate_body_lines(section.content) * LINE_HEIGHT_PT
    height += ARTICLE_BOTTOM_MARGIN_PT if section.type == SectionType.ARTICLE else BOTTOM_MARGIN_PT
    return height
