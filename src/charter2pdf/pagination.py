"""Greedy page layout under a fixed vertical budget."""

from __future__ import annotations

from typing import Iterable, Sequence

from charter2pdf.config import CHARTER2PDF_ORPHAN_THRESHOLD_PT, CHARTER2PDF_PAGE_HEIGHT_PT
from charter2pdf.estimate import estimate_height
from charter2pdf.exceptions import LayoutError
from charter2pdf.schemas import Section, SectionType
from charter2pdf.tree import SectionIndex
from charter2pdf.utils.logging_config import get_logger

logger = get_logger(__name__)


def _fill_pages(
    nodes: Sequence[Section],
    *,
    page_height: float,
    orphan_threshold: float,
) -> list[list[Section]]:
    pages: list[list[Section]] = []
    current: list[Section] = []
    current_height = 0.0

    for node in nodes:
        node_height = estimate_height(node)
        overflows = current_height + node_height > page_height
        orphans_heading = node.type == SectionType.SECTION and page_height - current_height < orphan_threshold
        if current and (overflows or orphans_heading):
            pages.append(current)
            current = []
            current_height = 0.0
        current.append(node)
        current_height += node_height

    if current:
        pages.append(current)
    return pages


def paginate_index(
    index: SectionIndex,
    *,
    page_height: float = CHARTER2PDF_PAGE_HEIGHT_PT,
    orphan_threshold: float = CHARTER2PDF_ORPHAN_THRESHOLD_PT,
) -> list[list[Section]]:
    """Distribute indexed sections over content pages.

    The preamble and each amendment occupy a page of their own. Each article
    subtree, and the trailing group of unattached sections, is filled
    greedily; a node taller than the budget still gets exactly one page.
    """
    if page_height <= 0:
        raise LayoutError(f"page_height must be positive, got {page_height}")
    if orphan_threshold < 0:
        raise LayoutError(f"orphan_threshold must not be negative, got {orphan_threshold}")

    pages: list[list[Section]] = []
    for group in index.document_groups():
        if group.kind in ("preamble", "amendment"):
            pages.append(list(group.sections))
            continue
        pages.extend(
            _fill_pages(group.sections, page_height=page_height, orphan_threshold=orphan_threshold)
        )

    logger.debug(
        "Paginated sections",
        extra={"sections": len(index), "pages": len(pages), "page_height": page_height},
    )
    return pages


def paginate(
    sections: Iterable[Section],
    *,
    page_height: float = CHARTER2PDF_PAGE_HEIGHT_PT,
    orphan_threshold: float = CHARTER2PDF_ORPHAN_THRESHOLD_PT,
) -> list[list[str]]:
    """Return content pages as ordered lists of section ids."""
    pages = paginate_index(
        SectionIndex.build(sections),
        page_height=page_height,
        orphan_threshold=orphan_threshold,
    )
    return [[section.id for section in page] for page in pages]
