"""Two-pass table of contents builder."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from charter2pdf.config import CHARTER2PDF_TOC_ENTRIES_PER_PAGE
from charter2pdf.exceptions import LayoutError
from charter2pdf.numbering import NumberingResolver
from charter2pdf.pagination import paginate_index
from charter2pdf.schemas import Section, TableOfContents, TocEntry
from charter2pdf.tree import SectionIndex

COVER_PAGES = 1
TOC_START_PAGE = COVER_PAGES + 1


def estimate_toc_pages(entry_count: int, entries_per_page: int = CHARTER2PDF_TOC_ENTRIES_PER_PAGE) -> int:
    """Estimate how many pages ``entry_count`` TOC lines occupy.

    This is a fixed heuristic: long labels that wrap are not accounted for,
    so the rendered TOC can need more pages than estimated.
    """
    if entries_per_page <= 0:
        raise LayoutError(f"entries_per_page must be positive, got {entries_per_page}")
    return math.ceil(entry_count / entries_per_page)


def build_page_map(pages: Sequence[Sequence[Section]], content_start_page: int) -> dict[str, int]:
    """Assign every section the number of the first page it appears on."""
    page_map: dict[str, int] = {}
    for page_index, page in enumerate(pages):
        for section in page:
            page_map.setdefault(section.id, content_start_page + page_index)
    return page_map


def build_table_of_contents(
    index: SectionIndex,
    pages: Sequence[Sequence[Section]],
    *,
    resolver: NumberingResolver | None = None,
    entries_per_page: int = CHARTER2PDF_TOC_ENTRIES_PER_PAGE,
) -> TableOfContents:
    """Build TOC entries whose page numbers match ``pages``.

    Content starts right after the estimated TOC pages, which in turn depend
    on the number of entries; every section type is listed.
    """
    resolver = resolver or NumberingResolver(index)
    toc_pages = estimate_toc_pages(len(index), entries_per_page)
    content_start_page = TOC_START_PAGE + toc_pages
    page_map = build_page_map(pages, content_start_page)

    entries: list[TocEntry] = []
    for section in index.document_order():
        label = resolver.label(section)
        entries.append(
            TocEntry(
                section_id=section.id,
                display_label=label.display_label,
                page_number=page_map.get(section.id, content_start_page),
                section_type=section.type,
                indent_level=label.indent_level,
            )
        )

    return TableOfContents(
        entries=entries,
        toc_pages=toc_pages,
        content_start_page=content_start_page,
        total_pages=COVER_PAGES + toc_pages + len(pages),
    )


def generate_table_of_contents(sections: Iterable[Section]) -> TableOfContents:
    """Paginate ``sections`` and build their table of contents."""
    index = SectionIndex.build(sections)
    return build_table_of_contents(index, paginate_index(index))
