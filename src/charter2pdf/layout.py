"""Shared, renderer-agnostic layout stage.

Both renderers and the validator consume a single ``DocumentLayout`` so that
numbering, parsed blocks, pages and the TOC are derived exactly once.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from charter2pdf.cache_utils import LRUCache, sections_fingerprint
from charter2pdf.config import (
    CHARTER2PDF_ORPHAN_THRESHOLD_PT,
    CHARTER2PDF_PAGE_HEIGHT_PT,
    CHARTER2PDF_TOC_ENTRIES_PER_PAGE,
)
from charter2pdf.markup import parse_markup
from charter2pdf.numbering import NumberingResolver, SectionLabel
from charter2pdf.pagination import paginate_index
from charter2pdf.schemas import ContentBlock, Section, SectionType, TableOfContents, TocEntry
from charter2pdf.toc import build_table_of_contents
from charter2pdf.tree import SectionIndex
from charter2pdf.utils.logging_config import get_logger

logger = get_logger(__name__)

_LAYOUT_CACHE: LRUCache["DocumentLayout"] = LRUCache(max_entries=16)


@dataclass(frozen=True)
class DocumentLayout:
    """Everything a renderer needs, computed from one section snapshot."""

    index: SectionIndex
    labels: dict[str, SectionLabel]
    blocks: dict[str, list[ContentBlock]]
    pages: list[list[Section]]
    toc: TableOfContents
    fingerprint: str
    entries_per_page: int = CHARTER2PDF_TOC_ENTRIES_PER_PAGE

    @property
    def sections(self) -> tuple[Section, ...]:
        return self.index.sections

    def page_ids(self) -> list[list[str]]:
        return [[section.id for section in page] for page in self.pages]

    def label(self, section_id: str) -> str:
        return self.labels[section_id].display_label

    def toc_page_chunks(self) -> list[list[TocEntry]]:
        """TOC entries chunked the way they are printed."""
        entries = self.toc.entries
        size = self.entries_per_page
        return [entries[start : start + size] for start in range(0, len(entries), size)]


def build_document_layout(
    sections: Iterable[Section],
    *,
    page_height: float = CHARTER2PDF_PAGE_HEIGHT_PT,
    orphan_threshold: float = CHARTER2PDF_ORPHAN_THRESHOLD_PT,
    entries_per_page: int = CHARTER2PDF_TOC_ENTRIES_PER_PAGE,
    use_cache: bool = True,
) -> DocumentLayout:
    """Run numbering, parsing, pagination and the TOC builder.

    Results are memoised by a fingerprint of the snapshot and the layout
    parameters; recomputing on every edit is always safe.
    """
    snapshot = list(sections)
    fingerprint = sections_fingerprint(snapshot, page_height, orphan_threshold, entries_per_page)
    if use_cache:
        cached = _LAYOUT_CACHE.get(fingerprint)
        if cached is not None:
            return cached

    index = SectionIndex.build(snapshot)
    resolver = NumberingResolver(index)
    pages = paginate_index(index, page_height=page_height, orphan_threshold=orphan_threshold)
    toc = build_table_of_contents(index, pages, resolver=resolver, entries_per_page=entries_per_page)
    blocks = {
        section.id: [] if section.type == SectionType.ARTICLE else parse_markup(section.content)
        for section in index.sections
    }

    layout = DocumentLayout(
        index=index,
        labels=resolver.labels(),
        blocks=blocks,
        pages=pages,
        toc=toc,
        fingerprint=fingerprint,
        entries_per_page=entries_per_page,
    )
    logger.info(
        "Built document layout",
        extra={
            "sections": len(index),
            "content_pages": len(pages),
            "toc_pages": toc.toc_pages,
            "total_pages": toc.total_pages,
        },
    )
    if use_cache:
        _LAYOUT_CACHE.put(fingerprint, layout)
    return layout


def clear_layout_cache() -> None:
    _LAYOUT_CACHE.clear()
