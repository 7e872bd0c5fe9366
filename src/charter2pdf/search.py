"""Find sections by title or content, with the page each one lands on."""

from __future__ import annotations

from typing import Iterable

from charter2pdf.layout import DocumentLayout, build_document_layout
from charter2pdf.schemas import MatchType, SearchResult, Section, SectionType

MIN_QUERY_LENGTH = 2
SNIPPET_CONTEXT = 50


def content_snippet(content: str, position: int, length: int, context: int = SNIPPET_CONTEXT) -> str:
    """Cut ``context`` characters around a match, marking truncation with ``...``."""
    start = max(0, position - context)
    end = min(len(content), position + length + context)
    snippet = content[start:end]
    if start > 0:
        snippet = "..." + snippet
    if end < len(content):
        snippet = snippet + "..."
    return snippet


def search_layout(layout: DocumentLayout, query: str) -> list[SearchResult]:
    """Search the sections of an already computed layout.

    Title matches come before content matches; within each group results
    follow section order. A section matching in its title is not reported
    again for its content.
    """
    needle = query.strip().lower()
    if len(needle) < MIN_QUERY_LENGTH:
        return []

    page_map = layout.toc.page_map()
    matches: list[tuple[int, SearchResult]] = []
    for section in layout.index.sort(layout.sections):
        if needle in section.title.lower():
            match_type, match_text = MatchType.TITLE, section.title
        else:
            if section.type == SectionType.ARTICLE:
                continue
            position = section.content.lower().find(needle)
            if position < 0:
                continue
            match_type = MatchType.CONTENT
            match_text = content_snippet(section.content, position, len(needle))
        result = SearchResult(
            section_id=section.id,
            section_type=section.type,
            match_type=match_type,
            match_text=match_text,
            display_label=layout.label(section.id),
            page_number=page_map.get(section.id),
        )
        matches.append((0 if match_type == MatchType.TITLE else 1, result))

    # stable: section order is kept inside each match type
    matches.sort(key=lambda item: item[0])
    return [result for _, result in matches]


def search_sections(sections: Iterable[Section], query: str) -> list[SearchResult]:
    """Lay out ``sections`` and search them for ``query``."""
    return search_layout(build_document_layout(sections), query)
