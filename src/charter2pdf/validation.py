"""Advisory consistency checks for a section snapshot.

Nothing here blocks rendering: structural anomalies are reported as
warnings and the engine lays the document out anyway. Errors are reserved
for disagreements between the preview and the static document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from charter2pdf.exceptions import Charter2pdfError
from charter2pdf.layout import DocumentLayout, build_document_layout
from charter2pdf.markup import image_descriptions
from charter2pdf.preview import build_preview
from charter2pdf.render_html import render_document_html
from charter2pdf.schemas import DocumentMeta, PreviewNode, Section, SectionType, ValidationReport
from charter2pdf.tree import SectionIndex
from charter2pdf.utils.logging_config import get_logger

try:
    from bs4 import BeautifulSoup
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise Charter2pdfError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc

logger = get_logger(__name__)

MAX_IMAGE_DESCRIPTION_LENGTH = 100

_EXPECTED_PARENTS: dict[SectionType, tuple[SectionType, ...]] = {
    SectionType.SECTION: (SectionType.ARTICLE,),
    SectionType.SUBSECTION: (SectionType.SECTION, SectionType.SUBSECTION),
}


def _name(section: Section) -> str:
    return f'{section.type.value.capitalize()} "{section.title or "Untitled"}"'


@dataclass(frozen=True)
class PageOutline:
    """Structural summary of one rendered page, used for parity checks."""

    kind: str
    section_ids: tuple[str, ...]
    labels: tuple[str, ...]
    page_numbers: tuple[int, ...] = ()


def outline_static_document(document: str) -> list[PageOutline]:
    """Extract the page structure of a static HTML document."""
    soup = BeautifulSoup(document, "lxml")
    outlines: list[PageOutline] = []
    for page in soup.select("div.document-page"):
        kind = page.get("data-kind", "")
        if kind == "toc":
            entries = page.select("div.toc-entry")
            outlines.append(
                PageOutline(
                    kind=kind,
                    section_ids=tuple(entry["data-section-id"] for entry in entries),
                    labels=tuple(entry.select_one(".toc-label").get_text() for entry in entries),
                    page_numbers=tuple(int(entry.select_one(".toc-page").get_text()) for entry in entries),
                )
            )
        elif kind == "content":
            blocks = page.select("div.document-section")
            outlines.append(
                PageOutline(
                    kind=kind,
                    section_ids=tuple(block["data-section-id"] for block in blocks),
                    labels=tuple(block.find(["h2", "h3", "h4"]).get_text() for block in blocks),
                )
            )
        else:
            outlines.append(PageOutline(kind=kind, section_ids=(), labels=()))
    return outlines


def outline_preview(tree: PreviewNode) -> list[PageOutline]:
    """Extract the page structure of a preview component tree."""
    outlines: list[PageOutline] = []
    for page in tree.children:
        kind = page.props.get("kind", "")
        if kind == "toc":
            entries = [child for child in page.children if child.component == "TocEntry"]
            outlines.append(
                PageOutline(
                    kind=kind,
                    section_ids=tuple(entry.section_id or "" for entry in entries),
                    labels=tuple(entry.text or "" for entry in entries),
                    page_numbers=tuple(entry.props["pageNumber"] for entry in entries),
                )
            )
        elif kind == "content":
            blocks = [child for child in page.children if child.component == "Section"]
            outlines.append(
                PageOutline(
                    kind=kind,
                    section_ids=tuple(block.section_id or "" for block in blocks),
                    labels=tuple(block.children[0].text or "" for block in blocks),
                )
            )
        else:
            outlines.append(PageOutline(kind=kind, section_ids=(), labels=()))
    return outlines


def check_renderer_parity(layout: DocumentLayout, meta: DocumentMeta | None = None) -> list[str]:
    """Render both outputs and list every structural disagreement."""
    static_pages = outline_static_document(render_document_html(layout, meta))
    preview_pages = outline_preview(build_preview(layout, meta))

    errors: list[str] = []
    if len(static_pages) != len(preview_pages):
        errors.append(
            f"Preview has {len(preview_pages)} pages but the document has {len(static_pages)}"
        )
    for number, (static, preview) in enumerate(zip(static_pages, preview_pages), start=1):
        if static.kind != preview.kind:
            errors.append(f"Page {number}: preview is a {preview.kind} page, document is a {static.kind} page")
        elif static.section_ids != preview.section_ids:
            errors.append(f"Page {number}: preview and document list different sections")
        elif static.labels != preview.labels:
            errors.append(f"Page {number}: preview and document headings differ")
        elif static.page_numbers != preview.page_numbers:
            errors.append(f"Page {number}: preview and document TOC page numbers differ")
    return errors


class ConsistencyValidator:
    """Check a snapshot for issues that make preview and export diverge."""

    def __init__(
        self,
        sections: Iterable[Section],
        *,
        layout: DocumentLayout | None = None,
        meta: DocumentMeta | None = None,
        check_parity: bool = False,
    ) -> None:
        self.sections = list(sections)
        self.index = layout.index if layout is not None else SectionIndex.build(self.sections)
        self.layout = layout
        self.meta = meta
        self.check_parity = check_parity

    def validate(self) -> ValidationReport:
        """Run every check and return the advisory report."""
        report = ValidationReport()
        self._validate_structure(report)
        self._validate_ordering(report)
        self._validate_content(report)
        self._validate_titles(report)
        self._validate_images(report)
        if self.check_parity:
            layout = self.layout or build_document_layout(self.sections)
            report.errors.extend(check_renderer_parity(layout, self.meta))
        report.is_valid = not report.errors
        if report.errors:
            logger.warning("Preview and document disagree", extra={"errors": len(report.errors)})
        return report

    def _validate_structure(self, report: ValidationReport) -> None:
        for duplicate in self.index.duplicates:
            report.warnings.append(f'Duplicate section id "{duplicate.id}" ignored for {_name(duplicate)}')

        preambles = [s for s in self.index.sections if s.type == SectionType.PREAMBLE]
        if len(preambles) > 1:
            report.warnings.append(
                f"Found {len(preambles)} preambles; only the first one is used as the preamble"
            )

        for section in self.index.sections:
            if section.parent_id is None:
                continue
            parent = self.index.get(section.parent_id)
            if parent is None:
                report.warnings.append(f'{_name(section)} references missing parent "{section.parent_id}"')
            elif section.type not in _EXPECTED_PARENTS:
                report.warnings.append(f"{_name(section)} should not have a parent")
            elif parent.type not in _EXPECTED_PARENTS[section.type]:
                report.warnings.append(f"{_name(section)} is nested under {_name(parent)}")

        for group in self.index.document_groups():
            if group.kind != "unattached":
                continue
            for section in group.sections:
                report.warnings.append(f"{_name(section)} is not attached to the document tree")

    def _validate_ordering(self, report: ValidationReport) -> None:
        for section in self.index.sections:
            if section.order is None:
                report.warnings.append(f"{_name(section)} is missing order property")

    def _validate_content(self, report: ValidationReport) -> None:
        for section in self.index.sections:
            if section.type == SectionType.ARTICLE:
                continue
            if not section.content.strip():
                report.warnings.append(f"{_name(section)} has no content")
                continue
            if "\t" in section.content:
                report.warnings.append(
                    f"{_name(section)} contains tab characters that may render inconsistently"
                )
            if "\n\n\n" in section.content:
                report.suggestions.append(
                    f"{_name(section)} has multiple consecutive line breaks - "
                    "consider using double line breaks only"
                )

    def _validate_titles(self, report: ValidationReport) -> None:
        for section in self.index.sections:
            if section.title and section.title != section.title.strip():
                report.warnings.append(f"{_name(section)} has leading/trailing whitespace")

    def _validate_images(self, report: ValidationReport) -> None:
        for section in self.index.sections:
            if section.type == SectionType.ARTICLE:
                continue
            for description in image_descriptions(section.content):
                if not description.strip():
                    report.warnings.append(f"{_name(section)} has empty image placeholder")
                elif len(description) > MAX_IMAGE_DESCRIPTION_LENGTH:
                    report.suggestions.append(
                        f"Image description in {_name(section)} is very long and may affect layout"
                    )

    def generate_report(self) -> str:
        """Plain-text summary of :meth:`validate`."""
        return format_report(self.validate(), self.index.sections)


def format_report(report: ValidationReport, sections: Iterable[Section]) -> str:
    """Render a validation report as plain text with snapshot totals."""
    sections = list(sections)
    lines = ["=== Preview/Document Consistency Report ===", ""]
    if report.is_valid:
        lines.append("VALIDATION PASSED - preview and document should be consistent")
    else:
        lines.append("VALIDATION FAILED - issues found that may cause inconsistencies")
    lines.append("")

    for heading, items in (
        ("ERRORS", report.errors),
        ("WARNINGS", report.warnings),
        ("SUGGESTIONS", report.suggestions),
    ):
        if items:
            lines.append(f"{heading}:")
            lines.extend(f"  - {item}" for item in items)
            lines.append("")

    lines.append(f"Total sections: {len(sections)}")
    lines.append(f"Articles: {sum(1 for s in sections if s.type == SectionType.ARTICLE)}")
    lines.append(f"Amendments: {sum(1 for s in sections if s.type == SectionType.AMENDMENT)}")
    has_preamble = any(s.type == SectionType.PREAMBLE for s in sections)
    lines.append(f"Has preamble: {'Yes' if has_preamble else 'No'}")
    return "\n".join(lines)


def validate_consistency(
    sections: Iterable[Section],
    *,
    layout: DocumentLayout | None = None,
    meta: DocumentMeta | None = None,
    check_parity: bool = False,
) -> ValidationReport:
    """Quick validation entry point."""
    return ConsistencyValidator(sections, layout=layout, meta=meta, check_parity=check_parity).validate()
