"""Inspect the layout computed for a section snapshot."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import httpx
from pydantic import TypeAdapter

from charter2pdf.layout import DocumentLayout, build_document_layout
from charter2pdf.render_html import render_document_html
from charter2pdf.schemas import Section
from charter2pdf.validation import ConsistencyValidator

_SECTIONS = TypeAdapter(list[Section])


def main() -> None:
    parser = argparse.ArgumentParser(description="Print pages, table of contents and validation report.")
    parser.add_argument("--url", help="URL returning a JSON list of sections")
    parser.add_argument("--file", help="Local JSON file with a list of sections")
    parser.add_argument("--html", help="Write the static HTML document to this path")
    parser.add_argument("--parity", action="store_true", help="Also compare preview and document structure")
    args = parser.parse_args()

    if not args.url and not args.file:
        parser.error("Provide --url or --file")

    sections = _SECTIONS.validate_python(load_sections(url=args.url, file_path=args.file))
    layout = build_document_layout(sections, use_cache=False)

    print_pages(layout)
    print_toc(layout)
    print()
    print(ConsistencyValidator(sections, layout=layout, check_parity=args.parity).generate_report())

    if args.html:
        Path(args.html).write_text(render_document_html(layout), encoding="utf-8")
        print(f"\nWrote {args.html}")


def load_sections(*, url: str | None, file_path: str | None) -> Any:
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.json()

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Sections file not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def print_pages(layout: DocumentLayout) -> None:
    start = layout.toc.content_start_page
    print(f"Content pages: {len(layout.pages)} (starting at page {start})")
    for offset, page in enumerate(layout.pages):
        print(f"  page {start + offset}:")
        for section in page:
            print(f"    {layout.label(section.id)}")


def print_toc(layout: DocumentLayout) -> None:
    print(f"\nTable of contents ({layout.toc.toc_pages} pages, {layout.toc.total_pages} pages total):")
    for entry in layout.toc.entries:
        indent = "  " * entry.indent_level
        print(f"  {indent}{entry.display_label} .... {entry.page_number}")


if __name__ == "__main__":
    main()
