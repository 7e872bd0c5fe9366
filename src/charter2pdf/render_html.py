"""Assemble a self-contained HTML document from a layout."""

from __future__ import annotations

import html
from datetime import date
from typing import Iterable

from charter2pdf.layout import DocumentLayout
from charter2pdf.schemas import BlockType, ContentBlock, DocumentMeta, Section, TocEntry
from charter2pdf.typography import (
    HEADING_CLASSES,
    HEADING_STYLES,
    IMAGE_PLACEHOLDER_FALLBACK,
    section_indent_px,
    stylesheet,
    toc_indent_px,
)

TOC_TITLE = "TABLE OF CONTENTS"


def format_long_date(value: date) -> str:
    """Format as "January 5, 2025" independent of the process locale."""
    return f"{value:%B} {value.day}, {value.year}"


def resolve_last_updated(meta: DocumentMeta, sections: Iterable[Section]) -> date | None:
    """Explicit date first, else the newest section modification time."""
    if meta.last_updated is not None:
        return meta.last_updated
    stamps = [s.last_modified for s in sections if s.last_modified is not None]
    return max(stamps).date() if stamps else None


def render_block(block: ContentBlock) -> str:
    if block.type == BlockType.PARAGRAPH:
        return f'<p class="body-text">{block.text}</p>'
    if block.type == BlockType.NUMBERED_LIST:
        items = "".join(f"<li>{item}</li>" for item in block.items)
        return f'<ol class="numbered-list">{items}</ol>'
    if block.type == BlockType.BULLET_LIST:
        items = "".join(f"<li>{item}</li>" for item in block.items)
        return f'<ul class="bullet-list">{items}</ul>'
    if block.type == BlockType.DIAGRAM:
        return f'<pre class="diagram-block">{block.text}</pre>'
    description = html.escape(block.description or IMAGE_PLACEHOLDER_FALLBACK)
    return f'<div class="image-placeholder"><strong>Image:</strong> {description}</div>'


def render_section(layout: DocumentLayout, section: Section) -> str:
    label = layout.labels[section.id]
    style = HEADING_STYLES[section.type]
    css_class = f"{HEADING_CLASSES[section.type]} type-{section.type.value}"
    indent = section_indent_px(section.type, label.depth)
    indent_attr = f' style="margin-left: {indent}px;"' if indent else ""
    body = "".join(render_block(block) for block in layout.blocks[section.id])
    return (
        f'<div class="document-section" id="section-{html.escape(section.id, quote=True)}"'
        f' data-section-id="{html.escape(section.id, quote=True)}"{indent_attr}>'
        f'<{style.tag} class="{css_class}">{html.escape(label.display_label)}</{style.tag}>'
        f"{body}</div>"
    )


def _render_toc_entry(entry: TocEntry) -> str:
    section_id = html.escape(entry.section_id, quote=True)
    return (
        f'<div class="toc-entry" data-section-id="{section_id}"'
        f' style="padding-left: {toc_indent_px(entry.indent_level)}px;">'
        f'<a href="#section-{section_id}">'
        f'<span class="toc-label">{html.escape(entry.display_label)}</span>'
        f'<span class="toc-page">{entry.page_number}</span></a></div>'
    )


def _render_cover(meta: DocumentMeta, last_updated: date | None) -> str:
    parts = ['<div class="document-page cover-page" data-page="1" data-kind="cover">']
    logo = meta.logo_url
    if logo:
        parts.append(
            f'<div class="logo-container"><img src="{html.escape(logo, quote=True)}" alt="Logo"'
            ' style="width: 120px; height: 120px; object-fit: contain;" /></div>'
        )
    parts.append(f'<h1 class="cover-title">{html.escape(meta.title)}</h1>')
    if meta.subtitle:
        parts.append(f'<h2 class="cover-subtitle">{html.escape(meta.subtitle)}</h2>')
    if last_updated is not None:
        parts.append(f'<p class="cover-meta">Last Updated: {format_long_date(last_updated)}</p>')
    if meta.version is not None:
        parts.append(f'<p class="cover-meta">Version {meta.version}</p>')
    if meta.adopted_note:
        parts.append(f'<p class="cover-meta">{html.escape(meta.adopted_note)}</p>')
    parts.append("</div>")
    return "".join(parts)


def render_document_body(layout: DocumentLayout, meta: DocumentMeta | None = None) -> str:
    """Render the page ``<div>`` sequence without the surrounding document."""
    meta = meta or DocumentMeta()
    pages = [_render_cover(meta, resolve_last_updated(meta, layout.sections))]
    page_number = 2

    for chunk_index, chunk in enumerate(layout.toc_page_chunks()):
        title = f'<h2 class="toc-title">{TOC_TITLE}</h2>' if chunk_index == 0 else ""
        entries = "".join(_render_toc_entry(entry) for entry in chunk)
        pages.append(
            f'<div class="document-page toc-page" data-page="{page_number}" data-kind="toc">'
            f"{title}{entries}</div>"
        )
        page_number += 1

    for page in layout.pages:
        sections = "".join(render_section(layout, section) for section in page)
        pages.append(
            f'<div class="document-page content-page" data-page="{page_number}" data-kind="content">'
            f"{sections}</div>"
        )
        page_number += 1

    return "\n".join(pages)


def render_document_html(layout: DocumentLayout, meta: DocumentMeta | None = None) -> str:
    """Render a complete HTML document ready for the export service."""
    meta = meta or DocumentMeta()
    base = f'<base href="{html.escape(meta.base_url.rstrip("/"), quote=True)}/" />' if meta.base_url else ""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n<head>\n<meta charset="utf-8">\n'
        '<meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"<title>{html.escape(meta.title)}</title>\n{base}"
        f"<style>\n{stylesheet()}\n</style>\n</head>\n<body>\n"
        f"{render_document_body(layout, meta)}\n</body>\n</html>\n"
    )
