"""Interactive preview renderer.

Produces a serialisable component tree that a front end can map onto its
own widgets. Styles come from the same typographic contract as the static
document; labels, blocks and page breaks come from the shared layout.
"""

from __future__ import annotations

from charter2pdf.layout import DocumentLayout
from charter2pdf.render_html import TOC_TITLE, format_long_date, resolve_last_updated
from charter2pdf.schemas import BlockType, ContentBlock, DocumentMeta, PreviewNode, Section, TocEntry
from charter2pdf.typography import (
    BODY,
    COVER_META,
    COVER_SUBTITLE,
    COVER_TITLE,
    DIAGRAM,
    HEADING_STYLES,
    IMAGE_PLACEHOLDER_FALLBACK,
    LIST,
    PAGE,
    TOC_ENTRY,
    TOC_HEADING,
    TextStyle,
    section_indent_px,
    toc_indent_px,
)

_BLOCK_COMPONENTS = {
    BlockType.PARAGRAPH: "Paragraph",
    BlockType.NUMBERED_LIST: "NumberedList",
    BlockType.BULLET_LIST: "BulletList",
    BlockType.DIAGRAM: "Diagram",
    BlockType.IMAGE: "ImagePlaceholder",
}


def _camel(name: str) -> str:
    head, *rest = name.split("-")
    return head + "".join(part.capitalize() for part in rest)


def style_props(style: TextStyle) -> dict[str, str]:
    """Typography contract entry as React-style camelCase properties."""
    return {_camel(name): value for name, value in style.css_declarations().items()}


def _page_style() -> dict[str, str]:
    return {"width": PAGE.width, "height": PAGE.height, "padding": PAGE.margin}


def block_node(block: ContentBlock) -> PreviewNode:
    component = _BLOCK_COMPONENTS[block.type]
    if block.type == BlockType.PARAGRAPH:
        return PreviewNode(component=component, props={"html": block.text}, style=style_props(BODY))
    if block.type in (BlockType.NUMBERED_LIST, BlockType.BULLET_LIST):
        items = [
            PreviewNode(component="ListItem", props={"html": item, "number": position})
            for position, item in enumerate(block.items, start=1)
        ]
        return PreviewNode(component=component, style=style_props(LIST), children=items)
    if block.type == BlockType.DIAGRAM:
        return PreviewNode(
            component=component,
            props={"html": block.text},
            style={**style_props(DIAGRAM), "whiteSpace": "pre"},
        )
    return PreviewNode(
        component=component,
        text=block.description or IMAGE_PLACEHOLDER_FALLBACK,
        props={"description": block.description or "", "isEmpty": not block.description},
    )


def section_node(layout: DocumentLayout, section: Section, highlighted_id: str | None = None) -> PreviewNode:
    label = layout.labels[section.id]
    heading_style = HEADING_STYLES[section.type]
    heading = PreviewNode(
        component="Heading",
        section_id=section.id,
        text=label.display_label,
        props={"tag": heading_style.tag, "sectionType": section.type.value},
        style=style_props(heading_style),
    )
    indent = section_indent_px(section.type, label.depth)
    return PreviewNode(
        component="Section",
        section_id=section.id,
        props={"anchor": f"section-{section.id}", "highlighted": section.id == highlighted_id},
        style={"marginLeft": f"{indent}px"} if indent else {},
        children=[heading, *(block_node(block) for block in layout.blocks[section.id])],
    )


def _toc_entry_node(entry: TocEntry) -> PreviewNode:
    return PreviewNode(
        component="TocEntry",
        section_id=entry.section_id,
        text=entry.display_label,
        props={"pageNumber": entry.page_number, "href": f"#section-{entry.section_id}"},
        style={**style_props(TOC_ENTRY), "paddingLeft": f"{toc_indent_px(entry.indent_level)}px"},
    )


def _cover_node(layout: DocumentLayout, meta: DocumentMeta) -> PreviewNode:
    children = []
    if meta.logo_url:
        children.append(PreviewNode(component="Logo", props={"src": meta.logo_url}))
    children.append(PreviewNode(component="CoverTitle", text=meta.title, style=style_props(COVER_TITLE)))
    if meta.subtitle:
        children.append(PreviewNode(component="CoverSubtitle", text=meta.subtitle, style=style_props(COVER_SUBTITLE)))
    last_updated = resolve_last_updated(meta, layout.sections)
    if last_updated is not None:
        children.append(
            PreviewNode(
                component="CoverMeta",
                text=f"Last Updated: {format_long_date(last_updated)}",
                style=style_props(COVER_META),
            )
        )
    if meta.version is not None:
        children.append(PreviewNode(component="CoverMeta", text=f"Version {meta.version}", style=style_props(COVER_META)))
    if meta.adopted_note:
        children.append(PreviewNode(component="CoverMeta", text=meta.adopted_note, style=style_props(COVER_META)))
    return PreviewNode(
        component="Page",
        props={"pageNumber": 1, "kind": "cover"},
        style=_page_style(),
        children=children,
    )


def build_preview(
    layout: DocumentLayout,
    meta: DocumentMeta | None = None,
    *,
    highlighted_id: str | None = None,
) -> PreviewNode:
    """Build the preview component tree for ``layout``."""
    meta = meta or DocumentMeta()
    pages = [_cover_node(layout, meta)]
    page_number = 2

    for chunk_index, chunk in enumerate(layout.toc_page_chunks()):
        children = []
        if chunk_index == 0:
            children.append(PreviewNode(component="TocTitle", text=TOC_TITLE, style=style_props(TOC_HEADING)))
        children.extend(_toc_entry_node(entry) for entry in chunk)
        pages.append(
            PreviewNode(
                component="Page",
                props={"pageNumber": page_number, "kind": "toc"},
                style=_page_style(),
                children=children,
            )
        )
        page_number += 1

    for page in layout.pages:
        pages.append(
            PreviewNode(
                component="Page",
                props={"pageNumber": page_number, "kind": "content"},
                style=_page_style(),
                children=[section_node(layout, section, highlighted_id) for section in page],
            )
        )
        page_number += 1

    return PreviewNode(
        component="Document",
        props={"title": meta.title, "totalPages": len(pages), "fingerprint": layout.fingerprint},
        children=pages,
    )
