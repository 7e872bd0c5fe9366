"""Typographic contract shared by the preview and the static document.

Both renderers take every size, margin and colour from here, so the preview
and the exported document cannot drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass

from charter2pdf.schemas import SectionType

FONT_FAMILY = "Arial, sans-serif"
MONOSPACE_FAMILY = '"Courier New", Courier, monospace'


@dataclass(frozen=True)
class PageBox:
    width: str = "8.5in"
    height: str = "11in"
    margin: str = "1in"
    size: str = "letter"


@dataclass(frozen=True)
class TextStyle:
    tag: str
    font_size: str
    font_weight: str = "normal"
    line_height: str = "1.5"
    margin_top: str = "0"
    margin_bottom: str = "0"
    color: str = "#444"
    text_align: str = "left"
    text_transform: str = "none"
    font_family: str = FONT_FAMILY

    def css_declarations(self) -> dict[str, str]:
        return {
            "font-family": self.font_family,
            "font-size": self.font_size,
            "font-weight": self.font_weight,
            "line-height": self.line_height,
            "margin-top": self.margin_top,
            "margin-bottom": self.margin_bottom,
            "color": self.color,
            "text-align": self.text_align,
            "text-transform": self.text_transform,
        }


PAGE = PageBox()

HEADING_STYLES: dict[SectionType, TextStyle] = {
    SectionType.PREAMBLE: TextStyle(
        "h2", "18pt", "bold", "1.2", "20px", "8px", "#333", "center", "uppercase"
    ),
    SectionType.ARTICLE: TextStyle("h2", "18pt", "bold", "1.2", "20px", "8px", "#333"),
    SectionType.SECTION: TextStyle("h3", "12pt", "bold", "1.2", "12px", "8px", "#555"),
    SectionType.SUBSECTION: TextStyle("h4", "11pt", "600", "1.2", "10px", "6px", "#666"),
    SectionType.AMENDMENT: TextStyle(
        "h2", "18pt", "bold", "1.2", "20px", "8px", "#333", "center", "uppercase"
    ),
}

HEADING_CLASSES: dict[SectionType, str] = {
    SectionType.PREAMBLE: "article-title",
    SectionType.ARTICLE: "article-title",
    SectionType.SECTION: "section-title",
    SectionType.SUBSECTION: "subsection-title",
    SectionType.AMENDMENT: "article-title",
}

BODY = TextStyle("p", "11pt", margin_bottom="10px", text_align="justify")
LIST = TextStyle("ol", "11pt", margin_bottom="10px")
DIAGRAM = TextStyle("pre", "11pt", line_height="1.4", margin_top="12px", margin_bottom="12px",
                    font_family=MONOSPACE_FAMILY)
COVER_TITLE = TextStyle("h1", "28pt", "bold", "1.1", "0", "24px", "#333", "center")
COVER_SUBTITLE = TextStyle("h2", "16pt", "600", "1.3", "0", "48px", "#333", "center")
COVER_META = TextStyle("p", "14pt", "600", "1.5", "0", "12px", "#444", "center")
TOC_HEADING = TextStyle("h2", "18pt", "bold", "1.2", "20px", "16px", "#333", "center")
TOC_ENTRY = TextStyle("div", "11pt", margin_bottom="6px")

TOC_INDENT_PX = 24
TOC_MAX_INDENT_PX = 144
SUBSECTION_INDENT_PX = 24
IMAGE_PLACEHOLDER_FALLBACK = "Add image description"


def toc_indent_px(indent_level: int) -> int:
    """Left padding of a TOC entry, capped for deep nesting."""
    return min(indent_level * TOC_INDENT_PX, TOC_MAX_INDENT_PX)


def section_indent_px(section_type: SectionType, depth: int) -> int:
    """Left margin of a nested subsection body."""
    if section_type != SectionType.SUBSECTION:
        return 0
    return depth * SUBSECTION_INDENT_PX


def css_block(selector: str, declarations: dict[str, str]) -> str:
    body = "\n".join(f"    {name}: {value};" for name, value in declarations.items())
    return f"{selector} {{\n{body}\n}}"


def stylesheet() -> str:
    """Stylesheet for the static document, generated from the contract."""
    rules = [
        f"@page {{ size: {PAGE.size}; margin: 0; }}",
        css_block("*", {"box-sizing": "border-box"}),
        css_block(
            "body",
            {"font-family": FONT_FAMILY, "margin": "0", "padding": "0", "color": BODY.color, "background": "white"},
        ),
        css_block(
            ".document-page",
            {
                "width": PAGE.width,
                "height": PAGE.height,
                "padding": PAGE.margin,
                "margin": "0 auto",
                "overflow": "hidden",
                "page-break-after": "always",
                "break-after": "page",
            },
        ),
        css_block(".document-page:last-child", {"page-break-after": "avoid", "break-after": "auto"}),
        css_block(".cover-page", {"display": "flex", "flex-direction": "column", "align-items": "center"}),
        css_block(".cover-title", COVER_TITLE.css_declarations()),
        css_block(".cover-subtitle", COVER_SUBTITLE.css_declarations()),
        css_block(".cover-meta", COVER_META.css_declarations()),
        css_block(".toc-title", TOC_HEADING.css_declarations()),
        css_block(".toc-entry", {**TOC_ENTRY.css_declarations(), "display": "flex", "gap": "12px"}),
        css_block(".toc-entry .toc-label", {"flex": "1"}),
        css_block(".toc-entry .toc-page", {"margin-left": "auto"}),
        css_block(".document-section", {"margin-bottom": "24px", "break-inside": "avoid"}),
    ]
    for section_type, style in HEADING_STYLES.items():
        rules.append(
            css_block(
                f".{HEADING_CLASSES[section_type]}.type-{section_type.value}",
                {**style.css_declarations(), "page-break-after": "avoid"},
            )
        )
    rules.extend(
        [
            css_block("p.body-text", BODY.css_declarations()),
            css_block("ol.numbered-list, ul.bullet-list", {**LIST.css_declarations(), "padding-left": "20px"}),
            css_block("ol.numbered-list li, ul.bullet-list li", {"margin-bottom": "4px"}),
            css_block("pre.diagram-block", {**DIAGRAM.css_declarations(), "white-space": "pre"}),
            css_block(
                ".image-placeholder",
                {
                    "border": "2px dashed #ccc",
                    "padding": "24px",
                    "text-align": "center",
                    "margin": "16px 0",
                    "background": "#f9f9f9",
                    "break-inside": "avoid",
                },
            ),
        ]
    )
    return "\n".join(rules)
