"""Tests for the interactive preview tree."""

from __future__ import annotations

from charter2pdf.layout import build_document_layout
from charter2pdf.preview import build_preview, style_props
from charter2pdf.schemas import PreviewNode
from charter2pdf.typography import BODY
from conftest import make_section


def _sections_on(tree: PreviewNode) -> list[PreviewNode]:
    return [
        node
        for page in tree.children
        if page.props["kind"] == "content"
        for node in page.children
    ]


class TestBuildPreview:
    """Tests for build_preview function."""

    def test_pages(self, charter) -> None:
        tree = build_preview(build_document_layout(charter))

        assert tree.component == "Document"
        assert tree.props["totalPages"] == 6
        assert [page.props["kind"] for page in tree.children] == ["cover", "toc", "content", "content", "content", "content"]
        assert [page.props["pageNumber"] for page in tree.children] == [1, 2, 3, 4, 5, 6]

    def test_headings_match_toc_labels(self, charter) -> None:
        layout = build_document_layout(charter)
        tree = build_preview(layout)
        headings = {node.section_id: node.children[0].text for node in _sections_on(tree)}

        assert headings == {entry.section_id: entry.display_label for entry in layout.toc.entries}

    def test_highlight(self, charter) -> None:
        tree = build_preview(build_document_layout(charter), highlighted_id="s3")
        highlighted = [node.section_id for node in _sections_on(tree) if node.props["highlighted"]]

        assert highlighted == ["s3"]

    def test_styles_come_from_typography(self, charter) -> None:
        tree = build_preview(build_document_layout(charter))
        nodes = {node.section_id: node for node in _sections_on(tree)}

        assert nodes["s1"].children[0].style["fontSize"] == "12pt"
        assert nodes["s1"].children[0].props["tag"] == "h3"
        assert nodes["s1"].children[1].style == style_props(BODY)
        assert nodes["ss2"].style == {"marginLeft": "24px"}

    def test_block_components(self) -> None:
        section = make_section("p", "preamble", content="1. One\n2. Two\n\n[IMAGE:]\n\n┌─┐")
        tree = build_preview(build_document_layout([section]))
        blocks = _sections_on(tree)[0].children[1:]

        assert [block.component for block in blocks] == ["NumberedList", "ImagePlaceholder", "Diagram"]
        assert [item.props["html"] for item in blocks[0].children] == ["One", "Two"]
        assert blocks[1].props["isEmpty"] is True
        assert blocks[1].text == "Add image description"
        assert blocks[2].style["whiteSpace"] == "pre"
        assert blocks[2].props["html"] == "┌─┐"
        assert blocks[2].text is None

    def test_toc_entries(self, charter) -> None:
        tree = build_preview(build_document_layout(charter))
        toc_page = tree.children[1]

        assert toc_page.children[0].component == "TocTitle"
        entry = toc_page.children[-1]
        assert (entry.section_id, entry.props["pageNumber"], entry.props["href"]) == ("am1", 6, "#section-am1")

    def test_tree_is_json_serialisable(self, charter) -> None:
        tree = build_preview(build_document_layout(charter))

        assert PreviewNode.model_validate_json(tree.model_dump_json()) == tree


def test_diagram_markup_is_html_not_text() -> None:
    section = make_section("p", "preamble", content="┌──┐\n│<a>│\n└──┘")
    diagram = _sections_on(build_preview(build_document_layout([section])))[0].children[1]

    assert diagram.component == "Diagram"
    assert diagram.props["html"] == "┌──┐\n│&lt;a&gt;│\n└──┘"
    assert diagram.text is None
