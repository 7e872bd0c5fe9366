"""Tests for the paginator."""

from __future__ import annotations

import pytest

from charter2pdf.exceptions import LayoutError
from charter2pdf.pagination import paginate
from charter2pdf.toc import generate_table_of_contents
from conftest import make_section


class TestPaginate:
    """Tests for paginate function."""

    def test_sample_charter(self, charter) -> None:
        assert paginate(charter) == [
            ["pre"],
            ["a1", "s1"],
            ["a2", "s2", "s3", "ss1", "ss2"],
            ["am1"],
        ]

    def test_every_section_appears_exactly_once(self, charter) -> None:
        ids = [section_id for page in paginate(charter) for section_id in page]

        assert sorted(ids) == sorted(section.id for section in charter)

    def test_empty_input(self) -> None:
        assert paginate([]) == []

    def test_oversized_section_gets_its_own_page(self) -> None:
        sections = [
            make_section("a", "article", order=1),
            make_section("big", "section", content=" ".join(["word"] * 1000), order=1, parent_id="a"),
            make_section("small", "section", content="Short.", order=2, parent_id="a"),
        ]

        assert paginate(sections) == [["a"], ["big"], ["small"]]

    def test_avoids_orphan_section_heading(self) -> None:
        """A section that would fit still moves on when too little space remains."""
        sections = [
            make_section("a", "article", order=1),
            make_section("s1", "section", content="Line.", order=1, parent_id="a"),
            make_section("s2", "section", content="Line.", order=2, parent_id="a"),
        ]

        assert paginate(sections, page_height=200, orphan_threshold=100) == [["a", "s1"], ["s2"]]
        assert paginate(sections, page_height=200, orphan_threshold=0) == [["a", "s1", "s2"]]

    def test_preamble_and_amendments_stand_alone(self) -> None:
        sections = [
            make_section("m2", "amendment", content="B", order=2),
            make_section("p", "preamble", content="P"),
            make_section("m1", "amendment", content="A", order=1),
        ]

        assert paginate(sections) == [["p"], ["m1"], ["m2"]]

    def test_unattached_sections_follow_amendments(self) -> None:
        sections = [
            make_section("orphan", "section", content="Lost.", parent_id="nowhere"),
            make_section("a", "article", order=1),
            make_section("m", "amendment", content="A", order=1),
            make_section("p2", "preamble", content="Second preamble"),
            make_section("p1", "preamble", content="First preamble"),
        ]
        # first preamble in collection order wins
        sections.insert(0, sections.pop())

        assert paginate(sections) == [["p1"], ["a"], ["m"], ["orphan", "p2"]]

    def test_duplicate_ids_keep_first(self) -> None:
        sections = [
            make_section("p", "preamble", content="First"),
            make_section("p", "amendment", content="Duplicate", order=1),
        ]

        assert paginate(sections) == [["p"]]

    @pytest.mark.parametrize(("page_height", "orphan_threshold"), [(0, 100), (-1, 100), (648, -1)])
    def test_rejects_invalid_parameters(self, page_height: float, orphan_threshold: float) -> None:
        with pytest.raises(LayoutError):
            paginate([], page_height=page_height, orphan_threshold=orphan_threshold)


def test_deeply_nested_subsections() -> None:
    """A long subsection chain is laid out and listed without recursion limits."""
    depth = 1500
    sections = [
        make_section("a", "article", order=1),
        make_section("s", "section", order=1, parent_id="a"),
        make_section("sub0", "subsection", order=1, parent_id="s"),
    ]
    sections += [
        make_section(f"sub{i}", "subsection", order=1, parent_id=f"sub{i - 1}")
        for i in range(1, depth)
    ]

    pages = paginate(sections)
    toc = generate_table_of_contents(sections)
    labels = {entry.section_id: entry.display_label for entry in toc.entries}

    assert [section_id for page in pages for section_id in page] == [s.id for s in sections]
    assert len(toc.entries) == len(sections)
    assert labels["sub2"] == "Subsection 1.1AA"
    assert toc.entries[-1].indent_level == 2 + depth - 1
