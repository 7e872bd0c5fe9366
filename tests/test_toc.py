"""Tests for the table of contents builder."""

from __future__ import annotations

import pytest

from charter2pdf.exceptions import LayoutError
from charter2pdf.toc import build_page_map, estimate_toc_pages, generate_table_of_contents
from conftest import make_section


class TestEstimateTocPages:
    """Tests for estimate_toc_pages function."""

    @pytest.mark.parametrize(("count", "expected"), [(0, 0), (1, 1), (25, 1), (26, 2), (51, 3)])
    def test_ceil_of_entries(self, count: int, expected: int) -> None:
        assert estimate_toc_pages(count) == expected

    def test_rejects_non_positive_page_size(self) -> None:
        with pytest.raises(LayoutError):
            estimate_toc_pages(3, entries_per_page=0)


class TestBuildPageMap:
    """Tests for build_page_map function."""

    def test_first_occurrence_wins(self) -> None:
        a = make_section("a", "article")
        b = make_section("b", "amendment")

        assert build_page_map([[a], [b, a]], content_start_page=3) == {"a": 3, "b": 4}


class TestGenerateTableOfContents:
    """Tests for generate_table_of_contents function."""

    def test_sample_charter(self, charter) -> None:
        toc = generate_table_of_contents(charter)

        assert [entry.section_id for entry in toc.entries] == [
            "pre", "a1", "s1", "a2", "s2", "s3", "ss1", "ss2", "am1",
        ]
        assert [entry.page_number for entry in toc.entries] == [3, 4, 4, 5, 5, 5, 5, 5, 6]
        assert toc.toc_pages == 1
        assert toc.content_start_page == 3
        assert toc.total_pages == 6

    def test_labels_match_numbering(self, charter) -> None:
        toc = generate_table_of_contents(charter)
        labels = {entry.section_id: entry.display_label for entry in toc.entries}

        assert labels["a2"] == "Article II: Membership"
        assert labels["ss2"] == "Subsection 2.1A: Refunds"

    def test_every_section_listed_once(self, charter) -> None:
        toc = generate_table_of_contents(charter)

        assert len(toc.entries) == len(charter)
        assert len({entry.section_id for entry in toc.entries}) == len(charter)

    def test_page_numbers_never_decrease(self) -> None:
        sections = [make_section("stray", "subsection", content="x", parent_id="gone")]
        sections += [make_section(f"m{i}", "amendment", content="text", order=i) for i in range(30)]
        sections.append(make_section("p", "preamble", content="We"))
        toc = generate_table_of_contents(sections)
        pages = [entry.page_number for entry in toc.entries]

        assert pages == sorted(pages)
        assert toc.entries[-1].section_id == "stray"

    def test_toc_length_shifts_content(self) -> None:
        sections = [make_section(f"m{i}", "amendment", content="text", order=i) for i in range(30)]
        toc = generate_table_of_contents(sections)

        assert toc.toc_pages == 2
        assert toc.content_start_page == 4
        assert toc.entries[0].page_number == 4
        assert toc.total_pages == 1 + 2 + 30

    def test_empty_input(self) -> None:
        toc = generate_table_of_contents([])

        assert toc.entries == []
        assert toc.toc_pages == 0
        assert toc.content_start_page == 2
        assert toc.total_pages == 1

    def test_page_map(self, charter) -> None:
        assert generate_table_of_contents(charter).page_map()["ss1"] == 5
