"""Tests for the height estimator."""

from __future__ import annotations

import pytest

from charter2pdf.estimate import estimate_body_lines, estimate_height
from conftest import make_section


class TestEstimateBodyLines:
    """Tests for estimate_body_lines function."""

    def test_empty(self) -> None:
        assert estimate_body_lines("") == 0

    def test_explicit_lines_win(self) -> None:
        assert estimate_body_lines("a\nb\nc") == 3

    def test_wrapped_words_win(self) -> None:
        assert estimate_body_lines(" ".join(["word"] * 25)) == 3


class TestEstimateHeight:
    """Tests for estimate_height function."""

    @pytest.mark.parametrize(
        ("section_type", "expected"),
        [("preamble", 66.5), ("amendment", 66.5), ("section", 60.5), ("subsection", 56.5)],
    )
    def test_one_line_of_content(self, section_type: str, expected: float) -> None:
        assert estimate_height(make_section("x", section_type, content="One short line.")) == expected

    def test_article_ignores_content(self) -> None:
        article = make_section("a", "article", content="\n".join(["line"] * 40))

        assert estimate_height(article) == 42.0

    def test_empty_section_has_title_and_margin_only(self) -> None:
        assert estimate_height(make_section("s", "section")) == 44.0

    def test_deterministic(self) -> None:
        section = make_section("s", "section", content="Some text " * 30)

        assert estimate_height(section) == estimate_height(section)
