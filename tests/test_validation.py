"""Tests for the consistency validator."""

from __future__ import annotations

import pytest

from charter2pdf.layout import build_document_layout
from charter2pdf.schemas import PreviewNode
from charter2pdf.validation import (
    ConsistencyValidator,
    check_renderer_parity,
    format_report,
    validate_consistency,
)
from conftest import make_section


def _with_article(*sections):
    return [make_section("a", "article", title="Rules", order=1), *sections]


class TestValidateConsistency:
    """Tests for validate_consistency function."""

    def test_clean_charter(self, charter) -> None:
        report = validate_consistency(charter)

        assert report.is_valid
        assert report.errors == []
        assert report.warnings == []
        assert report.suggestions == []

    def test_empty_image_placeholder_is_one_warning(self) -> None:
        sections = _with_article(make_section("s", "section", title="Logo", content="[IMAGE:]", order=1, parent_id="a"))
        report = validate_consistency(sections)

        assert report.warnings == ['Section "Logo" has empty image placeholder']
        assert report.is_valid

    def test_missing_order(self) -> None:
        report = validate_consistency([make_section("p", "preamble", title="Preamble", content="x", order=None)])

        assert report.warnings == ['Preamble "Preamble" is missing order property']

    def test_empty_content_skips_articles(self) -> None:
        sections = _with_article(make_section("s", "section", title="Blank", order=1, parent_id="a"))

        assert validate_consistency(sections).warnings == ['Section "Blank" has no content']

    def test_tabs_and_padded_titles(self) -> None:
        sections = _with_article(
            make_section("s", "section", title=" Padded ", content="a\tb", order=1, parent_id="a"),
        )
        warnings = validate_consistency(sections).warnings

        assert 'Section " Padded " contains tab characters that may render inconsistently' in warnings
        assert 'Section " Padded " has leading/trailing whitespace' in warnings

    def test_suggestions(self) -> None:
        content = "One\n\n\nTwo [IMAGE:" + "x" * 101 + "]"
        sections = _with_article(make_section("s", "section", title="Long", content=content, order=1, parent_id="a"))
        report = validate_consistency(sections)

        assert report.warnings == []
        assert len(report.suggestions) == 2

    def test_structural_anomalies_are_warnings(self) -> None:
        sections = [
            make_section("p1", "preamble", content="First"),
            make_section("p2", "preamble", content="Second"),
            make_section("s", "section", title="Lost", content="x", parent_id="gone"),
            make_section("s", "section", title="Copy", content="x", parent_id="gone"),
        ]
        report = validate_consistency(sections)

        assert report.is_valid
        assert 'Duplicate section id "s" ignored for Section "Copy"' in report.warnings
        assert "Found 2 preambles; only the first one is used as the preamble" in report.warnings
        assert 'Section "Lost" references missing parent "gone"' in report.warnings
        assert 'Section "Lost" is not attached to the document tree' in report.warnings
        assert 'Preamble "Untitled" is not attached to the document tree' in report.warnings

    def test_misplaced_parent(self) -> None:
        sections = [
            make_section("m", "amendment", title="One", content="x", order=1),
            make_section("s", "section", title="Wrong", content="x", order=1, parent_id="m"),
        ]
        warnings = validate_consistency(sections).warnings

        assert 'Section "Wrong" is nested under Amendment "One"' in warnings


class TestRendererParity:
    """Tests for the preview/document parity check."""

    def test_renderers_agree(self, charter) -> None:
        assert check_renderer_parity(build_document_layout(charter)) == []

    def test_parity_runs_in_validator(self, charter) -> None:
        report = validate_consistency(charter, check_parity=True)

        assert report.is_valid

    def test_disagreement_is_an_error(self, charter, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            "charter2pdf.validation.build_preview",
            lambda layout, meta=None: PreviewNode(component="Document"),
        )
        report = validate_consistency(charter, check_parity=True)

        assert not report.is_valid
        assert report.errors == ["Preview has 0 pages but the document has 6"]


class TestFormatReport:
    """Tests for the plain-text report."""

    def test_passed_report(self, charter) -> None:
        text = ConsistencyValidator(charter).generate_report()

        assert "VALIDATION PASSED" in text
        assert "Total sections: 9" in text
        assert "Articles: 2" in text
        assert "Amendments: 1" in text
        assert text.endswith("Has preamble: Yes")

    def test_failed_report_lists_errors(self) -> None:
        report = validate_consistency([])
        report.errors.append("Page 2: preview and document list different sections")
        report.is_valid = False

        text = format_report(report, [])

        assert "VALIDATION FAILED" in text
        assert "  - Page 2: preview and document list different sections" in text
        assert "Has preamble: No" in text
