"""Test setup for charter2pdf."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from charter2pdf.layout import clear_layout_cache  # noqa: E402
from charter2pdf.schemas import Section, SectionType  # noqa: E402


def make_section(
    section_id: str,
    section_type: SectionType | str,
    *,
    title: str = "",
    content: str = "",
    order: float | None = 0,
    parent_id: str | None = None,
) -> Section:
    """Build a Section with sensible defaults for tests."""
    return Section(
        id=section_id,
        type=SectionType(section_type),
        title=title,
        content=content,
        order=order,
        parent_id=parent_id,
    )


@pytest.fixture(autouse=True)
def _fresh_layout_cache() -> None:
    """Keep the module-level layout memo from leaking between tests."""
    clear_layout_cache()


@pytest.fixture
def charter() -> list[Section]:
    """A small constitution: preamble, two articles, nested sections, one amendment."""
    return [
        make_section("pre", "preamble", title="Preamble", content="We the members establish this charter."),
        make_section("a1", "article", title="Name", order=1),
        make_section("s1", "section", title="Official Name", content="The name is Example Club.", order=1, parent_id="a1"),
        make_section("a2", "article", title="Membership", order=2),
        make_section("s2", "section", title="Eligibility", content="Any student may join.", order=1, parent_id="a2"),
        make_section("s3", "section", title="Dues", content="Dues are **ten** dollars.", order=2, parent_id="a2"),
        make_section("ss1", "subsection", title="Waivers", content="Dues may be waived.", order=1, parent_id="s3"),
        make_section("ss2", "subsection", title="Refunds", content="No refunds.", order=1, parent_id="ss1"),
        make_section("am1", "amendment", title="Quorum", content="Quorum is half the members.", order=1),
    ]
