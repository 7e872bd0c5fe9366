"""Resolve user-facing numbering for sections."""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_uppercase

from charter2pdf.schemas import Section, SectionType
from charter2pdf.tree import SectionIndex

PREAMBLE_LABEL = "Preamble"

_ROMAN_SYMBOLS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_roman(number: int) -> str:
    """Convert a positive integer to an uppercase Roman numeral."""
    if number < 1:
        raise ValueError(f"Roman numerals start at 1, got {number}")
    parts: list[str] = []
    for value, symbol in _ROMAN_SYMBOLS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


@dataclass(frozen=True)
class SectionLabel:
    """Resolved numbering for one section.

    Attributes:
        section_id: Id of the labelled section.
        display_label: Heading text shared by the TOC and both renderers.
        number: Numbering token without the kind prefix ("IV", "3", "2.1A").
        index: 1-based position among same-kind siblings, 0 for the preamble.
        depth: Ancestor subsection count (subsections only).
        indent_level: Visual nesting level used by the TOC and preview.
    """

    section_id: str
    display_label: str
    number: str
    index: int
    depth: int = 0
    indent_level: int = 0


def _with_title(prefix: str, title: str) -> str:
    title = title.strip()
    return f"{prefix}: {title}" if title else prefix


def _sibling_index(section: Section, siblings: list[Section]) -> int:
    for position, sibling in enumerate(siblings, start=1):
        if sibling.id == section.id:
            return position
    return 0


class NumberingResolver:
    """Derive labels from sibling order over a section index.

    The resolver is a pure function of the index; results are memoised per
    instance so that the recursive subsection walk stays linear.
    """

    def __init__(self, index: SectionIndex) -> None:
        self.index = index
        self._labels: dict[str, SectionLabel] = {}
        self._subsection_numbers: dict[str, str] = {}

    def label(self, section: Section) -> SectionLabel:
        cached = self._labels.get(section.id)
        if cached is None:
            cached = self._resolve(section)
            self._labels[section.id] = cached
        return cached

    def labels(self) -> dict[str, SectionLabel]:
        """Labels for every indexed section, keyed by id."""
        return {section.id: self.label(section) for section in self.index.sections}

    def subsection_depth(self, section: Section) -> int:
        """Count ancestor subsections, stopping at the first non-subsection."""
        depth = 0
        for ancestor in self.index.ancestors(section):
            if ancestor.type != SectionType.SUBSECTION:
                break
            depth += 1
        return depth

    def _resolve(self, section: Section) -> SectionLabel:
        if section.type == SectionType.PREAMBLE:
            return SectionLabel(section.id, PREAMBLE_LABEL, "", 0)

        if section.type == SectionType.ARTICLE:
            position = _sibling_index(section, self.index.of_type(SectionType.ARTICLE))
            numeral = to_roman(position)
            return SectionLabel(section.id, _with_title(f"Article {numeral}", section.title), numeral, position)

        if section.type == SectionType.AMENDMENT:
            position = _sibling_index(section, self.index.of_type(SectionType.AMENDMENT))
            return SectionLabel(
                section.id,
                _with_title(f"Amendment {position}", section.title),
                str(position),
                position,
            )

        if section.type == SectionType.SECTION:
            position = self._section_position(section)
            return SectionLabel(
                section.id,
                _with_title(f"Section {position}", section.title),
                str(position),
                position,
                indent_level=1,
            )

        depth = self.subsection_depth(section)
        siblings = self.index.children(section.parent_id, SectionType.SUBSECTION) if section.parent_id else [section]
        position = _sibling_index(section, siblings)
        number = self._subsection_number(section)
        prefix = f"Subsection {number}" if number else "Subsection"
        return SectionLabel(
            section.id,
            _with_title(prefix, section.title),
            number,
            position,
            depth=depth,
            indent_level=2 + depth,
        )

    def _section_position(self, section: Section) -> int:
        siblings = [
            s
            for s in self.index.sections
            if s.parent_id == section.parent_id and s.type == SectionType.SECTION
        ]
        return _sibling_index(section, self.index.sort(siblings))

    def _subsection_number(self, section: Section) -> str:
        """Build "2.1", "2.1A", "2.1AB", ... from the owning section down.

        Returns an empty string when no section ancestor exists.
        """
        # Collect the unnumbered subsection chain bottom-up, stopping at a
        # memoised number, a non-subsection parent or a cycle.
        chain: list[Section] = []
        seen: set[str] = set()
        current = section
        while current.id not in self._subsection_numbers:
            chain.append(current)
            seen.add(current.id)
            parent = self.index.get(current.parent_id)
            if parent is None or parent.id in seen or parent.type != SectionType.SUBSECTION:
                break
            current = parent

        for node in reversed(chain):
            self._subsection_numbers[node.id] = self._number_under_parent(node)
        return self._subsection_numbers[section.id]

    def _number_under_parent(self, section: Section) -> str:
        parent = self.index.get(section.parent_id)
        if parent is None or parent.id == section.id:
            return ""
        position = _sibling_index(section, self.index.children(parent.id, SectionType.SUBSECTION))
        if parent.type == SectionType.SECTION:
            return f"{self._section_position(parent)}.{position}"
        parent_number = self._subsection_numbers.get(parent.id, "") if parent.type == SectionType.SUBSECTION else ""
        if not parent_number:
            return ""
        suffix = ascii_uppercase[position - 1] if position <= len(ascii_uppercase) else str(position)
        return f"{parent_number}{suffix}"


def resolve_labels(index: SectionIndex) -> dict[str, SectionLabel]:
    """Convenience wrapper returning labels for every section in ``index``."""
    return NumberingResolver(index).labels()
