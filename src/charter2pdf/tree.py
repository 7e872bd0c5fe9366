"""Flat section index and document-order traversal.

Sections reference their parent through ``parent_id`` only. The index keeps
them in a flat tuple with an id -> position map; every child lookup is a
filter over that tuple, so malformed input (dangling parents, cycles,
duplicate ids) can never produce an unbounded walk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal

from charter2pdf.schemas import Section, SectionType

GroupKind = Literal["preamble", "article", "amendment", "unattached"]


@dataclass(frozen=True)
class DocumentGroup:
    """A top-level pagination unit in document order."""

    kind: GroupKind
    sections: tuple[Section, ...]


@dataclass(frozen=True)
class MoveCheck:
    """Outcome of checking a drag-and-drop move."""

    is_valid: bool
    new_parent_id: str | None = None
    message: str | None = None


@dataclass
class SectionIndex:
    """Immutable snapshot of sections with lookup helpers."""

    sections: tuple[Section, ...]
    duplicates: tuple[Section, ...] = ()
    _position: dict[str, int] = field(default_factory=dict, repr=False)

    @classmethod
    def build(cls, sections: Iterable[Section]) -> "SectionIndex":
        """Index ``sections``, keeping the first occurrence of each id."""
        unique: list[Section] = []
        duplicates: list[Section] = []
        position: dict[str, int] = {}
        for section in sections:
            if section.id in position:
                duplicates.append(section)
                continue
            position[section.id] = len(unique)
            unique.append(section)
        return cls(sections=tuple(unique), duplicates=tuple(duplicates), _position=position)

    def __len__(self) -> int:
        return len(self.sections)

    def __contains__(self, section_id: object) -> bool:
        return section_id in self._position

    def get(self, section_id: str | None) -> Section | None:
        if section_id is None:
            return None
        position = self._position.get(section_id)
        return None if position is None else self.sections[position]

    def position(self, section_id: str) -> int:
        return self._position[section_id]

    def sort(self, sections: Iterable[Section]) -> list[Section]:
        """Sort ascending by order; ties keep collection order."""
        return sorted(sections, key=lambda s: (s.sort_order, self._position[s.id]))

    def of_type(self, section_type: SectionType) -> list[Section]:
        return self.sort(s for s in self.sections if s.type == section_type)

    def children(self, parent_id: str, section_type: SectionType | None = None) -> list[Section]:
        return self.sort(
            s
            for s in self.sections
            if s.parent_id == parent_id and (section_type is None or s.type == section_type)
        )

    def preamble(self) -> Section | None:
        """Return the first preamble in collection order."""
        return next((s for s in self.sections if s.type == SectionType.PREAMBLE), None)

    def subsection_tree(self, parent_id: str, _seen: set[str] | None = None) -> list[Section]:
        """Flatten nested subsections below ``parent_id`` depth-first."""
        seen = _seen if _seen is not None else {parent_id}
        result: list[Section] = []
        stack = list(reversed(self.children(parent_id, SectionType.SUBSECTION)))
        while stack:
            child = stack.pop()
            if child.id in seen:
                continue
            seen.add(child.id)
            result.append(child)
            stack.extend(reversed(self.children(child.id, SectionType.SUBSECTION)))
        return result

    def article_subtree(self, article: Section) -> list[Section]:
        """Article, then each section followed by its subsection tree."""
        nodes = [article]
        seen = {article.id}
        for section in self.children(article.id, SectionType.SECTION):
            if section.id in seen:
                continue
            seen.add(section.id)
            nodes.append(section)
            nodes.extend(self.subsection_tree(section.id, seen))
        return nodes

    def descendants(self, parent_id: str) -> list[Section]:
        """All sections below ``parent_id``, regardless of type."""
        seen = {parent_id}
        result: list[Section] = []
        stack = [parent_id]
        while stack:
            current = stack.pop(0)
            for child in self.children(current):
                if child.id in seen:
                    continue
                seen.add(child.id)
                result.append(child)
                stack.append(child.id)
        return result

    def ancestors(self, section: Section) -> list[Section]:
        """Parent chain from nearest to farthest, stopping at cycles."""
        chain: list[Section] = []
        seen = {section.id}
        parent = self.get(section.parent_id)
        while parent is not None and parent.id not in seen:
            chain.append(parent)
            seen.add(parent.id)
            parent = self.get(parent.parent_id)
        return chain

    def document_groups(self) -> list[DocumentGroup]:
        """Split the snapshot into pagination units in document order.

        Sections the main walk cannot reach end up in a trailing
        ``unattached`` group, in collection order.
        """
        groups: list[DocumentGroup] = []
        placed: set[str] = set()

        preamble = self.preamble()
        if preamble is not None:
            groups.append(DocumentGroup("preamble", (preamble,)))
            placed.add(preamble.id)

        for article in self.of_type(SectionType.ARTICLE):
            nodes = [node for node in self.article_subtree(article) if node.id not in placed]
            placed.update(node.id for node in nodes)
            groups.append(DocumentGroup("article", tuple(nodes)))

        for amendment in self.of_type(SectionType.AMENDMENT):
            groups.append(DocumentGroup("amendment", (amendment,)))
            placed.add(amendment.id)

        leftovers = tuple(s for s in self.sections if s.id not in placed)
        if leftovers:
            groups.append(DocumentGroup("unattached", leftovers))
        return groups

    def document_order(self) -> list[Section]:
        """Every indexed section exactly once, in document order."""
        return [section for group in self.document_groups() for section in group.sections]


def validate_section_move(
    moved: Section,
    destination_index: int,
    hierarchy: list[Section],
) -> MoveCheck:
    """Find the parent a section would get when dropped at ``destination_index``.

    ``hierarchy`` is the flat, display-ordered list the section is dropped
    into. Sections attach to the nearest preceding article; subsections to
    the nearest preceding section or subsection.
    """
    if moved.type in (SectionType.PREAMBLE, SectionType.ARTICLE, SectionType.AMENDMENT):
        return MoveCheck(is_valid=True)

    if moved.type == SectionType.SECTION:
        allowed = (SectionType.ARTICLE,)
        message = "Sections must be placed under an article"
    else:
        allowed = (SectionType.SECTION, SectionType.SUBSECTION)
        message = "Subsections must be placed under a section or another subsection"

    for candidate in reversed(hierarchy[: max(destination_index, 0)]):
        if candidate.id == moved.id:
            continue
        if candidate.type in allowed:
            return MoveCheck(is_valid=True, new_parent_id=candidate.id)
    return MoveCheck(is_valid=False, message=message)
