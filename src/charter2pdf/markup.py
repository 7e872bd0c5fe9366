"""Parse section markup into typed content blocks."""

from __future__ import annotations

import html
import re

from charter2pdf.schemas import BlockType, ContentBlock

IMAGE_PLACEHOLDER_RE = re.compile(r"\[IMAGE:([^\]]*)\]")
_IMAGE_SPLIT_RE = re.compile(r"(\[IMAGE:[^\]]*\])")
_PARAGRAPH_SPLIT_RE = re.compile(r"\n[ \t]*\n")
_NUMBERED_ITEM_RE = re.compile(r"^\d+\.\s+(.+)$")
_BULLET_ITEM_RE = re.compile(r"^[-*]\s+(.+)$")
# Unicode "Box Drawing" block.
_BOX_DRAWING_RE = re.compile("[\u2500-\u257f]")
_STRONG_RE = re.compile(r"\*\*(.+?)\*\*", re.DOTALL)
_EMPHASIS_RE = re.compile(r"(?<!\*)\*([^*\n]+?)\*(?!\*)")
_PLACEHOLDER_RE = re.compile("\x00(\\d+)\x00")


def parse_markup(content: str) -> list[ContentBlock]:
    """Split raw section content into ordered content blocks.

    Image placeholders are cut out first; the remaining text is split into
    paragraph groups on blank lines and each group is classified as a
    numbered list, bullet list, diagram or plain paragraph.
    """
    blocks: list[ContentBlock] = []
    for part in _IMAGE_SPLIT_RE.split(content or ""):
        if not part:
            continue
        image = IMAGE_PLACEHOLDER_RE.fullmatch(part)
        if image:
            blocks.append(ContentBlock(type=BlockType.IMAGE, description=image.group(1).strip()))
            continue
        for group in _PARAGRAPH_SPLIT_RE.split(part):
            if group.strip():
                blocks.append(_classify_group(group))
    return blocks


def image_descriptions(content: str) -> list[str]:
    """Raw descriptions of every image placeholder in ``content``."""
    return IMAGE_PLACEHOLDER_RE.findall(content or "")


def _classify_group(group: str) -> ContentBlock:
    trimmed = group.strip("\n").rstrip()
    lines = [line.strip() for line in trimmed.split("\n") if line.strip()]

    numbered = [_NUMBERED_ITEM_RE.match(line) for line in lines]
    if all(numbered):
        return ContentBlock(
            type=BlockType.NUMBERED_LIST,
            items=[format_inline(match.group(1)) for match in numbered if match],
        )

    bullets = [_BULLET_ITEM_RE.match(line) for line in lines]
    if all(bullets):
        return ContentBlock(
            type=BlockType.BULLET_LIST,
            items=[format_inline(match.group(1)) for match in bullets if match],
        )

    if _BOX_DRAWING_RE.search(trimmed):
        return ContentBlock(type=BlockType.DIAGRAM, text=_escape(trimmed))

    return ContentBlock(type=BlockType.PARAGRAPH, text=format_inline(trimmed.strip()))


def _escape(text: str) -> str:
    return html.escape(text.replace("\x00", ""), quote=False)


def format_inline(text: str) -> str:
    """Escape ``text`` and convert ``**strong**`` then ``*emphasis*``.

    Converted strong spans are swapped for placeholders before emphasis is
    resolved, so no converted span is scanned twice.
    """
    escaped = _escape(text)
    rendered: list[str] = []

    def _stash_strong(match: re.Match[str]) -> str:
        inner = _EMPHASIS_RE.sub(r"<em>\1</em>", match.group(1))
        rendered.append(f"<strong>{inner}</strong>")
        return f"\x00{len(rendered) - 1}\x00"

    stashed = _STRONG_RE.sub(_stash_strong, escaped)
    emphasised = _EMPHASIS_RE.sub(r"<em>\1</em>", stashed)
    return _PLACEHOLDER_RE.sub(lambda match: rendered[int(match.group(1))], emphasised)
