"""Cursor-aware markup insertion around a buffer selection."""

from __future__ import annotations

from dataclasses import dataclass

from live_markup.buffer import TextBuffer

from .rules import CaretPolicy, MarkupRule


@dataclass(frozen=True, slots=True)
class InsertionResult:
    buffer: TextBuffer
    caret: int
    leading_newline: str = ""
    trailing_newline: str = ""


def insert_markup(
    buffer: TextBuffer,
    rule: MarkupRule,
    *,
    caret_policy: CaretPolicy = CaretPolicy.AFTER_SUFFIX,
) -> InsertionResult:
    """Wrap the selection of ``buffer`` with ``rule`` and collapse the caret.

    Block rules with ``ensure_newline`` get a leading newline when the
    selection does not already start a line, and a trailing newline unless the
    suffix ends with one. The caret is placed after the suffix but before the
    newline terminating a block, so the caret stays on the block's own line.
    """

    content = buffer.content
    start, end = buffer.selection
    selected = content[start:end]

    normalize = rule.ensure_newline and rule.block_level
    leading = "\n" if normalize and start > 0 and content[start - 1] != "\n" else ""
    trailing = "\n" if normalize and not rule.suffix.endswith("\n") else ""

    new_content = (
        content[:start]
        + leading
        + rule.prefix
        + selected
        + rule.suffix
        + trailing
        + content[end:]
    )

    opening = start + len(leading) + len(rule.prefix)
    if caret_policy is CaretPolicy.BETWEEN_MARKERS and not selected:
        caret = opening
    else:
        suffix_len = len(rule.suffix)
        if normalize and not trailing:
            suffix_len -= 1  # suffix supplies the block terminator
        caret = opening + len(selected) + suffix_len

    return InsertionResult(
        buffer=TextBuffer.collapsed_at(new_content, caret),
        caret=caret,
        leading_newline=leading,
        trailing_newline=trailing,
    )


class MarkupInserter:
    """Applies rules with a fixed caret policy."""

    def __init__(self, *, caret_policy: CaretPolicy = CaretPolicy.AFTER_SUFFIX) -> None:
        self.caret_policy = caret_policy

    def insert(self, buffer: TextBuffer, rule: MarkupRule) -> InsertionResult:
        return insert_markup(buffer, rule, caret_policy=self.caret_policy)


__all__ = ["InsertionResult", "MarkupInserter", "insert_markup"]
