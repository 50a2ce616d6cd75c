"""
Cursor repositioning across a mask rewrite.

Grouping separators move as digits are added or removed, so keeping the raw
offset would drift the cursor away from the digit just typed. The resolver
re-anchors the cursor to the same logical digit in the rewritten text.
Offsets are Python string indices, i.e. code points, so multi-character
and non-ASCII symbols are measured the same way the host measures them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import CursorBehavior, FormatConfig
from .money import extract_digits

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorState:
    """Cursor or selection over the current text."""

    base_offset: int
    extent_offset: int

    @classmethod
    def collapsed(cls, offset: int) -> "CursorState":
        return cls(offset, offset)

    @property
    def is_collapsed(self) -> bool:
        return self.base_offset == self.extent_offset

    def clamped(self, length: int) -> "CursorState":
        return CursorState(
            min(max(self.base_offset, 0), length),
            min(max(self.extent_offset, 0), length),
        )


def end_anchored_offset(new_text: str, config: FormatConfig) -> int:
    """Offset right before the right symbol, or the text end when it is missing."""
    if config.right_symbol and new_text.endswith(config.right_symbol):
        return len(new_text) - len(config.right_symbol)
    return len(new_text)


def content_anchored_offset(
    old_text: str,
    old_offset: int,
    new_text: str,
    config: FormatConfig,
) -> Optional[int]:
    """
    Offset in ``new_text`` right after the digit that preceded ``old_offset``.

    The significant digits before the old cursor (leading zeros dropped) are
    matched as a subsequence of ``new_text``, scanning from the end of the
    left symbol. Returns None when the subsequence cannot be fully matched.
    """
    left = config.left_symbol
    before = old_text[:old_offset]
    if left and before.startswith(left):
        before = before[len(left):]
    pending = extract_digits(before).lstrip("0")

    if not pending:
        return min(len(left) + 1, len(new_text))

    j = 0
    for i in range(len(left), len(new_text)):
        if new_text[i] == pending[j]:
            j += 1
            if j == len(pending):
                return i + 1
    return None


def resolve_cursor(
    old_text: str,
    old_cursor: CursorState,
    new_text: str,
    config: FormatConfig,
) -> CursorState:
    """Map ``old_cursor`` over ``old_text`` to a cursor over ``new_text``."""
    if not old_cursor.is_collapsed:
        return old_cursor.clamped(len(new_text))

    if old_cursor.base_offset == 0:
        return CursorState.collapsed(min(len(config.left_symbol) + 1, len(new_text)))

    end = CursorState.collapsed(end_anchored_offset(new_text, config))
    if config.cursor_behavior is CursorBehavior.END:
        return end

    if old_cursor.base_offset >= len(old_text):
        return end

    offset = content_anchored_offset(old_text, old_cursor.base_offset, new_text, config)
    if offset is None:
        # recovery path: the old digits are not all present in the new text
        logger.debug(
            "Cursor could not be re-anchored in %r (from %r @ %d); moving to end",
            new_text, old_text, old_cursor.base_offset,
        )
        return end
    return CursorState.collapsed(offset)
