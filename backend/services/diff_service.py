"""
Diff Service - Line-by-line and character-by-character text comparison

Both comparisons walk two cursors over the inputs and, on a mismatch, look
ahead for the nearest point where the sequences line up again. This is a
greedy heuristic, not a minimal edit script: the first match found wins.
"""

from __future__ import annotations

from collections.abc import Sequence

from models.diff import (
    ChangeType,
    DiffLine,
    DiffResult,
    DiffStats,
    InlineDiffResult,
    LineNumber,
)

# Read of an index outside a sequence; equal only to itself
_PAST_END = object()


def _item_at(sequence: Sequence, index: int):
    if 0 <= index < len(sequence):
        return sequence[index]
    return _PAST_END


def find_forward_match(
    sequence: Sequence,
    start: int,
    target,
    reach_past_end: bool = False,
) -> int | None:
    """
    Find the smallest offset k >= 1 with sequence[start + k] == target.

    The scan normally stops at the last element. With reach_past_end the
    index one past the end is probed too and reads as a past-the-end value,
    which matches a target that was itself read past the end of a sequence.
    Returns None when nothing matches.
    """
    limit = len(sequence) - start
    if reach_past_end:
        limit += 1

    for offset in range(1, limit):
        if _item_at(sequence, start + offset) == target:
            return offset
    return None


class DiffService:
    """Compute line and inline diffs of two texts"""

    def compute_diff(self, old_text: str, new_text: str) -> DiffResult:
        """Compare two texts line by line"""
        old_lines = old_text.split("\n")
        new_lines = new_text.split("\n")
        lines: list[DiffLine] = []
        additions = deletions = unchanged = 0

        i = 0
        j = 0

        while i < len(old_lines) or j < len(new_lines):
            if i < len(old_lines) and j < len(new_lines) and old_lines[i] == new_lines[j]:
                lines.append(self._unchanged_line(old_lines[i], i, j))
                unchanged += 1
                i += 1
                j += 1
                continue

            # Deletions are tried before additions
            skip = find_forward_match(old_lines, i, _item_at(new_lines, j))
            if skip is not None:
                for k in range(skip):
                    lines.append(self._removed_line(old_lines[i + k], i + k))
                deletions += skip
                i += skip
                continue

            skip = find_forward_match(new_lines, j, _item_at(old_lines, i))
            if skip is not None:
                for k in range(skip):
                    lines.append(self._added_line(new_lines[j + k], j + k))
                additions += skip
                j += skip
                continue

            # No realignment point: treat as a replaced line
            if i < len(old_lines):
                lines.append(self._removed_line(old_lines[i], i))
                deletions += 1
                i += 1
            if j < len(new_lines):
                lines.append(self._added_line(new_lines[j], j))
                additions += 1
                j += 1

        return DiffResult(
            lines=lines,
            stats=DiffStats(additions=additions, deletions=deletions, unchanged=unchanged),
        )

    def compute_inline_diff(self, old_line: str, new_line: str) -> InlineDiffResult:
        """
        Compare two lines character by character.

        Only the changed spans are reported, in scan order. Unlike compute_diff,
        additions are tried before deletions here.
        """
        added: list[str] = []
        removed: list[str] = []

        i = 0
        j = 0

        while i < len(old_line) or j < len(new_line):
            if _item_at(old_line, i) == _item_at(new_line, j):
                i += 1
                j += 1
                continue

            skip = find_forward_match(new_line, j, _item_at(old_line, i), reach_past_end=True)
            if skip is not None:
                added.append(new_line[j:j + skip])
                j += skip
                continue

            skip = find_forward_match(old_line, i, _item_at(new_line, j), reach_past_end=True)
            if skip is not None:
                removed.append(old_line[i:i + skip])
                i += skip
                continue

            if i < len(old_line):
                removed.append(old_line[i])
                i += 1
            if j < len(new_line):
                added.append(new_line[j])
                j += 1

        return InlineDiffResult(added=added, removed=removed)

    def render_text(self, result: DiffResult) -> str:
        """Render a diff as plain text with +/- prefixes"""
        prefixes = {
            ChangeType.ADDED: "+ ",
            ChangeType.REMOVED: "- ",
            ChangeType.UNCHANGED: "  ",
        }
        return "\n".join(prefixes[line.type] + line.content for line in result.lines)

    def _unchanged_line(self, content: str, i: int, j: int) -> DiffLine:
        return DiffLine(
            type=ChangeType.UNCHANGED,
            content=content,
            line_number=LineNumber(left=i + 1, right=j + 1),
        )

    def _removed_line(self, content: str, i: int) -> DiffLine:
        return DiffLine(type=ChangeType.REMOVED, content=content, line_number=LineNumber(left=i + 1))

    def _added_line(self, content: str, j: int) -> DiffLine:
        return DiffLine(type=ChangeType.ADDED, content=content, line_number=LineNumber(right=j + 1))
