"""Side-by-side line diff with context windowing."""

from __future__ import annotations

from difflib import SequenceMatcher
from typing import Iterator

from apicompare.core.canonical import pretty_json
from apicompare.core.models import ResponseBody
from apicompare.diff.models import AlignedLine, DiffBlock, DiffLine, DiffLineKind

CONTEXT_LINES = 5


def render_body_text(body: ResponseBody, *, normalized: bool = False) -> str:
    """Render a body as the text that gets line-diffed.

    Structured bodies are pretty-printed with a 2-space indent; in normalized
    mode mapping keys are sorted first so key order never shows up as a change.
    """
    if body.kind == "structured":
        return pretty_json(body.value, sort_keys=normalized)
    if body.value is None:
        return "null"
    return body.value


def split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def align_lines(expected: str, actual: str) -> list[AlignedLine]:
    """Line-diff two texts and number each side independently."""
    left_lines = split_lines(expected)
    right_lines = split_lines(actual)
    matcher = SequenceMatcher(None, left_lines, right_lines, autojunk=False)

    aligned: list[AlignedLine] = []
    left_number = 0
    right_number = 0
    for kind, text in _iter_line_groups(matcher, left_lines, right_lines):
        if kind == "unchanged":
            left_number += 1
            right_number += 1
            aligned.append(
                AlignedLine(
                    left=DiffLine("unchanged", text, left_number),
                    right=DiffLine("unchanged", text, right_number),
                )
            )
        elif kind == "added":
            right_number += 1
            aligned.append(AlignedLine(left=None, right=DiffLine("added", text, right_number)))
        else:
            left_number += 1
            aligned.append(AlignedLine(left=DiffLine("removed", text, left_number), right=None))
    return aligned


def _iter_line_groups(
    matcher: SequenceMatcher,
    left_lines: list[str],
    right_lines: list[str],
) -> Iterator[tuple[DiffLineKind, str]]:
    # Within a replaced region every removed line precedes every added line.
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            for text in left_lines[i1:i2]:
                yield "unchanged", text
            continue
        for text in left_lines[i1:i2]:
            yield "removed", text
        for text in right_lines[j1:j2]:
            yield "added", text


def window_lines(lines: list[AlignedLine], *, context: int = CONTEXT_LINES) -> list[DiffBlock]:
    """Keep only the neighbourhood of each change, marking elided gaps."""
    changed = [index for index, line in enumerate(lines) if line.changed]
    if not changed:
        return [DiffBlock(lines=list(lines))]

    last_index = len(lines) - 1
    ranges: list[list[int]] = []
    for index in changed:
        start = max(0, index - context)
        end = min(last_index, index + context)
        if ranges and start <= ranges[-1][1] + 1:
            ranges[-1][1] = max(ranges[-1][1], end)
        else:
            ranges.append([start, end])

    blocks: list[DiffBlock] = []
    for position, (start, end) in enumerate(ranges):
        if position > 0:
            blocks.append(DiffBlock.gap())
        blocks.append(DiffBlock(lines=lines[start : end + 1]))
    return blocks


def calculate_diff_blocks(
    expected: ResponseBody,
    actual: ResponseBody,
    *,
    normalized: bool = False,
) -> list[DiffBlock]:
    """Diff two bodies into context-windowed blocks of aligned lines."""
    expected_text = render_body_text(expected, normalized=normalized)
    actual_text = render_body_text(actual, normalized=normalized)
    return window_lines(align_lines(expected_text, actual_text))
