from apicompare.core.models import ResponseBody
from apicompare.diff import (
    CONTEXT_LINES,
    align_lines,
    calculate_diff_blocks,
    render_body_text,
    window_lines,
)


def _numbered(count: int) -> list[str]:
    return [f"line{number}" for number in range(1, count + 1)]


def _with_change(lines: list[str], *line_numbers: int) -> list[str]:
    changed = list(lines)
    for number in line_numbers:
        changed[number - 1] = f"CHANGED{number}"
    return changed


def test_identical_text_is_one_unchanged_block() -> None:
    text = "alpha\nbeta\ngamma\n"

    blocks = calculate_diff_blocks(ResponseBody.textual(text), ResponseBody.textual(text))

    assert len(blocks) == 1
    assert blocks[0].skipped is False
    assert len(blocks[0].lines) == 3
    for number, line in enumerate(blocks[0].lines, start=1):
        assert line.left is not None and line.right is not None
        assert line.left.kind == "unchanged"
        assert line.right.kind == "unchanged"
        assert line.left.text == line.right.text
        assert line.left.line_number == line.right.line_number == number


def test_replaced_line_becomes_removed_then_added() -> None:
    blocks = calculate_diff_blocks(
        ResponseBody.textual("line1\nline2\nline3"),
        ResponseBody.textual("line1\nCHANGED\nline3"),
    )

    assert len(blocks) == 1
    rows = blocks[0].lines
    assert [(row.left and row.left.kind, row.right and row.right.kind) for row in rows] == [
        ("unchanged", "unchanged"),
        ("removed", None),
        (None, "added"),
        ("unchanged", "unchanged"),
    ]
    assert rows[1].left.text == "line2"
    assert rows[1].left.line_number == 2
    assert rows[2].right.text == "CHANGED"
    assert rows[2].right.line_number == 2
    assert rows[3].left.line_number == 3
    assert rows[3].right.line_number == 3


def test_added_lines_only_advance_right_numbers() -> None:
    rows = align_lines("a\nb", "a\nx\ny\nb")

    assert [row.left.line_number if row.left else None for row in rows] == [1, None, None, 2]
    assert [row.right.line_number if row.right else None for row in rows] == [1, 2, 3, 4]
    assert rows[1].left is None and rows[1].right.kind == "added"


def test_trailing_newline_only_difference_has_no_changed_rows() -> None:
    blocks = calculate_diff_blocks(ResponseBody.textual("a\nb"), ResponseBody.textual("a\nb\n"))

    assert len(blocks) == 1
    assert all(not row.changed for row in blocks[0].lines)


def test_single_change_is_windowed_without_markers() -> None:
    left = _numbered(30)
    right = _with_change(left, 16)

    blocks = window_lines(align_lines("\n".join(left), "\n".join(right)))

    assert len(blocks) == 1
    shown = blocks[0].lines
    # removed row sits at index 15, added row at 16; context reaches 10..21
    assert len(shown) == 12
    assert shown[0].left.line_number == 16 - CONTEXT_LINES
    assert shown[-1].right.line_number == 16 + CONTEXT_LINES


def test_distant_changes_are_separated_by_one_skipped_marker() -> None:
    left = _numbered(40)
    right = _with_change(left, 5, 35)

    blocks = calculate_diff_blocks(
        ResponseBody.textual("\n".join(left)),
        ResponseBody.textual("\n".join(right)),
    )

    assert [block.skipped for block in blocks] == [False, True, False]
    assert blocks[1].lines == []
    assert blocks[0].lines[0].left.line_number == 1
    assert blocks[2].lines[-1].left.line_number == 40


def test_overlapping_context_windows_merge() -> None:
    left = _numbered(40)
    right = _with_change(left, 5, 15)

    blocks = calculate_diff_blocks(
        ResponseBody.textual("\n".join(left)),
        ResponseBody.textual("\n".join(right)),
    )

    assert len(blocks) == 1
    assert blocks[0].skipped is False


def test_every_changed_row_keeps_its_context() -> None:
    left = _numbered(60)
    right = _with_change(left, 3, 25, 58)
    aligned = align_lines("\n".join(left), "\n".join(right))

    blocks = window_lines(aligned)

    shown_ids = {id(row) for block in blocks if not block.skipped for row in block.lines}
    for index, row in enumerate(aligned):
        if not row.changed:
            continue
        for neighbour in range(max(0, index - 5), min(len(aligned), index + 6)):
            assert id(aligned[neighbour]) in shown_ids
    assert blocks[0].skipped is False
    assert blocks[-1].skipped is False
    for first, second in zip(blocks, blocks[1:]):
        assert not (first.skipped and second.skipped)


def test_left_and_right_columns_reproduce_each_side() -> None:
    expected = {"b": [1, 2], "a": {"y": True, "x": None}}
    actual = {"a": {"x": None, "y": False}, "b": [2, 1], "c": "new"}
    expected_body = ResponseBody.structured(expected)
    actual_body = ResponseBody.structured(actual)

    aligned = align_lines(
        render_body_text(expected_body, normalized=True),
        render_body_text(actual_body, normalized=True),
    )

    left_text = [row.left.text for row in aligned if row.left is not None]
    right_text = [row.right.text for row in aligned if row.right is not None]
    assert left_text == render_body_text(expected_body, normalized=True).split("\n")
    assert right_text == render_body_text(actual_body, normalized=True).split("\n")


def test_normalized_rendering_sorts_keys_at_every_depth() -> None:
    body = ResponseBody.structured({"b": 1, "a": {"d": [{"z": 1, "y": 2}], "c": 2}})

    assert render_body_text(body, normalized=True) == (
        "{\n"
        '  "a": {\n'
        '    "c": 2,\n'
        '    "d": [\n'
        "      {\n"
        '        "y": 2,\n'
        '        "z": 1\n'
        "      }\n"
        "    ]\n"
        "  },\n"
        '  "b": 1\n'
        "}"
    )


def test_strict_rendering_keeps_key_order() -> None:
    body = ResponseBody.structured({"b": 2, "a": 1})

    assert render_body_text(body, normalized=False) == '{\n  "b": 2,\n  "a": 1\n}'


def test_rendering_is_deterministic() -> None:
    body = ResponseBody.structured({"k": ["é", 1.5, None], "j": {"n": False}})

    assert render_body_text(body, normalized=True) == render_body_text(body, normalized=True)
    assert "é" in render_body_text(body)


def test_missing_body_renders_as_null() -> None:
    assert render_body_text(ResponseBody.empty()) == "null"


def test_empty_texts_produce_one_empty_block() -> None:
    blocks = calculate_diff_blocks(ResponseBody.textual(""), ResponseBody.textual(""))

    assert len(blocks) == 1
    assert blocks[0].lines == []
    assert blocks[0].skipped is False
