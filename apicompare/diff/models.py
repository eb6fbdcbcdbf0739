"""Data models for response differences and aligned line diffs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

DiffLineKind = Literal["added", "removed", "unchanged"]
DifferenceType = Literal["status_code", "body"]


@dataclass(frozen=True, slots=True)
class DiffLine:
    """One side of an aligned row."""

    kind: DiffLineKind
    text: str
    line_number: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "line_number": self.line_number,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "DiffLine":
        return cls(kind=raw["kind"], text=raw["text"], line_number=int(raw["line_number"]))


@dataclass(frozen=True, slots=True)
class AlignedLine:
    """A two-column row: reference on the left, target on the right."""

    left: DiffLine | None
    right: DiffLine | None

    @property
    def changed(self) -> bool:
        left_kind = self.left.kind if self.left is not None else None
        right_kind = self.right.kind if self.right is not None else None
        return left_kind != "unchanged" or right_kind != "unchanged"

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict() if self.left is not None else None,
            "right": self.right.to_dict() if self.right is not None else None,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "AlignedLine":
        left = raw.get("left")
        right = raw.get("right")
        return cls(
            left=DiffLine.from_dict(left) if left is not None else None,
            right=DiffLine.from_dict(right) if right is not None else None,
        )


@dataclass(slots=True)
class DiffBlock:
    """A shown run of aligned lines, or a marker for an elided gap."""

    lines: list[AlignedLine] = field(default_factory=list)
    skipped: bool = False

    @classmethod
    def gap(cls) -> "DiffBlock":
        return cls(lines=[], skipped=True)

    def to_dict(self) -> dict[str, Any]:
        return {
            "lines": [line.to_dict() for line in self.lines],
            "skipped": self.skipped,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "DiffBlock":
        return cls(
            lines=[AlignedLine.from_dict(line) for line in raw.get("lines", [])],
            skipped=bool(raw.get("skipped", False)),
        )


@dataclass(slots=True)
class Difference:
    """A status-code or body mismatch between reference and target."""

    type: DifferenceType
    message: str
    expected: Any
    actual: Any
    diff_blocks: list[DiffBlock] = field(default_factory=list)

    @classmethod
    def status_code(cls, expected: int, actual: int) -> "Difference":
        return cls(
            type="status_code",
            message=f"Status code mismatch: expected {expected}, got {actual}",
            expected=expected,
            actual=actual,
        )

    @classmethod
    def body(
        cls,
        message: str,
        *,
        expected: Any,
        actual: Any,
        diff_blocks: list[DiffBlock],
    ) -> "Difference":
        return cls(
            type="body",
            message=message,
            expected=expected,
            actual=actual,
            diff_blocks=diff_blocks,
        )

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "type": self.type,
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
        }
        if self.type == "body":
            payload["diff_blocks"] = [block.to_dict() for block in self.diff_blocks]
        return payload

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Difference":
        return cls(
            type=raw["type"],
            message=raw.get("message", ""),
            expected=raw.get("expected"),
            actual=raw.get("actual"),
            diff_blocks=[DiffBlock.from_dict(block) for block in raw.get("diff_blocks", [])],
        )
