"""Comparison result and report models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from apicompare.core.models import ResponseRecord
from apicompare.diff.models import Difference

REPORT_FORMAT_VERSION = "1.0"


def iso_timestamp(moment: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision, e.g. `2026-01-01T10:30:45.123Z`."""
    current = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return current.strftime("%Y-%m-%dT%H:%M:%S.") + f"{current.microsecond // 1000:03d}Z"


@dataclass(slots=True)
class ComparisonResult:
    """Outcome of comparing one request across both environments."""

    name: str
    method: str
    url: str
    reference_url: str
    target_url: str
    reference_base_url: str
    target_base_url: str
    reference: ResponseRecord
    target: ResponseRecord
    differences: list[Difference] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.differences

    @property
    def has_errors(self) -> bool:
        return self.reference.error is not None or self.target.error is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "method": self.method,
            "url": self.url,
            "reference_url": self.reference_url,
            "target_url": self.target_url,
            "reference_base_url": self.reference_base_url,
            "target_base_url": self.target_base_url,
            "reference": self.reference.to_dict(),
            "target": self.target.to_dict(),
            "differences": [difference.to_dict() for difference in self.differences],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ComparisonResult":
        return cls(
            name=raw["name"],
            method=raw["method"],
            url=raw["url"],
            reference_url=raw["reference_url"],
            target_url=raw["target_url"],
            reference_base_url=raw["reference_base_url"],
            target_base_url=raw["target_base_url"],
            reference=ResponseRecord.from_dict(raw["reference"]),
            target=ResponseRecord.from_dict(raw["target"]),
            differences=[Difference.from_dict(item) for item in raw.get("differences", [])],
        )


@dataclass(slots=True)
class ComparisonReport:
    """All results of one run plus the context needed to reproduce it."""

    timestamp: str
    command_line: str
    options: dict[str, Any]
    results: list[ComparisonResult] = field(default_factory=list)
    input_requests: list[dict[str, Any]] = field(default_factory=list)
    version: str = REPORT_FORMAT_VERSION

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.results if result.passed)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def exit_code(self) -> int:
        return 0 if self.failed == 0 else 1

    def summary(self) -> dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "timestamp": self.timestamp,
            "command_line": self.command_line,
            "options": dict(self.options),
            "input_requests": list(self.input_requests),
            "summary": self.summary(),
            "results": [result.to_dict() for result in self.results],
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ComparisonReport":
        return cls(
            version=raw.get("version", REPORT_FORMAT_VERSION),
            timestamp=raw["timestamp"],
            command_line=raw.get("command_line", ""),
            options=dict(raw.get("options", {})),
            input_requests=list(raw.get("input_requests", [])),
            results=[ComparisonResult.from_dict(item) for item in raw.get("results", [])],
        )
