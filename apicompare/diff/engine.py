"""Response comparison: status codes first, then bodies."""

from __future__ import annotations

from apicompare.core.canonical import json_equal, strict_json_equal
from apicompare.core.models import ResponseBody, ResponseRecord
from apicompare.diff.aligner import calculate_diff_blocks
from apicompare.diff.models import Difference


def compare_responses(
    reference: ResponseRecord,
    target: ResponseRecord,
    *,
    normalized: bool = False,
) -> list[Difference]:
    """Compare two responses and return their differences in a stable order.

    Never raises; a status mismatch does not short-circuit the body check.
    """
    differences: list[Difference] = []

    if reference.status_code != target.status_code:
        differences.append(Difference.status_code(reference.status_code, target.status_code))

    body_difference = compare_bodies(reference.body, target.body, normalized=normalized)
    if body_difference is not None:
        differences.append(body_difference)

    return differences


def compare_bodies(
    expected: ResponseBody,
    actual: ResponseBody,
    *,
    normalized: bool = False,
) -> Difference | None:
    if expected.is_structured and actual.is_structured:
        if normalized:
            if json_equal(expected.value, actual.value):
                return None
            message = "Response body differs (normalized comparison)"
        else:
            if strict_json_equal(expected.value, actual.value):
                return None
            message = "Response body differs (strict comparison)"
        return _body_difference(message, expected, actual, normalized=normalized)

    if not expected.is_structured and not actual.is_structured:
        if expected.value == actual.value:
            return None
        return _body_difference(
            "Response body differs (string comparison)",
            expected,
            actual,
            normalized=False,
        )

    message = (
        "Response body type mismatch: "
        f"reference is {expected.describe()}, target is {actual.describe()}"
    )
    return _body_difference(message, expected, actual, normalized=False)


def _body_difference(
    message: str,
    expected: ResponseBody,
    actual: ResponseBody,
    *,
    normalized: bool,
) -> Difference:
    return Difference.body(
        message,
        expected=expected.value,
        actual=actual.value,
        diff_blocks=calculate_diff_blocks(expected, actual, normalized=normalized),
    )
