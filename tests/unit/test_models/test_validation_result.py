"""Unit tests for ValidationResult and its factories."""

import pytest
from pydantic import ValidationError

from labyrinth.models.validation import (
    RejectionCode,
    ValidationResult,
    invalid_result,
    valid_result,
)


def test_valid_result_context() -> None:
    result = valid_result(direction="left")

    assert result.valid is True
    assert result.context == {"direction": "left"}
    assert result.rejection_code is None


def test_invalid_result_messages_with_hint() -> None:
    result = invalid_result(
        RejectionCode.MISSING_ARGUMENT,
        "You specified no direction...",
        hint="Usage: go <direction>",
    )

    assert result.to_messages() == ["You specified no direction...", "Usage: go <direction>"]


def test_invalid_result_messages_without_hint() -> None:
    result = invalid_result(RejectionCode.NO_EXIT, "No path.")

    assert result.to_messages() == ["No path."]


def test_valid_result_has_no_messages() -> None:
    with pytest.raises(ValueError, match="valid result"):
        valid_result().to_messages()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"rejection_reason": "No path."},
        {"rejection_code": RejectionCode.NO_EXIT},
    ],
)
def test_invalid_requires_code_and_reason(kwargs) -> None:
    with pytest.raises(ValidationError):
        ValidationResult(valid=False, **kwargs)
