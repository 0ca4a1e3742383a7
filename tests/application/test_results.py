"""Tests for OperationResult."""

from src.application.results import OperationResult, ResultStatus


def test_ok_result_carries_value():
    result = OperationResult.ok(5)

    assert result.is_ok
    assert result.value == 5
    assert result.message is None


def test_failure_constructors_set_status_and_message():
    cases = [
        (OperationResult.not_found, ResultStatus.NOT_FOUND),
        (OperationResult.validation_failed, ResultStatus.VALIDATION_FAILED),
        (OperationResult.conflict, ResultStatus.CONFLICT),
        (OperationResult.internal, ResultStatus.INTERNAL),
    ]
    for factory, status in cases:
        result = factory("boom")
        assert result.status is status
        assert result.message == "boom"
        assert not result.is_ok
        assert result.value is None
