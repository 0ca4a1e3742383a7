"""Tests for the cancellation token."""

import pytest

from src.application.cancellation import (
    CancellationToken,
    OperationCancelledError,
)


def test_token_starts_active():
    token = CancellationToken()

    assert token.cancelled is False
    token.raise_if_cancelled()


def test_cancelled_token_raises():
    token = CancellationToken()
    token.cancel()

    assert token.cancelled is True
    with pytest.raises(OperationCancelledError):
        token.raise_if_cancelled()
