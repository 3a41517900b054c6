"""Tests for the unified exception taxonomy.

Validates:
- PipelineError hierarchy and structured attributes
- Category classification (validation, transient, permanent, contract)
- Stage errors carry the expected stage, code, and category
"""

from __future__ import annotations

from typing import ClassVar

from quake_feed.core.config import ConfigValidationError
from quake_feed.core.exceptions import (
    ArgumentParseError,
    ContractError,
    DecodeError,
    FetchError,
    PermanentError,
    PipelineError,
    TransientError,
    ValidationError,
)


class TestPipelineErrorBase:
    """PipelineError base class behavior."""

    def test_default_attributes(self) -> None:
        err = PipelineError("boom")
        assert err.message == "boom"
        assert err.stage == ""
        assert err.code == ""
        assert err.retryable is False

    def test_custom_attributes(self) -> None:
        err = PipelineError(
            "fail",
            stage="fetch_feed",
            code="FEED_FETCH_FAILED",
            retryable=True,
        )
        assert err.stage == "fetch_feed"
        assert err.code == "FEED_FETCH_FAILED"
        assert err.retryable is True

    def test_str_is_message(self) -> None:
        err = PipelineError("human-readable error")
        assert str(err) == "human-readable error"


class TestCategoryBases:
    """Category base classes set correct defaults."""

    def test_validation_error_not_retryable(self) -> None:
        err = ValidationError("bad input")
        assert err.retryable is False
        assert err.category == "validation"

    def test_transient_error_retryable(self) -> None:
        err = TransientError("timeout")
        assert err.retryable is True
        assert err.category == "transient"

    def test_permanent_error_not_retryable(self) -> None:
        err = PermanentError("gone")
        assert err.retryable is False
        assert err.category == "permanent"

    def test_contract_error_not_retryable(self) -> None:
        err = ContractError("schema drift")
        assert err.retryable is False
        assert err.category == "contract"

    def test_bare_pipeline_error_is_unclassified(self) -> None:
        assert PipelineError("x", retryable=True).category == "unclassified"
        assert PipelineError("x").category == "unclassified"


class TestStageErrors:
    """Every stage error is a PipelineError with a fixed stage and code."""

    CASES: ClassVar[list[tuple[PipelineError, str, str, str]]] = [
        (ArgumentParseError("abc"), "parse_arguments", "ARGUMENT_PARSE_FAILED", "validation"),
        (FetchError("down"), "fetch_feed", "FEED_FETCH_FAILED", "transient"),
        (DecodeError("bad json"), "decode_feed", "FEED_DECODE_FAILED", "contract"),
        (
            ConfigValidationError("feed_url", "", "must not be empty"),
            "config",
            "CONFIG_VALIDATION_FAILED",
            "permanent",
        ),
    ]

    def test_stage_code_category(self) -> None:
        for err, stage, code, category in self.CASES:
            assert isinstance(err, PipelineError)
            assert err.stage == stage, type(err).__name__
            assert err.code == code, type(err).__name__
            assert err.category == category, type(err).__name__

    def test_fetch_error_is_retryable(self) -> None:
        assert FetchError("down").retryable is True

    def test_decode_error_is_not_retryable(self) -> None:
        assert DecodeError("bad").retryable is False

    def test_argument_parse_error_keeps_argument(self) -> None:
        err = ArgumentParseError("abc")
        assert err.argument == "abc"
        assert "abc" in err.message

    def test_argument_parse_error_custom_message(self) -> None:
        err = ArgumentParseError("abc", "Invalid number 'abc'")
        assert err.message == "Invalid number 'abc'"

    def test_config_error_is_permanent(self) -> None:
        err = ConfigValidationError("feed_url", "", "must not be empty")
        assert isinstance(err, PermanentError)
        assert err.retryable is False
