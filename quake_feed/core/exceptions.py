"""Unified pipeline exception taxonomy.

Provides a shared base exception hierarchy for every pipeline stage.
Every domain exception inherits from ``PipelineError`` and carries
structured context fields so the top-level handler can report a
consistent single-line diagnostic.

Taxonomy categories
-------------------
- ``ValidationError``   — bad user input, never retryable.
- ``TransientError``    — temporary failures (network), retryable in principle.
- ``PermanentError``    — unusable configuration, not retryable.
- ``ContractError``     — feed payload does not match the expected schema.

The top-level handler logs ``category``, ``stage``, ``code`` and
``retryable`` alongside the message.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base exception for all pipeline-domain errors.

    Attributes:
        message: Human-readable error description.
        stage: Pipeline stage where the error occurred
            (e.g. ``"fetch_feed"``, ``"decode_feed"``).
        code: Machine-readable error code (e.g. ``"FEED_FETCH_FAILED"``).
        retryable: Whether the operation could succeed if repeated.
    """

    #: Default stage for subclasses (override via class attribute or kwarg).
    default_stage: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        retryable: bool = False,
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.retryable = retryable
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, ContractError):
            return "contract"
        if isinstance(self, ValidationError):
            return "validation"
        if isinstance(self, TransientError):
            return "transient"
        if isinstance(self, PermanentError):
            return "permanent"
        return "unclassified"


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class ValidationError(PipelineError):
    """Input validation failure. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TransientError(PipelineError):
    """Temporary failure that may succeed on retry."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class PermanentError(PipelineError):
    """Unrecoverable failure. Not retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class ContractError(PipelineError):
    """Feed payload does not match the expected schema. Never retryable."""

    def __init__(self, message: str = "", **kwargs: object) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Stage errors
# ---------------------------------------------------------------------------


class ArgumentParseError(ValidationError):
    """Command-line argument could not be parsed.

    Non-fatal: the CLI logs a warning and falls back to a default.

    Attributes:
        argument: The raw argument text.
    """

    default_stage = "parse_arguments"
    default_code = "ARGUMENT_PARSE_FAILED"

    def __init__(self, argument: str, message: str = "") -> None:
        self.argument = argument
        super().__init__(message or f"Invalid argument {argument!r}")


class FetchError(TransientError):
    """The feed could not be retrieved (DNS, connection, timeout, HTTP status)."""

    default_stage = "fetch_feed"
    default_code = "FEED_FETCH_FAILED"


class DecodeError(ContractError):
    """The feed body is not valid JSON or does not match the feed schema."""

    default_stage = "decode_feed"
    default_code = "FEED_DECODE_FAILED"
