"""
Structured error types for seqid.

The generator itself never wraps or retries errors: whatever a sequencer
raises reaches the caller unchanged. This module gives sequencer authors and
the outer layers (settings, factory, CLI) a small typed hierarchy to raise
from, so callers can decide about retries and fallbacks without parsing
messages.

Manifesto:
    - **Typed hierarchy:** One class per failure domain
    - **Explicit retry hint:** Each error knows if a retry may help
    - **Error chaining:** ``cause=`` preserves the original exception
    - **Serialization-ready:** ``to_dict()`` for structured logs

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────┐
        │                       SeqIdError                         │
        │             (category, retryable, cause)                 │
        ├──────────────────────────────────────────────────────────┤
        │  SequencerError           SequenceCancelled    ConfigError│
        │  (SEQUENCE)               (CANCELLED)          (CONFIG)   │
        │     │                        │                    │       │
        │  SequenceExhaustedError   DeadlineExceeded  InvalidConfig │
        │  SequenceUnavailableError (+ TimeoutError)      Error     │
        └──────────────────────────────────────────────────────────┘

Examples:
    A database-backed sequencer reporting a broken connection:

    >>> try:
    ...     raise ConnectionError("server closed the connection")
    ... except ConnectionError as e:
    ...     error = SequenceUnavailableError("nextval failed", cause=e)
    >>> error.retryable
    True
    >>> error.category
    <ErrorCategory.SEQUENCE: 'SEQUENCE'>

Guardrails:
    ❌ DON'T: Return a sentinel value (0, -1) from ``Sequencer.next``
    ✅ DO: Raise a SequencerError subclass

    ❌ DON'T: Retry inside a sequencer or the generator
    ✅ DO: Let the caller inspect ``retryable`` and decide

Tags:
    error-handling, exception-hierarchy, sequencer, cancellation, seqid-core

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification and routing."""

    SEQUENCE = "SEQUENCE"
    CANCELLED = "CANCELLED"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


class SeqIdError(Exception):
    """
    Base class for all seqid errors.

    Subclasses set ``default_category`` and ``default_retryable``; both can be
    overridden per instance.

    Examples:
        >>> error = SeqIdError("boom")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>
        >>> error.to_dict()["retryable"]
        False
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    default_retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.retryable = retryable if retryable is not None else self.default_retryable
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# SEQUENCE ERRORS
# =============================================================================


class SequencerError(SeqIdError):
    """A sequence source failed to produce its next value."""

    default_category = ErrorCategory.SEQUENCE


class SequenceExhaustedError(SequencerError):
    """The backing sequence has no more values (e.g. a non-cycling DB sequence)."""


class SequenceUnavailableError(SequencerError):
    """The backing sequence could not be reached; a later attempt may succeed."""

    default_retryable = True


# =============================================================================
# CANCELLATION
# =============================================================================


class SequenceCancelled(SeqIdError):
    """The caller cancelled the request before a sequence value was produced."""

    default_category = ErrorCategory.CANCELLED

    def __init__(self, message: str = "Sequence request cancelled", **kwargs: Any):
        super().__init__(message, **kwargs)


class DeadlineExceeded(SequenceCancelled, TimeoutError):
    """The caller's deadline passed before a sequence value was produced.

    Inherits from built-in TimeoutError for broad exception handling.
    """

    def __init__(self, timeout: float | None = None, **kwargs: Any):
        self.timeout = timeout
        msg = "Sequence request deadline exceeded"
        if timeout is not None:
            msg += f" after {timeout}s"
        super().__init__(msg, **kwargs)


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigError(SeqIdError):
    """Settings could not be turned into a working generator."""

    default_category = ErrorCategory.CONFIG


class InvalidConfigError(ConfigError):
    """A configuration key holds a value seqid does not understand."""

    def __init__(self, key: str, value: Any, message: str | None = None, **kwargs: Any):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid value for {key}: {value!r}", **kwargs)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def is_retryable(error: Exception) -> bool:
    """Check if an error is retryable."""
    if isinstance(error, SeqIdError):
        return error.retryable
    return isinstance(error, (ConnectionError, BrokenPipeError))


def categorize_error(error: Exception) -> ErrorCategory:
    """Get the category of an error."""
    if isinstance(error, SeqIdError):
        return error.category
    if isinstance(error, TimeoutError):
        return ErrorCategory.CANCELLED
    if isinstance(error, (ConnectionError, OSError)):
        return ErrorCategory.SEQUENCE
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "SeqIdError",
    "SequencerError",
    "SequenceExhaustedError",
    "SequenceUnavailableError",
    "SequenceCancelled",
    "DeadlineExceeded",
    "ConfigError",
    "InvalidConfigError",
    "is_retryable",
    "categorize_error",
]
