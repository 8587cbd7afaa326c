"""
Multihash Schemas
File: errors.py

Purpose: Error taxonomy for the multihash codec.
Defines both Pydantic models for structured error values (returned by
validate) and Python exceptions for control flow (raised by encode/decode).
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the codec."""

    # Argument Errors
    MISSING_ARGUMENTS = "MISSING_ARGUMENTS"

    # Hash Function Resolution Errors
    INVALID_CODE_TYPE = "INVALID_CODE_TYPE"
    UNKNOWN_HASH_NAME = "UNKNOWN_HASH_NAME"
    UNRECOGNIZED_CODE = "UNRECOGNIZED_CODE"

    # Encoding Errors
    INVALID_DIGEST_TYPE = "INVALID_DIGEST_TYPE"
    LENGTH_MISMATCH = "LENGTH_MISMATCH"
    LENGTH_TOO_LARGE = "LENGTH_TOO_LARGE"

    # Envelope Validation Errors
    NOT_A_BYTE_SEQUENCE = "NOT_A_BYTE_SEQUENCE"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    UNKNOWN_FUNCTION_CODE = "UNKNOWN_FUNCTION_CODE"
    LENGTH_INCONSISTENT = "LENGTH_INCONSISTENT"

    # Text Representation Errors
    INVALID_HEX = "INVALID_HEX"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class MultihashError(BaseModel):
    """
    Error value describing why an input was rejected.

    validate() returns this model instead of raising, so callers can inspect
    the failure without exception handling. decode() converts it with
    to_exception().
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.TOO_SHORT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "MultihashException":
        """Convert this error model to the matching typed exception."""
        exc_class = EXCEPTIONS_BY_CODE.get(self.code, MultihashException)
        exc = exc_class(message=self.message, details=dict(self.details))
        exc.code = self.code
        return exc


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class MultihashException(Exception):
    """
    Base exception for all multihash codec errors.

    Carries structured error information and can be converted
    to/from MultihashError models.
    """

    default_code: str = "MULTIHASH_ERROR"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = self.default_code
        self.message = message
        self.details = details or {}
        self.retryable = False

    def to_error_model(self) -> MultihashError:
        """Convert this exception to a MultihashError model."""
        return MultihashError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class MissingArgumentsException(MultihashException, ValueError):
    """Raised when a required argument is absent or empty."""

    default_code = ErrorCodes.MISSING_ARGUMENTS


class InvalidCodeTypeException(MultihashException, TypeError):
    """Raised when a hash function designator is neither a name nor an int."""

    default_code = ErrorCodes.INVALID_CODE_TYPE


class UnknownHashNameException(MultihashException, ValueError):
    """Raised when a hash function name is not in the registry."""

    default_code = ErrorCodes.UNKNOWN_HASH_NAME


class UnrecognizedCodeException(MultihashException, ValueError):
    """Raised when a numeric code is neither registered nor an application code."""

    default_code = ErrorCodes.UNRECOGNIZED_CODE


class InvalidDigestTypeException(MultihashException, TypeError):
    """Raised when the digest to encode is not bytes-like."""

    default_code = ErrorCodes.INVALID_DIGEST_TYPE


class LengthMismatchException(MultihashException, ValueError):
    """Raised when an explicit length disagrees with the digest size."""

    default_code = ErrorCodes.LENGTH_MISMATCH


class LengthTooLargeException(MultihashException, ValueError):
    """Raised when a digest is longer than the length byte can announce."""

    default_code = ErrorCodes.LENGTH_TOO_LARGE


class InvalidHexException(MultihashException, ValueError):
    """Raised when a hex string cannot be turned into bytes."""

    default_code = ErrorCodes.INVALID_HEX


class InvalidMultihashException(MultihashException):
    """Base for failures found while validating an encoded envelope."""


class NotAByteSequenceException(InvalidMultihashException, TypeError):
    default_code = ErrorCodes.NOT_A_BYTE_SEQUENCE


class TooShortException(InvalidMultihashException, ValueError):
    default_code = ErrorCodes.TOO_SHORT


class TooLongException(InvalidMultihashException, ValueError):
    default_code = ErrorCodes.TOO_LONG


class UnknownFunctionCodeException(InvalidMultihashException, ValueError):
    default_code = ErrorCodes.UNKNOWN_FUNCTION_CODE


class LengthInconsistentException(InvalidMultihashException, ValueError):
    default_code = ErrorCodes.LENGTH_INCONSISTENT


EXCEPTIONS_BY_CODE: dict[str, type[MultihashException]] = {
    exc.default_code: exc
    for exc in (
        MissingArgumentsException,
        InvalidCodeTypeException,
        UnknownHashNameException,
        UnrecognizedCodeException,
        InvalidDigestTypeException,
        LengthMismatchException,
        LengthTooLargeException,
        InvalidHexException,
        NotAByteSequenceException,
        TooShortException,
        TooLongException,
        UnknownFunctionCodeException,
        LengthInconsistentException,
    )
}
