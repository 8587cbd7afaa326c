"""
Multihash Schemas
File: __init__.py

Purpose: Export the error taxonomy and decoded record model.
"""

# Error models and exceptions
from .errors import (
    EXCEPTIONS_BY_CODE,
    ErrorCodes,
    InvalidCodeTypeException,
    InvalidDigestTypeException,
    InvalidHexException,
    InvalidMultihashException,
    LengthInconsistentException,
    LengthMismatchException,
    LengthTooLargeException,
    MissingArgumentsException,
    MultihashError,
    MultihashException,
    NotAByteSequenceException,
    TooLongException,
    TooShortException,
    UnknownFunctionCodeException,
    UnknownHashNameException,
    UnrecognizedCodeException,
)

# Decoded record
from .records import DecodedMultihash

__all__ = [
    "EXCEPTIONS_BY_CODE",
    "ErrorCodes",
    "InvalidCodeTypeException",
    "InvalidDigestTypeException",
    "InvalidHexException",
    "InvalidMultihashException",
    "LengthInconsistentException",
    "LengthMismatchException",
    "LengthTooLargeException",
    "MissingArgumentsException",
    "MultihashError",
    "MultihashException",
    "NotAByteSequenceException",
    "TooLongException",
    "TooShortException",
    "UnknownFunctionCodeException",
    "UnknownHashNameException",
    "UnrecognizedCodeException",
    "DecodedMultihash",
]
