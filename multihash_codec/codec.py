"""
Multihash Codec
Encode, decode and validate self-describing hash envelopes.

Wire format (fixed single-byte fields):
    byte 0       : function code (0-255)
    byte 1       : digest length L (0-127)
    bytes 2..2+L : raw digest bytes

This module provides:
- coerce_code: resolve a hash function name or code to a valid code
- encode: wrap a digest in an envelope
- validate: check an envelope, returning an error value instead of raising
- decode: split a valid envelope into a DecodedMultihash
- is_valid: boolean form of validate

Determinism Notes:
- All functions are pure; the registry is read-only
- Digests are never computed here, only tagged
"""
from __future__ import annotations

import logging
from typing import Any, Union

from multihash_codec.config import DEFAULT_LIMITS
from multihash_codec.registry import NAMES, code_to_name, is_valid_code
from multihash_codec.schemas.errors import (
    ErrorCodes,
    InvalidCodeTypeException,
    InvalidDigestTypeException,
    LengthMismatchException,
    LengthTooLargeException,
    MissingArgumentsException,
    MultihashError,
    UnknownHashNameException,
    UnrecognizedCodeException,
)
from multihash_codec.schemas.records import DecodedMultihash

logger = logging.getLogger(__name__)

BYTES_LIKE: tuple[type, ...] = (bytes, bytearray, memoryview)

HashFunctionRef = Union[str, int]


def coerce_code(hashfn: HashFunctionRef) -> int:
    """
    Resolve a hash function designator to its numeric code.

    Args:
        hashfn: Registered name (e.g. "sha2-256") or numeric code

    Returns:
        The function code

    Raises:
        UnknownHashNameException: If a name is not registered
        InvalidCodeTypeException: If hashfn is neither str nor int
        UnrecognizedCodeException: If a code is neither registered nor an
            application code

    Example:
        >>> coerce_code("sha2-256")
        18
    """
    code: Any = hashfn
    if isinstance(hashfn, str):
        if hashfn not in NAMES:
            raise UnknownHashNameException(
                message=f"Unrecognized hash function named: {hashfn}",
                details={"name": hashfn},
            )
        code = NAMES[hashfn]

    if not isinstance(code, int) or isinstance(code, bool):
        raise InvalidCodeTypeException(
            message=f"Hash function code should be a number. Got: {code!r}",
            details={"type": type(code).__name__},
        )

    if not is_valid_code(code):
        raise UnrecognizedCodeException(
            message=f"Unrecognized function code: {code}",
            details={"code": code},
        )

    return code


def encode(
    digest: bytes,
    hashfn: HashFunctionRef,
    length: int | None = None,
) -> bytes:
    """
    Wrap a raw digest in a multihash envelope.

    Args:
        digest: Already-computed digest bytes
        hashfn: Hash function name or code
        length: Optional expected digest length, checked against the digest.
                It never truncates or pads.

    Returns:
        bytes([code, length]) + digest

    Raises:
        MissingArgumentsException: If digest or hashfn is absent or empty
        InvalidDigestTypeException: If digest is not bytes-like
        LengthMismatchException: If length differs from len(digest)
        LengthTooLargeException: If the digest exceeds 127 bytes
        (plus anything raised by coerce_code)

    Example:
        >>> encode(bytes(20), "sha1")[:2].hex()
        '1114'
    """
    if digest is None or hashfn is None or hashfn == "" or _is_empty(digest):
        raise MissingArgumentsException(
            message="multihash encode requires at least two args: digest, hashfn",
        )

    code = coerce_code(hashfn)

    if not isinstance(digest, BYTES_LIKE):
        raise InvalidDigestTypeException(
            message=f"digest should be bytes-like, got {type(digest).__name__}",
            details={"type": type(digest).__name__},
        )

    raw = bytes(digest)

    if not length:
        length = len(raw)

    if length != len(raw):
        raise LengthMismatchException(
            message="digest length should be equal to specified length.",
            details={"expected": length, "actual": len(raw)},
        )

    if length > DEFAULT_LIMITS.max_digest_length:
        raise LengthTooLargeException(
            message=(
                "multihash does not support digest lengths greater than "
                f"{DEFAULT_LIMITS.max_digest_length} bytes, got {length}"
            ),
            details={"length": length},
        )

    logger.debug(f"Encoded {length}-byte digest with function code {code:#04x}")
    return bytes([code, length]) + raw


def validate(multihash: Any) -> MultihashError | None:
    """
    Check that multihash is a well-formed envelope.

    Checks run in a fixed order and the first failure wins:
    byte type, minimum size, maximum size, function code, length consistency.

    Args:
        multihash: Candidate envelope

    Returns:
        None if valid, otherwise a MultihashError describing the first failure.
        Never raises.
    """
    if not isinstance(multihash, BYTES_LIKE):
        return MultihashError(
            code=ErrorCodes.NOT_A_BYTE_SEQUENCE,
            message="multihash must be bytes-like",
            details={"type": type(multihash).__name__},
        )

    data = bytes(multihash)

    if len(data) < DEFAULT_LIMITS.min_envelope_size:
        return MultihashError(
            code=ErrorCodes.TOO_SHORT,
            message=(
                "multihash too short. must be at least "
                f"{DEFAULT_LIMITS.min_envelope_size} bytes."
            ),
            details={"size": len(data)},
        )

    if len(data) > DEFAULT_LIMITS.max_envelope_size:
        return MultihashError(
            code=ErrorCodes.TOO_LONG,
            message=(
                "multihash too long. must be at most "
                f"{DEFAULT_LIMITS.max_envelope_size} bytes."
            ),
            details={"size": len(data)},
        )

    if not is_valid_code(data[0]):
        return MultihashError(
            code=ErrorCodes.UNKNOWN_FUNCTION_CODE,
            message=f"multihash unknown function code: {data[0]:#x}",
            details={"code": data[0]},
        )

    if len(data) - 2 != data[1]:
        return MultihashError(
            code=ErrorCodes.LENGTH_INCONSISTENT,
            message=f"multihash length inconsistent: 0x{data.hex()}",
            details={"announced": data[1], "actual": len(data) - 2},
        )

    return None


def is_valid(multihash: Any) -> bool:
    """Return True if multihash passes validate()."""
    return validate(multihash) is None


def decode(multihash: bytes) -> DecodedMultihash:
    """
    Split a multihash envelope into its components.

    Args:
        multihash: Encoded envelope

    Returns:
        DecodedMultihash with code, name (None for application codes),
        length and digest

    Raises:
        InvalidMultihashException subclass matching the first validation failure
    """
    error = validate(multihash)
    if error is not None:
        logger.debug(f"Rejected multihash: {error.code}")
        raise error.to_exception()

    data = bytes(multihash)
    code = data[0]

    logger.debug(f"Decoded multihash with function code {code:#04x}, length {data[1]}")
    return DecodedMultihash(
        code=code,
        name=code_to_name(code),
        length=data[1],
        digest=data[2:],
    )


def _is_empty(digest: Any) -> bool:
    # Only sized values count as empty; other types fall through to the type check
    try:
        return len(digest) == 0
    except TypeError:
        return False


__all__ = [
    "BYTES_LIKE",
    "HashFunctionRef",
    "coerce_code",
    "encode",
    "validate",
    "is_valid",
    "decode",
]
