"""
Multihash Codec
Self-describing hash envelopes: [function code][digest length][digest].

This package provides:
- encode / decode / validate / is_valid / coerce_code: the codec
- multihash: one callable that encodes or decodes based on its arguments
- Registry tables and lookups (NAMES, CODES, DEFAULT_LENGTHS, ...)
- to_hex_string / from_hex_string: hex text form of envelopes
- Error models and typed exceptions

Usage:
    from multihash_codec import encode, decode

    envelope = encode(digest, "sha2-256")
    decoded = decode(envelope)
    assert decoded.name == "sha2-256"
"""
from .codec import (
    BYTES_LIKE,
    HashFunctionRef,
    coerce_code,
    decode,
    encode,
    is_valid,
    validate,
)
from .config import DEFAULT_LIMITS, CodecLimits
from .dispatch import multihash
from .hexutil import from_hex_string, to_hex_string
from .registry import (
    CODES,
    DEFAULT_LENGTHS,
    HASH_FUNCTIONS,
    NAMES,
    HashFunction,
    code_to_default_length,
    code_to_name,
    is_app_code,
    is_valid_code,
    name_to_code,
)
from .schemas import (
    DecodedMultihash,
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

__version__ = "0.1.0"

__all__ = [
    # Codec
    "BYTES_LIKE",
    "HashFunctionRef",
    "coerce_code",
    "encode",
    "decode",
    "validate",
    "is_valid",
    "multihash",
    "to_hex_string",
    "from_hex_string",
    # Registry
    "HashFunction",
    "HASH_FUNCTIONS",
    "NAMES",
    "CODES",
    "DEFAULT_LENGTHS",
    "name_to_code",
    "code_to_name",
    "code_to_default_length",
    "is_app_code",
    "is_valid_code",
    # Config
    "CodecLimits",
    "DEFAULT_LIMITS",
    # Schemas
    "DecodedMultihash",
    "ErrorCodes",
    "MultihashError",
    "MultihashException",
    "InvalidMultihashException",
    "MissingArgumentsException",
    "InvalidCodeTypeException",
    "UnknownHashNameException",
    "UnrecognizedCodeException",
    "InvalidDigestTypeException",
    "LengthMismatchException",
    "LengthTooLargeException",
    "InvalidHexException",
    "NotAByteSequenceException",
    "TooShortException",
    "TooLongException",
    "UnknownFunctionCodeException",
    "LengthInconsistentException",
]
