"""
Hex helpers for multihash envelopes.

This module provides:
- to_hex_string: validated envelope -> lowercase hex (no prefix)
- from_hex_string: hex (optional 0x prefix) -> validated envelope bytes

Both directions validate the envelope, so a hex string produced here always
decodes.
"""
from __future__ import annotations

from typing import Any

from multihash_codec.codec import validate
from multihash_codec.schemas.errors import InvalidHexException


def to_hex_string(multihash: bytes) -> str:
    """
    Convert a multihash envelope to a hexadecimal string.

    Args:
        multihash: Encoded envelope

    Returns:
        Lowercase hex string without prefix

    Raises:
        InvalidMultihashException subclass if the envelope is malformed

    Example:
        >>> to_hex_string(bytes([0x11, 0x01, 0xff]))
        '1101ff'
    """
    error = validate(multihash)
    if error is not None:
        raise error.to_exception()
    return bytes(multihash).hex()


def from_hex_string(hex_string: Any) -> bytes:
    """
    Convert a hexadecimal string to multihash envelope bytes.

    Args:
        hex_string: Hex string, with or without a 0x prefix

    Returns:
        Envelope bytes

    Raises:
        InvalidHexException: If input is not a string, has odd length,
            or contains invalid hex characters
        InvalidMultihashException subclass if the decoded bytes are not a
            valid envelope

    Example:
        >>> from_hex_string("0x1101ff").hex()
        '1101ff'
    """
    if not isinstance(hex_string, str):
        raise InvalidHexException(
            message=f"Hex input must be a string, got {type(hex_string).__name__}",
            details={"type": type(hex_string).__name__},
        )

    hex_content = hex_string[2:] if hex_string.startswith(("0x", "0X")) else hex_string

    if len(hex_content) % 2 != 0:
        raise InvalidHexException(
            message=(
                "Hex string must have even length, "
                f"got length {len(hex_content)}"
            ),
            details={"length": len(hex_content)},
        )

    try:
        data = bytes.fromhex(hex_content)
    except ValueError as e:
        raise InvalidHexException(
            message=f"Invalid hex characters in string: {e}",
        ) from e

    error = validate(data)
    if error is not None:
        raise error.to_exception()
    return data


__all__ = [
    "to_hex_string",
    "from_hex_string",
]
