"""
Hash Function Registry
Fixed, immutable mapping between hash function names and multihash codes.

This module provides:
- HASH_FUNCTIONS: the registered entries (name, code, default length)
- NAMES / CODES / DEFAULT_LENGTHS: read-only lookup tables
- Lookup helpers that return None for unknown keys
- Code classification (registered vs application-reserved)

Registry Rules:
1. Name <-> code is bijective; duplicates fail at import time
2. Codes 0x01..0x0f are reserved for application use and never registered
3. Default lengths are advisory; the codec never consults them
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Sequence

from multihash_codec.config import DEFAULT_LIMITS


@dataclass(frozen=True)
class HashFunction:
    """
    A registered hash function.

    Attributes:
        name: Human-readable name (e.g. "sha2-256")
        code: Single-byte function code
        default_length: Usual digest size in bytes
    """
    name: str
    code: int
    default_length: int

    def __post_init__(self) -> None:
        """Validate entry structure."""
        if not 0 <= self.code <= 0xFF:
            raise ValueError(f"Function code must fit in one byte, got {self.code}")
        if DEFAULT_LIMITS.is_app_code(self.code):
            raise ValueError(
                f"Function code {self.code:#04x} is reserved for application use"
            )
        if not 0 < self.default_length <= DEFAULT_LIMITS.max_digest_length:
            raise ValueError(
                f"Default length out of range for {self.name}: {self.default_length}"
            )


HASH_FUNCTIONS: tuple[HashFunction, ...] = (
    HashFunction("sha1", 0x11, 20),
    HashFunction("sha2-256", 0x12, 32),
    HashFunction("sha2-512", 0x13, 64),
    HashFunction("sha3", 0x14, 64),
    HashFunction("blake2b", 0x40, 64),
    HashFunction("blake2s", 0x41, 32),
)


def _build_tables(
    entries: Sequence[HashFunction],
) -> tuple[Mapping[str, int], Mapping[int, str], Mapping[int, int]]:
    """
    Build read-only name->code, code->name and code->length tables.

    Raises:
        ValueError: If two entries share a name or a code
    """
    names: dict[str, int] = {}
    codes: dict[int, str] = {}
    lengths: dict[int, int] = {}

    for entry in entries:
        if entry.name in names:
            raise ValueError(f"Duplicate hash function name: {entry.name}")
        if entry.code in codes:
            raise ValueError(
                f"Duplicate hash function code {entry.code:#04x} "
                f"({codes[entry.code]} and {entry.name})"
            )
        names[entry.name] = entry.code
        codes[entry.code] = entry.name
        lengths[entry.code] = entry.default_length

    return MappingProxyType(names), MappingProxyType(codes), MappingProxyType(lengths)


NAMES, CODES, DEFAULT_LENGTHS = _build_tables(HASH_FUNCTIONS)


def _is_int(value: object) -> bool:
    # bool is an int subclass but never a function code
    return isinstance(value, int) and not isinstance(value, bool)


def name_to_code(name: str) -> int | None:
    """Return the code registered for name, or None."""
    if not isinstance(name, str):
        return None
    return NAMES.get(name)


def code_to_name(code: int) -> str | None:
    """Return the name registered for code, or None."""
    if not _is_int(code):
        return None
    return CODES.get(code)


def code_to_default_length(code: int) -> int | None:
    """Return the advisory digest length for code, or None."""
    if not _is_int(code):
        return None
    return DEFAULT_LENGTHS.get(code)


def is_app_code(code: int) -> bool:
    """
    Check whether code is reserved for application-defined use.

    Application codes are 0x01..0x0f inclusive. They are valid in envelopes
    but have no registered name.
    """
    return _is_int(code) and DEFAULT_LIMITS.is_app_code(code)


def is_valid_code(code: int) -> bool:
    """Check whether code is registered or an application code."""
    return is_app_code(code) or code_to_name(code) is not None


__all__ = [
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
]
