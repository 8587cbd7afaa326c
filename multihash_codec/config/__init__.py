"""
Codec Configuration Module

Provides the wire-format limits used by the multihash codec.
"""

from .limits import CodecLimits, DEFAULT_LIMITS, RESERVED_LENGTH_BIT

__all__ = [
    "CodecLimits",
    "DEFAULT_LIMITS",
    "RESERVED_LENGTH_BIT",
]
