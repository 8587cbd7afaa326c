"""
Codec Limits

Central definition of the fixed wire-format limits for multihash envelopes.
There is no runtime configuration surface: no environment variables and no
config files are read. The codec and registry consume DEFAULT_LIMITS.
"""

from __future__ import annotations

from dataclasses import dataclass

# High bit of the length byte is reserved for a future variable-length encoding.
RESERVED_LENGTH_BIT: int = 0x80


@dataclass(frozen=True)
class CodecLimits:
    """
    Size and code-range limits for the envelope format.

    Attributes:
        min_envelope_size: Smallest accepted envelope (code + length + 1 byte)
        max_envelope_size: Largest accepted envelope (code + length + 127 bytes)
        max_digest_length: Largest digest the length byte may announce
        app_code_min: First code reserved for application-defined use
        app_code_max: Last code reserved for application-defined use
    """
    min_envelope_size: int = 3
    max_envelope_size: int = 129
    max_digest_length: int = 127
    app_code_min: int = 0x01
    app_code_max: int = 0x0F

    def __post_init__(self) -> None:
        """Validate limit consistency."""
        if self.max_digest_length >= RESERVED_LENGTH_BIT:
            raise ValueError(
                f"max_digest_length must be below {RESERVED_LENGTH_BIT}, "
                f"got {self.max_digest_length}"
            )
        if self.max_envelope_size != 2 + self.max_digest_length:
            raise ValueError(
                "max_envelope_size must equal 2 + max_digest_length, "
                f"got {self.max_envelope_size} and {self.max_digest_length}"
            )
        if self.min_envelope_size < 2 or self.min_envelope_size > self.max_envelope_size:
            raise ValueError(
                f"min_envelope_size out of range: {self.min_envelope_size}"
            )
        if not (0 < self.app_code_min <= self.app_code_max < 0x10):
            raise ValueError(
                "application code range must lie within 0x01..0x0f, "
                f"got {self.app_code_min:#x}..{self.app_code_max:#x}"
            )

    def is_app_code(self, code: int) -> bool:
        """Return True if code falls in the application-reserved range."""
        return self.app_code_min <= code <= self.app_code_max


DEFAULT_LIMITS = CodecLimits()
