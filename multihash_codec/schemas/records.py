"""
Multihash Schemas
File: records.py

Purpose: Structured result of decoding a multihash envelope.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DecodedMultihash(BaseModel):
    """
    Components of a decoded multihash envelope.

    name is None when code is an application code with no registry entry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    code: int = Field(
        ...,
        description="Hash function code (byte 0 of the envelope)",
        ge=0,
        le=255,
    )
    name: str | None = Field(
        default=None,
        description="Registered hash function name, if any",
    )
    length: int = Field(
        ...,
        description="Digest length announced by byte 1 of the envelope",
        ge=0,
        le=127,
    )
    digest: bytes = Field(
        ...,
        description="Raw digest bytes",
    )

    @model_validator(mode="after")
    def validate_digest_length(self) -> "DecodedMultihash":
        """Ensure the digest holds exactly `length` bytes."""
        if len(self.digest) != self.length:
            raise ValueError(
                f"digest has {len(self.digest)} bytes but length is {self.length}"
            )
        return self

    @property
    def hex_digest(self) -> str:
        """Digest as a lowercase hex string."""
        return self.digest.hex()
