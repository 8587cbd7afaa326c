"""
Single entry point that encodes or decodes depending on the arguments given.
"""
from __future__ import annotations

from typing import overload

from multihash_codec.codec import HashFunctionRef, decode, encode
from multihash_codec.schemas.errors import MissingArgumentsException
from multihash_codec.schemas.records import DecodedMultihash


@overload
def multihash(hash_or_digest: bytes) -> DecodedMultihash: ...


@overload
def multihash(
    hash_or_digest: bytes,
    hashfn: HashFunctionRef,
    length: int | None = None,
) -> bytes: ...


def multihash(
    hash_or_digest: bytes,
    hashfn: HashFunctionRef | None = None,
    length: int | None = None,
) -> bytes | DecodedMultihash:
    """
    Encode when hashfn is given, otherwise decode.

    Usage:
        envelope = multihash(digest, "sha2-256")
        decoded = multihash(envelope)
    """
    if hash_or_digest is None:
        raise MissingArgumentsException(
            message="multihash must be called with the encode or decode parameters.",
        )

    if hashfn is not None:
        return encode(hash_or_digest, hashfn, length)

    return decode(hash_or_digest)


__all__ = ["multihash"]
