"""
Codec Limits Unit Tests
Tests for multihash_codec/config/limits.py
"""
import dataclasses

import pytest

from multihash_codec.config import DEFAULT_LIMITS, RESERVED_LENGTH_BIT, CodecLimits


class TestDefaultLimits:
    """The default limits describe the wire format."""

    def test_values(self):
        assert DEFAULT_LIMITS.min_envelope_size == 3
        assert DEFAULT_LIMITS.max_envelope_size == 129
        assert DEFAULT_LIMITS.max_digest_length == 127
        assert DEFAULT_LIMITS.app_code_min == 1
        assert DEFAULT_LIMITS.app_code_max == 15

    def test_length_below_reserved_bit(self):
        assert DEFAULT_LIMITS.max_digest_length < RESERVED_LENGTH_BIT

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_LIMITS.max_digest_length = 255

    def test_is_app_code(self):
        assert DEFAULT_LIMITS.is_app_code(1)
        assert DEFAULT_LIMITS.is_app_code(15)
        assert not DEFAULT_LIMITS.is_app_code(0)
        assert not DEFAULT_LIMITS.is_app_code(16)


class TestLimitValidation:
    """Inconsistent limits are rejected at construction."""

    def test_reserved_bit(self):
        with pytest.raises(ValueError, match="below"):
            CodecLimits(max_digest_length=128, max_envelope_size=130)

    def test_envelope_size_must_match(self):
        with pytest.raises(ValueError, match="2 \\+ max_digest_length"):
            CodecLimits(max_envelope_size=100)

    def test_min_size(self):
        with pytest.raises(ValueError, match="min_envelope_size"):
            CodecLimits(min_envelope_size=1)

    def test_app_range(self):
        with pytest.raises(ValueError, match="application code range"):
            CodecLimits(app_code_max=0x10)

    def test_smaller_limits_allowed(self):
        limits = CodecLimits(max_digest_length=64, max_envelope_size=66)
        assert limits.max_envelope_size == 66
