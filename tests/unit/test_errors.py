"""
Error Taxonomy Unit Tests
Tests for multihash_codec/schemas/errors.py
"""
import pytest
from pydantic import ValidationError

from multihash_codec.schemas.errors import (
    EXCEPTIONS_BY_CODE,
    ErrorCodes,
    InvalidCodeTypeException,
    InvalidMultihashException,
    LengthInconsistentException,
    MultihashError,
    MultihashException,
    NotAByteSequenceException,
    TooShortException,
    UnknownHashNameException,
)


class TestErrorCodes:
    """Each failure kind has a distinct exception class."""

    def test_every_code_mapped(self):
        codes = {
            value
            for name, value in vars(ErrorCodes).items()
            if not name.startswith("_")
        }
        assert codes == set(EXCEPTIONS_BY_CODE)

    def test_classes_distinct(self):
        assert len(set(EXCEPTIONS_BY_CODE.values())) == len(EXCEPTIONS_BY_CODE)

    def test_all_subclass_base(self):
        for exc_class in EXCEPTIONS_BY_CODE.values():
            assert issubclass(exc_class, MultihashException)

    def test_builtin_bases(self):
        assert issubclass(InvalidCodeTypeException, TypeError)
        assert issubclass(NotAByteSequenceException, TypeError)
        assert issubclass(UnknownHashNameException, ValueError)
        assert issubclass(TooShortException, ValueError)

    def test_validation_kinds_share_base(self):
        assert issubclass(TooShortException, InvalidMultihashException)
        assert issubclass(LengthInconsistentException, InvalidMultihashException)
        assert not issubclass(UnknownHashNameException, InvalidMultihashException)


class TestMultihashError:
    """Tests for the MultihashError model."""

    def test_to_exception_picks_class(self):
        error = MultihashError(
            code=ErrorCodes.TOO_SHORT,
            message="too short",
            details={"size": 1},
        )
        exc = error.to_exception()

        assert isinstance(exc, TooShortException)
        assert exc.code == ErrorCodes.TOO_SHORT
        assert exc.message == "too short"
        assert exc.details == {"size": 1}
        assert str(exc) == "too short"

    def test_to_exception_unknown_code_falls_back(self):
        exc = MultihashError(code="SOMETHING_ELSE", message="x").to_exception()

        assert type(exc) is MultihashException
        assert exc.code == "SOMETHING_ELSE"

    def test_frozen(self):
        error = MultihashError(code=ErrorCodes.TOO_LONG, message="x")
        with pytest.raises(ValidationError):
            error.message = "y"

    def test_extra_forbidden(self):
        with pytest.raises(ValidationError):
            MultihashError(code=ErrorCodes.TOO_LONG, message="x", extra_field=1)


class TestMultihashException:
    """Tests for exception <-> model conversion."""

    def test_default_code(self):
        exc = UnknownHashNameException(message="bad name")

        assert exc.code == ErrorCodes.UNKNOWN_HASH_NAME
        assert exc.details == {}
        assert exc.retryable is False

    def test_round_trip_model(self):
        exc = TooShortException(message="short", details={"size": 2})
        model = exc.to_error_model()

        assert model.code == ErrorCodes.TOO_SHORT
        assert model.details == {"size": 2}
        assert isinstance(model.to_exception(), TooShortException)

    def test_repr(self):
        exc = TooShortException(message="short")
        assert repr(exc) == "TooShortException(code='TOO_SHORT', message='short')"
