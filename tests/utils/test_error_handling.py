"""Tests for error handling utilities."""
import pytest

from agreement_eval.types import (
    AgreementError,
    DatasetFormatError,
    DatasetReadError,
    ElementSetMismatchError,
    EvaluationError,
    InvalidDatasetError,
    ShapeMismatchError,
)
from agreement_eval.utils import handle_errors


class TestExceptionHierarchy:
    def test_error_attributes(self):
        cause = ValueError("bad token")
        error = DatasetFormatError("Malformed line", context={"line": 3}, cause=cause)
        assert error.message == "Malformed line"
        assert error.error_code == "DatasetFormatError"
        assert error.context == {"line": 3}
        assert error.cause is cause
        assert str(error) == "Malformed line"

    def test_to_dict(self):
        error = EvaluationError("Empty input", error_code="EMPTY")
        data = error.to_dict()
        assert data["error_type"] == "EvaluationError"
        assert data["error_code"] == "EMPTY"
        assert data["context"] == {}
        assert data["cause"] is None
        assert "timestamp" in data

    def test_subclasses(self):
        assert issubclass(DatasetFormatError, InvalidDatasetError)
        assert issubclass(ShapeMismatchError, EvaluationError)
        assert issubclass(ElementSetMismatchError, EvaluationError)
        assert issubclass(DatasetReadError, AgreementError)


class TestHandleErrors:
    def test_returns_normally(self):
        @handle_errors()
        def add(a, b):
            return a + b

        assert add(1, 2) == 3

    def test_wraps_foreign_exceptions(self):
        @handle_errors(error_type=DatasetReadError)
        def fail(path):
            raise OSError("disk on fire")

        with pytest.raises(DatasetReadError) as exc_info:
            fail("data.txt")
        error = exc_info.value
        assert isinstance(error.cause, OSError)
        assert error.__cause__ is error.cause
        assert error.context["function"] == "fail"
        assert "data.txt" in error.context["args"]

    def test_library_errors_pass_through(self):
        @handle_errors(error_type=DatasetReadError)
        def fail():
            raise ShapeMismatchError("wrong shape")

        with pytest.raises(ShapeMismatchError):
            fail()

    def test_return_value_without_reraise(self):
        @handle_errors(reraise=False, log_errors=False, return_value="fallback")
        def fail():
            raise RuntimeError("boom")

        assert fail() == "fallback"

    def test_preserves_metadata(self):
        @handle_errors()
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."
