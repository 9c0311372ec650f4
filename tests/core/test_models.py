"""Tests for core models."""

import pytest
from pydantic import ValidationError

from typeguess.core.models import DatabaseTypeRequest, Result, TypeTag
from typeguess.sizing import Size


class TestResult:
    """Tests for the Result type."""

    def test_ok(self):
        """Test a successful result."""
        result = Result.ok(5, warnings=["careful"])
        assert result.success
        assert result.unwrap() == 5
        assert result.warnings == ["careful"]

    def test_fail(self):
        """Test that unwrapping a failure raises."""
        result = Result.fail("nope")
        assert not result.success
        assert result.error == "nope"
        with pytest.raises(ValueError, match="nope"):
            result.unwrap()

    def test_map(self):
        """Test transforming only successful values."""
        assert Result.ok(2).map(lambda v: v * 10).value == 20
        failed = Result.fail("bad")
        assert failed.map(lambda v: v * 10) is failed


class TestDatabaseTypeRequest:
    """Tests for the guess result model."""

    def test_defaults(self):
        """Test the empty guess."""
        request = DatabaseTypeRequest()
        assert request.type is TypeTag.STRING
        assert request.size == Size()
        assert not request.unicode

    def test_frozen(self):
        """Test that callers cannot mutate a guess."""
        request = DatabaseTypeRequest()
        with pytest.raises(ValidationError):
            request.type = TypeTag.INTEGER

    @pytest.mark.parametrize(
        ("request_", "text", "width"),
        [
            (DatabaseTypeRequest(type=TypeTag.DECIMAL, size=Size(3, 2)), "DECIMAL(5,2)", 6),
            (DatabaseTypeRequest(type=TypeTag.INTEGER, size=Size(4)), "INTEGER(4)", 4),
            (DatabaseTypeRequest(size=Size(0, 0, 12), unicode=True), "STRING(12) unicode", 12),
            (DatabaseTypeRequest(type=TypeTag.DATETIME, size=Size(0, 0, 10)), "DATETIME", None),
            (DatabaseTypeRequest(type=TypeTag.BOOLEAN), "BOOLEAN", None),
        ],
    )
    def test_rendering(self, request_, text, width):
        """Test the text rendering and width of each type."""
        assert str(request_) == text
        assert request_.width == width

    def test_json_dump(self):
        """Test serialisation for scripting output."""
        dumped = DatabaseTypeRequest(type=TypeTag.INTEGER, size=Size(2, 0, 2)).model_dump(mode="json")
        assert dumped == {
            "type": "INTEGER",
            "size": {"integer_digits": 2, "fractional_digits": 0, "string_length": 2},
            "unicode": False,
        }
