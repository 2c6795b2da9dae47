"""Tests for error handler."""

import logging

import pytest
from json_nodegraph.error_handler import ErrorHandler
from json_nodegraph.types import CodecError, ErrorType, ValidationError, ValidationResult


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.handler = ErrorHandler()

    def test_validate_input_valid(self):
        """Test validation of valid JSON input."""
        result = self.handler.validate_input('{"key": "value"}')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_any_root(self):
        """Test every JSON root kind is accepted."""
        for text in ('[1, 2]', '"text"', '42', 'null', 'true'):
            assert self.handler.validate_input(text).is_valid, text

    def test_validate_input_invalid_syntax(self):
        """Test validation of invalid JSON syntax."""
        result = self.handler.validate_input('{"key": "value"')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "Invalid JSON syntax" in result.errors[0].message

    def test_validate_input_not_a_string(self):
        """Test non-string input is a validation error."""
        result = self.handler.validate_input(b'{}')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.VALIDATION

    def test_validate_columns_logs_warnings(self, caplog):
        """Test empty paths are reported as warnings."""
        with caplog.at_level(logging.WARNING):
            result = self.handler.validate_columns(["a", ""], ["a", ""], ["1", ""])

        assert result.is_valid
        assert "empty path" in caplog.text

    def test_validate_selection(self):
        """Test selection argument checks."""
        assert self.handler.validate_selection(None, 0).is_valid
        assert self.handler.validate_selection(["a"], 3).is_valid

        negative = self.handler.validate_selection(["a"], -1)
        assert not negative.is_valid
        assert negative.errors[0].type == ErrorType.VALIDATION

        not_int = self.handler.validate_selection(["a"], "2")
        assert not not_int.is_valid
        assert "integer" in not_int.errors[0].message

        boolean = self.handler.validate_selection(["a"], True)
        assert not boolean.is_valid

    def test_validate_selection_blank_paths_warn(self):
        """Test blank selected paths are only a warning."""
        result = self.handler.validate_selection(["", "a"], 1)

        assert result.is_valid
        assert result.warnings == ["Ignoring 1 empty selected paths"]

    def test_raise_if_invalid(self):
        """Test invalid results raise with every message and the first type."""
        self.handler.raise_if_invalid(ValidationResult(True, [], []))

        result = ValidationResult(
            is_valid=False,
            errors=[
                ValidationError(ErrorType.SYNTAX, "bad token", "line 1, column 2"),
                ValidationError(ErrorType.VALIDATION, "other problem"),
            ],
            warnings=[]
        )
        with pytest.raises(CodecError) as excinfo:
            self.handler.raise_if_invalid(result)

        assert excinfo.value.error_type == ErrorType.SYNTAX
        assert "bad token at line 1, column 2" in str(excinfo.value)
        assert "other problem" in str(excinfo.value)
        assert excinfo.value.context["errors"] == ["bad token", "other problem"]

    def test_wrap_codec_error_unchanged(self):
        """Test an existing CodecError passes through."""
        error = CodecError("too deep", ErrorType.DEPTH)
        assert self.handler.wrap_error(error, "encode") is error

    def test_wrap_unexpected_error(self):
        """Test other exceptions become processing errors."""
        wrapped = self.handler.wrap_error(KeyError("missing"), "decode")

        assert isinstance(wrapped, CodecError)
        assert wrapped.error_type == ErrorType.PROCESSING
        assert str(wrapped).startswith("decode failed")
        assert wrapped.context == {"operation": "decode", "cause": "KeyError"}

    def test_wrap_recursion_error(self):
        """Test stack exhaustion is reported as a depth error."""
        wrapped = self.handler.wrap_error(RecursionError(), "encode")
        assert wrapped.error_type == ErrorType.DEPTH

    def test_wrap_error_logs(self, caplog):
        """Test wrapped errors are logged."""
        with caplog.at_level(logging.ERROR):
            self.handler.wrap_error(ValueError("broken"), "encode")

        assert "encode failed: broken" in caplog.text
