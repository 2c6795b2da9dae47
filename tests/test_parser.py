"""Tests for JSON parser."""

import pytest
from json_nodegraph.parser import JSONParser
from json_nodegraph.types import CodecError, DataType, ErrorType


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_object(self):
        """Test parsing a JSON object."""
        data, root_type = self.parser.parse('{"key": "value", "number": 42}')

        assert data == {"key": "value", "number": 42}
        assert root_type == DataType.DICT

    def test_parse_array(self):
        """Test parsing a JSON array."""
        data, root_type = self.parser.parse('[1, 2, 3]')

        assert data == [1, 2, 3]
        assert root_type == DataType.LIST

    def test_parse_primitive(self):
        """Test parsing a primitive root."""
        data, root_type = self.parser.parse('"text"')

        assert data == "text"
        assert root_type == DataType.PRIMITIVE

    def test_parse_invalid_json(self):
        """Test parsing invalid JSON raises ValueError."""
        with pytest.raises(ValueError, match="Invalid JSON input"):
            self.parser.parse('{"key": }')

    def test_parse_without_validation(self):
        """Test pre-validated text skips the validation step."""
        calls = []
        self.parser.error_handler.validate_input = lambda text: calls.append(text)

        data, _ = self.parser.parse('{"a": 1}', validate=False)

        assert data == {"a": 1}
        assert calls == []

    def test_parse_without_validation_still_rejects_invalid_json(self):
        """Test malformed text fails at load time when validation is skipped."""
        with pytest.raises(ValueError, match="JSON parsing failed"):
            self.parser.parse('{"key": }', validate=False)

    def test_parse_too_deep(self):
        """Test nesting beyond max_depth is rejected."""
        parser = JSONParser(max_depth=3)
        parser.parse('[[[1]]]')

        with pytest.raises(CodecError) as excinfo:
            parser.parse('[[[[1]]]]')
        assert excinfo.value.error_type == ErrorType.DEPTH
        assert excinfo.value.context == {"depth": 4, "max_depth": 3}

    def test_calculate_nesting_depth(self):
        """Test nesting depth calculation."""
        assert JSONParser.calculate_nesting_depth(5) == 0
        assert JSONParser.calculate_nesting_depth({}) == 1
        assert JSONParser.calculate_nesting_depth({"a": [1, {"b": {}}]}) == 4

    def test_nesting_depth_of_very_deep_value(self):
        """Test depth measurement does not recurse."""
        data = []
        for _ in range(5000):
            data = [data]

        assert JSONParser.calculate_nesting_depth(data) == 5001

    def test_structure_statistics(self):
        """Test structure statistics."""
        stats = self.parser.get_structure_statistics({"a": [1, 2], "b": {"c": None}})

        assert stats["root_type"] == "dict"
        assert stats["dict_count"] == 2
        assert stats["list_count"] == 1
        assert stats["primitive_count"] == 3
        assert stats["total_keys"] == 3
        assert stats["total_items"] == 2
        assert stats["max_depth"] == 2
