"""Tests for graph encoder."""

import pytest
from json_nodegraph.config import CodecConfig
from json_nodegraph.processors.graph_encoder import GraphEncoder, stringify
from json_nodegraph.types import CodecError, ErrorType
from json_nodegraph.utils.validation import ValidationUtils


class TestGraphEncoder:
    """Tests for GraphEncoder class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.encoder = GraphEncoder()

    def test_encode_flat_and_nested_object(self):
        """Test objects produce key paths in depth order."""
        nodes = self.encoder.encode({"a": 1, "b": {"c": 2}})

        assert [(n.name, n.value, n.path, n.depth) for n in nodes] == [
            ("a", "1", "a", 1),
            ("b", "", "b", 1),
            ("c", "2", "b.c", 2),
        ]
        assert nodes[2].parent == "b"
        assert nodes[2].import_parent_path == "b"
        assert nodes[0].parent == ""
        assert nodes[0].import_parent_path == ""

    def test_primitive_array_elements_use_their_value_as_segment(self):
        """Test primitive elements are addressed by value, not index."""
        nodes = self.encoder.encode({"tags": ["x", "y"]})

        assert [n.path for n in nodes] == ["tags", "tags.x", "tags.y"]
        assert [n.value for n in nodes] == ["", "x", "y"]
        assert nodes[1].parent == "tags"

    def test_container_array_elements_use_index_nodes(self):
        """Test object elements get an index node and nested paths."""
        nodes = self.encoder.encode({"users": [{"name": "Ann"}, {"name": "Bob"}]})

        assert [n.path for n in nodes] == [
            "users", "users.0", "users.1", "users.0.name", "users.1.name"
        ]
        index_node = nodes[1]
        assert index_node.name == "0"
        assert index_node.value == ""
        assert nodes[3].parent == "0"
        assert nodes[3].import_parent_path == "users.0"

    def test_scalar_spelling(self):
        """Test null keeps its literal spelling while containers are empty."""
        nodes = self.encoder.encode({
            "none": None, "yes": True, "ratio": 1.5, "empty": {}, "blank": []
        })
        values = {n.path: n.value for n in nodes}

        assert values == {
            "none": "null",
            "yes": "true",
            "ratio": "1.5",
            "empty": "",
            "blank": "",
        }

    def test_duplicate_primitives_collapse(self):
        """Test equal primitive siblings map onto one node."""
        nodes = self.encoder.encode({"t": ["x", "x", "y"]})
        assert [n.path for n in nodes] == ["t", "t.x", "t.y"]

    def test_first_occurrence_wins_across_branches(self):
        """Test a later branch producing a taken path drops only that node."""
        nodes = self.encoder.encode({"a": ["1", {"b": 2}]})

        assert [n.path for n in nodes] == ["a", "a.1", "a.1.b"]
        assert nodes[1].value == "1"
        assert nodes[2].value == "2"
        assert nodes[2].import_parent_path == "a.1"

    def test_mixed_array_keeps_container_descendants(self):
        """Test an object sharing its index segment with a primitive keeps its keys."""
        nodes = self.encoder.encode({"a": [1, {"k": "v"}]})

        assert [n.path for n in nodes] == ["a", "a.1", "a.1.k"]
        assert ValidationUtils.validate_node_list(nodes).is_valid

    def test_empty_root_key_subtree_is_dropped(self):
        """Test an empty root key drops its whole subtree."""
        nodes = self.encoder.encode({"": {"x": 1}, "a": 2})
        assert [n.path for n in nodes] == ["a"]

    def test_nodes_sorted_by_depth_with_stable_siblings(self):
        """Test ordering is by depth, insertion order within a depth."""
        nodes = self.encoder.encode({"z": {"y": {"x": 1}}, "a": 1})
        assert [n.path for n in nodes] == ["z", "a", "z.y", "z.y.x"]

    def test_root_primitive_produces_no_nodes(self):
        """Test the root value itself is never a node."""
        assert self.encoder.encode("just text") == []
        assert self.encoder.encode(None) == []

    def test_root_array(self):
        """Test root arrays encode their elements at depth one."""
        nodes = self.encoder.encode(["x", {"a": 2}])
        assert [n.path for n in nodes] == ["x", "1", "1.a"]

    def test_empty_keys_are_not_emitted_at_root(self):
        """Test the empty path is never emitted."""
        nodes = self.encoder.encode({"": 1, "a": 2})
        assert [n.path for n in nodes] == ["a"]

    def test_output_passes_node_list_checks(self, sample_report_json):
        """Test depth consistency, uniqueness and ancestor ordering."""
        nodes = self.encoder.encode(sample_report_json)
        result = ValidationUtils.validate_node_list(nodes)

        assert result.is_valid, result.errors
        assert len({n.path for n in nodes}) == len(nodes)

    def test_calls_do_not_share_visited_paths(self):
        """Test encoding the same value twice yields the same nodes."""
        first = self.encoder.encode({"a": [1, 2]})
        second = self.encoder.encode({"a": [1, 2]})
        assert first == second
        assert len(second) == 3

    def test_depth_guard(self):
        """Test nesting beyond max_depth is rejected."""
        data = {"a": {"b": {"c": {"d": 1}}}}

        with pytest.raises(CodecError) as excinfo:
            GraphEncoder(CodecConfig(max_depth=3)).encode(data)
        assert excinfo.value.error_type == ErrorType.DEPTH

        nodes = GraphEncoder(CodecConfig(max_depth=4)).encode(data)
        assert nodes[-1].path == "a.b.c.d"

    def test_custom_separator(self):
        """Test paths honour the configured separator."""
        nodes = GraphEncoder(CodecConfig(separator="/")).encode({"a": {"b": 1}})
        assert [n.path for n in nodes] == ["a", "a/b"]
        assert nodes[1].depth == 2


class TestStringify:
    """Tests for the stringify helper."""

    def test_stringify(self):
        """Test primitive string forms."""
        assert stringify("text") == "text"
        assert stringify(None) == "null"
        assert stringify(False) == "false"
        assert stringify(10) == "10"
        assert stringify(2.5) == "2.5"
