import unittest
from types import MappingProxyType

from jsonshape import UNSET, SchemaError, SchemaNode, compile, parse_schema


class ParseSchemaTests(unittest.TestCase):
    def test_scalar_type_becomes_tuple(self):
        node = parse_schema({"type": "string"})
        self.assertEqual(node.types, ("string",))

    def test_duplicate_kinds_collapse_in_order(self):
        node = parse_schema({"type": ["null", "string", "null"]})
        self.assertEqual(node.types, ("null", "string"))

    def test_absent_facets_are_none(self):
        node = parse_schema({"type": "array"})
        self.assertIsNone(node.min_items)
        self.assertIsNone(node.items)
        self.assertIs(node.const, UNSET)
        self.assertFalse(node.has_const)
        self.assertIs(node.additional_properties, True)

    def test_zero_and_false_are_kept(self):
        node = parse_schema({"type": "object", "minItems": 0, "additionalProperties": False, "const": None})
        self.assertEqual(node.min_items, 0)
        self.assertIs(node.additional_properties, False)
        self.assertTrue(node.has_const)
        self.assertIsNone(node.const)

    def test_nested_nodes_are_parsed(self):
        node = parse_schema({
            "type": "object",
            "properties": {"b": {"type": "string"}, "a": {"type": "integer"}},
            "additionalProperties": {"type": "boolean"},
            "items": {"type": "null"},
        })
        self.assertIsInstance(node.properties, MappingProxyType)
        self.assertEqual(list(node.properties), ["b", "a"])
        self.assertIsInstance(node.additional_properties, SchemaNode)
        self.assertEqual(len(node.children()), 4)

    def test_not_format(self):
        node = parse_schema({"type": "string", "not": {"format": "ipv4"}})
        self.assertEqual(node.not_format, "ipv4")

    def test_node_is_immutable(self):
        node = parse_schema({"type": "string"})
        with self.assertRaises(AttributeError):
            node.min_length = 3

    def test_parsed_node_passes_through(self):
        node = parse_schema({"type": "string"})
        self.assertIs(parse_schema(node), node)
        self.assertTrue(compile(node)("x").ok)


class SchemaErrorTests(unittest.TestCase):
    def assertSchemaError(self, schema, pattern):
        with self.assertRaisesRegex(SchemaError, pattern):
            parse_schema(schema)

    def test_missing_type(self):
        self.assertSchemaError({"properties": {}}, r"root: missing 'type'")

    def test_unknown_type(self):
        self.assertSchemaError({"type": "list"}, "unknown type 'list'")

    def test_empty_type_list(self):
        self.assertSchemaError({"type": []}, "at least one kind")

    def test_error_location_is_reported(self):
        self.assertSchemaError(
            {"type": "object", "properties": {"id": {"type": "int"}}},
            r"root\.properties\.id: unknown type",
        )

    def test_invalid_pattern(self):
        self.assertSchemaError({"type": "string", "pattern": "[a-"}, "invalid pattern")

    def test_composite_enum_rejected(self):
        self.assertSchemaError({"type": "object", "enum": [{"a": 1}]}, "'enum' only supports")

    def test_composite_const_rejected(self):
        self.assertSchemaError({"type": "array", "const": [1]}, "'const' only supports")

    def test_negative_count(self):
        self.assertSchemaError({"type": "string", "minLength": -1}, "non-negative integer")

    def test_boolean_bound(self):
        self.assertSchemaError({"type": "number", "minimum": True}, "finite number")

    def test_limits_beyond_float_range(self):
        huge = 10 ** 400
        self.assertSchemaError({"type": "string", "maxLength": huge}, "'maxLength' is out of range")
        self.assertSchemaError({"type": "number", "minimum": huge}, "'minimum' is out of range")
        self.assertSchemaError({"type": "array", "minItems": huge}, "'minItems' is out of range")

    def test_required_must_be_a_list(self):
        self.assertSchemaError({"type": "object", "required": "id"}, "'required'")

    def test_schema_error_is_value_error(self):
        self.assertTrue(issubclass(SchemaError, ValueError))


if __name__ == "__main__":
    unittest.main()
