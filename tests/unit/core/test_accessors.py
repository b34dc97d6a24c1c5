"""
Test cases for the failure-tolerant accessors.

Type mismatches never raise; null, absent/wrong-typed and defined values stay
distinguishable.
"""

import unittest

from jsonaccess import (
    JS_NULL,
    UNDEFINED_BOOL,
    is_defined,
    js_get,
    js_is_null,
    js_keys,
    js_list,
    js_num,
    js_of_bool,
    js_of_num,
    js_of_str,
    js_str,
    js_true,
    parse,
)


class TestScalarAccessors(unittest.TestCase):
    """js_str / js_num delegate to the default on a mismatch."""

    def test_js_str_returns_string(self):
        self.assertEqual(js_str(lambda v: "fallback", js_of_str("hello")), "hello")

    def test_js_str_calls_default_once_with_value(self):
        calls = []
        value = js_of_num(3)

        def default(v):
            calls.append(v)
            return "fallback"

        self.assertEqual(js_str(default, value), "fallback")
        self.assertEqual(len(calls), 1)
        self.assertIs(calls[0], value)

    def test_js_str_default_not_called_on_match(self):
        def default(v):
            raise AssertionError("default must not be called")

        self.assertEqual(js_str(default, js_of_str("")), "")

    def test_default_may_raise(self):
        def strict(v):
            raise KeyError("expected a string")

        with self.assertRaises(KeyError):
            js_str(strict, JS_NULL)

    def test_js_num(self):
        self.assertEqual(js_num(lambda v: -1, js_of_num(2.5)), 2.5)
        self.assertEqual(js_num(lambda v: -1, js_of_str("2.5")), -1)
        self.assertEqual(js_num(lambda v: 0.0, JS_NULL), 0.0)


class TestBooleanAccessor(unittest.TestCase):
    """js_true separates real false from undefined."""

    def test_real_booleans(self):
        self.assertIs(js_true(js_of_bool(True)), True)
        self.assertIs(js_true(js_of_bool(False)), False)
        self.assertTrue(is_defined(js_true(js_of_bool(False))))

    def test_undefined_boolean(self):
        result = js_true(js_of_str("true"))
        self.assertIs(result, UNDEFINED_BOOL)
        self.assertFalse(result)
        self.assertFalse(is_defined(result))
        self.assertIsNot(result, False)

    def test_null_is_not_a_boolean(self):
        self.assertIs(js_true(JS_NULL), UNDEFINED_BOOL)


class TestContainerAccessors(unittest.TestCase):
    """js_list, js_get and js_keys on matching and mismatching values."""

    def setUp(self):
        self.doc = parse('{"a": 1, "b": [true, false, null], "n": null}')

    def test_get_and_list(self):
        self.assertEqual(js_num(lambda v: None, js_get("a", self.doc)), 1.0)
        self.assertEqual(
            js_list(js_get("b", self.doc)),
            (js_of_bool(True), js_of_bool(False), JS_NULL),
        )

    def test_missing_field_is_null(self):
        self.assertTrue(js_is_null(js_get("missing", parse('{"a": 1}'))))

    def test_get_on_non_object_is_null(self):
        self.assertIs(js_get("a", js_of_str("a")), JS_NULL)
        self.assertIs(js_get("a", parse("[1]")), JS_NULL)

    def test_present_null_vs_absent_via_keys(self):
        self.assertIn("n", js_keys(self.doc))
        self.assertNotIn("missing", js_keys(self.doc))
        self.assertTrue(js_is_null(js_get("n", self.doc)))
        self.assertTrue(js_is_null(js_get("missing", self.doc)))

    def test_list_of_wrong_type_is_empty(self):
        self.assertEqual(js_list(js_get("a", self.doc)), ())
        self.assertEqual(js_list(js_get("typo", self.doc)), ())
        self.assertEqual([x for x in js_list(JS_NULL)], [])

    def test_chained_access_degrades_to_no_op(self):
        names = [
            js_str(lambda v: "", js_get("name", item))
            for item in js_list(js_get("users", js_get("nested", self.doc)))
        ]
        self.assertEqual(names, [])

    def test_keys(self):
        self.assertEqual(sorted(js_keys(self.doc)), ["a", "b", "n"])
        self.assertEqual(js_keys(parse("{}")), [])
        self.assertEqual(js_keys(parse("[1]")), [])

    def test_is_null(self):
        self.assertTrue(js_is_null(parse("null")))
        self.assertFalse(js_is_null(parse("0")))
        self.assertFalse(js_is_null(parse('""')))


if __name__ == "__main__":
    unittest.main()
