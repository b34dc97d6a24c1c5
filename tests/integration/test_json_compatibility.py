"""
Test cases comparing jsonaccess with the standard json module.

Valid documents must produce the same data as json.loads once converted to
native values, and the parse/dumps/parse round trip must be lossless.
"""

import io
import json
import unittest

import jsonaccess

PASS1 = r"""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\"",
        "backslash": "\\",
        "controls": "\b\f\n\r\t",
        "slash": "/ & \/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\u0123\u4567\u89AB\uCDEF\uabcd\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "http://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\"object with 1 member\":[\"array with 1 element\"]}",
        "quotes": "&#34; \u0022 %22 0x22 034 &#x22;",
        "\/\\\"\uCAFE\uBABE\uAB98\uFCDE\ubcda\uef4A\b\f\n\r\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]"""

PASS2 = '[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]'

PASS3 = """{
    "JSON Test Pattern pass3": {
        "The outermost value": "must be an object or array.",
        "In this test": "It is an object."
    }
}"""

# Documents json.loads rejects that jsonaccess also rejects.
FAIL_DOCS = [
    '["Unclosed array"',
    '{unquoted_key: "keys must be quoted"}',
    '["extra comma",]',
    '["double extra comma",,]',
    '[   , "<-- missing value"]',
    '["Comma after the close"],',
    '["Extra close"]]',
    '{"Extra comma": true,}',
    '{"Extra value after close": true} "misplaced quoted value"',
    '{"Illegal expression": 1 + 2}',
    '{"Illegal invocation": alert()}',
    '{"Numbers cannot be hex": 0x14}',
    "[\\naked]",
    '{"Missing colon" null}',
    '{"Double colon":: null}',
    '{"Comma instead of colon", null}',
    '["Colon instead of comma": false]',
    '["Bad value", truth]',
    "['single quote']",
    "[0e]",
    "[0e+]",
    "[0e+-1]",
    '{"Comma instead if closing brace": true,',
    '["mismatch"}',
]


class TestLoadsCompatibility(unittest.TestCase):
    """Valid documents decode to the same data as json.loads."""

    def test_json_checker_pass_documents(self):
        for name, doc in [("pass1", PASS1), ("pass2", PASS2), ("pass3", PASS3)]:
            with self.subTest(doc=name):
                self.assertEqual(jsonaccess.to_native(jsonaccess.parse(doc)), json.loads(doc))

    def test_pass1_escaped_quote(self):
        members = jsonaccess.js_get("quotes", jsonaccess.js_list(jsonaccess.parse(PASS1))[8])
        self.assertEqual(jsonaccess.js_str(None, members), '&#34; " %22 0x22 034 &#x22;')

    def test_basic_documents(self):
        test_cases = [
            '{"test": "value"}',
            "[1, 2, 3]",
            '{"nested": {"array": [1, 2, {"deep": true}]}}',
            '{"number": 123, "float": 45.67, "bool": false, "null": null}',
        ]
        for test_case in test_cases:
            with self.subTest(test_case=test_case):
                self.assertEqual(
                    jsonaccess.to_native(jsonaccess.loads(test_case)), json.loads(test_case)
                )

    def test_load_from_file_object(self):
        fp = io.StringIO(PASS3)
        self.assertEqual(jsonaccess.to_native(jsonaccess.load(fp)), json.loads(PASS3))

    def test_json_checker_fail_documents(self):
        for doc in FAIL_DOCS:
            with self.subTest(doc=doc):
                with self.assertRaises(json.JSONDecodeError):
                    json.loads(doc)
                with self.assertRaises(jsonaccess.InvalidJSONError):
                    jsonaccess.parse(doc)


class TestRoundTrip(unittest.TestCase):
    """parse(dumps(v)) is structurally equal to v."""

    def assertRoundTrips(self, value):
        self.assertEqual(jsonaccess.parse(jsonaccess.dumps(value)), value)

    def test_parsed_documents_round_trip(self):
        for doc in (PASS1, PASS2, PASS3):
            with self.subTest(doc=doc[:20]):
                self.assertRoundTrips(jsonaccess.parse(doc))

    def test_constructed_values_round_trip(self):
        values = [
            jsonaccess.JS_NULL,
            jsonaccess.js_of_str(""),
            jsonaccess.js_of_str('tab\there "quoted" \\ / é \U0001F600'),
            jsonaccess.js_of_num(0),
            jsonaccess.js_of_num(-12.75),
            jsonaccess.js_of_num(6.02e23),
            jsonaccess.js_of_bool(False),
            jsonaccess.js_of_list(),
            jsonaccess.js_of_obj({}),
            jsonaccess.from_native(
                {"users": [{"name": "ada", "admin": True, "age": 36, "tags": []}], "n": None}
            ),
        ]
        for value in values:
            with self.subTest(value=value):
                self.assertRoundTrips(value)

    def test_round_trip_with_indentation(self):
        value = jsonaccess.parse(PASS1)
        text = jsonaccess.dumps(value, indent=2, sort_keys=True)
        self.assertEqual(jsonaccess.parse(text), value)


if __name__ == "__main__":
    unittest.main()
