"""
Pytest configuration and shared fixtures for jtree tests.

Provides immutable test case containers and the JSON_checker documents used
by the pass/fail suites.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from jtree import Array
from jtree import Bool
from jtree import Null
from jtree import Number
from jtree import Object
from jtree import String
from jtree import float32


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: str
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""


# https://json.org/JSON_checker/test/failN.json, in order, plus the
# simplejson control character case.
FAIL_DOCS = [
    '"A JSON payload should be an object or array, not a string."',
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
    '{"Numbers cannot have leading zeroes": 013}',
    '{"Numbers cannot be hex": 0x14}',
    '["Illegal backslash escape: \\x15"]',
    "[\\naked]",
    '["Illegal backslash escape: \\017"]',
    '[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]',
    '{"Missing colon" null}',
    '{"Double colon":: null}',
    '{"Comma instead of colon", null}',
    '["Colon instead of comma": false]',
    '["Bad value", truth]',
    "['single quote']",
    '["\ttab\tcharacter\tin\tstring\t"]',
    '["tab\\   character\\   in\\  string\\  "]',
    '["line\nbreak"]',
    '["line\\\nbreak"]',
    "[0e]",
    "[0e+]",
    "[0e+-1]",
    '{"Comma instead if closing brace": true,',
    '["mismatch"}',
    '["A\u001fZ control characters in string"]',
]

# Documents the grammar deliberately accepts.
LENIENT_FAIL_DOCS = {
    1: "any value is accepted at the top level",
    4: "one trailing comma is tolerated in arrays",
    9: "one trailing comma is tolerated in objects",
    13: "a single leading zero is accepted before other digits",
    18: "nesting is bounded by max_depth, not by JSON_checker's 19",
    25: "characters inside strings are taken verbatim",
    27: "characters inside strings are taken verbatim",
    34: "characters inside strings are taken verbatim",
}

PASS1 = """[
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
        "":  23456789012E+66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & /",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}"
    }
]"""


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON_checker documents that must be rejected in strict mode.

    Documents the grammar accepts on purpose carry a skip reason.
    """
    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=True,
            skip_reason=LENIENT_FAIL_DOCS.get(idx + 1, ""),
        )
        for idx, doc in enumerate(FAIL_DOCS)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON documents that must parse successfully.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data=PASS1,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers all JSON primitive types and basic container structures.
    """
    return [
        JsonTestCase("null value", "null", False, Null()),
        JsonTestCase("true boolean", "true", False, Bool(True)),
        JsonTestCase("false boolean", "false", False, Bool(False)),
        JsonTestCase("integer", "42", False, Number(42.0)),
        JsonTestCase("negative integer", "-17", False, Number(-17.0)),
        JsonTestCase("float", "3.14", False, Number(float32(3.14))),
        JsonTestCase("empty string", '""', False, String("")),
        JsonTestCase("simple string", '"hello"', False, String("hello")),
        JsonTestCase("empty array", "[]", False, Array()),
        JsonTestCase("empty object", "{}", False, Object()),
        JsonTestCase(
            "simple array",
            "[1, 2, 3]",
            False,
            Array((Number(1.0), Number(2.0), Number(3.0))),
        ),
        JsonTestCase(
            "simple object",
            '{"key": "value"}',
            False,
            Object(((String("key"), String("value")),)),
        ),
        JsonTestCase("bare word", "nothing", True),
        JsonTestCase("empty input", "", True),
        JsonTestCase("whitespace only", " \n\t", True),
    ]
