from docwright.core.parsing.strategies import (
    clean,
    cleaned_parse,
    coerce_scalar,
    key_value_parse,
    opaque_fallback,
    strict_parse,
)


# ───────────────────────────────────────────────────────── strict
def test_strict_parse_object():
    assert strict_parse('  {"a": 1, "b": [true, null]} ') == {"a": 1, "b": [True, None]}


def test_strict_parse_rejects_non_objects():
    assert strict_parse("[1, 2]") is None
    assert strict_parse('"text"') is None
    assert strict_parse("hello") is None


# ───────────────────────────────────────────────────────── cleaned
def test_clean_unwraps_fence_and_trailing_comma():
    assert clean("```json\n{'a': 1,}\n```") == '{"a": 1}'


def test_clean_unwraps_json_tag_without_newline():
    assert cleaned_parse('```json{"a":1}```') == {"a": 1}
    assert cleaned_parse('```json[1]```') is None


def test_cleaned_parse_quotes_bare_keys():
    raw = "{name: 'x', tags: ['a', 'b',],}"
    assert cleaned_parse(raw) == {"name": "x", "tags": ["a", "b"]}


def test_cleaned_parse_strips_edge_backticks():
    assert cleaned_parse('`{"a": 2}`') == {"a": 2}


def test_cleaned_parse_gives_up_on_prose():
    assert cleaned_parse("please write the design") is None


# ───────────────────────────────────────────────────────── key/value
def test_key_value_coercion():
    raw = "flag: TRUE, n: 42, ratio: 0.5, name: 'bob', note: plain text"
    assert key_value_parse(raw) == {
        "flag": True,
        "n": 42,
        "ratio": 0.5,
        "name": "bob",
        "note": "plain text",
    }


def test_key_value_requires_a_key():
    assert key_value_parse("no structure here") is None


def test_coerce_scalar():
    assert coerce_scalar(" -3 ") == -3
    assert coerce_scalar("1e3") == 1000.0
    assert coerce_scalar('"x"') == "x"
    assert coerce_scalar("False") is False
    assert coerce_scalar("v1.2") == "v1.2"


def test_coerce_scalar_keeps_huge_integers_as_text():
    digits = "1" * 5000
    assert coerce_scalar(digits) == digits
    assert key_value_parse("a: " + digits) == {"a": digits}


def test_opaque_fallback_keeps_raw_text():
    assert opaque_fallback("  anything ") == {"input": "  anything "}
