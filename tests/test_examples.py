import pytest

from ramldoc.exceptions import UnsupportedParameterType
from ramldoc.flatten.examples import (
    NUMBER_PLACEHOLDER,
    ParamType,
    make_example_from_type,
    make_request_examples,
    set_dotted,
    try_pretty_json,
)


class TestTryPrettyJson:
    def test_pretty_prints_json(self):
        assert try_pretty_json('{"a":1}') == '{\n  "a": 1\n}'

    def test_non_json_returned_unchanged(self):
        assert try_pretty_json("not json") == "not json"

    def test_missing_example_stays_none(self):
        assert try_pretty_json(None) is None

    def test_keeps_unicode(self):
        assert try_pretty_json('{"name":"Zoë"}') == '{\n  "name": "Zoë"\n}'


class TestParamType:
    def test_known_types(self):
        assert ParamType.parse("string") is ParamType.STRING
        assert ParamType.parse("number") is ParamType.NUMBER

    def test_unknown_type_raises(self):
        with pytest.raises(UnsupportedParameterType) as exc_info:
            ParamType.parse("boolean", "enabled")
        assert exc_info.value.param_type == "boolean"
        assert "enabled" in str(exc_info.value)


class TestMakeExampleFromType:
    def test_string_placeholder(self):
        assert make_example_from_type("string", "name") == "EXAMPLE: name"

    def test_number_placeholder(self):
        assert make_example_from_type("number", "age") == NUMBER_PLACEHOLDER == 1234567890


class TestSetDotted:
    def test_flat_key(self):
        target = {}
        set_dotted(target, "x", 1)
        assert target == {"x": 1}

    def test_nested_keys_share_parent(self):
        target = {}
        set_dotted(target, "user.name", "a")
        set_dotted(target, "user.age", 2)
        assert target == {"user": {"name": "a", "age": 2}}


class TestMakeRequestExamples:
    def test_body_examples_in_content_type_order(self):
        method = {
            "body": {
                "application/json": {"example": '{"a":1}'},
                "text/plain": {"example": "not json"},
            }
        }
        assert make_request_examples(method) == ['{\n  "a": 1\n}', "not json"]

    def test_body_wins_over_params(self):
        method = {
            "body": {"application/json": {"example": "[]"}},
            "params": [{"displayName": "x", "type": "string"}],
        }
        assert make_request_examples(method) == ["[]"]

    def test_body_without_example(self):
        assert make_request_examples({"body": {"application/json": None}}) == [None]

    def test_string_param_placeholder(self):
        method = {"params": [{"displayName": "x", "type": "string"}]}
        assert make_request_examples(method) == [{"x": "EXAMPLE: x"}]

    def test_number_param_placeholder(self):
        method = {"params": [{"displayName": "n", "type": "number"}]}
        assert make_request_examples(method) == [{"n": 1234567890}]

    def test_literal_example_used_verbatim(self):
        method = {"params": [{"displayName": "flag", "type": "boolean", "example": False}]}
        assert make_request_examples(method) == [{"flag": False}]

    def test_dotted_names_build_nested_object(self):
        method = {
            "params": [
                {"displayName": "user.name", "type": "string"},
                {"displayName": "user.id", "type": "number"},
                {"displayName": "note", "type": "string", "example": "hi"},
            ]
        }
        assert make_request_examples(method) == [
            {"user": {"name": "EXAMPLE: user.name", "id": 1234567890}, "note": "hi"}
        ]

    def test_unsupported_type_without_example_raises(self):
        method = {"params": [{"displayName": "b", "type": "boolean"}]}
        with pytest.raises(UnsupportedParameterType):
            make_request_examples(method)

    def test_nothing_declared(self):
        assert make_request_examples({"method": "get"}) is None

    def test_empty_params(self):
        assert make_request_examples({"params": []}) is None


class TestJavaScriptNumberFormatting:
    def test_integral_float_printed_as_integer(self):
        assert try_pretty_json('{"a":1.0}') == '{\n  "a": 1\n}'

    def test_fraction_kept(self):
        assert try_pretty_json('{"a":1.5}') == '{\n  "a": 1.5\n}'

    def test_yaml_scalar_examples_become_json_text(self):
        assert try_pretty_json(5) == "5"
        assert try_pretty_json(2.0) == "2"
        assert try_pretty_json(True) == "true"

    def test_mapping_example_returned_unchanged(self):
        example = {"id": 1}
        assert try_pretty_json(example) is example
