"""
Tests for spec and signature serialization.

These tests ensure JSON/YAML round-trip of predicate-free spec lists and
loading of named signatures, including the failure modes.
"""

import warnings

import pytest
from bindutil.serialization import (
    SignatureParseError,
    parse_signature,
    signature_to_text,
    signatures_from_dict,
    signatures_from_yaml,
    signatures_to_yaml,
    spec_from_dict,
    spec_to_dict,
    specs_from_json,
    specs_from_yaml,
    specs_to_json,
    specs_to_yaml,
)
from bindutil.specs import OptionalName, RequiredName


SAMPLE_SPECS = [OptionalName("subpath"), RequiredName("value")]


def test_spec_to_dict():
    assert spec_to_dict("value") == {"type": "required", "name": "value"}
    assert spec_to_dict("?subpath") == {"type": "optional", "name": "subpath"}


def test_spec_from_dict():
    assert spec_from_dict({"type": "optional", "name": "a"}) == OptionalName("a")


def test_unknown_spec_dict_type():
    with pytest.raises(TypeError):
        spec_from_dict({"type": "predicate", "name": "a"})


def test_predicate_cannot_be_serialized():
    with pytest.raises(TypeError):
        spec_to_dict(lambda arg: "x")


def test_json_roundtrip():
    assert specs_from_json(specs_to_json(SAMPLE_SPECS)) == SAMPLE_SPECS


def test_yaml_roundtrip():
    assert specs_from_yaml(specs_to_yaml(SAMPLE_SPECS)) == SAMPLE_SPECS


class TestParseSignature:
    """Test the compact text form."""

    def test_text_signature(self):
        assert parse_signature("?subpath, value") == SAMPLE_SPECS

    def test_list_signature(self):
        assert parse_signature(["?subpath", "value"]) == SAMPLE_SPECS

    def test_whitespace_trimmed(self):
        assert parse_signature("  ? subpath ,value ") == SAMPLE_SPECS

    def test_empty_signature(self):
        assert parse_signature("") == []
        assert parse_signature([]) == []

    def test_empty_entry_rejected(self):
        with pytest.raises(SignatureParseError):
            parse_signature("a,,b")

    def test_bare_marker_rejected(self):
        with pytest.raises(SignatureParseError):
            parse_signature("?, a")

    def test_non_text_rejected(self):
        with pytest.raises(SignatureParseError):
            parse_signature(42)
        with pytest.raises(SignatureParseError):
            parse_signature(["a", 1])

    def test_text_roundtrip(self):
        assert signature_to_text(parse_signature("?subpath, value")) == "?subpath, value"


class TestSignatures:
    """Test loading named signatures."""

    def test_load_from_yaml(self):
        document = """
set:
  - "?subpath"
  - new_value
update: "?subpath, update_fn"
"""
        signatures = signatures_from_yaml(document)
        assert signatures["set"] == [OptionalName("subpath"), RequiredName("new_value")]
        assert signatures["update"] == [OptionalName("subpath"), RequiredName("update_fn")]

    def test_empty_document(self):
        assert signatures_from_yaml("") == {}

    def test_non_mapping_document(self):
        with pytest.raises(SignatureParseError):
            signatures_from_yaml("- a\n- b\n")

    def test_error_names_signature(self):
        with pytest.raises(SignatureParseError, match="broken"):
            signatures_from_dict({"ok": "a", "broken": "a,,b"})

    def test_multiple_transitions_warn_but_load(self):
        with pytest.warns(UserWarning, match="switches between required and optional"):
            signatures = signatures_from_dict({"odd": "?a, b, ?c"})
        assert len(signatures["odd"]) == 3

    def test_well_formed_signature_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            signatures_from_dict({"set": "?subpath, value"})

    def test_yaml_roundtrip(self):
        signatures = {"set": SAMPLE_SPECS, "get": [OptionalName("subpath")]}
        restored = signatures_from_yaml(signatures_to_yaml(signatures))
        assert restored == signatures
        assert list(restored.keys()) == ["set", "get"]
