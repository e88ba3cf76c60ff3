"""
Tests for spec entries and their classification.

These tests verify:
    - Raw entries classify into the right tagged variant
    - Variants are immutable and carry their kind
    - The MISSING placeholder is a distinct singleton
"""

import pytest
from bindutil.specs import (
    MISSING,
    ArgSpec,
    OptionalName,
    Predicate,
    RequiredName,
    SpecKind,
    classify,
    classify_all,
    spec_name,
)


class TestClassify:
    """Test conversion of raw entries into variants."""

    def test_plain_name_is_required(self):
        """A name without marker is a required entry."""
        spec = classify("value")
        assert spec == RequiredName("value")
        assert spec.kind is SpecKind.REQUIRED
        assert spec.is_required

    def test_marked_name_is_optional(self):
        """A '?' prefix marks an optional entry; the marker is stripped."""
        spec = classify("?subpath")
        assert spec == OptionalName("subpath")
        assert spec.kind is SpecKind.OPTIONAL
        assert not spec.is_required

    def test_bare_marker_is_optional_with_empty_name(self):
        spec = classify("?")
        assert spec == OptionalName("")

    def test_only_leading_marker_counts(self):
        """A '?' elsewhere in the name does not make it optional."""
        assert classify("a?b") == RequiredName("a?b")

    def test_callable_is_predicate(self):
        """Callables become predicate entries."""
        def check(arg):
            return "x" if arg else None
        spec = classify(check)
        assert isinstance(spec, Predicate)
        assert spec.kind is SpecKind.PREDICATE
        assert not spec.is_required
        assert spec.match(1) == "x"
        assert spec.match(0) is None

    def test_classified_entry_passes_through(self):
        spec = OptionalName("a")
        assert classify(spec) is spec

    def test_unsupported_entry_raises(self):
        """Entries that are neither text nor callable are rejected."""
        with pytest.raises(TypeError):
            classify(42)

    def test_classify_all_preserves_order(self):
        specs = classify_all(["?a", "b", len])
        assert [s.kind for s in specs] == [SpecKind.OPTIONAL, SpecKind.REQUIRED, SpecKind.PREDICATE]


class TestVariants:
    """Test variant properties."""

    def test_variants_are_arg_specs(self):
        assert isinstance(RequiredName("a"), ArgSpec)
        assert isinstance(OptionalName("a"), ArgSpec)
        assert isinstance(Predicate(len), ArgSpec)

    def test_required_name_immutable(self):
        spec = RequiredName("a")
        with pytest.raises(AttributeError):
            spec.name = "b"

    def test_optional_name_immutable(self):
        spec = OptionalName("a")
        with pytest.raises(AttributeError):
            spec.name = "b"

    def test_spec_name(self):
        assert spec_name(RequiredName("a")) == "a"
        assert spec_name(OptionalName("b")) == "b"
        assert spec_name(Predicate(len)) is None


class TestMissing:
    """Test the MISSING placeholder."""

    def test_missing_is_not_none(self):
        assert MISSING is not None
        assert MISSING != None  # noqa: E711

    def test_missing_repr(self):
        assert repr(MISSING) == "MISSING"
