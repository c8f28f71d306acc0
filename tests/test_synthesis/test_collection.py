"""Tests for CollectionPolicy."""

from __future__ import annotations

from protorand.sources.numpy_source import NumpyRandomSource
from protorand.synthesis.collection import CollectionPolicy
from protorand.synthesis.values import FieldValueSynthesizer


def _policy(seed: int = 0) -> CollectionPolicy:
    return CollectionPolicy(FieldValueSynthesizer(NumpyRandomSource(seed=seed)))


class TestCollectionPolicy:
    def test_repeated_scalar_is_singleton(self, schema) -> None:
        field = schema["Collections"].fields_by_name["numbers"]
        for seed in range(20):
            elements = _policy(seed).elements(field, lambda d: {})
            assert len(elements) == 1
            assert isinstance(elements[0], int)

    def test_repeated_message_uses_nested(self, schema) -> None:
        field = schema["Collections"].fields_by_name["points"]
        assert _policy().elements(field, lambda d: d.name) == ["Point"]

    def test_map_entry_key_and_value_kinds(self, schema) -> None:
        field = schema["Collections"].fields_by_name["counts"]
        key, value = _policy().entry(field, lambda d: {})
        assert isinstance(key, str)
        assert len(key) == 10
        assert isinstance(value, int)

    def test_map_message_value_uses_nested(self, schema) -> None:
        field = schema["Collections"].fields_by_name["points_by_id"]
        key, value = _policy().entry(field, lambda d: d.full_name)
        assert isinstance(key, int)
        assert value == "protorand.test.Point"

    def test_size_is_fixed(self) -> None:
        assert CollectionPolicy.size == 1
