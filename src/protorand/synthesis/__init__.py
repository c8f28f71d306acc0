"""Descriptor-driven synthesis of random message instances.

Value dispatch, oneof selection, collection policy and the depth-bounded
recursive message walk.
"""

from protorand.synthesis.builder import DictMessageBuilder, DynamicMessageBuilder, MessageBuilder
from protorand.synthesis.collection import CollectionPolicy
from protorand.synthesis.message import (
    MessageSynthesizer,
    RecursionGuard,
    SynthesisStats,
    is_map_field,
)
from protorand.synthesis.oneof import OneofSelector
from protorand.synthesis.values import FieldValueSynthesizer

__all__ = [
    "CollectionPolicy",
    "DictMessageBuilder",
    "DynamicMessageBuilder",
    "FieldValueSynthesizer",
    "MessageBuilder",
    "MessageSynthesizer",
    "OneofSelector",
    "RecursionGuard",
    "SynthesisStats",
    "is_map_field",
]
