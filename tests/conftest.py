"""Shared pytest fixtures for protorand tests.

Test schemas are assembled from ``descriptor_pb2`` protos and loaded into
private descriptor pools, so no ``protoc`` step is needed. Two pools hold
the same file to exercise merges across pools.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

from protorand.config import ProtoRandConfig
from protorand.sources.numpy_source import NumpyRandomSource

if TYPE_CHECKING:
    from google.protobuf.descriptor import Descriptor

_F = descriptor_pb2.FieldDescriptorProto
_PACKAGE = "protorand.test"

# Scalar kinds in field-number order for the ``Scalars`` message.
SCALAR_FIELDS: list[tuple[str, int]] = [
    ("f_int32", _F.TYPE_INT32),
    ("f_int64", _F.TYPE_INT64),
    ("f_uint32", _F.TYPE_UINT32),
    ("f_uint64", _F.TYPE_UINT64),
    ("f_sint32", _F.TYPE_SINT32),
    ("f_sint64", _F.TYPE_SINT64),
    ("f_fixed32", _F.TYPE_FIXED32),
    ("f_fixed64", _F.TYPE_FIXED64),
    ("f_sfixed32", _F.TYPE_SFIXED32),
    ("f_sfixed64", _F.TYPE_SFIXED64),
    ("f_float", _F.TYPE_FLOAT),
    ("f_double", _F.TYPE_DOUBLE),
    ("f_bool", _F.TYPE_BOOL),
    ("f_string", _F.TYPE_STRING),
    ("f_bytes", _F.TYPE_BYTES),
]


def _add_field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    kind: int,
    *,
    repeated: bool = False,
    type_name: str | None = None,
    oneof_index: int | None = None,
    proto3_optional: bool = False,
) -> None:
    field = message.field.add()
    field.name = name
    field.number = number
    field.type = kind  # type: ignore[assignment]
    field.label = _F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL  # type: ignore[assignment]
    if type_name is not None:
        field.type_name = f".{_PACKAGE}.{type_name}"
    if oneof_index is not None:
        field.oneof_index = oneof_index
    if proto3_optional:
        field.proto3_optional = True


def _add_map(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    entry_name: str,
    key_kind: int,
    value_kind: int,
    value_type_name: str | None = None,
) -> None:
    entry = message.nested_type.add()
    entry.name = entry_name
    entry.options.map_entry = True
    _add_field(entry, "key", 1, key_kind)
    _add_field(entry, "value", 2, value_kind, type_name=value_type_name)
    _add_field(
        message, name, number, _F.TYPE_MESSAGE, repeated=True, type_name=f"{message.name}.{entry_name}"
    )


def _build_proto3_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto()
    fdp.name = "protorand/test/schema.proto"
    fdp.package = _PACKAGE
    fdp.syntax = "proto3"

    color = fdp.enum_type.add()
    color.name = "Color"
    for number, value_name in enumerate(("RED", "GREEN", "BLUE")):
        value = color.value.add()
        value.name = value_name
        value.number = number

    lonely = fdp.enum_type.add()
    lonely.name = "Lonely"
    only = lonely.value.add()
    only.name = "ONLY"
    only.number = 0

    scalars = fdp.message_type.add()
    scalars.name = "Scalars"
    for number, (name, kind) in enumerate(SCALAR_FIELDS, start=1):
        _add_field(scalars, name, number, kind)
    _add_field(scalars, "f_color", 16, _F.TYPE_ENUM, type_name="Color")
    _add_field(scalars, "f_lonely", 17, _F.TYPE_ENUM, type_name="Lonely")

    point = fdp.message_type.add()
    point.name = "Point"
    _add_field(point, "x", 1, _F.TYPE_INT32)
    _add_field(point, "y", 2, _F.TYPE_INT32)

    node = fdp.message_type.add()
    node.name = "Node"
    _add_field(node, "value", 1, _F.TYPE_INT32)
    _add_field(node, "child", 2, _F.TYPE_MESSAGE, type_name="Node")

    choice = fdp.message_type.add()
    choice.name = "Choice"
    choice.oneof_decl.add().name = "pick"
    choice.oneof_decl.add().name = "_maybe"
    _add_field(choice, "a", 1, _F.TYPE_INT32, oneof_index=0)
    _add_field(choice, "b", 2, _F.TYPE_STRING, oneof_index=0)
    _add_field(choice, "c", 3, _F.TYPE_MESSAGE, type_name="Point", oneof_index=0)
    _add_field(choice, "label", 4, _F.TYPE_STRING)
    _add_field(choice, "maybe", 5, _F.TYPE_INT32, oneof_index=1, proto3_optional=True)

    collections = fdp.message_type.add()
    collections.name = "Collections"
    _add_field(collections, "numbers", 1, _F.TYPE_INT32, repeated=True)
    _add_field(collections, "names", 2, _F.TYPE_STRING, repeated=True)
    _add_field(collections, "points", 3, _F.TYPE_MESSAGE, repeated=True, type_name="Point")
    _add_field(collections, "colors", 4, _F.TYPE_ENUM, repeated=True, type_name="Color")
    _add_map(collections, "counts", 5, "CountsEntry", _F.TYPE_STRING, _F.TYPE_INT32)
    _add_map(
        collections,
        "points_by_id",
        6,
        "PointsByIdEntry",
        _F.TYPE_INT64,
        _F.TYPE_MESSAGE,
        value_type_name="Point",
    )

    # Mutual recursion: Tree -> Branch -> Tree.
    tree = fdp.message_type.add()
    tree.name = "Tree"
    _add_field(tree, "branch", 1, _F.TYPE_MESSAGE, type_name="Branch")
    branch = fdp.message_type.add()
    branch.name = "Branch"
    _add_field(branch, "tree", 1, _F.TYPE_MESSAGE, type_name="Tree")
    _add_field(branch, "name", 2, _F.TYPE_STRING)

    return fdp


def _build_proto2_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto()
    fdp.name = "protorand/test/legacy.proto"
    fdp.package = _PACKAGE
    fdp.syntax = "proto2"

    legacy = fdp.message_type.add()
    legacy.name = "Legacy"
    _add_field(legacy, "id", 1, _F.TYPE_INT32)
    group = legacy.nested_type.add()
    group.name = "Payload"
    _add_field(group, "blob", 3, _F.TYPE_BYTES)
    _add_field(legacy, "payload", 2, _F.TYPE_GROUP, type_name="Legacy.Payload")
    return fdp


def _load_pool() -> descriptor_pool.DescriptorPool:
    pool = descriptor_pool.DescriptorPool()
    pool.AddSerializedFile(_build_proto3_file().SerializeToString())
    pool.AddSerializedFile(_build_proto2_file().SerializeToString())
    return pool


class Schema:
    """Lookup of test message descriptors by short name."""

    def __init__(self, pool: descriptor_pool.DescriptorPool) -> None:
        self._pool = pool

    def __getitem__(self, name: str) -> Descriptor:
        return self._pool.FindMessageTypeByName(f"{_PACKAGE}.{name}")

    def message_class(self, name: str) -> type:
        return message_factory.GetMessageClass(self[name])


@pytest.fixture(scope="session")
def schema() -> Schema:
    """Return the primary test schema."""
    return Schema(_load_pool())


@pytest.fixture(scope="session")
def other_schema() -> Schema:
    """Return the same schema loaded into a second, independent pool."""
    return Schema(_load_pool())


@pytest.fixture
def silent_config() -> ProtoRandConfig:
    """Return a config with no logging for noise-free tests."""
    return ProtoRandConfig(log_level="none")


@pytest.fixture
def diagnostic_config() -> ProtoRandConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return ProtoRandConfig(log_level="full", diagnostic_mode=True)


@pytest.fixture
def seeded_source() -> NumpyRandomSource:
    """Return a NumpyRandomSource with a fixed seed for reproducibility."""
    return NumpyRandomSource(seed=42)
