"""Selection of the populated member of each oneof group."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from google.protobuf.descriptor import FieldDescriptor, OneofDescriptor

    from protorand.sources.base import RandomSource


class OneofSelector:
    """Picks exactly one member field per oneof group, uniformly."""

    def __init__(self, source: RandomSource) -> None:
        self._source = source

    def select(self, oneof: OneofDescriptor) -> FieldDescriptor | None:
        """Return the member to populate.

        A single-member group (including proto3 ``optional`` fields)
        returns its member without consuming a draw. An empty group
        returns ``None``.
        """
        members = oneof.fields
        if not members:
            return None
        if len(members) == 1:
            return members[0]
        return members[self._source.intn(len(members))]
