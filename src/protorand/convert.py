"""Copy a generic (dynamic) message into a concrete message type."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from google.protobuf.message import Message

M = TypeVar("M", bound="Message")


def merge_into(target: M, generic: Message) -> M:
    """Merge *generic* into *target* and return *target*.

    Both messages must share the same schema. The copy goes through the
    wire format so that the two need not share a Python class or a
    descriptor pool.

    Raises:
        TypeError: If the message type names differ.
    """
    if target.DESCRIPTOR.full_name != generic.DESCRIPTOR.full_name:
        raise TypeError(
            f"Cannot merge {generic.DESCRIPTOR.full_name} into {target.DESCRIPTOR.full_name}"
        )
    target.MergeFromString(generic.SerializeToString())
    return target
