"""Exception hierarchy for protorand.

All exceptions derive from ProtoRandError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class ProtoRandError(Exception):
    """Base exception for all protorand errors."""


class UnsupportedFieldKindError(ProtoRandError):
    """A field's value kind has no synthesis rule.

    Raised when the field value dispatch table has no entry for the
    field's kind (e.g., proto2 groups). Aborts the whole generation call;
    no partially populated message is returned.

    Attributes:
        field_name: Fully qualified name of the offending field.
        kind: Numeric value kind (``FieldDescriptor.TYPE_*``).
    """

    def __init__(self, field_name: str, kind: int) -> None:
        self.field_name = field_name
        self.kind = kind
        super().__init__(f"Unsupported value kind {kind} for field '{field_name}'")


class ConfigValidationError(ProtoRandError):
    """Configuration field validation failed.

    Raised when overrides contain unknown keys or values that fail type
    or range validation.
    """
