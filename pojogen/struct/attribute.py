"""
Attribute descriptor of a struct.

A StructAttribute describes one field of the value object to be generated:
its name, its declared type and whether it is constant (final).
"""

from dataclasses import dataclass

from ..errors import require_bool, require_text


@dataclass(frozen=True)
class StructAttribute:
    """Immutable description of a single struct field.

    The type name is opaque: it is copied into the generated code as-is
    and never checked against a type system.
    """

    name: str
    type_name: str
    constant: bool = False

    def __post_init__(self):
        require_text(self.name, "name")
        require_text(self.type_name, "type_name")
        require_bool(self.constant, "constant")

    def is_constant(self) -> bool:
        """Return whether the attribute is declared constant."""
        return self.constant

    @classmethod
    def create(
        cls, name: str, type_name: str, constant: bool = False
    ) -> "StructAttribute":
        """
        Create an attribute.

        Args:
            name: Field name, non-empty
            type_name: Declared type of the field, non-empty
            constant: Whether the field is final

        Returns:
            The created attribute

        Raises:
            InvalidArgumentError: If name or type_name is None or empty, or
                constant is not a bool
        """
        return cls(name, type_name, constant)
