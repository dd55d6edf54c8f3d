"""
Struct blueprint representation.

A Struct holds the name, the ordered attributes and the constant flag of a
value object. It is consumed by the generator to produce the class source.
Instances are immutable; use StructBuilder for staged construction.
"""

from typing import Iterable, Iterator, List, Optional, Tuple

from ..errors import InvalidArgumentError, require_bool, require_not_none, require_text
from .attribute import StructAttribute


def _copy_attributes(attributes: Iterable[StructAttribute]) -> Tuple[StructAttribute, ...]:
    """Copy attributes into a tuple, rejecting anything that is not an attribute."""
    require_not_none(attributes, "attributes")
    if isinstance(attributes, (str, bytes)):
        raise InvalidArgumentError("attributes must be an iterable of StructAttribute")

    try:
        copied = tuple(attributes)
    except TypeError:
        raise InvalidArgumentError(
            f"attributes must be iterable, got {type(attributes).__name__}"
        ) from None

    for index, attribute in enumerate(copied):
        if not isinstance(attribute, StructAttribute):
            raise InvalidArgumentError(
                f"attributes[{index}] must be a StructAttribute, "
                f"got {type(attribute).__name__}"
            )
    return copied


class Struct:
    """Value-object description of a struct blueprint."""

    __slots__ = ("_name", "_attributes", "_constant")

    def __init__(
        self,
        name: str,
        attributes: Iterable[StructAttribute] = (),
        constant: bool = False,
    ):
        """
        Initialize a struct.

        Args:
            name: Name of the struct, used as the generated class name
            attributes: Attributes in declaration order
            constant: Whether the whole struct is declared final

        Raises:
            InvalidArgumentError: If name is None or empty, or attributes is
                None or contains something other than StructAttribute, or
                constant is not a bool
        """
        object.__setattr__(self, "_name", require_text(name, "name"))
        object.__setattr__(self, "_attributes", _copy_attributes(attributes))
        object.__setattr__(self, "_constant", require_bool(constant, "constant"))

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @property
    def name(self) -> str:
        return self._name

    @property
    def constant(self) -> bool:
        return self._constant

    @property
    def attributes(self) -> Iterator[StructAttribute]:
        """
        Fresh iterator over the attributes in declaration order.

        Every access starts a new traversal; the underlying container is
        never handed out.
        """
        return iter(self._attributes)

    @property
    def attribute_count(self) -> int:
        return len(self._attributes)

    def is_constant(self) -> bool:
        """Return whether the struct is declared constant."""
        return self._constant

    def is_immutable(self) -> bool:
        """
        Return whether the struct is effectively immutable.

        True if the struct is declared constant or every attribute is. A
        non-constant struct without attributes is immutable as well.
        """
        return self._constant or all(a.constant for a in self._attributes)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Struct):
            return NotImplemented
        return (
            self._constant == other._constant
            and self._name == other._name
            and self._attributes == other._attributes
        )

    def __hash__(self):
        return hash((self._name, self._constant, self._attributes))

    def __repr__(self):
        return (
            f"Struct(name={self._name!r}, constant={self._constant}, "
            f"attributes={len(self._attributes)})"
        )

    def __copy__(self):
        return Struct.copy_of(self)

    def __deepcopy__(self, memo):
        return Struct.copy_of(self)

    @classmethod
    def create(
        cls,
        name: str,
        attributes: Iterable[StructAttribute] = (),
        constant: bool = False,
    ) -> "Struct":
        """
        Create a struct from a name, optional attributes and constant flag.

        Raises:
            InvalidArgumentError: If name or attributes is None
        """
        return cls(name, attributes, constant)

    @classmethod
    def copy_of(cls, struct: "Struct") -> "Struct":
        """Return a structurally equal, independently owned copy of struct."""
        require_not_none(struct, "struct")
        if not isinstance(struct, Struct):
            raise InvalidArgumentError(
                f"struct must be a Struct, got {type(struct).__name__}"
            )
        return cls(struct._name, struct._attributes, struct._constant)

    @staticmethod
    def new_builder() -> "StructBuilder":
        """Return an empty builder."""
        return StructBuilder()


class StructBuilder:
    """Mutable accumulator producing immutable Struct instances."""

    def __init__(self):
        self._name: Optional[str] = None
        self._constant = False
        self._attributes: Optional[List[StructAttribute]] = None

    def with_name(self, name: str) -> "StructBuilder":
        self._name = name
        return self

    def with_constant(self, constant: bool = True) -> "StructBuilder":
        self._constant = require_bool(constant, "constant")
        return self

    def with_attributes(
        self, attributes: Iterable[StructAttribute]
    ) -> "StructBuilder":
        """Replace the accumulated attributes with a copy of attributes."""
        self._attributes = list(_copy_attributes(attributes))
        return self

    def add_attribute(self, attribute: StructAttribute) -> "StructBuilder":
        """Append a single attribute."""
        if not isinstance(attribute, StructAttribute):
            raise InvalidArgumentError(
                f"attribute must be a StructAttribute, got {type(attribute).__name__}"
            )
        self._ensure_attributes()
        self._attributes.append(attribute)
        return self

    def _ensure_attributes(self):
        if self._attributes is None:
            self._attributes = []

    def create(self) -> Struct:
        """
        Build the struct.

        Raises:
            InvalidArgumentError: If no name has been supplied
        """
        if self._name is None:
            raise InvalidArgumentError("struct name has not been set")
        self._ensure_attributes()
        return Struct(self._name, self._attributes, self._constant)
