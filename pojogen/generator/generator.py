"""
Value-object generator.

Turns a Struct and a GenerationProfile into the source of one Java class:
fields, constructor, accessors, equals, hashCode and toString.
"""

from collections import Counter
from typing import Any, Dict, List, Optional

from ..errors import InvalidArgumentError, require_not_none
from ..logging_config import get_logger
from ..struct import Struct, StructAttribute
from .naming import accessor_name, is_reserved_word, mutator_name
from .profile import GenerationProfile, ProfileOption
from .templates import (
    VALUE_CLASS_TEMPLATE_NAME,
    TemplateEngine,
    get_default_template_engine,
    java_string_literal,
)

logger = get_logger(__name__)


class PojoGenerator:
    """Generates value-object classes from struct blueprints.

    The generator keeps no state between calls, so one instance can be
    shared freely.
    """

    def __init__(self, template_engine: Optional[TemplateEngine] = None):
        """Initialize generator with an optional template engine."""
        self._template_engine = template_engine

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            return get_default_template_engine()
        return self._template_engine

    def generate(self, struct: Struct, profile: GenerationProfile) -> str:
        """
        Generate the class source for a struct.

        Args:
            struct: Blueprint of the class
            profile: Formatting options and auxiliary lines

        Returns:
            Complete class source, lines joined by the configured separator

        Raises:
            InvalidArgumentError: If struct or profile is None or of the wrong type
        """
        require_not_none(struct, "struct")
        require_not_none(profile, "profile")
        if not isinstance(struct, Struct):
            raise InvalidArgumentError(
                f"struct must be a Struct, got {type(struct).__name__}"
            )
        if not isinstance(profile, GenerationProfile):
            raise InvalidArgumentError(
                f"profile must be a GenerationProfile, got {type(profile).__name__}"
            )

        logger.debug(
            "Generating class %s with %d attributes",
            struct.name,
            struct.attribute_count,
        )
        for warning in self.validate_struct(struct):
            logger.warning(warning)
        for key in profile.unknown_options():
            logger.debug("Ignoring unknown profile option: %s", key)

        context = self._build_context(struct, profile)
        rendered = self.template_engine.render_template(
            VALUE_CLASS_TEMPLATE_NAME, context
        )

        separator = profile.get_option(ProfileOption.LINE_SEPARATOR)
        return separator.join(rendered.split("\n"))

    def validate_struct(self, struct: Struct) -> List[str]:
        """
        Check a struct for issues that make the generated code uncompilable.

        Duplicate attribute names and reserved words are reported, never
        rejected: the class is emitted as described.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if is_reserved_word(struct.name):
            warnings.append(f"Struct name '{struct.name}' is a Java reserved word")

        counts = Counter(attribute.name for attribute in struct.attributes)
        for name, count in counts.items():
            if count > 1:
                warnings.append(
                    f"Attribute '{name}' is declared {count} times in {struct.name}"
                )
            if is_reserved_word(name):
                warnings.append(
                    f"Attribute {struct.name}.{name} is a Java reserved word"
                )

        return warnings

    def _build_context(
        self, struct: Struct, profile: GenerationProfile
    ) -> Dict[str, Any]:
        """Build template context for a struct."""
        line_prefix = profile.get_option(ProfileOption.LINE_PREFIX)
        accessor_prefix = profile.get_option(ProfileOption.ACCESSOR_PREFIX)
        setters = profile.get_flag(ProfileOption.GENERATE_SETTERS)

        attributes = list(struct.attributes)
        fields = [
            self._field_data(attribute, accessor_prefix, setters and not struct.constant)
            for attribute in attributes
        ]

        def pad(depth: int) -> str:
            return line_prefix * (depth + 1)

        return {
            "pad": pad,
            "package_name": profile.get_option(ProfileOption.PACKAGE_NAME),
            "auxiliary_lines": self._auxiliary_lines(profile),
            "comments": profile.get_flag(ProfileOption.GENERATE_COMMENTS),
            "class_name": struct.name,
            "immutable": struct.is_immutable(),
            "fields": fields,
            "constructor_parameters": ", ".join(
                f"final {a.type_name} {a.name}" for a in attributes
            ),
            "equals_expression": " && ".join(
                f"java.util.Objects.equals(this.{a.name}, that.{a.name})"
                for a in attributes
            ),
            "hash_arguments": ", ".join(f"this.{a.name}" for a in attributes),
            "to_string_expression": self._to_string_expression(struct.name, attributes),
        }

    def _auxiliary_lines(self, profile: GenerationProfile) -> List[str]:
        """Auxiliary lines with embedded line breaks split, so each part gets the prefix."""
        lines = []
        for line in profile.auxiliary_lines:
            lines.extend(line.splitlines() or [""])
        return lines

    def _field_data(
        self, attribute: StructAttribute, accessor_prefix: str, setters: bool
    ) -> Dict[str, Any]:
        return {
            "name": attribute.name,
            "type_name": attribute.type_name,
            "constant": attribute.constant,
            "accessor": accessor_name(attribute.name, accessor_prefix),
            "mutator": mutator_name(attribute.name),
            "mutable": setters and not attribute.constant,
        }

    def _to_string_expression(
        self, class_name: str, attributes: List[StructAttribute]
    ) -> str:
        """Build the toString concatenation, e.g. "Person{id=" + this.id + "}"."""
        pieces = []
        literal = class_name + "{"
        for index, attribute in enumerate(attributes):
            if index:
                literal += ", "
            literal += attribute.name + "="
            pieces.append(java_string_literal(literal))
            pieces.append(f"this.{attribute.name}")
            literal = ""
        pieces.append(java_string_literal(literal + "}"))
        return " + ".join(pieces)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}


def generate_code(
    generator: PojoGenerator, struct: Struct, profile: GenerationProfile
) -> GenerationResult:
    """
    Generate code and collect warnings and metadata.

    Args:
        generator: Generator instance
        struct: Blueprint of the class
        profile: Generation profile

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    require_not_none(generator, "generator")
    code = generator.generate(struct, profile)
    warnings = generator.validate_struct(struct)

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "class_name": struct.name,
        "attribute_count": struct.attribute_count,
        "immutable": struct.is_immutable(),
    }

    return GenerationResult(code, warnings, metadata)


def create_generator(template_engine: Optional[TemplateEngine] = None) -> PojoGenerator:
    """Create a generator ready for use."""
    return PojoGenerator(template_engine)
