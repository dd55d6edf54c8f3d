"""
Naming utilities for the generated Java source.

Derives accessor and mutator names from attribute names and knows the
words that cannot be used as Java identifiers.
"""


# Java reserved words and literals
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "try",
    "void",
    "volatile",
    "while",
    "true",
    "false",
    "null",
    "_",
}


def capitalize_first(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    # str.capitalize() would lower-case the rest: firstName -> Firstname
    if not name:
        return name
    return name[0].upper() + name[1:]


def accessor_name(attribute_name: str, prefix: str = "get") -> str:
    """Return the accessor method name, e.g. id -> getId."""
    return f"{prefix}{capitalize_first(attribute_name)}"


def mutator_name(attribute_name: str) -> str:
    """Return the mutator method name, e.g. id -> setId."""
    return f"set{capitalize_first(attribute_name)}"


def is_reserved_word(name: str) -> bool:
    """Check whether name is a Java reserved word or literal."""
    return name in JAVA_RESERVED_WORDS
