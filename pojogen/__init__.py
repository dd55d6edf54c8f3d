"""
pojogen

Generates value-object classes from struct blueprints.
"""

from .errors import InvalidArgumentError, PojoGenError
from .generator import (
    GenerationProfile,
    GenerationResult,
    PojoGenerator,
    ProfileError,
    ProfileOption,
    create_generator,
    generate_code,
    load_profile,
)
from .logging_config import configure_logging, get_logger
from .struct import Struct, StructAttribute, StructBuilder

# Version info
__version__ = "0.1.0"


def quick_generate(struct: Struct, **options: str) -> str:
    """
    Generate a class with keyword options.

    Keyword names use underscores in place of dashes, e.g.
    quick_generate(struct, line_prefix="    ").

    Args:
        struct: Blueprint of the class
        **options: Profile options

    Returns:
        Generated code string
    """
    profile = GenerationProfile.create(
        (), {key.replace("_", "-"): value for key, value in options.items()}
    )
    return create_generator().generate(struct, profile)


__all__ = [
    "Struct",
    "StructAttribute",
    "StructBuilder",
    "GenerationProfile",
    "ProfileOption",
    "ProfileError",
    "PojoGenerator",
    "GenerationResult",
    "InvalidArgumentError",
    "PojoGenError",
    "create_generator",
    "generate_code",
    "load_profile",
    "quick_generate",
    "configure_logging",
    "get_logger",
]
