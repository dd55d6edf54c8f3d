"""
Code generation components.

Provides the generation profile, the template engine and the generator
that renders value-object classes.
"""

from .generator import GenerationResult, PojoGenerator, create_generator, generate_code
from .naming import accessor_name, capitalize_first, mutator_name
from .profile import (
    OPTION_DEFAULTS,
    GenerationProfile,
    ProfileError,
    ProfileOption,
    load_profile,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Generator
    "PojoGenerator",
    "GenerationResult",
    "create_generator",
    "generate_code",
    # Profile
    "GenerationProfile",
    "ProfileOption",
    "ProfileError",
    "OPTION_DEFAULTS",
    "load_profile",
    # Naming
    "accessor_name",
    "capitalize_first",
    "mutator_name",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
