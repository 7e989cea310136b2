"""
Core class template components.

Provides template extraction, name derivation, token accumulation
and code generation.
"""

from .config import (
    TemplateConfig,
    ConfigError,
    load_config,
    save_config,
    validate_config,
)
from .naming import extract_class_name, extract_namespace_name, substring_between
from .template import (
    ClassTemplate,
    TemplateError,
    EmptyInputError,
    MalformedInputError,
    extract_template_code,
    split_lines,
    validate,
    validation_error,
)
from .generator import GeneratorError, GenerationResult, generate_code

__all__ = [
    # Template
    "ClassTemplate",
    "TemplateError",
    "EmptyInputError",
    "MalformedInputError",
    "extract_template_code",
    "split_lines",
    "validate",
    "validation_error",
    # Naming
    "extract_class_name",
    "extract_namespace_name",
    "substring_between",
    # Configuration
    "TemplateConfig",
    "ConfigError",
    "load_config",
    "save_config",
    "validate_config",
    # Generation
    "GeneratorError",
    "GenerationResult",
    "generate_code",
]
