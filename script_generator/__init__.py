"""
Script Generator

Generates source files from class templates embedded in text: the template
block is extracted, its class and namespace names derived, and token keys
replaced by accumulated values with their indentation preserved.
"""

__version__ = "0.1.0"

from .core import (
    ClassTemplate,
    TemplateConfig,
    TemplateError,
    EmptyInputError,
    MalformedInputError,
    ConfigError,
    GeneratorError,
    GenerationResult,
    extract_template_code,
    extract_class_name,
    extract_namespace_name,
    validate,
    validation_error,
    generate_code,
    load_config,
)


def generate_from_text(text, tokens=None, config=None):
    """
    Generate code from template text and a token mapping.

    Args:
        text: Text containing the class template
        tokens: Mapping of token key to a string or a list of lines
        config: TemplateConfig to use

    Returns:
        Generated code string
    """
    template = ClassTemplate(text, config)

    for key, value in (tokens or {}).items():
        if isinstance(value, str):
            template.append(key, value)
        else:
            for line in value:
                template.append_line(key, line)

    return template.generate()


__all__ = [
    "ClassTemplate",
    "TemplateConfig",
    "TemplateError",
    "EmptyInputError",
    "MalformedInputError",
    "ConfigError",
    "GeneratorError",
    "GenerationResult",
    "extract_template_code",
    "extract_class_name",
    "extract_namespace_name",
    "validate",
    "validation_error",
    "generate_code",
    "generate_from_text",
    "load_config",
]
