"""
Generation wrapper for class templates.

Runs a full generation pass over a ClassTemplate and collects the
generated code together with warnings and metadata.
"""

from typing import Dict, List, Any, Optional

from ..logging_config import get_logger
from .template import ClassTemplate, split_lines

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
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
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def check_template(template: ClassTemplate) -> List[str]:
    """
    Check a template for shapes that usually indicate a mistake.

    Args:
        template: Template to check

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []

    if not template.has_code:
        warnings.append("Template has no code between the start and end marks")
        return warnings

    if not template.has_class:
        warnings.append("Template declares no class")

    for token_key in template.tokens:
        if token_key not in template.code:
            warnings.append(f"Token '{token_key}' does not occur in the template")

    return warnings


def get_file_name(template: ClassTemplate, file_extension: Optional[str] = None):
    """Return the conventional file name for the generated class, if any."""
    if not template.has_class:
        return None
    if file_extension is None:
        file_extension = template.config.file_extension
    return f"{template.class_name}{file_extension}"


def generate_code(
    template: ClassTemplate, file_extension: Optional[str] = None
) -> GenerationResult:
    """
    Generate code from a template with error handling.

    Args:
        template: Template holding the code and the token values
        file_extension: Extension used for the suggested file name
            (defaults to the template configuration)

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = check_template(template)
        for warning in warnings:
            logger.warning(warning)

        code = template.generate()

        metadata = {
            "class_name": template.class_name,
            "namespace_name": template.namespace_name,
            "has_class": template.has_class,
            "has_namespace": template.has_namespace,
            "token_count": len(template.tokens),
            "line_count": len(split_lines(code, template.config.newline)),
            "file_name": get_file_name(template, file_extension),
        }

        logger.info(
            "Generated class %r (%d line(s))",
            template.class_name,
            metadata["line_count"],
        )
        return GenerationResult(code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
