"""
Class templates for script generation.

A class template is a block of source code found between a start mark line
and an end mark line inside arbitrary text. Token keys placed in the block
are replaced by accumulated token values when the class code is generated,
and multi-line values are re-indented to the column where the key appeared.
"""

from typing import Dict, List, Optional

from ..logging_config import get_logger
from .config import TemplateConfig
from .naming import extract_class_name, extract_namespace_name

logger = get_logger(__name__)


class TemplateError(Exception):
    """Base exception for class template input errors."""

    pass


class EmptyInputError(TemplateError):
    """Raised when the template input text is missing or blank."""

    pass


class MalformedInputError(TemplateError):
    """Raised when the template input text has no start mark."""

    pass


def split_lines(text: str, newline: str = "\n") -> List[str]:
    """
    Split text into lines on the configured newline only.

    With the default "\\n" newline, "\\r\\n" terminators are accepted as well.
    The empty string left after a final terminator is dropped.

    Args:
        text: Text to split
        newline: Line terminator

    Returns:
        The lines, without terminators
    """
    if newline == "\n":
        text = text.replace("\r\n", "\n")

    lines = text.split(newline)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def validation_error(
    text: Optional[str], config: Optional[TemplateConfig] = None
) -> Optional[TemplateError]:
    """
    Check input text for class template extraction.

    Args:
        text: Input text containing the class template code
        config: Marker configuration

    Returns:
        The error describing why the text is invalid, or None if it is valid
    """
    config = config or TemplateConfig()

    if text is None or not text.strip():
        return EmptyInputError("Empty input")

    if config.start_mark not in text:
        return MalformedInputError(
            "Invalid input. No code start mark found. "
            "Input should contain class template code put between two lines: "
            f'start line (prefixed with start mark "{config.start_mark}") and '
            f'end line (prefixed with end mark "{config.end_mark}")'
        )

    return None


def validate(text: Optional[str], config: Optional[TemplateConfig] = None) -> bool:
    """Return True if the text can be used to extract a class template."""
    return validation_error(text, config) is None


def extract_template_code(
    text: Optional[str], config: Optional[TemplateConfig] = None
) -> str:
    """
    Extract the class template code placed between the start and end marks.

    Lines are collected after the first line starting with the start mark
    and up to (excluding) the next line starting with the end mark. A missing
    end mark collects to the end of the text.

    Args:
        text: Text containing the class template code
        config: Marker configuration

    Returns:
        The template code, each line terminated by the configured newline

    Raises:
        EmptyInputError: If the text is missing or blank
        MalformedInputError: If the text does not contain the start mark
    """
    config = config or TemplateConfig()

    error = validation_error(text, config)
    if error is not None:
        logger.debug("Template input rejected: %s", error)
        raise error

    collected: List[str] = []
    start_found = False

    for line in split_lines(text, config.newline):
        if start_found:
            if line.startswith(config.end_mark):
                break
            collected.append(line + config.newline)
        elif line.startswith(config.start_mark):
            start_found = True

    if not start_found:
        logger.debug("No line starts with start mark %r", config.start_mark)
        return ""

    return "".join(collected)


class ClassTemplate:
    """A class template that generates source code by replacing tokens."""

    def __init__(self, text: str, config: Optional[TemplateConfig] = None):
        """
        Initialize a class template from input text.

        Args:
            text: Text to parse for the class template code
            config: Marker and newline configuration

        Raises:
            EmptyInputError: If the text is missing or blank
            MalformedInputError: If the text does not contain the start mark
        """
        self.config = config or TemplateConfig()
        self.tokens: Dict[str, str] = {}
        self._code = ""
        self.class_name = ""
        self.namespace_name = ""
        self.code = text

    @property
    def code(self) -> str:
        """The extracted class template code."""
        return self._code

    @code.setter
    def code(self, text: str):
        code = extract_template_code(text, self.config)
        if not code.strip():
            code = ""

        self._code = code
        self.class_name = extract_class_name(code)
        self.namespace_name = extract_namespace_name(code)

        logger.debug(
            "Template code set: %d line(s), class=%r, namespace=%r",
            len(split_lines(code, self.config.newline)),
            self.class_name,
            self.namespace_name,
        )

    @property
    def has_code(self) -> bool:
        return bool(self._code)

    @property
    def has_class(self) -> bool:
        return bool(self.class_name)

    @property
    def has_namespace(self) -> bool:
        return bool(self.namespace_name)

    def append(self, token_key: str, text: str):
        """
        Append text to a token value, adding the token if it doesn't exist.

        Args:
            token_key: Key of the token to append to
            text: Text to append
        """
        self.tokens[token_key] = self.tokens.get(token_key, "") + text

    def append_line(self, token_key: str, line: str):
        """Append a line of text (followed by a newline) to a token value."""
        self.append(token_key, f"{line}{self.config.newline}")

    def generate(self) -> str:
        """
        Generate the class code by replacing token keys in the template code.

        A template line containing a token key is replaced as a whole by the
        token value lines, each padded to the column of the key. Tokens are
        tried in insertion order against the current content of each line.

        Returns:
            The generated class code
        """
        newline = self.config.newline
        code_lines = self._code.split(newline)

        for i, line in enumerate(code_lines):
            for token_key, token_value in self.tokens.items():
                padding_width = line.find(token_key)
                if padding_width < 0:
                    continue
                padding = " " * padding_width
                value_lines = [
                    value_line
                    for value_line in token_value.split(newline)
                    if value_line
                ]
                line = newline.join(padding + value_line for value_line in value_lines)
            code_lines[i] = line

        return newline.join(code_lines)

    def __repr__(self) -> str:
        return (
            f"ClassTemplate(class_name={self.class_name!r}, "
            f"namespace_name={self.namespace_name!r}, tokens={list(self.tokens)!r})"
        )
