"""
Name derivation for class templates.

Extracts the class and namespace names declared in template code using
plain textual anchors, without any knowledge of the target language
grammar beyond the `namespace NAME {` and `class NAME [: bases] {` forms.
"""

NAMESPACE_ANCHOR = "namespace "
CLASS_ANCHOR = "class "
BLOCK_OPEN = "{"
BASE_LIST_SEPARATOR = ":"


def substring_between(text: str, start: str, end: str) -> str:
    """
    Get the text between the first `start` and the next `end` after it.

    Args:
        text: Text to search
        start: Opening anchor (an empty anchor matches the beginning)
        end: Closing anchor

    Returns:
        The enclosed text, or an empty string if either anchor is missing
    """
    start_index = text.find(start)
    if start_index < 0:
        return ""
    start_index += len(start)

    end_index = text.find(end, start_index)
    if end_index < 0:
        return ""

    return text[start_index:end_index]


def extract_namespace_name(code: str) -> str:
    """
    Extract the name of the namespace declared in the given code.

    Args:
        code: Template code to scan

    Returns:
        The namespace name, or an empty string if no namespace is found
    """
    return substring_between(code, NAMESPACE_ANCHOR, BLOCK_OPEN).strip()


def extract_class_name(code: str) -> str:
    """
    Extract the name of the class declared in the given code.

    Base class and interface lists (`class Foo : Bar {`) are stripped.

    Args:
        code: Template code to scan

    Returns:
        The class name, or an empty string if no class is found
    """
    declaration = substring_between(code, CLASS_ANCHOR, BLOCK_OPEN).strip()
    name, _, _ = declaration.partition(BASE_LIST_SEPARATOR)
    return name.strip()
