"""
Utility functions for the CRD to TypeScript generator.
"""

import re

# A bare TypeScript/JavaScript identifier (ASCII subset)
_IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def upper_first(text: str) -> str:
    """Uppercase the first character and keep the rest untouched.

    Examples:
        "spec" -> "Spec"
        "apiVersion" -> "ApiVersion"
        "x-kubernetes" -> "X-kubernetes"
        "" -> ""
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def is_identifier(name: str) -> bool:
    """Check whether a name can be used unquoted as a TypeScript property."""
    return bool(_IDENTIFIER_PATTERN.match(name))
