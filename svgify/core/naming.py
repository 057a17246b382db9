"""
Identifier derivation from icon file names.
"""
import re
from typing import Collection

_SEPARATOR_RUNS = re.compile(r"[\s\-._]+")
_DISALLOWED = re.compile(r"[^a-zA-Z0-9-]")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")
_REPEATED_HYPHENS = re.compile(r"-+")

COMPONENT_SUFFIX = "Icon"
DIGIT_PREFIX = "icon-"


def sanitize(filename: str) -> str:
    """
    Derive a lowercase, hyphen-separated identifier base from a file name.

    Only the first literal ".svg" is removed. An empty result means the
    file has no usable name and should be skipped.

    Args:
        filename: File name as discovered on disk

    Returns:
        Name containing only [a-z0-9-], or "" if nothing is left
    """
    name = filename.replace(".svg", "", 1)
    name = _SEPARATOR_RUNS.sub("-", name)
    name = _DISALLOWED.sub("", name)
    name = _EDGE_HYPHENS.sub("", name)
    name = _REPEATED_HYPHENS.sub("-", name)
    return name.lower()


def to_pascal_case(name: str) -> str:
    """user-profile -> UserProfile"""
    return "".join(word[:1].upper() + word[1:] for word in name.split("-"))


def to_camel_case(name: str) -> str:
    """user-profile -> userProfile"""
    pascal = to_pascal_case(name)
    return pascal[:1].lower() + pascal[1:]


def identifier_base(sanitized_name: str) -> str:
    """Prefix names that would otherwise start with a digit."""
    if sanitized_name[:1].isdigit():
        return DIGIT_PREFIX + sanitized_name
    return sanitized_name


def component_identifier(sanitized_name: str) -> str:
    """
    Build the component name for a sanitized icon name.

    Args:
        sanitized_name: Output of sanitize()

    Returns:
        PascalCase identifier ending in "Icon"
    """
    return to_pascal_case(identifier_base(sanitized_name)) + COMPONENT_SUFFIX


def registry_key(sanitized_name: str) -> str:
    """camelCase lookup key for the registry."""
    return to_camel_case(identifier_base(sanitized_name))


def make_unique(sanitized_name: str, taken: Collection[str]) -> str:
    """
    Append -2, -3, ... until the registry key is not in ``taken``.

    Args:
        sanitized_name: Candidate name
        taken: Registry keys already in use

    Returns:
        A sanitized name whose registry key is free
    """
    if registry_key(sanitized_name) not in taken:
        return sanitized_name

    counter = 2
    while registry_key(f"{sanitized_name}-{counter}") in taken:
        counter += 1
    return f"{sanitized_name}-{counter}"
