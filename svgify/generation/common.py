"""
Helpers shared by the source templates.
"""

GENERATED_HEADER = "// Auto-generated file - DO NOT EDIT"
COMPONENT_HEADER = "// Auto-generated component - DO NOT EDIT"

REGISTRY_MODULE = "IconRegistry"
WRAPPER_MODULE = "Icon"
INDEX_MODULE = "index"


def js_template_text(value: str) -> str:
    """Escape text for use inside a JavaScript template literal."""
    return value.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def comment_text(value: str) -> str:
    """Keep text from terminating a block comment."""
    return value.replace("*/", "*\\/")
