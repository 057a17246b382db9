"""
Default configuration settings for icon component generation.
"""
from types import MappingProxyType

DEFAULT_CONFIG_FILE_NAME = "svgify.config.json"

DEFAULT_CONFIG = {
    # Output selection
    "icon_mode": "both",  # "direct", "registry" or "both"
    "typescript": True,  # .tsx/.ts when True, .jsx/.js otherwise

    # Component settings
    "class_name": "icon",  # Base class merged into every component's className

    # Hooks
    "post_generate": None,  # Shell command run after all files are written

    # Discovery
    "sort_files": True,  # Process files in lexical order
}

# Component defaults baked into the generated code
DEFAULT_ICON_SIZE = 20
DEFAULT_VIEW_BOX = "0 0 24 24"

# Multipass optimization stops after this many passes even if output still changes
MAX_OPTIMIZER_PASSES = 10

# Options handed to scour; anything not listed keeps scour's own default
DEFAULT_SCOUR_OPTIONS = {
    "strip_xml_prolog": True,
    "strip_comments": True,
    "remove_metadata": True,
    "remove_descriptive_elements": True,
    "strip_ids": True,
    "shorten_ids": True,
    "simple_colors": True,  # rgb()/named colors -> #hex
    "style_to_xml": True,
    "group_collapse": True,
    "enable_viewboxing": False,  # keep viewBox, never rewrite width/height into it
    "keep_editor_data": False,
    "indent_type": "none",
    "newlines": False,
    "strip_xml_space_attribute": False,
    "quiet": True,
}

# "element:attribute" entries only apply to matching elements
DEFAULT_REMOVE_ATTRS = ("class", "style", "data-*", "svg:width", "svg:height")

DEFAULT_ROOT_ATTRIBUTES = {"fill": "currentColor"}


def default_optimizer_config():
    """
    Build a fresh, immutable optimizer configuration.

    Returns:
        OptimizerConfig populated with the default settings
    """
    from svgify.config.settings import OptimizerConfig

    return OptimizerConfig(
        multipass=True,
        scour_options=MappingProxyType(dict(DEFAULT_SCOUR_OPTIONS)),
        remove_attrs=tuple(DEFAULT_REMOVE_ATTRS),
        root_attributes=MappingProxyType(dict(DEFAULT_ROOT_ATTRIBUTES)),
    )
