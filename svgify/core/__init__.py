"""
Core functionality for turning SVG files into icon components.
"""

from svgify.core.attributes import SVG_ATTR_MAP, normalize_colors, translate_attributes
from svgify.core.generator import GenerationResult, IconGenerator, generate
from svgify.core.naming import sanitize, to_camel_case, to_pascal_case
from svgify.core.optimizer import SVGOptimizer, optimize
from svgify.core.processor import IconProcessor, process_icon, strip_svg_wrapper

__all__ = [
    "SVG_ATTR_MAP",
    "normalize_colors",
    "translate_attributes",
    "GenerationResult",
    "IconGenerator",
    "generate",
    "sanitize",
    "to_camel_case",
    "to_pascal_case",
    "SVGOptimizer",
    "optimize",
    "IconProcessor",
    "process_icon",
    "strip_svg_wrapper",
]
