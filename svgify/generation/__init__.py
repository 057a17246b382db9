"""
Svgify - Generation Package
===========================
Pure functions that turn processed icons into React source code.
"""

from svgify.generation.component import generate_icon_component
from svgify.generation.index import generate_index_file
from svgify.generation.registry import generate_icon_registry
from svgify.generation.wrapper import generate_icon_wrapper

__all__ = [
    "generate_icon_component",
    "generate_icon_registry",
    "generate_icon_wrapper",
    "generate_index_file",
]
