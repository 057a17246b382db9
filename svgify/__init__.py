"""
Svgify Package
==============
Convert a directory of SVG icons into React components, a string-keyed
icon registry, or both.
"""

__version__ = "1.0.0"

from svgify.config.settings import GeneratorConfig, IconMode, OptimizerConfig
from svgify.core.generator import GenerationResult, IconGenerator, generate
from svgify.errors import (
    ConfigurationError,
    IconProcessingError,
    NoIconsProcessedError,
    NoSvgFilesError,
    OptimizationError,
    SvgifyError,
)
from svgify.models.icon import ProcessedIcon

__all__ = [
    "generate",
    "GeneratorConfig",
    "IconMode",
    "OptimizerConfig",
    "GenerationResult",
    "IconGenerator",
    "ProcessedIcon",
    "SvgifyError",
    "ConfigurationError",
    "IconProcessingError",
    "OptimizationError",
    "NoSvgFilesError",
    "NoIconsProcessedError",
]
