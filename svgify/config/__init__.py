"""
Configuration for icon component generation.
"""

from svgify.config.default import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FILE_NAME,
    default_optimizer_config,
)
from svgify.config.settings import GeneratorConfig, IconMode, OptimizerConfig

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_FILE_NAME",
    "default_optimizer_config",
    "GeneratorConfig",
    "IconMode",
    "OptimizerConfig",
]
