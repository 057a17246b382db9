"""
Svgify - Utilities Package
==========================
Logging and file helpers shared by the pipeline and the CLI.
"""

from svgify.utils.io import (
    ensure_directory, list_svg_files, load_config, read_svg, write_source
)
from svgify.utils.logger import (
    JsonLineFormatter, capture_logs, configure_logging, log_icon_failure
)

__all__ = [
    'ensure_directory', 'list_svg_files', 'load_config', 'read_svg', 'write_source',
    'JsonLineFormatter', 'capture_logs', 'configure_logging', 'log_icon_failure',
]
