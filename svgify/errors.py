"""
Error Types Module
==================
Exception hierarchy raised by the icon generation pipeline.

Only configuration problems and total-failure conditions escape to the caller.
Per-file problems are raised as IconProcessingError inside the processor and
recovered there.
"""


class SvgifyError(Exception):
    """Base class for all svgify errors."""
    pass


class ConfigurationError(SvgifyError):
    """Required configuration is missing or has an invalid value."""
    pass


class NoSvgFilesError(SvgifyError):
    """The input directory holds no .svg files."""

    def __init__(self, input_dir):
        self.input_dir = input_dir
        super().__init__(f"No SVG files found in {input_dir}")


class IconProcessingError(SvgifyError):
    """A single icon could not be processed."""

    def __init__(self, filename: str, message: str):
        self.filename = filename
        super().__init__(f"{filename}: {message}")


class OptimizationError(IconProcessingError):
    """The SVG optimizer rejected the markup."""
    pass


class NoIconsProcessedError(SvgifyError):
    """Every discovered file failed processing."""

    def __init__(self, failed=None):
        self.failed = list(failed or [])
        super().__init__(
            f"No icons were successfully processed ({len(self.failed)} failed)"
        )
