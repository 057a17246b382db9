"""
Generation orchestration: discovery, processing, file output and hooks.
"""
import logging
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Union

from svgify.config.settings import GeneratorConfig
from svgify.errors import NoIconsProcessedError, NoSvgFilesError
from svgify.core.processor import IconProcessor
from svgify.generation.common import INDEX_MODULE, REGISTRY_MODULE, WRAPPER_MODULE
from svgify.generation.component import generate_icon_component
from svgify.generation.index import generate_index_file
from svgify.generation.registry import generate_icon_registry
from svgify.generation.wrapper import generate_icon_wrapper
from svgify.models.icon import ProcessedIcon
from svgify.utils.io import ensure_directory, list_svg_files, write_source

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Summary of a completed generation run."""
    icons: List[ProcessedIcon] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    post_generate_ok: Optional[bool] = None  # None when no hook is configured


class IconGenerator:
    """
    Drives a full generation run.

    This class handles the complete process:
    1. Preparing the input and output directories
    2. Discovering .svg files
    3. Processing each file into a ProcessedIcon
    4. Writing components, registry, wrapper and index files
    5. Running the post-generation hook
    """

    def __init__(self, config: GeneratorConfig, show_progress: bool = True):
        """
        Initialize the generator.

        Args:
            config: Resolved generator configuration
            show_progress: Whether to display a progress bar while processing
        """
        self.config = config
        self.processor = IconProcessor(config, show_progress=show_progress)

    def run(self) -> GenerationResult:
        """
        Run the generation.

        Returns:
            GenerationResult describing what was produced

        Raises:
            NoSvgFilesError: If the input directory holds no .svg files
            NoIconsProcessedError: If every file failed processing
        """
        config = self.config
        logger.info("Starting icon generation")

        ensure_directory(config.input_dir)
        ensure_directory(config.output_dir)

        svg_files = list_svg_files(config.input_dir, sort=config.sort_files)
        if not svg_files:
            raise NoSvgFilesError(config.input_dir)
        logger.info(f"Found {len(svg_files)} SVG files in {config.input_dir}")

        report = self.processor.process_all(svg_files)
        if not report.icons:
            raise NoIconsProcessedError(report.failed)

        result = GenerationResult(icons=report.icons, failed=report.failed)
        result.written.extend(self._write_outputs(report.icons))

        if config.post_generate:
            result.post_generate_ok = self._run_post_generate(config.post_generate)

        logger.info(
            f"Icon generation complete: {len(result.icons)} processed, "
            f"{len(result.failed)} failed, {len(result.written)} files written"
        )
        return result

    def _write_outputs(self, icons: List[ProcessedIcon]) -> List[Path]:
        config = self.config
        ext = config.component_extension
        written = []

        for icon in icons:
            path = config.output_dir / f"{icon.component_name}.{ext}"
            written.append(write_source(path, generate_icon_component(icon, config)))
        logger.info(f"Generated {len(icons)} icon components")

        if config.includes_registry:
            path = config.output_dir / f"{REGISTRY_MODULE}.{ext}"
            written.append(write_source(path, generate_icon_registry(icons, config)))
            logger.info(f"Generated {REGISTRY_MODULE}")

            path = config.output_dir / f"{WRAPPER_MODULE}.{ext}"
            written.append(write_source(path, generate_icon_wrapper(config)))
            logger.info(f"Generated {WRAPPER_MODULE} wrapper")

        path = config.output_dir / f"{INDEX_MODULE}.{config.index_extension}"
        written.append(write_source(path, generate_index_file(icons, config)))
        logger.info("Generated index file")

        return written

    def _run_post_generate(self, command: str) -> bool:
        """
        Run the post-generation command in the host shell.

        Failures are logged and reported through the return value only.
        """
        logger.info(f"Running post-generate command: {command}")
        try:
            # Hook output may be in any encoding
            completed = subprocess.run(
                command, shell=True, capture_output=True, text=True, errors="replace"
            )
        except OSError as e:
            logger.warning(f"Post-generate command could not be started: {e}")
            return False

        if completed.returncode != 0:
            logger.warning(
                f"Post-generate command failed with exit code {completed.returncode}: "
                f"{completed.stderr.strip()}"
            )
            return False

        logger.info("Post-generate command completed")
        return True


def generate(
    config: Union[GeneratorConfig, Mapping[str, Any]],
    show_progress: bool = True
) -> GenerationResult:
    """
    Generate React icon components from a directory of SVG files.

    Args:
        config: GeneratorConfig, or a mapping accepted by GeneratorConfig.from_dict
        show_progress: Whether to display a progress bar while processing

    Returns:
        GenerationResult describing what was produced

    Raises:
        ConfigurationError: If the configuration is missing required fields
        NoSvgFilesError: If the input directory holds no .svg files
        NoIconsProcessedError: If every file failed processing
    """
    if not isinstance(config, GeneratorConfig):
        config = GeneratorConfig.from_dict(config)
    return IconGenerator(config, show_progress=show_progress).run()
