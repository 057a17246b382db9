"""
Per-file icon processing: naming, optimization and markup rewriting.
"""
import logging
import re
from typing import Iterable, Optional, Set

from tqdm import tqdm

from svgify.config.settings import GeneratorConfig
from svgify.core.attributes import normalize_colors, translate_attributes
from svgify.core.naming import (
    component_identifier, make_unique, registry_key, sanitize
)
from svgify.core.optimizer import SVGOptimizer
from svgify.errors import IconProcessingError
from svgify.models.icon import ProcessedIcon, ProcessingReport
from svgify.utils.io import read_svg
from svgify.utils.logger import log_icon_failure

logger = logging.getLogger(__name__)

_OPEN_TAG = re.compile(r"<svg[^>]*>")
_CLOSE_TAG = "</svg>"


def strip_svg_wrapper(markup: str) -> str:
    """
    Remove the first <svg ...> opening tag and the last </svg> closing tag.

    Args:
        markup: Optimized SVG document

    Returns:
        The child markup, trimmed
    """
    markup = _OPEN_TAG.sub("", markup, count=1)
    head, sep, tail = markup.rpartition(_CLOSE_TAG)
    if sep:
        markup = head + tail
    return markup.strip()


class IconProcessor:
    """
    Turns SVG files into ProcessedIcon records.

    Problems with a single file never escape process(); the file is logged
    and skipped so the rest of the icon set can still be generated.
    """

    def __init__(self, config: GeneratorConfig, show_progress: bool = True):
        """
        Initialize the processor.

        Args:
            config: Resolved generator configuration
            show_progress: Whether to display a tqdm progress bar in process_all
        """
        self.config = config
        self.optimizer = SVGOptimizer(config.optimizer_config)
        self.show_progress = show_progress

    def process(self, filename: str, name_override: Optional[str] = None) -> Optional[ProcessedIcon]:
        """
        Process one file from the input directory.

        Args:
            filename: File name inside config.input_dir
            name_override: Sanitized name to use instead of the derived one

        Returns:
            ProcessedIcon, or None if the file was skipped
        """
        if not filename.endswith(".svg"):
            logger.debug(f"Skipping {filename}: not an .svg file")
            return None

        sanitized_name = name_override or sanitize(filename)
        if not sanitized_name:
            logger.warning(f"Skipping {filename}: invalid filename after sanitization")
            return None

        try:
            svg_content = read_svg(self.config.input_dir / filename)
            optimized = self.optimizer.optimize(svg_content, filename)
            inner = strip_svg_wrapper(optimized)
            inner = translate_attributes(normalize_colors(inner))
        except IconProcessingError as e:
            log_icon_failure(logger, filename, e)
            return None
        except Exception as e:
            log_icon_failure(logger, filename, IconProcessingError(filename, str(e)))
            return None

        return ProcessedIcon(
            original_file=filename,
            sanitized_name=sanitized_name,
            component_name=component_identifier(sanitized_name),
            camel_case_name=registry_key(sanitized_name),
            svg_content=svg_content,
            optimized_svg=inner,
        )

    def process_all(self, filenames: Iterable[str]) -> ProcessingReport:
        """
        Process files sequentially, in the given order.

        Files whose registry key is already taken are given a -2, -3, ...
        suffix so every generated name stays unique.

        Args:
            filenames: File names inside config.input_dir

        Returns:
            ProcessingReport with successes, failures and renames
        """
        filenames = list(filenames)
        report = ProcessingReport()
        taken: Set[str] = set()

        for filename in tqdm(filenames, desc="Processing icons", unit="icon",
                             disable=not self.show_progress):
            sanitized = sanitize(filename)
            unique = make_unique(sanitized, taken) if sanitized else sanitized
            if unique != sanitized:
                logger.warning(
                    f"{filename}: name '{sanitized}' already in use, renamed to '{unique}'"
                )

            icon = self.process(filename, name_override=unique or None)
            if icon is None:
                report.failed.append(filename)
                logger.info(f"Processing {filename}... failed")
                continue

            if unique != sanitized:
                report.renamed[filename] = unique
            taken.add(icon.camel_case_name)
            report.icons.append(icon)
            logger.info(f"Processing {filename}... ok (-> {icon.component_name})")

        return report


def process_icon(filename: str, config: GeneratorConfig) -> Optional[ProcessedIcon]:
    """Process a single file with a one-off IconProcessor."""
    return IconProcessor(config, show_progress=False).process(filename)
