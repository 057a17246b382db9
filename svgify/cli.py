"""
Command-line interface for generating React icon components.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from svgify import __version__
from svgify.config.default import DEFAULT_CONFIG_FILE_NAME
from svgify.core.generator import generate
from svgify.errors import ConfigurationError, SvgifyError
from svgify.utils.io import load_config
from svgify.utils.logger import configure_logging

logger = logging.getLogger(__name__)

EXAMPLE_CONFIG = {
    "inputDir": "./raw-icons",
    "outputDir": "./src/icons",
}

OPTIONAL_FIELDS_HELP = """Optional fields:
  - iconMode: "direct" | "registry" | "both" (default: "both")
  - typescript: true | false (default: true)
  - className: string (default: "icon")
  - postGenerate: string (e.g., "biome format --write src/")
  - svgoConfig: object (custom optimizer configuration)"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="svgify",
        description="Convert SVG files into React icon components.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        default=DEFAULT_CONFIG_FILE_NAME,
        help="Path to the JSON configuration file",
    )

    parser.add_argument(
        "--input-dir", "-i",
        type=str,
        help="Directory containing raw SVG files (overrides inputDir)",
    )

    parser.add_argument(
        "--output-dir", "-o",
        type=str,
        help="Directory for generated components (overrides outputDir)",
    )

    parser.add_argument(
        "--mode", "-m",
        choices=["direct", "registry", "both"],
        help="Which files to generate (overrides iconMode)",
    )

    parser.add_argument(
        "--javascript",
        action="store_true",
        help="Generate .jsx/.js instead of TypeScript",
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to this file",
    )

    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Write the log file as JSON lines",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(argv)


def print_config_help(config_path: Path) -> None:
    """Explain how to create a configuration file."""
    print(f"Configuration file not found: {config_path}", file=sys.stderr)
    print(f"\nPlease create a {DEFAULT_CONFIG_FILE_NAME} file in your project root:\n")
    print(json.dumps(EXAMPLE_CONFIG, indent=2))
    print()
    print(OPTIONAL_FIELDS_HELP)


def build_config(args: argparse.Namespace) -> Optional[Dict[str, Any]]:
    """
    Load the configuration file and apply command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        Configuration mapping, or None if it could not be loaded
    """
    config_path = Path(args.config)
    config: Dict[str, Any] = {}

    if config_path.exists():
        try:
            config = load_config(config_path)
        except (OSError, UnicodeDecodeError, ConfigurationError) as e:
            logger.error(f"Failed to load configuration: {e}")
            return None
        if not isinstance(config, dict):
            logger.error(f"Configuration file {config_path} must contain a JSON object")
            return None
    elif not (args.input_dir and args.output_dir):
        print_config_help(config_path)
        return None

    if args.input_dir:
        config["inputDir"] = args.input_dir
    if args.output_dir:
        config["outputDir"] = args.output_dir
    if args.mode:
        config["iconMode"] = args.mode
    if args.javascript:
        config["typescript"] = False

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    args = parse_args(argv)
    configure_logging(verbose=args.verbose, log_file=args.log_file, json_file=args.log_json)

    logger.info(f"svgify v{__version__}")

    config = build_config(args)
    if config is None:
        return 1

    try:
        result = generate(config, show_progress=not args.no_progress)
    except (SvgifyError, OSError) as e:
        logger.error(f"Fatal error: {e}")
        return 1

    logger.info(f"Successfully processed: {len(result.icons)} icons")
    if result.failed:
        logger.warning(f"Skipped {len(result.failed)} files: {', '.join(result.failed)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
