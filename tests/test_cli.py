"""
Tests for the command-line interface.
"""

import io
import json
import logging
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from svgify.cli import build_config, main, parse_args
from svgify.utils.logger import JsonLineFormatter

ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
    '<path fill="#000" d="M2 2h20v20H2z"/></svg>'
)


class CliTestCase(unittest.TestCase):
    """Temporary project layout for CLI runs."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.input_dir = self.temp_dir / "raw-icons"
        self.output_dir = self.temp_dir / "src" / "icons"
        self.config_path = self.temp_dir / "svgify.config.json"
        self.input_dir.mkdir()
        (self.input_dir / "home.svg").write_text(ICON, encoding="utf-8")

        # Leave logger handlers alone between tests
        patcher = mock.patch("svgify.cli.configure_logging")
        self.configure_logging = patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def write_config(self, data):
        self.config_path.write_text(json.dumps(data), encoding="utf-8")

    def run_cli(self, *extra):
        return main(["--config", str(self.config_path), "--no-progress", *extra])


class TestMain(CliTestCase):
    """Tests for main()."""

    def test_missing_config(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            self.assertEqual(self.run_cli(), 1)
        self.assertIn('"inputDir": "./raw-icons"', stdout.getvalue())
        self.assertIn("iconMode", stdout.getvalue())
        self.assertFalse(self.output_dir.exists())

    def test_valid_config(self):
        self.write_config({"inputDir": str(self.input_dir), "outputDir": str(self.output_dir)})

        self.assertEqual(self.run_cli(), 0)
        self.assertTrue((self.output_dir / "HomeIcon.tsx").is_file())
        self.assertTrue((self.output_dir / "index.ts").is_file())

    def test_directories_from_flags(self):
        code = self.run_cli(
            "--input-dir", str(self.input_dir),
            "--output-dir", str(self.output_dir),
            "--mode", "direct",
            "--javascript",
        )

        self.assertEqual(code, 0)
        self.assertEqual(
            sorted(p.name for p in self.output_dir.iterdir()),
            ["HomeIcon.jsx", "index.js"]
        )

    def test_invalid_json(self):
        self.config_path.write_text("{ not json", encoding="utf-8")
        self.assertEqual(self.run_cli(), 1)

    def test_config_must_be_object(self):
        self.write_config(["inputDir"])
        self.assertEqual(self.run_cli(), 1)

    def test_missing_required_field(self):
        self.write_config({"inputDir": str(self.input_dir)})
        self.assertEqual(self.run_cli(), 1)

    def test_no_svg_files(self):
        (self.input_dir / "home.svg").unlink()
        self.write_config({"inputDir": str(self.input_dir), "outputDir": str(self.output_dir)})
        self.assertEqual(self.run_cli(), 1)

    def test_output_dir_is_a_file(self):
        self.output_dir.parent.mkdir(parents=True)
        self.output_dir.write_text("not a directory", encoding="utf-8")
        self.write_config({"inputDir": str(self.input_dir), "outputDir": str(self.output_dir)})
        self.assertEqual(self.run_cli(), 1)

    def test_verbose_sets_debug_level(self):
        self.write_config({"inputDir": str(self.input_dir), "outputDir": str(self.output_dir)})
        self.run_cli("--verbose")
        self.assertTrue(self.configure_logging.call_args[1]["verbose"])


class TestBuildConfig(unittest.TestCase):
    """Tests for build_config()."""

    def test_flags_override_file(self):
        temp_dir = Path(tempfile.mkdtemp())
        self.addCleanup(shutil.rmtree, temp_dir)
        config_path = temp_dir / "svgify.config.json"
        config_path.write_text(
            json.dumps({"inputDir": "a", "outputDir": "b", "iconMode": "both"}),
            encoding="utf-8"
        )

        args = parse_args(["--config", str(config_path), "--output-dir", "c", "--mode", "registry"])
        config = build_config(args)

        self.assertEqual(config, {"inputDir": "a", "outputDir": "c", "iconMode": "registry"})


class TestLogging(unittest.TestCase):
    """Tests for structured log output."""

    def test_json_line_format(self):
        record = logging.LogRecord(
            "svgify.core.processor", logging.ERROR, __file__, 10, "Skipped %d files", (2,), None
        )
        record.icon_file = "broken.svg"

        data = json.loads(JsonLineFormatter().format(record))

        self.assertEqual(data["level"], "ERROR")
        self.assertEqual(data["logger"], "svgify.core.processor")
        self.assertEqual(data["message"], "Skipped 2 files")
        self.assertEqual(data["icon_file"], "broken.svg")
        self.assertNotIn("error", data)

    def test_icon_file_is_optional(self):
        record = logging.LogRecord("svgify", logging.INFO, __file__, 1, "done", (), None)
        data = json.loads(JsonLineFormatter().format(record))
        self.assertNotIn("icon_file", data)


if __name__ == "__main__":
    unittest.main()
