"""
Tests for the IconProcessor.
"""

import shutil
import tempfile
import unittest
from pathlib import Path

from svgify.config.settings import GeneratorConfig
from svgify.core.processor import IconProcessor, process_icon, strip_svg_wrapper
from svgify.utils.logger import capture_logs

RED_TRIANGLE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24" class="x">'
    '<path fill="#FF0000" stroke="red" stroke-width="2" stroke-linejoin="round" d="M12 2L2 22h20z"/>'
    '</svg>'
)


class TestStripSvgWrapper(unittest.TestCase):
    """Tests for strip_svg_wrapper()."""

    def test_strips_outer_tags(self):
        markup = '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0"/></svg>'
        self.assertEqual(strip_svg_wrapper(markup), '<path d="M0 0"/>')

    def test_nested_svg_keeps_inner_pair(self):
        markup = '<svg a="1"><svg b="2"><path/></svg></svg>'
        self.assertEqual(strip_svg_wrapper(markup), '<svg b="2"><path/></svg>')

    def test_empty_root(self):
        self.assertEqual(strip_svg_wrapper('<svg viewBox="0 0 24 24"/>'), "")


class TestIconProcessor(unittest.TestCase):
    """Tests for the IconProcessor class."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.input_dir = Path(self.temp_dir) / "icons"
        self.input_dir.mkdir()
        self.config = GeneratorConfig(
            input_dir=self.input_dir,
            output_dir=Path(self.temp_dir) / "out",
        )
        self.processor = IconProcessor(self.config, show_progress=False)

    def tearDown(self):
        """Clean up after tests."""
        shutil.rmtree(self.temp_dir)

    def _write(self, name, content):
        (self.input_dir / name).write_text(content, encoding="utf-8")

    def test_process_icon(self):
        self._write("Warning Sign.svg", RED_TRIANGLE)

        icon = self.processor.process("Warning Sign.svg")

        self.assertIsNotNone(icon)
        self.assertEqual(icon.original_file, "Warning Sign.svg")
        self.assertEqual(icon.sanitized_name, "warning-sign")
        self.assertEqual(icon.component_name, "WarningSignIcon")
        self.assertEqual(icon.camel_case_name, "warningSign")
        self.assertEqual(icon.svg_content, RED_TRIANGLE)

        inner = icon.optimized_svg
        self.assertTrue(inner.startswith("<path"))
        self.assertNotIn("<svg", inner)
        self.assertNotIn("</svg>", inner)
        self.assertIn('fill="currentColor"', inner)
        self.assertIn('stroke="currentColor"', inner)
        self.assertIn('strokeWidth="2"', inner)
        self.assertIn('strokeLinejoin="round"', inner)
        self.assertNotIn("stroke-width", inner)

    def test_style_elements_dropped(self):
        self._write("badge.svg", (
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">'
            '<defs><style>.cls-1{fill:#f00}.cls-2{fill:#0f0}</style></defs>'
            '<path class="cls-1" d="M0 0h12v12H0z"/>'
            '<path class="cls-2" d="M12 12h12v12H12z"/>'
            '</svg>'
        ))

        icon = self.processor.process("badge.svg")

        self.assertIsNotNone(icon)
        self.assertNotIn("<style", icon.optimized_svg)
        self.assertNotIn("{", icon.optimized_svg)
        self.assertNotIn("class=", icon.optimized_svg)
        self.assertIn("<path", icon.optimized_svg)

    def test_not_svg_suffix(self):
        self._write("notes.txt", RED_TRIANGLE)
        self.assertIsNone(self.processor.process("notes.txt"))

    def test_empty_sanitized_name(self):
        self._write("$$$.svg", RED_TRIANGLE)
        with capture_logs() as capture:
            self.assertIsNone(self.processor.process("$$$.svg"))
        self.assertTrue(any("invalid filename" in m for m in capture.messages))

    def test_corrupt_file_is_skipped(self):
        self._write("broken.svg", "<svg><path d=")
        with capture_logs() as capture:
            self.assertIsNone(self.processor.process("broken.svg"))
        self.assertTrue(any("broken.svg" in m for m in capture.messages))

    def test_missing_file_is_skipped(self):
        self.assertIsNone(self.processor.process("ghost.svg"))

    def test_unreadable_bytes_are_skipped(self):
        (self.input_dir / "latin.svg").write_bytes(b"\xff\xfe\x00<svg")
        self.assertIsNone(self.processor.process("latin.svg"))

    def test_process_all_reports_failures(self):
        self._write("a.svg", RED_TRIANGLE)
        self._write("b.svg", "garbage")
        self._write("c.svg", RED_TRIANGLE)

        report = self.processor.process_all(["a.svg", "b.svg", "c.svg"])

        self.assertEqual([i.original_file for i in report.icons], ["a.svg", "c.svg"])
        self.assertEqual(report.failed, ["b.svg"])
        self.assertEqual(report.success_count, 2)

    def test_process_all_disambiguates_names(self):
        self._write("User_Icon.svg", RED_TRIANGLE)
        self._write("user-icon.svg", RED_TRIANGLE)

        report = self.processor.process_all(["User_Icon.svg", "user-icon.svg"])

        self.assertEqual(
            [i.component_name for i in report.icons],
            ["UserIconIcon", "UserIcon2Icon"]
        )
        self.assertEqual(
            [i.camel_case_name for i in report.icons],
            ["userIcon", "userIcon2"]
        )
        self.assertEqual(report.renamed, {"user-icon.svg": "user-icon-2"})

    def test_process_icon_function(self):
        self._write("home.svg", RED_TRIANGLE)
        icon = process_icon("home.svg", self.config)
        self.assertEqual(icon.component_name, "HomeIcon")


if __name__ == "__main__":
    unittest.main()
