"""
Tests for color normalization and attribute name translation.
"""

import unittest

from svgify.core.attributes import SVG_ATTR_MAP, normalize_colors, translate_attributes


class TestNormalizeColors(unittest.TestCase):
    """Tests for normalize_colors()."""

    def test_hex_fill(self):
        self.assertEqual(normalize_colors('<path fill="#ff0000"/>'), '<path fill="currentColor"/>')

    def test_stroke(self):
        self.assertEqual(
            normalize_colors('<path stroke="rgb(0, 0, 0)"/>'),
            '<path stroke="currentColor"/>'
        )

    def test_none_and_current_color_untouched(self):
        markup = '<path fill="none" stroke="currentColor"/><path fill="NONE"/>'
        self.assertEqual(normalize_colors(markup), markup)

    def test_multiple_elements(self):
        markup = '<g fill="#000"><path fill="blue" stroke="#fff"/></g>'
        self.assertEqual(
            normalize_colors(markup),
            '<g fill="currentColor"><path fill="currentColor" stroke="currentColor"/></g>'
        )


class TestTranslateAttributes(unittest.TestCase):
    """Tests for translate_attributes()."""

    def test_hyphenated_names(self):
        markup = '<path fill-rule="evenodd" clip-rule="evenodd" stroke-width="2"/>'
        self.assertEqual(
            translate_attributes(markup),
            '<path fillRule="evenodd" clipRule="evenodd" strokeWidth="2"/>'
        )

    def test_namespaced_names(self):
        self.assertEqual(translate_attributes('<use xlink:href="#a"/>'), '<use xlinkHref="#a"/>')
        self.assertEqual(translate_attributes('<text xml:space="preserve"/>'), '<text xmlSpace="preserve"/>')

    def test_case_insensitive_and_whitespace(self):
        self.assertEqual(translate_attributes('<path STROKE-WIDTH = "1"/>'), '<path strokeWidth = "1"/>')

    def test_values_left_alone(self):
        markup = '<path d="M0 0" id="stroke-width"/>'
        self.assertEqual(translate_attributes(markup), markup)

    def test_idempotent(self):
        markup = '<path stroke-linecap="round" stroke-linejoin="round" stop-color="#fff"/>'
        once = translate_attributes(markup)
        self.assertEqual(translate_attributes(once), once)

    def test_camel_case_markup_unchanged(self):
        markup = " ".join(f'{camel}="1"' for camel in SVG_ATTR_MAP.values())
        self.assertEqual(translate_attributes(markup), markup)

    def test_every_mapping_applies(self):
        for name, camel in SVG_ATTR_MAP.items():
            self.assertEqual(translate_attributes(f'<g {name}="x"/>'), f'<g {camel}="x"/>')


if __name__ == "__main__":
    unittest.main()
