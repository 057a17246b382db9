"""
SVG optimization backed by scour.

Markup is parsed with defusedxml before anything else touches it, so DTDs,
entity expansion and external references are rejected up front.
"""
import fnmatch
import logging
import xml.etree.ElementTree as ET
from types import SimpleNamespace
from typing import Optional, Tuple

from defusedxml import ElementTree as SafeElementTree
from defusedxml.common import DefusedXmlException
from scour import scour

from svgify.config.default import MAX_OPTIMIZER_PASSES, default_optimizer_config
from svgify.config.settings import OptimizerConfig
from svgify.errors import OptimizationError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

_PREFIXES = {XLINK_NS: "xlink", XML_NS: "xml"}

# Serialize SVG elements without ns0: prefixes
ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


def _qualified_name(key: str) -> str:
    """{http://www.w3.org/1999/xlink}href -> xlink:href"""
    if key.startswith("{"):
        uri, local = key[1:].split("}", 1)
        prefix = _PREFIXES.get(uri)
        return f"{prefix}:{local}" if prefix else local
    return key


def _local_name(tag: str) -> str:
    return tag.split("}", 1)[-1]


class SVGOptimizer:
    """
    Reduces SVG markup size and normalizes its structure.

    Each pass runs scour, drops <style> elements, strips the configured
    attributes from every element and adds the configured attributes to the root element. With multipass
    enabled, passes repeat until the output stops changing.
    """

    def __init__(self, config: Optional[OptimizerConfig] = None):
        """
        Initialize the optimizer.

        Args:
            config: Optimizer settings, defaults to default_optimizer_config()
        """
        self.config = config or default_optimizer_config()
        self.scour_options = scour.sanitizeOptions(SimpleNamespace(**self.config.scour_options))

    def optimize(self, markup: str, filename: str = "<string>") -> str:
        """
        Optimize SVG markup.

        Args:
            markup: Raw SVG markup
            filename: Name used in error messages

        Returns:
            Optimized markup, root element included

        Raises:
            OptimizationError: If the markup cannot be parsed or optimized
        """
        self._parse(markup, filename)

        passes = MAX_OPTIMIZER_PASSES if self.config.multipass else 1
        result = markup
        for pass_number in range(1, passes + 1):
            optimized = self._run_pass(result, filename)
            if optimized == result:
                logger.debug(f"{filename}: optimization stable after {pass_number - 1} pass(es)")
                break
            result = optimized

        return result

    def _run_pass(self, markup: str, filename: str) -> str:
        try:
            scoured = scour.scourString(markup, self.scour_options)
        except Exception as e:
            raise OptimizationError(filename, f"scour failed: {e}") from e

        root = self._parse(scoured, filename)
        _remove_style_elements(root)
        self._remove_attributes(root)
        for name, value in self.config.root_attributes.items():
            root.set(name, value)
        return ET.tostring(root, encoding="unicode")

    def _parse(self, markup: str, filename: str) -> ET.Element:
        try:
            root = SafeElementTree.fromstring(
                markup.encode("utf-8"),
                forbid_dtd=True,
                forbid_entities=True,
                forbid_external=True,
            )
        except (ET.ParseError, DefusedXmlException) as e:
            raise OptimizationError(filename, f"invalid SVG markup: {e}") from e

        if _local_name(root.tag) != "svg":
            raise OptimizationError(filename, f"root element is <{_local_name(root.tag)}>, not <svg>")
        return root

    def _remove_attributes(self, root: ET.Element) -> None:
        rules = [_split_rule(pattern) for pattern in self.config.remove_attrs]
        if not rules:
            return
        for element in root.iter():
            tag = _local_name(element.tag)
            for key in list(element.attrib):
                name = _qualified_name(key)
                if any(
                    fnmatch.fnmatchcase(tag, tag_pattern) and fnmatch.fnmatchcase(name, attr_pattern)
                    for tag_pattern, attr_pattern in rules
                ):
                    del element.attrib[key]


def _remove_style_elements(root: ET.Element) -> None:
    """
    Drop <style> elements.

    Their CSS text is not valid inside JSX, and once class attributes are
    stripped the rules no longer match anything.
    """
    for parent in list(root.iter()):
        for child in list(parent):
            if _local_name(child.tag) == "style":
                parent.remove(child)


def _split_rule(pattern: str) -> Tuple[str, str]:
    """
    Split an "element:attribute" rule; plain or namespaced names match any element.

    svg:width -> ("svg", "width"), xlink:href -> ("*", "xlink:href")
    """
    head, sep, tail = pattern.partition(":")
    if sep and head not in _PREFIXES.values() and head != "xmlns":
        return head, tail
    return "*", pattern


def optimize(markup: str, config: Optional[OptimizerConfig] = None) -> str:
    """Optimize SVG markup with a one-off SVGOptimizer."""
    return SVGOptimizer(config).optimize(markup)
