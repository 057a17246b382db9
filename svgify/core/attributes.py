"""
SVG attribute rewriting for React markup.

React expects camelCase property names (strokeWidth, not stroke-width), and
generated icons follow the caller's color through currentColor.
"""
import re
from typing import Dict, List, Pattern, Tuple

# SVG attribute name -> React property name
SVG_ATTR_MAP: Dict[str, str] = {
    'clip-path': 'clipPath',
    'clip-rule': 'clipRule',
    'fill-rule': 'fillRule',
    'fill-opacity': 'fillOpacity',
    'stroke-width': 'strokeWidth',
    'stroke-linecap': 'strokeLinecap',
    'stroke-linejoin': 'strokeLinejoin',
    'stroke-miterlimit': 'strokeMiterlimit',
    'stroke-dasharray': 'strokeDasharray',
    'stroke-dashoffset': 'strokeDashoffset',
    'stroke-opacity': 'strokeOpacity',
    'stop-color': 'stopColor',
    'stop-opacity': 'stopOpacity',
    'xlink:href': 'xlinkHref',
    'xml:space': 'xmlSpace',
    'xmlns:xlink': 'xmlnsXlink',
    'color-interpolation-filters': 'colorInterpolationFilters',
    'flood-color': 'floodColor',
    'flood-opacity': 'floodOpacity',
    'font-family': 'fontFamily',
    'font-size': 'fontSize',
    'font-weight': 'fontWeight',
    'text-anchor': 'textAnchor',
    'dominant-baseline': 'dominantBaseline',
    'marker-start': 'markerStart',
    'marker-mid': 'markerMid',
    'marker-end': 'markerEnd',
    'paint-order': 'paintOrder',
    'vector-effect': 'vectorEffect',
}

_FILL_COLOR = re.compile(r'fill="(?!none|currentColor)[^"]*"', re.IGNORECASE)
_STROKE_COLOR = re.compile(r'stroke="(?!none|currentColor)[^"]*"', re.IGNORECASE)


def _compile_attr_patterns() -> List[Tuple[Pattern, str]]:
    patterns = []
    for name in sorted(SVG_ATTR_MAP, key=len, reverse=True):
        pattern = re.compile(rf"\b{re.escape(name)}(?=\s*=)", re.IGNORECASE)
        patterns.append((pattern, SVG_ATTR_MAP[name]))
    return patterns


_ATTR_PATTERNS = _compile_attr_patterns()


def normalize_colors(markup: str) -> str:
    """
    Point every fill and stroke color at currentColor.

    Values of none and currentColor are left alone.

    Args:
        markup: SVG markup

    Returns:
        Markup with fill/stroke colors rewritten
    """
    markup = _FILL_COLOR.sub('fill="currentColor"', markup)
    return _STROKE_COLOR.sub('stroke="currentColor"', markup)


def translate_attributes(markup: str) -> str:
    """
    Rewrite hyphenated SVG attribute names to React property names.

    Only names at a word boundary and followed by '=' are touched, so
    attribute values and unrelated tokens are left as they are. Running it
    on already translated markup changes nothing.

    Args:
        markup: SVG markup

    Returns:
        Markup with camelCase attribute names
    """
    for pattern, replacement in _ATTR_PATTERNS:
        markup = pattern.sub(replacement, markup)
    return markup
