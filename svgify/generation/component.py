"""
Icon Component Template
=======================
Generates one self-contained React component per icon.
"""

from svgify.config.default import DEFAULT_ICON_SIZE, DEFAULT_VIEW_BOX
from svgify.config.settings import GeneratorConfig
from svgify.generation.common import (
    COMPONENT_HEADER, comment_text, js_template_text
)
from svgify.models.icon import ProcessedIcon

PROPS_INTERFACE = """export interface IconProps extends SVGProps<SVGSVGElement> {
  size?: number | string;
  color?: string;
}
"""


def generate_icon_component(icon: ProcessedIcon, config: GeneratorConfig) -> str:
    """
    Generate the source of a single icon component.

    The component accepts size, width, height, color, className and style,
    and passes every other prop through to the <svg> element.

    Args:
        icon: Processed icon record
        config: Resolved generator configuration

    Returns:
        Component source code
    """
    name = icon.component_name
    base_class = js_template_text(config.class_name)

    if config.typescript:
        preamble = f"import type {{ FC, SVGProps }} from 'react';\n\n{PROPS_INTERFACE}"
        annotation = ": FC<IconProps>"
    else:
        preamble = ""
        annotation = ""

    return f"""{COMPONENT_HEADER}
{preamble}
/**
 * {name}
 * Original file: {comment_text(icon.original_file)}
 */
export const {name}{annotation} = ({{
  size,
  width,
  height,
  color = 'currentColor',
  className = '',
  style,
  ...props
}}) => {{
  const w = size || width || {DEFAULT_ICON_SIZE};
  const h = size || height || width || {DEFAULT_ICON_SIZE};
  const combinedClassName = `{base_class} ${{className}}`.trim();

  return (
    <svg
      width={{w}}
      height={{h}}
      viewBox="{DEFAULT_VIEW_BOX}"
      fill={{color}}
      className={{combinedClassName}}
      style={{{{ color, ...style }}}}
      {{...props}}
    >
      {icon.optimized_svg}
    </svg>
  );
}};

{name}.displayName = '{name}';

export default {name};
"""
