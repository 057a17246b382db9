"""
Icon Wrapper Template
=====================
Generates the dynamic <Icon icon="name" /> component backed by the registry.
"""

from svgify.config.settings import GeneratorConfig
from svgify.generation.common import GENERATED_HEADER, REGISTRY_MODULE


def generate_icon_wrapper(config: GeneratorConfig) -> str:
    """
    Generate the wrapper component.

    Unknown names log a console warning and render nothing. Every other prop
    is forwarded untouched, so defaults and the base class are applied once,
    by the resolved icon component.

    Args:
        config: Resolved generator configuration

    Returns:
        Wrapper source code
    """
    if config.typescript:
        preamble = f"""import type {{ FC, SVGProps }} from 'react';
import {{ getIconComponent }} from './{REGISTRY_MODULE}';
import type {{ IconName }} from './{REGISTRY_MODULE}';

export interface IconProps extends SVGProps<SVGSVGElement> {{
  icon: IconName;
  size?: number | string;
  color?: string;
}}
"""
        annotation = ": FC<IconProps>"
    else:
        preamble = f"import {{ getIconComponent }} from './{REGISTRY_MODULE}';\n"
        annotation = ""

    return f"""{GENERATED_HEADER}
{preamble}
export const Icon{annotation} = ({{ icon, ...props }}) => {{
  const IconComponent = getIconComponent(icon);

  if (!IconComponent) {{
    console.warn(`Icon "${{icon}}" not found`);
    return null;
  }}

  return <IconComponent {{...props}} />;
}};

Icon.displayName = 'Icon';

export default Icon;
"""
