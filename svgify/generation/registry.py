"""
Icon Registry Template
======================
Generates the module that maps camelCase icon names to components.
"""

from typing import Sequence

from svgify.config.settings import GeneratorConfig
from svgify.generation.common import GENERATED_HEADER
from svgify.models.icon import ProcessedIcon


def generate_icon_registry(icons: Sequence[ProcessedIcon], config: GeneratorConfig) -> str:
    """
    Generate the registry module.

    Imports follow the order of ``icons``; the module exports iconNames,
    getIconComponent, hasIcon and getAllIconNames (plus the IconName type
    in TypeScript).

    Args:
        icons: Processed icons in discovery order
        config: Resolved generator configuration

    Returns:
        Registry source code
    """
    ts = config.typescript

    imports = "\n".join(
        f"import {icon.component_name} from './{icon.component_name}';" for icon in icons
    )
    names = "\n".join(f"  '{icon.camel_case_name}'," for icon in icons)
    entries = "\n".join(f"  {icon.camel_case_name}: {icon.component_name}," for icon in icons)

    type_import = "import type { FC } from 'react';\n" if ts else ""
    as_const = " as const" if ts else ""
    name_type = "\nexport type IconName = (typeof iconNames)[number];\n" if ts else ""
    map_type = ": Record<string, FC<any>>" if ts else ""
    name_param = "name: string" if ts else "name"
    bool_type = ": boolean" if ts else ""
    lookup_type = ": FC<any> | undefined" if ts else ""
    names_type = ": string[]" if ts else ""

    return f"""{GENERATED_HEADER}
{type_import}
// Import all icons
{imports}

export const iconNames = [
{names}
]{as_const};
{name_type}
const iconComponents{map_type} = {{
{entries}
}};

export function hasIcon({name_param}){bool_type} {{
  return Object.prototype.hasOwnProperty.call(iconComponents, name);
}}

export function getIconComponent({name_param}){lookup_type} {{
  return hasIcon(name) ? iconComponents[name] : undefined;
}}

export function getAllIconNames(){names_type} {{
  return [...iconNames];
}}
"""
