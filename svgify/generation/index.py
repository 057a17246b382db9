"""
Index Template
==============
Generates the aggregating entry module.
"""

from typing import List, Sequence

from svgify.config.settings import GeneratorConfig
from svgify.generation.common import GENERATED_HEADER, REGISTRY_MODULE, WRAPPER_MODULE
from svgify.models.icon import ProcessedIcon


def generate_index_file(icons: Sequence[ProcessedIcon], config: GeneratorConfig) -> str:
    """
    Generate the index module.

    Registry exports appear when the mode includes the registry, direct
    component exports when it includes direct components.

    Args:
        icons: Processed icons in discovery order
        config: Resolved generator configuration

    Returns:
        Index source code
    """
    sections: List[str] = []

    if config.includes_registry:
        registry = [
            "// Registry exports",
            f"export {{ Icon }} from './{WRAPPER_MODULE}';",
        ]
        if config.typescript:
            registry.append(f"export type {{ IconProps }} from './{WRAPPER_MODULE}';")
        registry.append(
            "export { iconNames, getIconComponent, hasIcon, getAllIconNames } "
            f"from './{REGISTRY_MODULE}';"
        )
        if config.typescript:
            registry.append(f"export type {{ IconName }} from './{REGISTRY_MODULE}';")
        sections.append("\n".join(registry))

    if config.includes_direct:
        direct = ["// Direct component exports"]
        direct.extend(
            f"export {{ default as {icon.component_name} }} from './{icon.component_name}';"
            for icon in icons
        )
        direct.append("")
        direct.append(f"// Total icons: {len(icons)}")
        sections.append("\n".join(direct))

    body = "\n\n".join(sections)
    return f"{GENERATED_HEADER}\n{body}\n"
