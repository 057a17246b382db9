"""
Configuration Model Module
==========================
Typed, immutable configuration records for the generator and the optimizer.

The JSON configuration file uses camelCase keys (inputDir, outputDir, ...);
from_dict accepts those as well as the snake_case field names.
"""

import logging
import os
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from svgify.config.default import DEFAULT_CONFIG, default_optimizer_config
from svgify.errors import ConfigurationError

logger = logging.getLogger(__name__)

# JSON key -> dataclass field
_KEY_ALIASES = {
    "inputDir": "input_dir",
    "outputDir": "output_dir",
    "iconMode": "icon_mode",
    "className": "class_name",
    "postGenerate": "post_generate",
    "svgoConfig": "optimizer_config",
    "optimizerConfig": "optimizer_config",
    "sortFiles": "sort_files",
}


class IconMode(str, Enum):
    """Which categories of files a generation run emits."""
    DIRECT = "direct"
    REGISTRY = "registry"
    BOTH = "both"

    @classmethod
    def parse(cls, value: Any) -> "IconMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(mode.value for mode in cls)
            raise ConfigurationError(
                f"Invalid iconMode {value!r}; expected one of: {choices}"
            ) from None


@dataclass(frozen=True)
class OptimizerConfig:
    """
    Settings for the SVG optimizer adapter.

    Field defaults are the bare engine behaviour (single pass, scour's own
    options, nothing stripped or added). The preset used when no svgoConfig
    is given comes from default_optimizer_config().
    """
    multipass: bool = False
    scour_options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    remove_attrs: Tuple[str, ...] = ()
    root_attributes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OptimizerConfig":
        """
        Build an optimizer configuration from a JSON-style mapping.

        Recognized keys are multipass, scour, removeAttrs and addAttributes.
        The result replaces the default preset entirely: keys left out fall
        back to the bare engine behaviour, not to the preset.

        Args:
            data: Mapping loaded from the svgoConfig section

        Returns:
            OptimizerConfig instance
        """
        if isinstance(data, OptimizerConfig):
            return data
        if not isinstance(data, Mapping):
            raise ConfigurationError("svgoConfig must be an object")

        unknown = set(data) - {
            "multipass", "scour", "removeAttrs", "remove_attrs",
            "addAttributes", "root_attributes", "scour_options",
        }
        if unknown:
            logger.warning(f"Ignoring unknown svgoConfig keys: {', '.join(sorted(unknown))}")

        scour_options = data.get("scour", data.get("scour_options")) or {}
        remove_attrs = data.get("removeAttrs", data.get("remove_attrs")) or ()
        root_attributes = data.get("addAttributes", data.get("root_attributes")) or {}

        if isinstance(remove_attrs, str) or not all(isinstance(a, str) for a in remove_attrs):
            raise ConfigurationError("svgoConfig.removeAttrs must be a list of strings")
        if not isinstance(scour_options, Mapping) or not isinstance(root_attributes, Mapping):
            raise ConfigurationError("svgoConfig.scour and svgoConfig.addAttributes must be objects")

        return cls(
            multipass=bool(data.get("multipass", False)),
            scour_options=MappingProxyType(dict(scour_options)),
            remove_attrs=tuple(remove_attrs),
            root_attributes=MappingProxyType({k: str(v) for k, v in root_attributes.items()}),
        )


@dataclass(frozen=True)
class GeneratorConfig:
    """Resolved configuration for one generation run."""
    input_dir: Path
    output_dir: Path
    icon_mode: IconMode = IconMode(DEFAULT_CONFIG["icon_mode"])
    typescript: bool = DEFAULT_CONFIG["typescript"]
    class_name: str = DEFAULT_CONFIG["class_name"]
    post_generate: Optional[str] = DEFAULT_CONFIG["post_generate"]
    optimizer_config: OptimizerConfig = field(default_factory=default_optimizer_config)
    sort_files: bool = DEFAULT_CONFIG["sort_files"]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GeneratorConfig":
        """
        Validate a user configuration and merge it over the defaults.

        Args:
            data: Mapping with camelCase or snake_case keys

        Returns:
            GeneratorConfig instance

        Raises:
            ConfigurationError: If inputDir/outputDir are missing or a value is invalid
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError("Configuration must be an object")

        values = {}
        for key, value in data.items():
            values[_KEY_ALIASES.get(key, key)] = value

        if not values.get("input_dir") or not values.get("output_dir"):
            raise ConfigurationError("inputDir and outputDir are required in configuration")

        known = {f for f in cls.__dataclass_fields__}
        unknown = set(values) - known
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")

        # Shallow merge; a user optimizer config replaces the default wholesale
        merged = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in values.items() if k in known and v is not None})

        for key, label in (("input_dir", "inputDir"), ("output_dir", "outputDir")):
            if not isinstance(merged[key], (str, os.PathLike)):
                raise ConfigurationError(f"{label} must be a path string, got {merged[key]!r}")

        typescript = merged["typescript"]
        if not isinstance(typescript, bool):
            raise ConfigurationError(f"typescript must be true or false, got {typescript!r}")

        class_name = merged["class_name"]
        if not isinstance(class_name, str):
            raise ConfigurationError(f"className must be a string, got {class_name!r}")

        optimizer = merged.get("optimizer_config")
        return cls(
            input_dir=Path(merged["input_dir"]),
            output_dir=Path(merged["output_dir"]),
            icon_mode=IconMode.parse(merged["icon_mode"]),
            typescript=typescript,
            class_name=class_name,
            post_generate=merged["post_generate"] or None,
            optimizer_config=(
                OptimizerConfig.from_dict(optimizer)
                if optimizer is not None else default_optimizer_config()
            ),
            sort_files=bool(merged["sort_files"]),
        )

    def with_overrides(self, **changes) -> "GeneratorConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def includes_direct(self) -> bool:
        return self.icon_mode in (IconMode.DIRECT, IconMode.BOTH)

    @property
    def includes_registry(self) -> bool:
        return self.icon_mode in (IconMode.REGISTRY, IconMode.BOTH)

    @property
    def component_extension(self) -> str:
        return "tsx" if self.typescript else "jsx"

    @property
    def index_extension(self) -> str:
        return "ts" if self.component_extension == "tsx" else "js"
