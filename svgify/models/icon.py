"""
Icon Model Module
=================
This module defines the ProcessedIcon record produced once per input file.
"""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ProcessedIcon:
    """An SVG file after sanitization, optimization and attribute translation."""
    original_file: str
    sanitized_name: str
    component_name: str
    camel_case_name: str
    svg_content: str = field(repr=False)  # raw source, never emitted
    optimized_svg: str = field(repr=False)


@dataclass
class ProcessingReport:
    """Outcome of processing a batch of files."""
    icons: List[ProcessedIcon] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    renamed: Dict[str, str] = field(default_factory=dict)  # original file -> disambiguated name

    @property
    def success_count(self) -> int:
        return len(self.icons)
