"""
Svgify - Models Package
=======================
Data records passed between pipeline stages.
"""

from svgify.models.icon import ProcessedIcon, ProcessingReport

__all__ = [
    "ProcessedIcon",
    "ProcessingReport",
]
