"""
Analyzer module for Scratch 2 projects.

This module provides:
- Typed views over a decoded project.json
- Attribute flattening and summaries across the stage and its sprites
- Block extraction and frequency counts from script trees
- The analyze() entry point that attaches "_meta" to a project
"""

from .errors import (
    AnalysisError,
    StructuralError,
    DepthExceededError,
    ProjectLoadError,
)
from .document import ProjectDocument, ProjectChild
from .attributes import flatten, extract
from .sprites import count_sprites
from .frequency import frequency
from .blocks import WalkLimits, walk_blocks, extract_blocks
from .extensions import extract_extensions
from .analyze import (
    AnalysisResult,
    analyze,
    analyze_with_callback,
    build_metadata,
    run_analysis,
)

__all__ = [
    # Errors
    "AnalysisError",
    "StructuralError",
    "DepthExceededError",
    "ProjectLoadError",
    # Views
    "ProjectDocument",
    "ProjectChild",
    # Extractors
    "flatten",
    "extract",
    "count_sprites",
    "frequency",
    "WalkLimits",
    "walk_blocks",
    "extract_blocks",
    "extract_extensions",
    # Entry points
    "AnalysisResult",
    "analyze",
    "analyze_with_callback",
    "build_metadata",
    "run_analysis",
]
