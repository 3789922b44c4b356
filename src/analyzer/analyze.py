"""
Project analysis entry points.

This module provides:
- analyze(): build the metadata object and attach it to the project in place
- AnalysisResult: single success/failure channel for callers that prefer
  a value over an exception
- run_analysis() / analyze_with_callback(): wrappers reporting through that channel
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .attributes import extract
from .blocks import WalkLimits, extract_blocks
from .constants import EXTRACTION_TABLE, MetaKeys
from .document import ProjectDocument
from .errors import AnalysisError
from .extensions import extract_extensions
from .sprites import count_sprites


def build_metadata(document: ProjectDocument, limits: Optional[WalkLimits] = None) -> Dict[str, Any]:
    """Compute the metadata object for a project view, keys in MetaKeys.ORDER."""
    meta = {}
    for key, attribute, id_field, hash_field in EXTRACTION_TABLE:
        meta[key] = extract(document, attribute, id_field, hash_field)

    meta[MetaKeys.SPRITES] = count_sprites(document)
    meta[MetaKeys.BLOCKS] = extract_blocks(document, limits)
    meta[MetaKeys.EXTENSIONS] = extract_extensions(document)
    return meta


def analyze(project: Dict[str, Any], limits: Optional[WalkLimits] = None) -> Dict[str, Any]:
    """
    Analyze a decoded project and attach its metadata under "_meta".

    The project is mutated in place and returned; any existing "_meta" is
    replaced. A previous "_meta" is never read back as project content.

    Args:
        project: Decoded project.json dictionary
        limits: Script walk budget (default: WalkLimits())

    Returns:
        The same project dictionary

    Raises:
        StructuralError: If the project cannot be traversed
    """
    document = ProjectDocument.from_dict(project)
    document.raw[MetaKeys.META] = build_metadata(document, limits)
    return document.raw


@dataclass
class AnalysisResult:
    """
    Outcome of analyzing one project.

    Carries either the augmented project or the reason traversal failed.
    """
    success: bool
    project: Optional[Dict[str, Any]] = None
    error_message: Optional[str] = None
    error_type: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, project: Dict[str, Any], **metadata) -> "AnalysisResult":
        """Create a successful result."""
        return cls(success=True, project=project, metadata=metadata)

    @classmethod
    def error(cls, error_message: str, error_type: str = "analysis_error", **metadata) -> "AnalysisResult":
        """Create an error result."""
        return cls(success=False, error_message=error_message, error_type=error_type, metadata=metadata)

    @property
    def meta(self) -> Optional[Dict[str, Any]]:
        """Metadata attached to the project, or None on failure."""
        if self.project is None:
            return None
        return self.project.get(MetaKeys.META)


def _error_type(exc: AnalysisError) -> str:
    # StructuralError -> "structural_error"
    name = type(exc).__name__
    snake = "".join(f"_{c.lower()}" if c.isupper() else c for c in name).lstrip("_")
    return snake


def run_analysis(project: Any, limits: Optional[WalkLimits] = None) -> AnalysisResult:
    """Analyze a project, reporting failures as an error result instead of raising."""
    try:
        return AnalysisResult.ok(analyze(project, limits))
    except AnalysisError as e:
        return AnalysisResult.error(
            str(e),
            error_type=_error_type(e),
            field=getattr(e, "field", None),
        )


def analyze_with_callback(
    project: Any,
    callback: Callable[[Optional[AnalysisError], Optional[Dict[str, Any]]], None],
    limits: Optional[WalkLimits] = None,
) -> None:
    """
    Analyze a project and report through ``callback(error, project)``.

    Exactly one call is made: ``(None, project)`` on success or
    ``(error, None)`` when the project cannot be traversed.
    """
    try:
        result = analyze(project, limits)
    except AnalysisError as e:
        callback(e, None)
        return
    callback(None, result)
