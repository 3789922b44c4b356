"""
Exceptions raised while loading or analyzing a project.

Absent attributes are never errors; these are reserved for documents whose
shape makes traversal impossible and for files that cannot be decoded.
"""

from typing import Optional


class AnalysisError(Exception):
    """Base class for analyzer failures."""
    pass


class StructuralError(AnalysisError):
    """Raised when the document is not the expected composite shape."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class DepthExceededError(StructuralError):
    """Raised when the script walk exceeds its depth or node budget."""

    def __init__(self, message: str, limit_name: str, limit: int):
        super().__init__(message, field="scripts")
        self.limit_name = limit_name
        self.limit = limit


class ProjectLoadError(AnalysisError):
    """Raised when a project file cannot be read or decoded."""
    pass
