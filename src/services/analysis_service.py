"""
Analysis service for Scratch project files.

This service handles project file loading, metadata extraction,
and a compact summary of the last analyzed project.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..analyzer import AnalysisResult, WalkLimits, run_analysis
from ..analyzer.constants import MetaKeys
from ..project import load_project

logger = logging.getLogger(__name__)


class AnalysisService:
    """
    Service for loading and analyzing projects.

    Provides operations for:
    - Loading .json / .sb2 files
    - Attaching "_meta" to the decoded project
    - Summarizing the last analyzed project
    """

    def __init__(self, limits: Optional[WalkLimits] = None):
        """
        Initialize analysis service.

        Args:
            limits: Script walk budget passed to every analysis
        """
        self.limits = limits or WalkLimits()
        self.current_file: Optional[Path] = None
        self.current_project: Optional[Dict[str, Any]] = None
        self.logger = logging.getLogger(f"{__name__}.AnalysisService")

    def analyze_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a project file and analyze it.

        Args:
            file_path: Path to a .json, .sb2 or .sb file

        Returns:
            Dictionary with status, file and a compact summary

        Raises:
            FileNotFoundError: If the file does not exist
            AnalysisError: If the file cannot be decoded or traversed
        """
        file_path = Path(file_path)
        project = load_project(file_path)

        result = self.analyze_project(project)
        if not result.success:
            self.logger.error(f"Analysis of {file_path.name} failed: {result.error_message}")
            return {
                "status": "error",
                "file": str(file_path),
                "error": result.error_message,
                "error_type": result.error_type,
            }

        self.current_file = file_path
        self.logger.info(f"Analyzed {file_path.name}")
        return {
            "status": "success",
            "file": str(file_path),
            "summary": self.get_project_info(),
        }

    def analyze_project(self, project: Dict[str, Any]) -> AnalysisResult:
        """Analyze an already decoded project and remember it on success."""
        result = run_analysis(project, self.limits)
        if result.success:
            self.current_project = result.project
        return result

    def get_meta(self) -> Optional[Dict[str, Any]]:
        """Metadata of the last analyzed project, or None."""
        if self.current_project is None:
            return None
        return self.current_project.get(MetaKeys.META)

    def get_project_info(self) -> Dict[str, Any]:
        """Compact summary of the last analyzed project."""
        meta = self.get_meta()
        if meta is None:
            return {"loaded": False}

        return {
            "loaded": True,
            "file": str(self.current_file) if self.current_file else None,
            "sprites": meta[MetaKeys.SPRITES]["count"],
            "scripts": meta[MetaKeys.SCRIPTS]["count"],
            "blocks": meta[MetaKeys.BLOCKS]["count"],
            "unique_blocks": meta[MetaKeys.BLOCKS]["unique"],
            "extensions": meta[MetaKeys.EXTENSIONS]["id"],
        }
