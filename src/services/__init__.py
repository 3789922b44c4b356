"""
Service module for analyzing Scratch project files.

This module provides:
- AnalysisService for loading and analyzing project files
- ProjectWatcher for re-analyzing a project when it is saved
"""

from .analysis_service import AnalysisService
from .watcher import ProjectWatcher, ProjectFileHandler

__all__ = ["AnalysisService", "ProjectWatcher", "ProjectFileHandler"]
