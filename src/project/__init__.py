"""
Project file module for Scratch 2 projects.

This module handles:
- Loading project.json files and .sb2 archives
- Writing analyzed projects back out as JSON
"""

from .loader import load_project, dump_project, write_project

__all__ = [
    "load_project",
    "dump_project",
    "write_project",
]
