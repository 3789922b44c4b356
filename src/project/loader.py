import json
import logging
import zipfile
from pathlib import Path
from typing import Any, Dict

from ..analyzer.errors import ProjectLoadError

logger = logging.getLogger(__name__)

PROJECT_ENTRY = "project.json"
ARCHIVE_SUFFIXES = {".sb2", ".sb"}


def load_project(path: Path) -> Dict[str, Any]:
    """Load a Scratch 2 project from a .json file or a .sb2/.sb archive."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if path.suffix == ".json":
        raw = path.read_bytes()
    elif path.suffix in ARCHIVE_SUFFIXES:
        raw = _read_archive_entry(path)
    else:
        raise ProjectLoadError(f"Unsupported file type: {path.suffix}")

    try:
        data = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ProjectLoadError(f"{path.name} is not valid UTF-8: {e}") from e

    try:
        project = json.loads(data)
    except json.JSONDecodeError as e:
        raise ProjectLoadError(f"Invalid JSON in {path.name}: {e}") from e

    logger.debug(f"Loaded project from {path} ({len(data)} chars)")
    return project


def _read_archive_entry(path: Path) -> bytes:
    try:
        with zipfile.ZipFile(path) as archive:
            if PROJECT_ENTRY not in archive.namelist():
                raise ProjectLoadError(f"{path.name} has no {PROJECT_ENTRY}")
            return archive.read(PROJECT_ENTRY)
    except zipfile.BadZipFile as e:
        raise ProjectLoadError(f"{path.name} is not a valid project archive") from e


def dump_project(project: Dict[str, Any], indent: int = 2) -> str:
    """Serialize a (possibly analyzed) project to a JSON string."""
    return json.dumps(project, indent=indent, ensure_ascii=False)


def write_project(project: Dict[str, Any], path: Path, indent: int = 2) -> Path:
    """Write a project as JSON, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_project(project, indent=indent), encoding="utf-8")
    logger.info(f"Wrote project to {path}")
    return path
