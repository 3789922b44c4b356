"""Extract the list of extensions saved with a project."""

from typing import Any, Dict

from .constants import ProjectFields
from .document import ProjectDocument


def extract_extensions(document: ProjectDocument) -> Dict[str, Any]:
    """
    List the names of externally loaded extensions.

    Args:
        document: Project view

    Returns:
        Dict with structure:
        {
            'count': int,
            'id': list of extension names, in saved order
        }
        Projects without ``info.savedExtensions`` give a count of 0.
    """
    names = []

    if document.saved_extensions is None:
        return {"count": 0, "id": names}

    for extension in document.saved_extensions:
        name = extension.get(ProjectFields.EXTENSION_NAME) if isinstance(extension, dict) else None
        names.append(name)

    return {"count": len(names), "id": names}
