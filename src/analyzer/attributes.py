"""Flatten and summarize attribute sequences across the stage and its children."""

from typing import Any, Dict, List, Optional

from .document import ProjectDocument


def flatten(document: ProjectDocument, attribute: str) -> List[Any]:
    """
    Collect every item of an attribute from the project and its children.

    Args:
        document: Project view
        attribute: Project attribute name (e.g. "sounds")

    Returns:
        New list with the project's own items first, then each child's
        items in child order. Empty when nothing carries the attribute.
    """
    items = list(document.attribute(attribute) or [])

    # Only immediate children, never grandchildren
    for child in document.children:
        child_items = child.attribute(attribute)
        if child_items is not None:
            items.extend(child_items)

    return items


def _project(elements: List[Any], key: str) -> List[Any]:
    # One slot per element so projections stay index-aligned
    return [element.get(key) if isinstance(element, dict) else None for element in elements]


def extract(
    document: ProjectDocument,
    attribute: str,
    id_field: Optional[str] = None,
    hash_field: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Summarize an attribute across the project.

    Args:
        document: Project view
        attribute: Project attribute name
        id_field: Key to project into an "id" list (optional)
        hash_field: Key to project into a "hash" list (optional)

    Returns:
        Summary dict with structure:
        {
            'count': int,
            'id': list,    # only when id_field is given
            'hash': list,  # only when hash_field is given
        }
    """
    elements = flatten(document, attribute)

    summary = {"count": len(elements)}
    if id_field is not None:
        summary["id"] = _project(elements, id_field)
    if hash_field is not None:
        summary["hash"] = _project(elements, hash_field)

    return summary
