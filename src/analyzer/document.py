"""
Typed views over a decoded Scratch 2 project.

The analyzer never reads the raw dictionary directly. It reads these views,
which expose exactly the attributes the extractors query as explicitly
optional fields. A JSON ``null`` is treated the same as a missing key.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import ProjectFields
from .errors import StructuralError


# Project attribute name -> dataclass field name
_ATTRIBUTE_FIELDS = {
    ProjectFields.SCRIPTS: "scripts",
    ProjectFields.VARIABLES: "variables",
    ProjectFields.LISTS: "lists",
    ProjectFields.SCRIPT_COMMENTS: "script_comments",
    ProjectFields.SOUNDS: "sounds",
    ProjectFields.COSTUMES: "costumes",
}


def _optional_list(raw: Dict[str, Any], key: str, owner: str) -> Optional[List[Any]]:
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise StructuralError(
            f"{owner} field '{key}' has type {type(value).__name__}, expected list",
            field=key,
        )
    return value


@dataclass
class ProjectChild:
    """
    A member of the project's ``children`` sequence (a sprite, a watcher, ...).

    Only the attribute sequences and the presence of the sprite marker are
    kept; grandchildren are never read.
    """
    scripts: Optional[List[Any]] = None
    variables: Optional[List[Any]] = None
    lists: Optional[List[Any]] = None
    script_comments: Optional[List[Any]] = None
    sounds: Optional[List[Any]] = None
    costumes: Optional[List[Any]] = None
    has_sprite_info: bool = False

    @classmethod
    def from_dict(cls, raw: Any, owner: str = "child") -> "ProjectChild":
        """Build a view from a decoded child. Non-mapping children carry nothing."""
        if not isinstance(raw, dict):
            return cls()

        values = {
            field_name: _optional_list(raw, attribute, owner)
            for attribute, field_name in _ATTRIBUTE_FIELDS.items()
        }
        return cls(has_sprite_info=ProjectFields.SPRITE_INFO in raw, **values)

    def attribute(self, name: str) -> Optional[List[Any]]:
        """Return the named attribute sequence, or None when absent or not queried."""
        field_name = _ATTRIBUTE_FIELDS.get(name)
        if field_name is None:
            return None
        return getattr(self, field_name)


@dataclass
class ProjectDocument(ProjectChild):
    """
    Root view of a project (the stage plus its children).

    ``raw`` is the decoded dictionary the view was built from; the analyzer
    attaches its metadata to it in place.
    """
    children: List[ProjectChild] = field(default_factory=list)
    saved_extensions: Optional[List[Any]] = None
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, raw: Any, owner: str = "project") -> "ProjectDocument":
        """
        Build a view over a decoded project.

        Raises:
            StructuralError: If the project is not a mapping, or ``children``,
                ``info``, ``info.savedExtensions`` or an attribute sequence is
                present with the wrong type.
        """
        if not isinstance(raw, dict):
            raise StructuralError(
                f"Project has type {type(raw).__name__}, expected dict"
            )

        root = ProjectChild.from_dict(raw, owner=owner)

        raw_children = _optional_list(raw, ProjectFields.CHILDREN, owner) or []
        children = [
            ProjectChild.from_dict(child, owner=f"child {index}")
            for index, child in enumerate(raw_children)
        ]

        saved_extensions = None
        info = raw.get(ProjectFields.INFO)
        if info is not None:
            if not isinstance(info, dict):
                raise StructuralError(
                    f"Project field 'info' has type {type(info).__name__}, expected dict",
                    field=ProjectFields.INFO,
                )
            saved_extensions = _optional_list(info, ProjectFields.SAVED_EXTENSIONS, "info")

        return cls(
            scripts=root.scripts,
            variables=root.variables,
            lists=root.lists,
            script_comments=root.script_comments,
            sounds=root.sounds,
            costumes=root.costumes,
            has_sprite_info=root.has_sprite_info,
            children=children,
            saved_extensions=saved_extensions,
            raw=raw,
        )
