"""Count sprites among the project's children."""

from typing import Dict

from .document import ProjectDocument


def count_sprites(document: ProjectDocument) -> Dict[str, int]:
    """
    Count children carrying the sprite marker.

    Presence of the marker is enough, whatever its value. Other children
    (watchers, list monitors) are skipped.
    """
    count = sum(1 for child in document.children if child.has_sprite_info)
    return {"count": count}
