"""
Block extraction from Scratch 2 script trees.

A script tree is a nest of lists. A list whose first entry is a string is a
block: the string is its identifier and the remaining entries are its
arguments, which may themselves be blocks or lists of blocks. A list led by
anything else is a plain container. The walk below visits blocks in preorder
using an explicit stack so that deeply nested input fails with a clear error
instead of exhausting the interpreter's recursion limit.
"""

from dataclasses import dataclass
from itertools import islice
from typing import Any, Dict, Iterator, List, Optional

from .attributes import flatten
from .constants import BlockConstants, ProjectFields, WalkDefaults
from .document import ProjectDocument
from .errors import DepthExceededError
from .frequency import frequency


@dataclass(frozen=True)
class WalkLimits:
    """
    Budget for a single script walk.

    max_depth: Maximum number of nested lists open at once
    max_nodes: Maximum number of lists visited in total
    """
    max_depth: int = WalkDefaults.MAX_DEPTH
    max_nodes: int = WalkDefaults.MAX_NODES


_EXHAUSTED = object()


def walk_blocks(stack: List[Any], limits: Optional[WalkLimits] = None) -> List[str]:
    """
    Collect block identifiers from a script forest in preorder.

    Args:
        stack: Sequence of script entries (usually the flattened "scripts")
        limits: Walk budget (default: WalkLimits())

    Returns:
        Block identifiers in the order encountered, duplicates included

    Raises:
        DepthExceededError: If nesting or total size exceeds the budget
    """
    limits = limits or WalkLimits()
    identifiers: List[str] = []
    pending: List[Iterator[Any]] = [iter(stack)]
    visited = 0

    while pending:
        entry = next(pending[-1], _EXHAUSTED)
        if entry is _EXHAUSTED:
            pending.pop()
            continue

        # Stray literals are not blocks
        if not isinstance(entry, list):
            continue

        visited += 1
        if visited > limits.max_nodes:
            raise DepthExceededError(
                f"Script walk visited more than {limits.max_nodes} lists",
                limit_name="max_nodes",
                limit=limits.max_nodes,
            )

        head = entry[0] if entry else None
        if not isinstance(head, str):
            children = iter(entry)
        else:
            identifiers.append(head)
            if head == BlockConstants.PROCEDURE_DEFINITION:
                continue
            children = islice(entry, 1, None)

        if len(pending) >= limits.max_depth:
            raise DepthExceededError(
                f"Script nesting exceeds {limits.max_depth} levels",
                limit_name="max_depth",
                limit=limits.max_depth,
            )
        pending.append(children)

    return identifiers


def extract_blocks(document: ProjectDocument, limits: Optional[WalkLimits] = None) -> Dict[str, Any]:
    """
    Extract every block used in the project's scripts.

    Args:
        document: Project view
        limits: Walk budget (default: WalkLimits())

    Returns:
        Dict with structure:
        {
            'count': int,        # total blocks, duplicates included
            'unique': int,       # distinct identifiers
            'id': list,          # identifiers in preorder
            'frequency': dict    # identifier -> occurrences, first-seen order
        }
    """
    identifiers = walk_blocks(flatten(document, ProjectFields.SCRIPTS), limits)
    tally = frequency(identifiers)

    return {
        "count": len(identifiers),
        "unique": len(tally),
        "id": identifiers,
        "frequency": tally,
    }
