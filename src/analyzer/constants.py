"""
Constants for the Scratch project analyzer.

This module centralizes the field names, reserved keys and traversal
defaults used throughout the extraction code.
"""


class MetaKeys:
    """Keys of the metadata object attached to an analyzed project."""

    # Reserved top-level key the metadata is stored under
    META = "_meta"

    SCRIPTS = "scripts"
    VARIABLES = "variables"
    LISTS = "lists"
    COMMENTS = "comments"
    SOUNDS = "sounds"
    COSTUMES = "costumes"
    SPRITES = "sprites"
    BLOCKS = "blocks"
    EXTENSIONS = "extensions"

    # Serialization order of the metadata object
    ORDER = (
        SCRIPTS,
        VARIABLES,
        LISTS,
        COMMENTS,
        SOUNDS,
        COSTUMES,
        SPRITES,
        BLOCKS,
        EXTENSIONS,
    )


class ProjectFields:
    """Field names read from a Scratch 2 project document."""

    CHILDREN = "children"
    INFO = "info"
    SAVED_EXTENSIONS = "savedExtensions"
    EXTENSION_NAME = "extensionName"
    SPRITE_INFO = "spriteInfo"

    SCRIPTS = "scripts"
    VARIABLES = "variables"
    LISTS = "lists"
    SCRIPT_COMMENTS = "scriptComments"
    SOUNDS = "sounds"
    COSTUMES = "costumes"

    # Attribute sequences that may appear on the stage and on each child
    ATTRIBUTES = (
        SCRIPTS,
        VARIABLES,
        LISTS,
        SCRIPT_COMMENTS,
        SOUNDS,
        COSTUMES,
    )


class BlockConstants:
    """Block identifiers with special handling in the script walk."""

    # Trailing entries of a procedure definition are parameter declarations
    PROCEDURE_DEFINITION = "procDef"


class WalkDefaults:
    """Default budget for the script walk."""

    MAX_DEPTH = 1000
    MAX_NODES = 1_000_000


# (metadata key, project attribute, id field, hash field)
EXTRACTION_TABLE = (
    (MetaKeys.SCRIPTS, ProjectFields.SCRIPTS, None, None),
    (MetaKeys.VARIABLES, ProjectFields.VARIABLES, "name", None),
    (MetaKeys.LISTS, ProjectFields.LISTS, "listName", None),
    (MetaKeys.COMMENTS, ProjectFields.SCRIPT_COMMENTS, None, None),
    (MetaKeys.SOUNDS, ProjectFields.SOUNDS, "soundName", "md5"),
    (MetaKeys.COSTUMES, ProjectFields.COSTUMES, "costumeName", "baseLayerMD5"),
)
