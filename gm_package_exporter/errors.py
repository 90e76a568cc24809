"""
Error taxonomy for the GameMaker local package exporter.

Every failure of the export pipeline derives from ExportError so the CLI can
report it with a single handler.
"""


class ExportError(Exception):
    """Base class for all export failures."""


class ProjectNotFoundError(ExportError):
    """The project root does not exist or is not a directory."""


class MetadataFileNotFoundError(ExportError):
    """The project description (.yyp) or a resource's .yy file is missing."""


class MalformedPathError(ExportError):
    """A folder path does not have the 'folders/.../Name.yy' shape."""


class OrphanResourceError(ExportError):
    """A resource is parented at a folder that was never declared."""


class TreeConflictError(ExportError):
    """A folder and a resource claim the same name at the same level."""


class MissingSelectionError(ExportError):
    """The selection is empty although the project has content."""


class ArchiveWriteError(ExportError):
    """The package archive could not be written."""
