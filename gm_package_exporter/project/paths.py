"""
Folder path decomposition.

A folder path names its position in the asset browser hierarchy, e.g.
"folders/Scripts/Sub.yy" -> ["Scripts", "Sub"].
"""

from ..errors import MalformedPathError
from .constants import FOLDER_ROOT_MARKER, FOLDER_SUFFIX


def decompose_folder_path(folder_path: str) -> list[str]:
    """
    Split a folder path into its hierarchy segment names.
    
    The first segment must be the root marker and the last one must carry
    the folder suffix, which is stripped.
    
    Args:
        folder_path: A path like "folders/Scripts/Sub.yy".
        
    Returns:
        Segment names below the root marker.
        
    Raises:
        MalformedPathError: If the path does not have that shape.
    """
    if not isinstance(folder_path, str):
        raise MalformedPathError(f"Folder path must be a string, got {folder_path!r}")
    
    parts = folder_path.split("/")
    if len(parts) < 2:
        raise MalformedPathError(f"Folder path has no segments below '{FOLDER_ROOT_MARKER}': {folder_path}")
    if parts[0] != FOLDER_ROOT_MARKER:
        raise MalformedPathError(f"Folder path must start with '{FOLDER_ROOT_MARKER}/': {folder_path}")
    if not parts[-1].endswith(FOLDER_SUFFIX):
        raise MalformedPathError(f"Folder path must end with '{FOLDER_SUFFIX}': {folder_path}")
    
    segments = parts[1:]
    segments[-1] = segments[-1][:-len(FOLDER_SUFFIX)]
    
    if any(not s for s in segments):
        raise MalformedPathError(f"Folder path has an empty segment: {folder_path}")
    
    return segments


def compose_folder_path(prefix: str, name: str) -> str:
    """Join a traversal prefix and a segment name back into a folder path."""
    return f"{prefix}/{name}{FOLDER_SUFFIX}"
