"""
Resource tree construction.

Rebuilds the asset browser hierarchy from the flat folder and resource
declarations of a project description.
"""

from typing import Iterable

from ..errors import OrphanResourceError, TreeConflictError
from .models import FolderDescriptor, ResourceRecord, ResourceTerminal, TreeNode, is_terminal
from .paths import decompose_folder_path


def build_tree(
    folders: Iterable[FolderDescriptor],
    resources: Iterable[ResourceRecord]
) -> TreeNode:
    """
    Build the nested resource tree.
    
    Folders are created first, in any order, and re-declaring a folder is a
    no-op. Resources are then attached under their parent folder, which must
    already exist. Two resources with the same name under the same folder
    overwrite one another (last write wins).
    
    Args:
        folders: Folder declarations.
        resources: Resource declarations.
        
    Returns:
        The root mapping of the tree.
        
    Raises:
        MalformedPathError: If a folder path is malformed.
        OrphanResourceError: If a resource's parent folder is not declared.
        TreeConflictError: If a folder and a resource share a name.
    """
    root: TreeNode = {}
    
    for folder in folders:
        current = root
        for segment in decompose_folder_path(folder.folder_path):
            child = current.get(segment)
            if child is None:
                child = {}
                current[segment] = child
            elif is_terminal(child):
                raise TreeConflictError(
                    f"Folder '{folder.folder_path}' runs through resource '{child.id.name}'"
                )
            current = child
    
    for record in resources:
        current = root
        if record.parent_folder_path is not None:
            for segment in decompose_folder_path(record.parent_folder_path):
                child = current.get(segment)
                if child is None or is_terminal(child):
                    raise OrphanResourceError(
                        f"Resource '{record.id.name}' ({record.id.path}) is parented at "
                        f"undeclared folder '{record.parent_folder_path}'"
                    )
                current = child
        
        existing = current.get(record.id.name)
        if existing is not None and not is_terminal(existing):
            raise TreeConflictError(
                f"Resource '{record.id.name}' has the same name as a folder under "
                f"'{record.parent_folder_path}'"
            )
        current[record.id.name] = ResourceTerminal(id=record.id)
    
    return root
