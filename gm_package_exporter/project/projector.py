"""
Flatten a (pruned) resource tree back into description lists.
"""

from .constants import FOLDER_ROOT_MARKER
from .models import ResourceIdentity, TreeNode, is_terminal
from .paths import compose_folder_path


def flatten_resources(tree: TreeNode) -> list[ResourceIdentity]:
    """Collect every resource identity in depth-first order."""
    result = []
    
    for node in tree.values():
        if is_terminal(node):
            result.append(node.id)
        else:
            result.extend(flatten_resources(node))
    
    return result


def flatten_folders(tree: TreeNode, prefix: str = FOLDER_ROOT_MARKER) -> list[str]:
    """
    Collect the folder path of every folder node in depth-first order.
    
    Empty folders are included; the root itself is not.
    
    Args:
        tree: Root (or sub-tree) to walk.
        prefix: Path of the node being walked, starting at the root marker.
        
    Returns:
        Folder paths like "folders/Scripts/Sub.yy".
    """
    result = []
    
    for name, node in tree.items():
        if is_terminal(node):
            continue
        
        current_path = f"{prefix}/{name}"
        result.append(compose_folder_path(prefix, name))
        result.extend(flatten_folders(node, current_path))
    
    return result
