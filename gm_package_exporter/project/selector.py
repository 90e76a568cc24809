"""
Glob-style selection over the resource tree.

Patterns are matched against segment paths below the root marker, e.g.
"Scripts/Sub/foo". Supported syntax:
- literal segments ("Scripts")
- wildcards inside a segment ("Scr*", "obj_?", "[ab]*")
- "*" as a whole segment matches exactly one level
- "**" matches zero or more levels

A node is selected when the pattern matches its own path or the path of one
of its ancestors, so a matched folder carries its whole sub-tree. Folders
above a selected node are kept to preserve reachability.
"""

from fnmatch import fnmatchcase

from .models import TreeNode, is_terminal

RECURSIVE_WILDCARD = "**"


def parse_pattern(pattern: str) -> list[str]:
    """Split a selection pattern into segments, ignoring empty ones."""
    return [s for s in pattern.replace("\\", "/").split("/") if s]


def _closure(states: set[int], segments: list[str]) -> set[int]:
    """Expand states across '**' segments, which may match nothing."""
    result = set()
    for i in states:
        while True:
            result.add(i)
            if i < len(segments) and segments[i] == RECURSIVE_WILDCARD:
                i += 1
            else:
                break
    return result


def _advance(states: set[int], name: str, segments: list[str]) -> set[int]:
    """Consume one path segment from every live state."""
    next_states = set()
    for i in _closure(states, segments):
        if i >= len(segments):
            continue
        seg = segments[i]
        if seg == RECURSIVE_WILDCARD:
            next_states.add(i)
        elif fnmatchcase(name, seg):
            next_states.add(i + 1)
    return next_states


def _accepts(states: set[int], segments: list[str]) -> bool:
    return len(segments) in _closure(states, segments)


def copy_tree(tree: TreeNode) -> TreeNode:
    """Copy the folder mappings of a tree; terminals are immutable and shared."""
    return {
        name: node if is_terminal(node) else copy_tree(node)
        for name, node in tree.items()
    }


def _select(tree: TreeNode, states: set[int], segments: list[str]) -> TreeNode:
    result: TreeNode = {}
    
    for name, node in tree.items():
        next_states = _advance(states, name, segments)
        if not next_states:
            continue
        
        if _accepts(next_states, segments):
            result[name] = node if is_terminal(node) else copy_tree(node)
            continue
        
        if is_terminal(node):
            continue
        
        subtree = _select(node, next_states, segments)
        if subtree:
            result[name] = subtree
    
    return result


def select_tree(tree: TreeNode, pattern: str) -> TreeNode:
    """
    Prune a tree to the nodes matching a selection pattern.
    
    The input tree is never modified. A pattern matching nothing yields an
    empty root.
    
    Args:
        tree: Root of the resource tree.
        pattern: Glob-style selection pattern.
        
    Returns:
        A new, pruned tree.
    """
    segments = parse_pattern(pattern)
    if not segments:
        return {}
    return _select(tree, {0}, segments)
