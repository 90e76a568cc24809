"""
Project model for the GameMaker local package exporter.

Provides:
- Folder path decomposition
- Resource tree building, selection and flattening
- Metadata re-linking
"""

from .models import (
    ResourceIdentity,
    ResourceRecord,
    FolderDescriptor,
    ResourceTerminal,
    TreeNode,
    PackageFields,
    PackageSummary,
    ProjectDescription,
)
from .paths import decompose_folder_path, compose_folder_path
from .tree import build_tree
from .selector import select_tree
from .projector import flatten_resources, flatten_folders
from .relink import relink, compute_package_summary, unfiltered_reference_tables

__all__ = [
    "ResourceIdentity",
    "ResourceRecord",
    "FolderDescriptor",
    "ResourceTerminal",
    "TreeNode",
    "PackageFields",
    "PackageSummary",
    "ProjectDescription",
    "decompose_folder_path",
    "compose_folder_path",
    "build_tree",
    "select_tree",
    "flatten_resources",
    "flatten_folders",
    "relink",
    "compute_package_summary",
    "unfiltered_reference_tables",
]
