"""
Data model of a GameMaker project description and its resource tree.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Union


@dataclass(frozen=True)
class ResourceIdentity:
    """A resource's declared name and the path of its .yy file."""
    name: str
    path: str
    
    def to_dict(self) -> dict:
        return {"name": self.name, "path": self.path}
    
    @classmethod
    def from_dict(cls, data: dict) -> "ResourceIdentity":
        return cls(name=data.get("name", ""), path=data.get("path", ""))


@dataclass(frozen=True)
class ResourceRecord:
    """
    A resource declaration plus the folder it lives under.
    
    parent_folder_path is None for resources parented directly at the
    project file (they live at the tree root).
    """
    id: ResourceIdentity
    parent_folder_path: str | None


@dataclass(frozen=True)
class FolderDescriptor:
    folder_path: str


@dataclass(frozen=True)
class ResourceTerminal:
    """Leaf of the resource tree."""
    id: ResourceIdentity
    kind: str = "resource"


# Keys are segment names, values are sub-trees (folders) or terminals
TreeNode = Dict[str, Union["TreeNode", ResourceTerminal]]


def is_terminal(node: Any) -> bool:
    return isinstance(node, ResourceTerminal)


@dataclass(frozen=True)
class PackageFields:
    """Package identity supplied by the user."""
    display_name: str
    id: str
    publisher: str
    version: str


@dataclass(frozen=True)
class PackageSummary:
    """The compact metadata.json record of a package."""
    package_id: str
    display_name: str
    version: str
    package_type: str
    ide_version: str
    
    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class ProjectDescription:
    """
    A parsed project description.
    
    document is the raw .yyp content; resources and folders are its typed
    view, with each resource's parent folder resolved from its .yy file.
    """
    file_name: str
    document: dict
    resources: list[ResourceRecord] = field(default_factory=list)
    folders: list[FolderDescriptor] = field(default_factory=list)
