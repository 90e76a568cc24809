"""
Project description reading.

Locates the .yyp file of a GameMaker project and resolves each declared
resource's parent folder from its own .yy file.
"""

from pathlib import Path
from typing import Any

from .errors import MetadataFileNotFoundError, ProjectNotFoundError
from .project.constants import DESCRIPTION_SUFFIX, FOLDERS_KEY, RESOURCES_KEY
from .project.models import FolderDescriptor, ProjectDescription, ResourceIdentity, ResourceRecord
from .utils import load_json


def find_description_file(project_path: Path) -> Path:
    """
    Find the project description file in a project root.
    
    Raises:
        ProjectNotFoundError: If the root does not exist.
        MetadataFileNotFoundError: If no .yyp file is present.
    """
    if not project_path.exists() or not project_path.is_dir():
        raise ProjectNotFoundError(f"Project path {project_path} does not exist!")
    
    candidates = sorted(
        p for p in project_path.iterdir()
        if p.is_file() and p.name.endswith(DESCRIPTION_SUFFIX)
    )
    if not candidates:
        raise MetadataFileNotFoundError(f"Project's metadata file not found in {project_path}!")
    
    return candidates[0]


def _load_object(path: Path, label: str) -> dict:
    """Load a JSON5 file whose top-level value must be an object."""
    try:
        data = load_json(path)
    except ValueError as e:
        # Covers UnicodeDecodeError as well as JSON5 syntax errors
        raise MetadataFileNotFoundError(f"{label} is not valid JSON: {path.name} ({e})") from e
    
    if not isinstance(data, dict):
        raise MetadataFileNotFoundError(
            f"{label} must contain a JSON object, got {type(data).__name__}: {path.name}"
        )
    return data


def parse_resource_id(entry: Any) -> ResourceIdentity:
    """
    Read the identity of one 'resources' entry.
    
    Raises:
        MetadataFileNotFoundError: If the entry has no usable id.name / id.path.
    """
    resource_id = entry.get("id") if isinstance(entry, dict) else None
    if not isinstance(resource_id, dict):
        raise MetadataFileNotFoundError(f"Resource entry without an 'id' object: {entry!r}")
    
    name = resource_id.get("name")
    path = resource_id.get("path")
    if not isinstance(name, str) or not name or not isinstance(path, str) or not path:
        raise MetadataFileNotFoundError(f"Resource entry needs a non-empty id.name and id.path: {entry!r}")
    
    return ResourceIdentity(name=name, path=path)


def read_resource_parent(project_path: Path, resource_id: ResourceIdentity) -> str | None:
    """
    Read the parent folder path declared in a resource's .yy file.
    
    Returns:
        The folder path, or None when the resource sits directly under the
        project file.
    """
    resource_file = project_path / resource_id.path
    if not resource_file.is_file():
        raise MetadataFileNotFoundError(
            f"Resource file for '{resource_id.name}' not found: {resource_id.path}"
        )
    
    resource = _load_object(resource_file, f"Resource file for '{resource_id.name}'")
    
    parent = resource.get("parent") or {}
    if not isinstance(parent, dict):
        raise MetadataFileNotFoundError(
            f"Resource file for '{resource_id.name}' has a malformed 'parent': {resource_id.path}"
        )
    
    parent_path = parent.get("path")
    if parent_path is not None and not isinstance(parent_path, str):
        raise MetadataFileNotFoundError(
            f"Resource file for '{resource_id.name}' has a malformed 'parent.path': {resource_id.path}"
        )
    if not parent_path or parent_path.endswith(DESCRIPTION_SUFFIX):
        return None
    return parent_path


def read_project(project_path: Path) -> ProjectDescription:
    """
    Read and parse a project's description.
    
    Args:
        project_path: The project root directory.
        
    Returns:
        The parsed ProjectDescription.
    """
    description_file = find_description_file(project_path)
    document = _load_object(description_file, "Project's metadata file")
    
    resource_entries = document.get(RESOURCES_KEY, [])
    folder_entries = document.get(FOLDERS_KEY, [])
    for key, value in ((RESOURCES_KEY, resource_entries), (FOLDERS_KEY, folder_entries)):
        if not isinstance(value, list):
            raise MetadataFileNotFoundError(f"'{key}' in {description_file.name} must be a list")
    
    resources = []
    for entry in resource_entries:
        resource_id = parse_resource_id(entry)
        resources.append(ResourceRecord(
            id=resource_id,
            parent_folder_path=read_resource_parent(project_path, resource_id),
        ))
    
    folders = []
    for folder in folder_entries:
        if not isinstance(folder, dict):
            raise MetadataFileNotFoundError(f"Folder entry must be an object: {folder!r}")
        folders.append(FolderDescriptor(folder_path=folder.get("folderPath", "")))
    
    return ProjectDescription(
        file_name=description_file.name,
        document=document,
        resources=resources,
        folders=folders,
    )
