"""
Metadata re-linking.

Filters every cross-reference table of a project description down to the
selected resources and folders so the exported package has no dangling
references, then stamps the package identity.
"""

import copy
from typing import Any, Iterable

from ..errors import MissingSelectionError
from .constants import (
    FOLDER_SUFFIX,
    FOLDERS_KEY,
    HANDLED_KEYS,
    IDE_VERSION_FIELD,
    METADATA_KEY,
    OPTIONS_KEY,
    PACKAGE_ID_FIELD,
    PACKAGE_NAME_FIELD,
    PACKAGE_PUBLISHER_FIELD,
    PACKAGE_TYPE,
    PACKAGE_TYPE_FIELD,
    PACKAGE_VERSION_FIELD,
    PASS_THROUGH_KEYS,
    RESOURCES_KEY,
    ROOM_ORDER_ID_KEY,
    ROOM_ORDER_KEY,
    SUMMARY_PACKAGE_TYPE,
)
from .models import PackageFields, PackageSummary, ProjectDescription, ResourceIdentity


def _identity(data: Any) -> ResourceIdentity | None:
    if not isinstance(data, dict):
        return None
    return ResourceIdentity.from_dict(data)


def relink(
    original: ProjectDescription,
    selected_resources: Iterable[ResourceIdentity],
    selected_folders: Iterable[str],
    package_fields: PackageFields
) -> ProjectDescription:
    """
    Build the package's project description from a selection.
    
    The original description is left untouched; a filtered copy is returned.
    Build option overrides are environment specific and are always dropped.
    
    Args:
        original: The source project description.
        selected_resources: Identities of the resources to keep.
        selected_folders: Folder paths to keep.
        package_fields: Package identity to stamp into MetaData.
        
    Returns:
        The filtered project description.
        
    Raises:
        MissingSelectionError: If a selection list is empty while the
            corresponding project list is not.
    """
    selected_ids = set(selected_resources)
    folder_set = set(selected_folders)
    
    if original.resources and not selected_ids:
        raise MissingSelectionError(
            f"No resources selected out of {len(original.resources)} in the project"
        )
    if original.folders and not folder_set:
        raise MissingSelectionError(
            f"No folders selected out of {len(original.folders)} in the project"
        )
    
    document = copy.deepcopy(original.document)
    
    document[RESOURCES_KEY] = [
        entry for entry in document.get(RESOURCES_KEY, [])
        if _identity(entry.get("id")) in selected_ids
    ]
    document[FOLDERS_KEY] = [
        folder for folder in document.get(FOLDERS_KEY, [])
        if folder.get("folderPath") in folder_set
    ]
    if ROOM_ORDER_KEY in document:
        document[ROOM_ORDER_KEY] = [
            node for node in document[ROOM_ORDER_KEY]
            if _identity(node.get(ROOM_ORDER_ID_KEY)) in selected_ids
        ]
    
    document[OPTIONS_KEY] = []
    
    metadata = dict(document.get(METADATA_KEY) or {})
    metadata[PACKAGE_TYPE_FIELD] = PACKAGE_TYPE
    metadata[PACKAGE_NAME_FIELD] = package_fields.display_name
    metadata[PACKAGE_ID_FIELD] = package_fields.id
    metadata[PACKAGE_PUBLISHER_FIELD] = package_fields.publisher
    metadata[PACKAGE_VERSION_FIELD] = package_fields.version
    document[METADATA_KEY] = metadata
    
    return ProjectDescription(
        file_name=original.file_name,
        document=document,
        resources=[r for r in original.resources if r.id in selected_ids],
        folders=[f for f in original.folders if f.folder_path in folder_set],
    )


def compute_package_summary(description: ProjectDescription) -> PackageSummary:
    """Derive the metadata.json record from a re-linked description."""
    metadata = description.document.get(METADATA_KEY) or {}
    return PackageSummary(
        package_id=metadata.get(PACKAGE_ID_FIELD, ""),
        display_name=metadata.get(PACKAGE_NAME_FIELD, ""),
        version=metadata.get(PACKAGE_VERSION_FIELD, ""),
        package_type=SUMMARY_PACKAGE_TYPE,
        ide_version=metadata.get(IDE_VERSION_FIELD, ""),
    )


def _references_resource(value: Any) -> bool:
    if isinstance(value, dict):
        path = value.get("path")
        if isinstance(value.get("name"), str) and isinstance(path, str) and path.endswith(FOLDER_SUFFIX):
            return True
        return any(_references_resource(v) for v in value.values())
    if isinstance(value, list):
        return any(_references_resource(v) for v in value)
    return False


def unfiltered_reference_tables(document: dict) -> list[str]:
    """
    List top-level tables that reference resources but are not re-linked.
    
    Such tables are copied into the package unchanged and may point at
    resources that were not selected.
    """
    return [
        key for key, value in document.items()
        if key not in HANDLED_KEYS
        and key not in PASS_THROUGH_KEYS
        and _references_resource(value)
    ]
