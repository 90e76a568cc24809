"""
Export pipeline for the GameMaker local package exporter.

read -> build tree -> select -> flatten -> re-link -> stage -> archive
"""

import tempfile
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .packager import stage_package, write_archive
from .project import (
    PackageFields,
    PackageSummary,
    ProjectDescription,
    ResourceIdentity,
    build_tree,
    compute_package_summary,
    flatten_folders,
    flatten_resources,
    relink,
    select_tree,
    unfiltered_reference_tables,
)
from .project.constants import DEFAULT_PATTERN, DEFAULT_WORKERS, STAGING_PREFIX
from .reader import read_project


@dataclass
class ExportSelection:
    """Everything computed before anything is written."""
    project_path: Path
    pattern: str
    original: ProjectDescription
    description: ProjectDescription
    summary: PackageSummary
    resources: list[ResourceIdentity] = field(default_factory=list)
    folders: list[str] = field(default_factory=list)
    unfiltered_tables: list[str] = field(default_factory=list)


def prepare_export(
    project_path: Path,
    package_fields: PackageFields,
    pattern: str = DEFAULT_PATTERN
) -> ExportSelection:
    """
    Read a project and compute the package description for a selection.
    
    Args:
        project_path: The project root directory.
        package_fields: Package identity to stamp.
        pattern: Selection pattern over the asset tree.
        
    Returns:
        The computed selection; nothing is written.
    """
    original = read_project(project_path)
    
    tree = build_tree(original.folders, original.resources)
    selected_tree = select_tree(tree, pattern)
    
    resources = flatten_resources(selected_tree)
    folders = flatten_folders(selected_tree)
    
    description = relink(original, resources, folders, package_fields)
    
    return ExportSelection(
        project_path=project_path,
        pattern=pattern,
        original=original,
        description=description,
        summary=compute_package_summary(description),
        resources=resources,
        folders=folders,
        unfiltered_tables=unfiltered_reference_tables(original.document),
    )


def export_package(
    selection: ExportSelection,
    output_file: Path,
    workers: int = DEFAULT_WORKERS,
    dry_run: bool = False,
    show_progress: bool = True
) -> dict:
    """
    Write a prepared selection as a package file.
    
    The staging directory is temporary and always removed.
    
    Args:
        selection: Result of prepare_export().
        output_file: Package file to create.
        workers: Number of payload copy threads.
        dry_run: If True, write nothing.
        show_progress: Show the copy progress bar.
        
    Returns:
        A report dict.
    """
    copy_results: list[dict] = []
    
    if not dry_run:
        with tempfile.TemporaryDirectory(prefix=STAGING_PREFIX) as tmpdir:
            staging_root = Path(tmpdir)
            copy_results = stage_package(
                selection.project_path,
                staging_root,
                selection.description,
                selection.summary,
                selection.resources,
                workers,
                show_progress
            )
            write_archive(staging_root, output_file)
    
    failed = [r for r in copy_results if r["status"] != "copied"]
    
    return {
        "project": str(selection.project_path),
        "output_file": str(output_file),
        "pattern": selection.pattern,
        "dry_run": dry_run,
        "exported_at": datetime.now().isoformat(timespec='seconds'),
        "package": selection.summary.to_dict(),
        "total_resources_count": len(selection.original.resources),
        "total_folders_count": len(selection.original.folders),
        "selected_resources_count": len(selection.resources),
        "selected_folders_count": len(selection.folders),
        "copied_resources_count": len(copy_results) - len(failed),
        "failed_copies": failed,
        "unfiltered_tables": selection.unfiltered_tables,
    }
