"""
Package staging and archiving.

Writes the package documents into a staging directory, copies the payload of
every selected resource next to them and zips the result.
"""

import shutil
import zipfile
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path, PurePosixPath
from tqdm import tqdm

from .errors import ArchiveWriteError
from .project.constants import DEFAULT_WORKERS, SUMMARY_FILE_NAME
from .project.models import PackageSummary, ProjectDescription, ResourceIdentity
from .utils import save_json


def resource_directory(resource: ResourceIdentity) -> str:
    """Directory (relative to the project root) holding a resource's files."""
    return str(PurePosixPath(resource.path).parent)


def _copy_resource(src: Path, dst: Path, resource: ResourceIdentity) -> dict:
    """Helper to copy a single resource directory, safe for threads."""
    res = {"name": resource.name, "path": resource.path, "status": "failed", "error": None}
    
    try:
        if not src.is_dir():
            res["error"] = "Source directory not found"
            return res
        
        shutil.copytree(src, dst, dirs_exist_ok=True)
        res["status"] = "copied"
        return res
        
    except (OSError, shutil.Error) as e:
        res["error"] = str(e)
        return res


def copy_payloads(
    project_path: Path,
    staging_root: Path,
    resources: list[ResourceIdentity],
    workers: int = DEFAULT_WORKERS,
    show_progress: bool = True
) -> list[dict]:
    """
    Copy the directory of every resource into the staging root.
    
    Copies are submitted in the order of `resources` and each one is
    independent; a failed copy is reported in its result, never raised.
    Resources sharing a directory are copied once.
    
    Args:
        project_path: Project root to copy from.
        staging_root: Staging directory to copy into.
        resources: Selected resource identities.
        workers: Number of copy threads.
        show_progress: Show a tqdm progress bar.
        
    Returns:
        One result dict per resource, in input order.
    """
    results: list[dict | None] = [None] * len(resources)
    scheduled: dict[str, int] = {}
    shared: list[tuple[int, int]] = []
    
    # Create destination directories sequentially before submitting threads
    for i, resource in enumerate(resources):
        rel_dir = resource_directory(resource)
        if rel_dir == ".":
            results[i] = {"name": resource.name, "path": resource.path, "status": "failed",
                          "error": "Resource has no directory of its own"}
            continue
        if rel_dir in scheduled:
            shared.append((i, scheduled[rel_dir]))
            continue
        scheduled[rel_dir] = i
        (staging_root / rel_dir).mkdir(parents=True, exist_ok=True)
    
    with ThreadPoolExecutor(max_workers=max(1, workers)) as executor:
        futures = {
            executor.submit(
                _copy_resource,
                project_path / rel_dir,
                staging_root / rel_dir,
                resources[i]
            ): i for rel_dir, i in scheduled.items()
        }
        
        with tqdm(total=len(futures), unit="resource", disable=not show_progress) as pbar:
            for future in as_completed(futures):
                res = future.result()
                results[futures[future]] = res
                if res["status"] != "copied":
                    tqdm.write(f"[ERROR] {res['error']}: {res['path']}")
                pbar.update(1)
    
    for i, owner in shared:
        results[i] = {**results[owner], "name": resources[i].name, "path": resources[i].path}
    
    return results


def stage_package(
    project_path: Path,
    staging_root: Path,
    description: ProjectDescription,
    summary: PackageSummary,
    resources: list[ResourceIdentity],
    workers: int = DEFAULT_WORKERS,
    show_progress: bool = True
) -> list[dict]:
    """
    Assemble the package contents in a staging directory.
    
    Writes the filtered description under its original file name, the
    metadata.json summary and one payload directory per resource.
    
    Returns:
        Per-resource copy results (see copy_payloads).
    """
    staging_root.mkdir(parents=True, exist_ok=True)
    save_json(description.document, staging_root / description.file_name)
    save_json(summary.to_dict(), staging_root / SUMMARY_FILE_NAME)
    
    return copy_payloads(project_path, staging_root, resources, workers, show_progress)


def write_archive(staging_root: Path, output_file: Path) -> Path:
    """
    Zip a staging directory into a single package file.
    
    Archive member names are relative to the staging root. The archive is
    written to a temporary file next to output_file and moved into place
    only once complete, so a failed write leaves no partial package.
    
    Raises:
        ArchiveWriteError: On any I/O failure.
    """
    partial_file = output_file.with_name(f".{output_file.name}.partial")
    
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(partial_file, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for path in sorted(staging_root.rglob("*")):
                if path.is_file():
                    archive.write(path, path.relative_to(staging_root).as_posix())
        partial_file.replace(output_file)
    except OSError as e:
        try:
            partial_file.unlink(missing_ok=True)
        except OSError:
            pass  # Parent directory could not be created
        raise ArchiveWriteError(f"Failed to write package {output_file}: {e}") from e
    
    return output_file
