"""
GameMaker Local Package Exporter
================================

A command-line tool that exports a selectable part of a GameMaker project
as a local package (.yymps), keeping the package's project metadata
consistent with the selection.
"""

__version__ = "1.0.0"

from .exporter import prepare_export, export_package, ExportSelection
from .reader import read_project
from .packager import stage_package, write_archive
from .utils import save_json, load_json

__all__ = [
    "prepare_export",
    "export_package",
    "ExportSelection",
    "read_project",
    "stage_package",
    "write_archive",
    "save_json",
    "load_json",
]
