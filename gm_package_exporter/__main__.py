#!/usr/bin/env python3
"""
GameMaker Local Package Exporter - CLI Entry Point
==================================================

Usage:
    python -m gm_package_exporter export -P ./MyGame -o MyPackage.yymps \
        -d "My Package" -i com.me.mypackage -p "Me" -v 1.0.0 -a "Scripts/**"
"""

import argparse
import sys
from pathlib import Path

from .errors import ExportError
from .exporter import prepare_export, export_package
from .project import PackageFields
from .project.constants import DEFAULT_PATTERN, DEFAULT_WORKERS
from .utils import save_json, console, print_header, print_error, print_warning, print_success, print_selection_table


def _pattern(value: str) -> str:
    """argparse type for selection patterns."""
    if not value.strip(" /"):
        raise argparse.ArgumentTypeError("pattern must not be blank")
    return value


# =============================================================================
# Subcommands
# =============================================================================

def cmd_export(args) -> int:
    """Export command - build a local package from a project."""
    project_path = args.project_path.resolve()
    package_fields = PackageFields(
        display_name=args.package_display_name,
        id=args.package_id,
        publisher=args.package_publisher_name,
        version=args.package_version,
    )
    
    print_header("GameMaker Local Package Exporter", f"Project: {project_path}\nPattern: {args.assets_pattern}")
    
    try:
        with console.status("[bold green]Reading project...[/bold green]"):
            selection = prepare_export(project_path, package_fields, args.assets_pattern)
        
        console.print("[green]Project detected![/green]")
        print_selection_table(
            selection.resources,
            selection.folders,
            len(selection.original.resources),
            len(selection.original.folders)
        )
        
        for table in selection.unfiltered_tables:
            print_warning(f"Table '{table}' references resources but is copied unfiltered")
        
        if not args.dry_run:
            console.print("\n[bold cyan]Staging and archiving package...[/bold cyan]")
        
        report = export_package(selection, args.output_file, args.workers, args.dry_run)
        
    except ExportError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130
    
    if args.report_out:
        save_json(report, args.report_out)
        console.print(f"[INFO] Saved: {args.report_out}")
    
    failed = report["failed_copies"]
    if failed:
        print_warning(f"{len(failed)} resource(s) could not be copied:")
        for res in failed[:5]:
            console.print(f"  - {res['name']} ({res['path']}): {res['error']}")
        if len(failed) > 5:
            console.print(f"  ... and {len(failed) - 5} more")
    
    if args.dry_run:
        print_warning("This was a DRY-RUN. No package was written.")
        return 0
    
    if failed and args.strict:
        print_error("Package written with missing resources (--strict)")
        return 1
    
    print_success(f"Local package exported in {report['output_file']}")
    return 0


# =============================================================================
# Main
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="GameMaker Local Package Exporter - Export part of a project as a local package",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    
    # --- EXPORT command ---
    export_parser = subparsers.add_parser("export", help="Export a local package")
    export_parser.add_argument("-P", "--project-path", type=Path, required=True,
                               help="Path of the project root")
    export_parser.add_argument("-a", "--assets-pattern", type=_pattern, default=DEFAULT_PATTERN,
                               metavar="GLOB",
                               help=f"Glob pattern of the assets to include (default: {DEFAULT_PATTERN})")
    export_parser.add_argument("-d", "--package-display-name", required=True,
                               help="Local package display name")
    export_parser.add_argument("-i", "--package-id", required=True,
                               help="Local package ID")
    export_parser.add_argument("-p", "--package-publisher-name", required=True,
                               help="Local package publisher name")
    export_parser.add_argument("-v", "--package-version", required=True,
                               help="Local package version")
    export_parser.add_argument("-o", "--output-file", type=Path, required=True,
                               help="Local package output file path (.yymps)")
    export_parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS,
                               help=f"Parallel resource copies (default: {DEFAULT_WORKERS})")
    export_parser.add_argument("--dry-run", action="store_true",
                               help="Show the selection without writing the package")
    export_parser.add_argument("--report-out", type=Path,
                               help="Save a JSON report of the export")
    export_parser.add_argument("--strict", action="store_true",
                               help="Fail if any resource could not be copied")
    export_parser.set_defaults(func=cmd_export)
    
    args = parser.parse_args(argv)
    
    if args.command is None:
        parser.print_help()
        return 0
    
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
