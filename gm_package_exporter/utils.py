"""
Utility functions for the GameMaker local package exporter.

Includes:
- JSON save/load helpers (GameMaker files are JSON5: trailing commas, comments)
- UI helpers
"""

import json
import json5
from pathlib import Path
from typing import Any
from rich.console import Console
from rich.table import Table
from rich.tree import Tree
from rich.panel import Panel

# Global console instance
console = Console()

def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))

def print_selection_table(resources: list, folders: list[str], total_resources: int, total_folders: int):
    """Print a summary table of the selection."""
    table = Table(title="Selection Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Selected", style="magenta")
    table.add_column("In project", style="dim")
    
    table.add_row("Resources", str(len(resources)), str(total_resources))
    table.add_row("Folders", str(len(folders)), str(total_folders))
    
    console.print(table)
    
    if resources:
        tree = Tree("[bold green]Sample Resources[/bold green]")
        for resource in resources[:10]:
            tree.add(f"[yellow]{resource.name}[/yellow] [dim]{resource.path}[/dim]")
        if len(resources) > 10:
            tree.add(f"[italic]... and {len(resources)-10} more[/italic]")
        console.print(tree)

def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")


def save_json(data: Any, path: Path) -> None:
    """
    Save data to a JSON file with pretty formatting.
    
    Args:
        data: The data to serialize.
        path: The output file path.
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def load_json(path: Path) -> Any:
    """
    Load data from a GameMaker JSON5 file (.yyp / .yy).
    
    Args:
        path: The input file path.
        
    Returns:
        The deserialized data.
        
    Raises:
        ValueError: If the file is not valid UTF-8 or not valid JSON5.
    """
    with open(path, 'r', encoding='utf-8-sig') as f:
        return json5.loads(f.read())
