"""Writes small GameMaker projects to disk for tests."""

import json
from pathlib import Path

FOLDERS = [
    "folders/Scripts.yy",
    "folders/Scripts/Sub.yy",
    "folders/Rooms.yy",
]

RESOURCES = [
    # name, path, parent path
    ("scr_util", "scripts/scr_util/scr_util.yy", "folders/Scripts.yy"),
    ("foo", "scripts/foo/foo.yy", "folders/Scripts/Sub.yy"),
    ("rm_main", "rooms/rm_main/rm_main.yy", "folders/Rooms.yy"),
    ("rm_boot", "rooms/rm_boot/rm_boot.yy", "MyGame.yyp"),
]


def make_project(root: Path, trailing_commas: bool = True) -> Path:
    """Create a project under root and return its path."""
    root.mkdir(parents=True, exist_ok=True)
    
    document = {
        "resources": [{"id": {"name": n, "path": p}} for n, p, _ in RESOURCES],
        "Options": [{"name": "Main", "path": "options/main/options_main.yy"}],
        "RoomOrderNodes": [
            {"roomId": {"name": "rm_boot", "path": "rooms/rm_boot/rm_boot.yy"}},
            {"roomId": {"name": "rm_main", "path": "rooms/rm_main/rm_main.yy"}},
        ],
        "Folders": [{"folderPath": p, "name": p.split("/")[-1][:-3]} for p in FOLDERS],
        "AudioGroups": [],
        "TextureGroups": [],
        "IncludedFiles": [],
        "MetaData": {"IDEVersion": "2023.8.2.152"},
        "name": "MyGame",
    }
    text = json.dumps(document, indent=2)
    if trailing_commas:
        text = text.replace("}\n  ]", "},\n  ]")
    (root / "MyGame.yyp").write_text(text, encoding="utf-8")
    
    for name, path, parent in RESOURCES:
        resource_file = root / path
        resource_file.parent.mkdir(parents=True, exist_ok=True)
        resource = {
            "name": name,
            "parent": {"name": parent.split("/")[-1].split(".")[0], "path": parent},
        }
        resource_file.write_text(json.dumps(resource) + "\n", encoding="utf-8")
        (resource_file.parent / f"{name}.gml").write_text(f"// {name}\n", encoding="utf-8")
    
    return root
