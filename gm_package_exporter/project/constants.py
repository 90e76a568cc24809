"""
GameMaker project format constants.
"""

# Folder paths look like "folders/Scripts/Sub.yy"
FOLDER_ROOT_MARKER = "folders"
FOLDER_SUFFIX = ".yy"

# Project description file (one per project root)
DESCRIPTION_SUFFIX = ".yyp"

# Description tables
RESOURCES_KEY = "resources"
FOLDERS_KEY = "Folders"
ROOM_ORDER_KEY = "RoomOrderNodes"
ROOM_ORDER_ID_KEY = "roomId"
OPTIONS_KEY = "Options"
METADATA_KEY = "MetaData"

# Tables whose entries never reference a resource identity
PASS_THROUGH_KEYS = {
    "AudioGroups",
    "TextureGroups",
    "IncludedFiles",
    "configs",
    "LibraryEmitters",
}

# Keys the re-linker rewrites itself
HANDLED_KEYS = {
    RESOURCES_KEY,
    FOLDERS_KEY,
    ROOM_ORDER_KEY,
    OPTIONS_KEY,
    METADATA_KEY,
}

# MetaData fields
PACKAGE_TYPE_FIELD = "PackageType"
PACKAGE_NAME_FIELD = "PackageName"
PACKAGE_ID_FIELD = "PackageID"
PACKAGE_PUBLISHER_FIELD = "PackagePublisher"
PACKAGE_VERSION_FIELD = "PackageVersion"
IDE_VERSION_FIELD = "IDEVersion"

PACKAGE_TYPE = "Asset"          # Stamped into the description
SUMMARY_PACKAGE_TYPE = "asset"  # Written to metadata.json

# Package layout
SUMMARY_FILE_NAME = "metadata.json"
STAGING_PREFIX = "gm_local_package_exporter"
DEFAULT_WORKERS = 8
DEFAULT_PATTERN = "*"
