"""specproj: locate marker-file projects and work with the files inside them.

Layout of a project:
    <root>/
    ├── manifest.json                  # Marker: its presence makes <root> a project
    ├── specs/                         # *.spec files, any depth
    ├── concepts/                      # *.cpt files, any depth
    └── env/
        └── default/
            └── default.properties     # Appended to by PropertyAppender
"""

from specproj.config import (
    CONCEPTS_DIRECTORY_NAME,
    DEFAULT_ENV_DIR,
    DEFAULT_ENV_FILE_NAME,
    ENV_DIRECTORY_NAME,
    MANIFEST_FILE,
    SPECS_DIRECTORY_NAME,
    EnvLayout,
    ProjectLayout,
    load_layout,
)
from specproj.errors import NotFoundError
from specproj.fs import FileSystem, LocalFileSystem, MemoryFileSystem
from specproj.locator import (
    ProjectLocator,
    ascend,
    get_project_root,
    get_project_root_from_spec_path,
)
from specproj.properties import (
    Property,
    PropertyAppender,
    append_properties,
    read_file_contents,
    save_file,
)
from specproj.resolver import (
    PathResolver,
    get_default_properties_file,
    get_dir_in_project,
    sub_directory_exists,
)
from specproj.scanner import FileScanner, dir_exists, file_exists, find_files_in_dir

__all__ = [
    "CONCEPTS_DIRECTORY_NAME",
    "DEFAULT_ENV_DIR",
    "DEFAULT_ENV_FILE_NAME",
    "ENV_DIRECTORY_NAME",
    "MANIFEST_FILE",
    "SPECS_DIRECTORY_NAME",
    "EnvLayout",
    "FileScanner",
    "FileSystem",
    "LocalFileSystem",
    "MemoryFileSystem",
    "NotFoundError",
    "PathResolver",
    "ProjectLayout",
    "ProjectLocator",
    "Property",
    "PropertyAppender",
    "append_properties",
    "ascend",
    "dir_exists",
    "file_exists",
    "find_files_in_dir",
    "get_default_properties_file",
    "get_dir_in_project",
    "get_project_root",
    "get_project_root_from_spec_path",
    "load_layout",
    "read_file_contents",
    "save_file",
    "sub_directory_exists",
]
