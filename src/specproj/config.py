"""Project layout names, loaded from environment variables and specproj.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

MANIFEST_FILE = "manifest.json"
SPECS_DIRECTORY_NAME = "specs"
CONCEPTS_DIRECTORY_NAME = "concepts"
SPEC_FILE_EXTENSION = ".spec"
CONCEPT_FILE_EXTENSION = ".cpt"
ENV_DIRECTORY_NAME = "env"
DEFAULT_ENV_DIR = "default"
DEFAULT_ENV_FILE_NAME = "default.properties"

_CONFIG_FILENAME = "specproj.toml"


@dataclass
class EnvLayout:
    """Where environment property files live inside a project."""

    dir_name: str = ENV_DIRECTORY_NAME
    default_name: str = DEFAULT_ENV_DIR
    default_file: str = DEFAULT_ENV_FILE_NAME


@dataclass
class ProjectLayout:
    """Marker file and well-known directory names of a project."""

    manifest_file: str = MANIFEST_FILE
    specs_dir: str = SPECS_DIRECTORY_NAME
    concepts_dir: str = CONCEPTS_DIRECTORY_NAME
    spec_extension: str = SPEC_FILE_EXTENSION
    concept_extension: str = CONCEPT_FILE_EXTENSION
    env: EnvLayout = field(default_factory=EnvLayout)

    @property
    def default_properties_path(self) -> Path:
        """Default properties file, relative to the project root."""
        return Path(self.env.dir_name) / self.env.default_name / self.env.default_file


def load_layout(config_path: Path | None = None) -> ProjectLayout:
    """Load the project layout from environment variables and optional specproj.toml.

    Priority: environment variables > specproj.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.specproj/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, Path.home() / ".specproj" / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    env_data = file_data.get("env", {})

    return ProjectLayout(
        manifest_file=os.getenv(
            "SPECPROJ_MANIFEST_FILE", file_data.get("manifest_file", MANIFEST_FILE)
        ),
        specs_dir=os.getenv("SPECPROJ_SPECS_DIR", file_data.get("specs_dir", SPECS_DIRECTORY_NAME)),
        concepts_dir=os.getenv(
            "SPECPROJ_CONCEPTS_DIR", file_data.get("concepts_dir", CONCEPTS_DIRECTORY_NAME)
        ),
        spec_extension=file_data.get("spec_extension", SPEC_FILE_EXTENSION),
        concept_extension=file_data.get("concept_extension", CONCEPT_FILE_EXTENSION),
        env=EnvLayout(
            dir_name=os.getenv("SPECPROJ_ENV_DIR", env_data.get("dir_name", ENV_DIRECTORY_NAME)),
            default_name=os.getenv(
                "SPECPROJ_DEFAULT_ENV", env_data.get("default_name", DEFAULT_ENV_DIR)
            ),
            default_file=os.getenv(
                "SPECPROJ_DEFAULT_ENV_FILE", env_data.get("default_file", DEFAULT_ENV_FILE_NAME)
            ),
        ),
    )
