"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"

# Hyphenated option names as declared by the CI action that drives a build.
ACTION_INPUTS = {
    "destination_directory": "destination-directory",
    "root_directory":        "root-directory",
    "zip_filename":          "zip-filename",
    "index_name":            "index-name",
    "version_code":          "version-code",
}


class Settings(BaseModel):
    app_name:              str = "mdpack"
    destination_directory: str = Field(default="dist",     description="Parent of the working tree and archive")
    root_directory:        str = Field(default="docs",     description="Source documentation tree")
    zip_filename:          str = Field(default="docs.zip", pattern=r"^[^/\\]+\.zip$", description="Archive file name")
    index_name:            str = Field(default="index",    min_length=1, description="Substring marking an index file")
    version_code: Optional[str] = Field(default=None,      description="Working directory name; zip stem when unset")
    layout:                str = Field(default="mirror",   pattern="^(mirror|promote)$", description="mirror or promote")
    hidden:      Optional[bool] = Field(default=None,      description="Emit 'hidden: false'; layout decides when unset")
    toc_start_tag:         str = Field(default='<details open markdown="block">', description="Generated TOC start line")
    toc_end_tag:           str = Field(default="</details>", description="Generated TOC end line")

    @property
    def working_dir(self) -> Path:
        """Intermediate tree, named by version_code or the archive stem."""
        return Path(self.destination_directory) / (self.version_code or Path(self.zip_filename).stem)

    @property
    def archive_path(self) -> Path:
        return Path(self.destination_directory) / self.zip_filename


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then INPUT_<OPTION> and MDPACK_<FIELD> env vars, then CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name, option in ACTION_INPUTS.items():
        if val := os.getenv(f"INPUT_{option.upper()}"):
            data[name] = val

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPACK_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
