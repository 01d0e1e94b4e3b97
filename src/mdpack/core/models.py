"""Data models shared by the classify, normalize, walk and archive steps"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class EntryKind(str, Enum):
    directory = "directory"
    markdown  = "markdown"
    other     = "other"


class Layout(str, Enum):
    mirror  = "mirror"      # every level copied; index renamed in place
    promote = "promote"     # root files skipped; index lifted out of its folder


class NormalizeOptions(BaseModel):
    """Per-document rewrite switches."""
    hidden:        bool = False     # emit 'hidden: false' in the injected block
    strip_toc:     bool = False
    toc_start_tag: str  = '<details open markdown="block">'
    toc_end_tag:   str  = "</details>"
    skip_blank_after_frontmatter: bool = False


class WalkPolicy(BaseModel):
    """Level gates and placement rules applied by the tree walker.

    index_min_level / file_min_level are inclusive depth thresholds (0 = root).
    index_target 'self' writes a renamed index into its own destination
    directory; 'parent' writes it one level up, beside that directory.
    """
    index_min_level: int = Field(default=0, ge=0)
    file_min_level:  int = Field(default=0, ge=0)
    index_target:    Literal["self", "parent"] = "self"
    prune_empty:     bool = False
    normalize:       NormalizeOptions = Field(default_factory=NormalizeOptions)

    @model_validator(mode="after")
    def _check_promotion_depth(self) -> "WalkPolicy":
        if self.index_target == "parent" and self.index_min_level < 1:
            raise ValueError("index_target 'parent' requires index_min_level >= 1")
        return self

    @classmethod
    def for_layout(
        cls,
        layout: Layout | str,
        hidden: bool | None = None,
        toc_start_tag: str | None = None,
        toc_end_tag: str | None = None,
        ) -> "WalkPolicy":
        """Build the preset policy for a layout, with optional normalizer overrides."""
        layout = Layout(layout)
        if layout is Layout.mirror:
            policy = cls()
        else:
            policy = cls(
                index_min_level=2,
                file_min_level=1,
                index_target="parent",
                prune_empty=True,
                normalize=NormalizeOptions(hidden=True, strip_toc=True, skip_blank_after_frontmatter=True),
            )
        updates = {"hidden": hidden, "toc_start_tag": toc_start_tag, "toc_end_tag": toc_end_tag}
        updates = {k: v for k, v in updates.items() if v is not None}
        if updates:
            policy = policy.model_copy(update={"normalize": policy.normalize.model_copy(update=updates)})
        return policy


@dataclass
class BuildResult:
    """Outcome of a pipeline run; not persisted."""
    archive_path: Path | None
    working_dir:  Path
    written:      list[tuple[Path, Path]] = field(default_factory=list)   # (source, destination)
