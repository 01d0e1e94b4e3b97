"""Pipeline step functions: pre-clean, convert, and archive orchestration"""

import logging
import shutil
from pathlib import Path

from mdpack.config import Settings
from mdpack.core.archive import assemble_archive
from mdpack.core.models import BuildResult, WalkPolicy
from mdpack.core.walk import walk_tree


logger = logging.getLogger(__name__)


def policy_from_settings(settings: Settings) -> WalkPolicy:
    """Build the walk policy for the configured layout and normalizer overrides."""
    return WalkPolicy.for_layout(
        settings.layout,
        hidden=settings.hidden,
        toc_start_tag=settings.toc_start_tag,
        toc_end_tag=settings.toc_end_tag,
    )


def clean_outputs(*paths: Path) -> None:
    """Delete leftovers of a previous run (directory trees or files) if present."""
    for p in paths:
        if p.is_dir():
            logger.info("Removing stale directory %s", p)
            shutil.rmtree(p)
        elif p.exists():
            logger.info("Removing stale file %s", p)
            p.unlink()


def check_disjoint(root: Path, working_dir: Path) -> None:
    """Refuse a working tree that is, contains, or lies inside the source tree."""
    root, work = Path(root).resolve(), Path(working_dir).resolve()
    if work == root or root in work.parents or work in root.parents:
        raise ValueError(f"Working directory {working_dir} overlaps root directory {root}")


def run_convert(settings: Settings, working_dir: Path = None) -> BuildResult:
    """Rebuild the normalized tree from scratch without archiving it."""
    working_dir = Path(working_dir or settings.working_dir)
    check_disjoint(Path(settings.root_directory), working_dir)
    clean_outputs(working_dir)
    working_dir.mkdir(parents=True)
    written = walk_tree(
        Path(settings.root_directory), working_dir, settings.index_name, policy_from_settings(settings),
    )
    return BuildResult(archive_path=None, working_dir=working_dir, written=written)


def run_build(settings: Settings) -> BuildResult:
    """Run the full pipeline: clean -> convert -> archive.

    The working tree is removed only after the archive has been closed; on any
    error both the partial tree and the exception are left to the caller.
    """
    check_disjoint(Path(settings.root_directory), settings.working_dir)
    clean_outputs(settings.archive_path)
    result = run_convert(settings)
    result.archive_path = assemble_archive(result.working_dir, settings.archive_path)
    return result
