"""Recursive mirroring of a documentation tree with index renaming and level gates"""

import logging
from pathlib import Path

from mdpack.core.classify import MD_EXTENSION, classify, is_index_file
from mdpack.core.frontmatter import normalize
from mdpack.core.models import EntryKind, WalkPolicy


logger = logging.getLogger(__name__)


def _copy_markdown(src: Path, dest: Path, policy: WalkPolicy) -> None:
    """Read, normalize and write a single markdown file."""
    text = normalize(src.read_text(encoding="utf-8-sig"), policy.normalize, source=str(src))
    dest.write_text(text, encoding="utf-8")


def _index_destination(origin: Path, destination: Path, policy: WalkPolicy) -> Path:
    """Return where the index file of origin lands: <origin name>.md in destination or its parent."""
    target_dir = destination.parent if policy.index_target == "parent" else destination
    return target_dir / f"{origin.name}{MD_EXTENSION}"


def walk_tree(
    origin: Path,
    destination: Path,
    index_name: str,
    policy: WalkPolicy = None,
    level: int = 0,
    ) -> list[tuple[Path, Path]]:
    """Mirror origin into the existing destination directory; return (source, written) pairs.

    Entries are visited in name order. Directories are recreated and descended
    into with level + 1; markdown files are normalized on the way. Index files
    are renamed after their directory. Anything else is skipped. Filesystem
    errors propagate to the caller.
    """
    policy = policy or WalkPolicy()
    origin = Path(origin).resolve()
    destination = Path(destination)
    logger.info("Copying directory %s to %s", origin, destination)

    written: list[tuple[Path, Path]] = []
    for src in sorted(origin.iterdir(), key=lambda p: p.name):
        kind = classify(src.name)

        if kind is EntryKind.directory:
            sub = destination / src.name
            sub.mkdir()
            written += walk_tree(src, sub, index_name, policy, level + 1)
            if policy.prune_empty and not any(sub.iterdir()):
                logger.info("Removing empty directory %s", sub)
                sub.rmdir()

        elif is_index_file(src.name, index_name) and level >= policy.index_min_level:
            dest = _index_destination(origin, destination, policy)
            logger.info("Renaming index file %s and copying to %s", src, dest)
            _copy_markdown(src, dest, policy)
            written.append((src, dest))

        elif kind is EntryKind.markdown and not is_index_file(src.name, index_name) and level >= policy.file_min_level:
            dest = destination / src.name
            logger.info("Copying file %s to %s", src, dest)
            _copy_markdown(src, dest, policy)
            written.append((src, dest))

    return written
