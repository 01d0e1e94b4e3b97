"""Zip assembly of the normalized tree, followed by removal of the tree"""

import logging
import shutil
import zipfile
from pathlib import Path


logger = logging.getLogger(__name__)

ZIP_EPOCH = (1980, 1, 1, 0, 0, 0)
FILE_MODE = 0o100644
DIR_MODE = 0o040755


def _entry(arcname: str, mode: int) -> zipfile.ZipInfo:
    """ZipInfo with a fixed timestamp and permissions so archives are reproducible."""
    info = zipfile.ZipInfo(arcname, date_time=ZIP_EPOCH)
    info.external_attr = mode << 16
    if mode == DIR_MODE:
        info.external_attr |= 0x10      # MS-DOS directory flag
    else:
        info.compress_type = zipfile.ZIP_DEFLATED
    return info


def iter_tree(root: Path) -> list[Path]:
    """Return every path under root, parents before children, siblings in name order."""
    paths = []
    for p in sorted(root.iterdir(), key=lambda p: p.name):
        paths.append(p)
        if p.is_dir():
            paths += iter_tree(p)
    return paths


def write_archive(origin: Path, output: Path) -> list[str]:
    """Write origin into a zip at output, entries rooted at origin's name. Returns the entry names."""
    origin = Path(origin)
    root_name = origin.resolve().name
    names = []
    logger.info("Starting to compress files... (%s)", output)
    with zipfile.ZipFile(output, "w") as zf:
        for p in [origin] + iter_tree(origin):
            rel = Path(root_name) / p.relative_to(origin)
            if p.is_dir():
                arcname = f"{rel.as_posix()}/"
                zf.writestr(_entry(arcname, DIR_MODE), b"")
            else:
                arcname = rel.as_posix()
                zf.writestr(_entry(arcname, FILE_MODE), p.read_bytes())
            names.append(arcname)
    logger.info("Final zip file has been exported as %s", output)
    return names


def assemble_archive(origin: Path, output: Path) -> Path:
    """Archive origin into output, then delete origin once the archive is closed."""
    write_archive(origin, output)
    logger.info("Cleaning up %s", origin)
    shutil.rmtree(origin)
    return Path(output)
