"""Front matter rewriting: strip the source header, drop generated TOC, inject title/excerpt"""

import logging
from typing import Any

import yaml

from mdpack.core.models import NormalizeOptions


logger = logging.getLogger(__name__)

FRONTMATTER_TAG = "---"
TOC_HEADING = "table of contents"


def strip_frontmatter(text: str, skip_blank: bool = False, source: str = "<text>") -> str:
    """Return text without its leading front matter block.

    Only a document whose first characters are the delimiter is touched. When
    no closing delimiter follows, the block is taken to end at line 1, so the
    first content line is lost along with the opening delimiter.
    """
    if not text.startswith(FRONTMATTER_TAG):
        return text

    lines = text.split("\n")
    end_idx = 1
    for i, line in enumerate(lines):
        if line == FRONTMATTER_TAG and i != 0:
            end_idx = i
            break
    else:
        logger.warning("Unterminated front matter in %s; dropping its first line", source)

    start = end_idx + 1
    if skip_blank and start < len(lines) and not lines[start].strip():
        start += 1
    return "\n".join(lines[start:])


def strip_generated_toc(text: str, start_tag: str, end_tag: str) -> str:
    """Remove the lines from start_tag through end_tag when both appear as whole lines, in order."""
    lines = text.split("\n")
    try:
        start = lines.index(start_tag)
        end = lines.index(end_tag, start + 1)
    except ValueError:
        return text
    return "\n".join(lines[:start] + lines[end + 1:])


def extract_heading(text: str) -> str:
    """Return the first heading line that is not a table of contents, minus a leading '# '."""
    for line in text.split("\n"):
        if line.startswith("#") and TOC_HEADING not in line.lower():
            return line[2:] if line.startswith("# ") else line
    return ""


def build_frontmatter(heading: str, hidden: bool = False) -> str:
    """Render the injected front matter block, closed and followed by a blank line.

    Values go through yaml.safe_dump, so an empty heading is written as '' and
    headings YAML would misread ('Step 1: install', 'yes', '42') are quoted.
    """
    fm: dict[str, Any] = {"title": heading, "excerpt": heading}
    if hidden:
        fm["hidden"] = False
    header = yaml.safe_dump(fm, default_flow_style=False, allow_unicode=True, sort_keys=False, width=2**16)
    return f"{FRONTMATTER_TAG}\n{header}{FRONTMATTER_TAG}\n\n"


def normalize(text: str, options: NormalizeOptions = None, source: str = "<text>") -> str:
    """Replace a document's front matter with a title/excerpt block derived from its first heading."""
    options = options or NormalizeOptions()
    body = strip_frontmatter(text, options.skip_blank_after_frontmatter, source)
    if options.strip_toc:
        body = strip_generated_toc(body, options.toc_start_tag, options.toc_end_tag)
    return build_frontmatter(extract_heading(body), options.hidden) + body
