"""Directory entry classification by name"""

from mdpack.core.models import EntryKind


MD_EXTENSION = ".md"


def classify(name: str) -> EntryKind:
    """Classify an entry from its name alone; a name without a dot is a directory."""
    if "." not in name:
        return EntryKind.directory
    if name.endswith(MD_EXTENSION):
        return EntryKind.markdown
    return EntryKind.other


def is_index_file(name: str, index_name: str) -> bool:
    """True for a markdown file whose name contains the index marker."""
    return classify(name) is EntryKind.markdown and index_name in name
