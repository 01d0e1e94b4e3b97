"""Root test configuration: isolated working directory, environment and a sample docs tree"""

import os
from pathlib import Path

import pytest


_ENV_PREFIXES = ("MDPACK_", "INPUT_")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test from tmp_path with no config env vars or CI markers inherited."""
    for name in list(os.environ):
        if name.startswith(_ENV_PREFIXES):
            monkeypatch.delenv(name)
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.chdir(tmp_path)


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture(name="docs_tree")
def docs_tree_fixture(tmp_path):
    """A three-level documentation tree.

        docs/
          index.md                 # Docs Home
          logo.png
          guides/
            index.md               # Guides
            setup.md               (front matter + generated TOC)
            advanced/
              index.md             # Advanced
              tuning.md
          assets/
            diagram.svg
    """
    root = tmp_path / "docs"
    write(root / "index.md", "# Docs Home\n\nWelcome.\n")
    write(root / "logo.png", "not really a png")
    write(root / "guides" / "index.md", "---\nlayout: default\n---\n# Guides\n\nAll guides.\n")
    write(root / "guides" / "setup.md", (
        "---\n"
        "title: Old\n"
        "nav_order: 2\n"
        "---\n"
        "\n"
        '<details open markdown="block">\n'
        "  <summary>\n"
        "    Table of contents\n"
        "  </summary>\n"
        "# Hidden TOC heading\n"
        "</details>\n"
        "# Setup\n"
        "\n"
        "Install it.\n"
    ))
    write(root / "guides" / "advanced" / "index.md", "# Advanced\n")
    write(root / "guides" / "advanced" / "tuning.md", "# Tuning\n\nKnobs.\n")
    write(root / "assets" / "diagram.svg", "<svg/>")
    return root
