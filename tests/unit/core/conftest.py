"""Shared fixtures for core unit tests"""

import pytest

from mdpack.core.models import NormalizeOptions, WalkPolicy


SAMPLE_MD = """\
---
title: Old Title
nav_order: 3
---

# Getting Started

Install the package.

## Next steps
"""

TOC_MD = """\
Intro line.
<details open markdown="block">
  <summary>
    Table of contents
  </summary>
1. TOC
{:toc}
</details>
# Real Heading

Body.
"""


@pytest.fixture(name="promote_options")
def promote_options_fixture() -> NormalizeOptions:
    return WalkPolicy.for_layout("promote").normalize


@pytest.fixture(name="sample_md")
def sample_md_fixture() -> str:
    return SAMPLE_MD


@pytest.fixture(name="toc_md")
def toc_md_fixture() -> str:
    return TOC_MD
