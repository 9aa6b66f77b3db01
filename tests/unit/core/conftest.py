"""Shared fixtures for core unit tests"""

import pytest


MIXED_MD = """\
# Guide

Intro paragraph.

!!! note "Read me"
    Body of the note.

=== "Python"
    ```python
    print("hi")
    ```

=== "Shell"
    echo hi

- [x] 2024-01-01: Kickoff
- [ ] Release

## Details

Closing paragraph.
"""

FENCED_ONLY_MD = """\
```markdown
!!! warning "Not a block"
    still code
=== "Not a tab"
    still code
- [x] 2024-01-01: not a timeline
```
"""


@pytest.fixture(name="mixed_md")
def mixed_md_fixture():
    return MIXED_MD


@pytest.fixture(name="fenced_only_md")
def fenced_only_md_fixture():
    return FENCED_ONLY_MD
