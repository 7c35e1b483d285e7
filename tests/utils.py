"""Helpers shared by the booksource tests."""

import shutil
import tempfile
from pathlib import Path

SAMPLE_DOCUMENT = """\
---
title: Sample
author: Jane Doe
---
# Introduction

Some *emphasis*, some **strong** text and `inline code`.
A second line of the same paragraph.

> A quoted line.

- first item
- second item
  - nested item

1. one
2. two

```python
print("hello")
```

---

See [the site](https://example.com "Example") and ![logo](logo.png).
"""


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def write_file(directory: Path, name: str, content: str) -> Path:
    """Write UTF-8 text to ``directory / name``, creating parent directories."""
    path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path
