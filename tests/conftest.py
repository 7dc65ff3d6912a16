from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

TreeWriter = Callable[[dict[str, Any]], Path]


@pytest.fixture
def write_tree(tmp_path: Path) -> TreeWriter:
    """Materialise ``{relative_path: content}`` under tmp_path.

    dict/list content is written as JSON, str content verbatim, and ``None``
    creates an empty directory.
    """

    def _write(files: dict[str, Any]) -> Path:
        for rel, content in files.items():
            target = tmp_path / rel
            if content is None:
                target.mkdir(parents=True, exist_ok=True)
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, (dict, list)):
                target.write_text(json.dumps(content), encoding="utf-8")
            else:
                target.write_text(content, encoding="utf-8")
        return tmp_path

    return _write
