from __future__ import annotations

from typing import List

import pytest


@pytest.fixture
def write_maze(tmp_path):
    def _write(name: str, rows: List[str]):
        path = tmp_path / name
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path

    return _write
