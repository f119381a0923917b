"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


def _write(path: Path, size: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)


@pytest.fixture
def solution(tmp_path):
    """Create a fake .NET solution with build output folders.

    Layout::

        solution/
            README.md
            obj/project.assets.json, obj/Debug/cache
            src/Program.cs
            src/bin/App.dll
            lib/Core/BIN/Core.dll, lib/Core/BIN/obj/nested.tmp
            lib/Core/Obj/Core.pdb
            docs/binaries/readme.txt
    """
    root = tmp_path.resolve() / "solution"
    root.mkdir()
    _write(root / "README.md", 64)
    _write(root / "obj" / "project.assets.json", 500)
    _write(root / "obj" / "Debug" / "cache", 300)
    _write(root / "src" / "Program.cs", 200)
    _write(root / "src" / "bin" / "App.dll", 4096)
    _write(root / "lib" / "Core" / "BIN" / "Core.dll", 2048)
    _write(root / "lib" / "Core" / "BIN" / "obj" / "nested.tmp", 10)
    _write(root / "lib" / "Core" / "Obj" / "Core.pdb", 1000)
    _write(root / "docs" / "binaries" / "readme.txt", 30)
    return root


@pytest.fixture
def expected_matches(solution):
    """Matches for the ``solution`` tree, in scan order."""
    return [
        solution / "lib" / "Core" / "BIN",
        solution / "lib" / "Core" / "Obj",
        solution / "obj",
        solution / "src" / "bin",
    ]


@pytest.fixture
def snapshot():
    """Return a helper listing every path under a root, relative and sorted."""

    def _snapshot(root: Path) -> list[str]:
        return sorted(str(p.relative_to(root)) for p in root.rglob("*"))

    return _snapshot
