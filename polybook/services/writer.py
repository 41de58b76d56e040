"""Writes rendered pages to disk atomically."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Callable

from polybook.errors import RenderError


class StaticSiteWriter:
    """Writes rendered markup below ``out_dir``.

    Every write goes through a temporary file in the target directory and
    is moved into place with ``os.replace``, so a page is either complete
    or absent.
    """

    def __init__(self, out_dir: str | Path):
        self._out_dir = Path(out_dir)

    @property
    def out_dir(self) -> Path:
        return self._out_dir

    def write(self, path: str, render: Callable[[], str]) -> Path:
        """Call ``render`` and store its markup at ``out_dir / path``."""
        try:
            html = render()
        except Exception as e:
            raise RenderError(f"Failed to render {path}: {e}", [path]) from e
        target = self._out_dir / path
        try:
            write_text_atomic(target, html)
        except OSError as e:
            raise RenderError(f"Failed to write {target}: {e}", [path]) from e
        return target

    def copy_asset(self, name: str, text: str) -> Path:
        """Store a static asset verbatim."""
        target = self._out_dir / name
        write_text_atomic(target, text)
        return target


def write_text_atomic(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
