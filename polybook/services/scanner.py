"""Scan a language folder into chapters."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from polybook.errors import DirectoryReadError, FileReadError, ParseError
from polybook.models.chapter import Chapter
from polybook.services.parser import parse_chapter


SkipCallback = Callable[[Path, ParseError], None]


def scan_folder(directory: str | Path, on_skip: SkipCallback | None = None) -> list[Chapter]:
    """Parse every regular file in ``directory`` into a chapter.

    Entries are visited in filesystem order; nothing is sorted or
    deduplicated.  Files that fail to parse are reported and skipped,
    while unreadable directories or files abort the scan.
    """
    directory = Path(directory)
    try:
        entries = list(os.scandir(directory))
    except OSError as e:
        raise DirectoryReadError(f"Cannot read chapter directory {directory}: {e}") from e

    chapters: list[Chapter] = []
    for entry in entries:
        # Sub-folders are other languages when scanning the source root
        if entry.name.startswith(".") or not entry.is_file():
            continue

        path = Path(entry.path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(f"Cannot read chapter file {path}: {e}") from e

        try:
            chapter = parse_chapter(text, path.stem, source=path)
        except ParseError as e:
            print(f"[WARN] Skipping chapter {e}")
            if on_skip is not None:
                on_skip(path, e)
            continue

        chapters.append(chapter)

    return chapters
