"""Turns one source file's text into a Chapter."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from polybook.errors import EmptyFileError, ParseError
from polybook.models.chapter import Chapter
from polybook.utils.yaml_helper import split_front_matter


FRONT_MATTER_MARKER = "---"


def parse_chapter(raw_text: str, file_stem: str, source: Path | None = None) -> Chapter:
    """Turn the text of one source file into a Chapter.

    Files opening with ``---`` are read as YAML front matter plus a body;
    anything else is plain text whose first line is the title.  In both
    cases the slug falls back to ``file_stem`` when none was declared.

    Raises:
        ParseError: If the front matter is incomplete, invalid or lacks a
            title.
        EmptyFileError: If a plain-text file has no lines at all.
    """
    label = source if source is not None else file_stem
    if raw_text.startswith(FRONT_MATTER_MARKER):
        title, slug, content, metadata = _parse_front_matter(raw_text, label)
    else:
        title, slug, content, metadata = _parse_plain(raw_text, file_stem, label)

    return Chapter(
        title=title,
        slug=slug or file_stem,
        content=content,
        metadata=metadata,
        source=source,
    )


def _parse_front_matter(raw_text: str, label) -> tuple[str, str | None, str, dict[str, Any]]:
    parts = split_front_matter(raw_text)
    if parts is None:
        raise ParseError("front matter is not closed with '---'", label)
    block, body = parts

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise ParseError(f"invalid front matter: {e}", label) from e

    if not isinstance(data, dict):
        raise ParseError("front matter must be a mapping", label)

    title = data.get("title")
    if not isinstance(title, str):
        raise ParseError("front matter needs a string 'title'", label)

    slug = data.get("slug")
    if slug is not None and not isinstance(slug, str):
        raise ParseError("'slug' must be a string", label)

    return title, slug, body, data


def _parse_plain(raw_text: str, file_stem: str, label) -> tuple[str, str, str, dict[str, Any]]:
    if raw_text == "":
        raise EmptyFileError("file is empty, no title line", label)
    # Only "\n" ends a line; str.splitlines would also break on form feeds etc.
    title = raw_text.split("\n", 1)[0]
    if title.endswith("\r"):
        title = title[:-1]
    return title, file_stem, raw_text, {}
