"""Chapter data model — one source file turned into one page."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Chapter:
    """In-memory representation of a parsed chapter.

    Chapters parsed from plain text carry an empty ``metadata`` mapping;
    chapters with front matter keep the whole mapping there.
    """

    title: str
    slug: str | None = None
    content: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict, compare=False)
    source: Path | None = field(default=None, compare=False)

    @property
    def has_front_matter(self) -> bool:
        return bool(self.metadata)

    @property
    def output_name(self) -> str:
        return f"{self.slug}.html"
