"""Shared fixtures: small books on disk."""

from pathlib import Path

import pytest

from polybook.models.config import BookConfig
from polybook.utils.yaml_helper import save_yaml


INTRO_EN = "---\ntitle: Intro\nslug: intro\n---\nHello"
NOTA_ES = "Bienvenido\nTexto del capitulo"


def write_book(root: Path, chapters: dict[str, str], config: dict | None = None) -> BookConfig:
    """Write ``book.yaml`` plus chapter files keyed by path below src/."""
    data = config or {
        "book": {"title": "Test Book"},
        "languages": ["en", "es"],
        "default-language": "en",
    }
    save_yaml(root / "book.yaml", data)
    for rel, text in chapters.items():
        path = root / "src" / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return BookConfig.load(root)


@pytest.fixture
def book(tmp_path) -> BookConfig:
    """Two-language book: an English chapter with front matter, a plain Spanish one."""
    return write_book(tmp_path, {"en/intro.md": INTRO_EN, "es/nota.md": NOTA_ES})
