"""Book scaffolding — create a new book with a config and sample chapters."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Any, Sequence

from polybook.models.config import CONFIG_FILE, DEFAULT_BUILD_DIR, DEFAULT_SRC, BookConfig
from polybook.theme.renderer import THEME_DIR
from polybook.utils.yaml_helper import build_front_matter, save_yaml


SAMPLE_CHAPTERS = {
    "en": ("Introduction", "Welcome to your new book! Edit this file to start writing."),
    "es": ("Introducción", "¡Bienvenido a tu nuevo libro! Edita este archivo para empezar."),
}


def create_book(
    directory: str | Path,
    title: str | None = None,
    languages: Sequence[str] = ("en",),
    theme: bool = False,
) -> BookConfig:
    """Create a new book with scaffold files.

    Raises:
        FileExistsError: If ``directory`` already holds a book.yaml, or
            ``theme`` is set and it already has a theme directory.
    """
    root = Path(directory)
    if (root / CONFIG_FILE).exists():
        raise FileExistsError(f"A book already exists in {root}")
    if theme and (root / "theme").exists():
        raise FileExistsError(f"A theme directory already exists in {root}")
    root.mkdir(parents=True, exist_ok=True)

    title = title or root.resolve().name.replace("-", " ").replace("_", " ").title()
    languages = list(languages) or [""]

    book_config: dict[str, Any] = {
        "book": {"title": title, "src": DEFAULT_SRC},
        "languages": languages,
        "default-language": languages[0],
        "build": {
            "build-dir": DEFAULT_BUILD_DIR,
            "accumulate-languages": True,
            "jobs": 1,
        },
    }
    save_yaml(root / CONFIG_FILE, book_config)

    for language in languages:
        chapters_dir = root / DEFAULT_SRC / language if language else root / DEFAULT_SRC
        chapters_dir.mkdir(parents=True, exist_ok=True)
        heading, text = SAMPLE_CHAPTERS.get(language, SAMPLE_CHAPTERS["en"])
        chapter_text = build_front_matter(
            {"title": heading, "slug": "intro"},
            f"# {heading}\n\n{text}\n",
        )
        sample = chapters_dir / "intro.md"
        if not sample.exists():
            sample.write_text(chapter_text, encoding="utf-8")

    if theme:
        shutil.copytree(THEME_DIR, root / "theme", ignore=shutil.ignore_patterns("*.py", "__pycache__"))

    print(f"[INFO] Created book '{title}' in {root}")
    return BookConfig.load(root)
