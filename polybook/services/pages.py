"""Page generation — one HTML file per chapter plus a homepage."""

from __future__ import annotations

from collections import Counter
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Optional, Sequence

from polybook.errors import RenderError
from polybook.models.chapter import Chapter
from polybook.services.writer import StaticSiteWriter


Renderer = Callable[[Optional[Chapter], Sequence[Chapter], str], str]

INDEX_PAGE = "index.html"


class PageGenerator:
    """Feeds chapters through ``renderer`` and stores the pages via ``writer``."""

    def __init__(self, writer: StaticSiteWriter, renderer: Renderer, jobs: int = 1):
        self.writer = writer
        self.renderer = renderer
        self.jobs = max(1, jobs)

    def generate_chapter_pages(self, chapters: Sequence[Chapter], language: str) -> list[Path]:
        """Write ``<slug>.html`` for every chapter.

        All pages are attempted even when some fail; the failures are then
        raised together as one RenderError.  When two chapters share a
        slug only the later one is written.
        """
        snapshot = tuple(chapters)
        _warn_duplicate_slugs(snapshot, self.writer.out_dir)

        pages: dict[str, Callable[[], str]] = {}
        for chapter in snapshot:
            pages[chapter.output_name] = self._page_render(chapter, snapshot, language)
        return self._write_all(pages)

    def generate_homepage(self, chapters: Sequence[Chapter], default_language: str | None) -> Path:
        snapshot = tuple(chapters)
        language = default_language or ""
        path = self.writer.write(INDEX_PAGE, self._page_render(None, snapshot, language))
        print(f"    Generated {path}")
        return path

    # ------------------------------------------------------------------

    def _page_render(self, chapter: Chapter | None, chapters: tuple[Chapter, ...], language: str):
        def render() -> str:
            return self.renderer(chapter, chapters, language)

        return render

    def _write_all(self, pages: dict[str, Callable[[], str]]) -> list[Path]:
        written: dict[str, Path] = {}
        errors: dict[str, str] = {}

        if self.jobs == 1 or len(pages) < 2:
            for name, render in pages.items():
                try:
                    written[name] = self.writer.write(name, render)
                except RenderError as e:
                    errors[name] = str(e)
        else:
            with ThreadPoolExecutor(max_workers=self.jobs) as executor:
                futures = {
                    executor.submit(self.writer.write, name, render): name
                    for name, render in pages.items()
                }
                for future in as_completed(futures):
                    name = futures[future]
                    try:
                        written[name] = future.result()
                    except RenderError as e:
                        errors[name] = str(e)

        ordered = [written[name] for name in pages if name in written]
        for path in ordered:
            print(f"    Generated {path}")

        if errors:
            failed = [name for name in pages if name in errors]
            for name in failed:
                print(f"[ERROR] {errors[name]}")
            raise RenderError(f"{len(failed)} page(s) failed: {', '.join(failed)}", failed)
        return ordered


def _warn_duplicate_slugs(chapters: tuple[Chapter, ...], out_dir: Path) -> None:
    counts = Counter(chapter.slug for chapter in chapters)
    for slug, count in counts.items():
        if count > 1:
            print(f"[WARN] Slug '{slug}' is used by {count} chapters; "
                  f"{out_dir / (slug + '.html')} keeps the last one")
