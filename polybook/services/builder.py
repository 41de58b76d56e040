"""Build orchestration: languages in, static site out."""

from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Sequence

from polybook.errors import (
    AssetWriteError,
    OutputDirError,
    ParseError,
    RenderError,
    ScanError,
)
from polybook.models.chapter import Chapter
from polybook.models.config import BookConfig
from polybook.services.pages import PageGenerator, Renderer
from polybook.services.scanner import scan_folder
from polybook.services.writer import StaticSiteWriter
from polybook.theme.renderer import PageRenderer, load_stylesheet


STYLESHEET_NAME = "style.css"


@dataclass
class BuildReport:
    """What a build produced and what it had to leave out."""

    chapters: list[Chapter] = field(default_factory=list)
    pages: list[Path] = field(default_factory=list)
    skipped: list[tuple[Path, str]] = field(default_factory=list)
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures

    def fail(self, where: str, error: Exception) -> None:
        print(f"[ERROR] {where}: {error}")
        self.failures.append((where, str(error)))


def build_book(
    config: BookConfig,
    languages: Sequence[str] | None = None,
    default_language: str | None = None,
    renderer: Renderer | None = None,
    writer_factory: Callable[[Path], StaticSiteWriter] = StaticSiteWriter,
) -> BuildReport:
    """Build every configured language and the top-level homepage.

    Output root and stylesheet failures are fatal.  Scan or render
    failures are isolated to their language and recorded in the report.

    Raises:
        OutputDirError: If the output root cannot be created.
        AssetWriteError: If the stylesheet cannot be written.
    """
    if languages is None:
        languages = config.languages or ("",)
    if default_language is None:
        default_language = config.default_language()
    if default_language is None:
        # No configured default: the root index points into the first language
        default_language = languages[0] if languages else ""
    if renderer is None:
        renderer = PageRenderer(site_root=config.site_root, title=config.title,
                                theme_dir=config.root / "theme")

    out = config.build_dir
    print(f"Building book into {out}...")
    try:
        out.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputDirError(f"Cannot create output directory {out}: {e}") from e

    root_writer = writer_factory(out)
    try:
        root_writer.copy_asset(STYLESHEET_NAME, load_stylesheet(config.root / "theme"))
    except OSError as e:
        raise AssetWriteError(f"Cannot write {out / STYLESHEET_NAME}: {e}") from e

    report = BuildReport()
    chapters: list[Chapter] = []
    by_language: dict[str, list[Chapter]] = {}

    def record_skip(path: Path, error: ParseError) -> None:
        report.skipped.append((path, str(error)))

    for language in languages:
        label = f"language '{language}'" if language else "root language"
        source_dir = config.language_src_dir(language)
        print(f"[INFO] Reading {label} from {source_dir}")

        try:
            found = scan_folder(source_dir, on_skip=record_skip)
        except ScanError as e:
            report.fail(label, e)
            continue
        print(f"[INFO] Found {len(found)} chapter(s) for {label}")

        chapters.extend(found)
        by_language[language] = found
        # Earlier languages stay in the navigation unless accumulate-languages is off
        snapshot = tuple(chapters) if config.accumulate_languages else tuple(found)

        lang_out = config.language_build_dir(language)
        try:
            lang_out.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            report.fail(label, OutputDirError(f"Cannot create {lang_out}: {e}"))
            continue

        generator = PageGenerator(writer_factory(lang_out), _at_depth(renderer, 1 if language else 0),
                                  jobs=config.jobs)
        try:
            report.pages.extend(generator.generate_chapter_pages(snapshot, language))
        except RenderError as e:
            report.fail(label, e)
        try:
            report.pages.append(generator.generate_homepage(snapshot, language))
        except RenderError as e:
            report.fail(f"{label} homepage", e)

    report.chapters = list(chapters)

    if config.accumulate_languages:
        home_chapters = chapters
    else:
        home_chapters = by_language.get(default_language, chapters)

    homepage = PageGenerator(root_writer, _at_depth(renderer, 0), jobs=config.jobs)
    try:
        report.pages.append(homepage.generate_homepage(tuple(home_chapters), default_language))
    except RenderError as e:
        report.fail("homepage", e)

    status = "with errors" if report.failures else "successfully"
    print(f"Build finished {status}: {len(report.chapters)} chapter(s), "
          f"{len(report.pages)} page(s), {len(report.skipped)} skipped file(s).")
    return report


def _at_depth(renderer: Renderer, depth: int) -> Renderer:
    """Relocate the default renderer for pages ``depth`` levels below the root."""
    if isinstance(renderer, PageRenderer):
        return renderer.at_depth(depth)
    return renderer


def clean_book(config: BookConfig, dest_dir: str | Path | None = None) -> bool:
    """Delete the build directory; return whether anything was removed."""
    target = config.root / dest_dir if dest_dir is not None else config.build_dir
    if target.exists():
        print(f"[INFO] Cleaning build directory: {target}")
        shutil.rmtree(target)
        print("[INFO] Build directory cleaned")
        return True
    print("[INFO] Build directory does not exist, nothing to clean")
    return False
