"""Default theme — turns a chapter and its navigation list into HTML."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader, pass_context, select_autoescape
from markupsafe import Markup

from polybook.models.chapter import Chapter
from polybook.utils.markdown_helper import render_markdown


THEME_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = THEME_DIR / "templates"
STYLESHEET = THEME_DIR / "style.css"


def load_stylesheet(theme_dir: Path | None = None) -> str:
    """Return the stylesheet text, preferring a book-local theme copy."""
    if theme_dir is not None and (theme_dir / "style.css").exists():
        return (theme_dir / "style.css").read_text(encoding="utf-8")
    return STYLESHEET.read_text(encoding="utf-8")


class PageRenderer:
    """Callable ``(chapter, chapters, language) -> str``.

    Rendering has no side effects and depends only on its arguments and
    the settings given here, so identical input yields identical markup.

    Without a ``site_root`` links are relative: ``depth`` is how many
    directories the page sits below the output root, and every link
    climbs back up that many levels.  Use :meth:`at_depth` to get a
    renderer for pages in a language subdirectory.
    """

    def __init__(
        self,
        site_root: str | None = None,
        title: str = "",
        theme_dir: Path | None = None,
        depth: int = 0,
    ):
        if site_root and not site_root.endswith("/"):
            site_root += "/"
        self.site_root = site_root or None
        self.title = title
        self.depth = depth
        template_dirs = []
        if theme_dir is not None and (theme_dir / "templates").is_dir():
            template_dirs.append(theme_dir / "templates")
        template_dirs.append(TEMPLATES_DIR)
        self.env = Environment(
            loader=FileSystemLoader(template_dirs),
            autoescape=select_autoescape(["html"]),
            keep_trailing_newline=True,
        )
        self.env.filters["chapter_url"] = _chapter_url_filter

    @property
    def root_prefix(self) -> str:
        if self.site_root is not None:
            return self.site_root
        return "../" * self.depth

    def at_depth(self, depth: int) -> PageRenderer:
        """Same settings and templates, for pages ``depth`` levels down."""
        if depth == self.depth:
            return self
        other = copy.copy(self)
        other.depth = depth
        return other

    def __call__(self, chapter: Chapter | None, chapters: Sequence[Chapter], language: str) -> str:
        template = self.env.get_template("page.html")
        body = Markup(render_markdown(chapter.content or "")) if chapter is not None else None
        return template.render(
            book_title=self.title,
            chapter=chapter,
            chapters=chapters,
            language=language,
            body=body,
            site_root=self.root_prefix,
        )


@pass_context
def _chapter_url_filter(context, chapter: Chapter, language: str) -> str:
    root_prefix = context.get("site_root", "")
    prefix = f"{root_prefix}{language}/" if language else root_prefix
    return f"{prefix}{chapter.output_name}"
