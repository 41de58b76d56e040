"""Markdown rendering utilities for chapter bodies."""

import markdown


EXTENSIONS = [
    "tables",      # Table support
    "footnotes",   # Author notes
    "attr_list",   # Custom CSS classes {: .class-name}
    "sane_lists",  # better list handling
    "smarty",      # smart quotes
]


def render_markdown(text: str) -> str:
    """Render markdown text to an HTML fragment.

    A fresh converter per call; page rendering may run on worker threads.
    """
    return markdown.markdown(text, extensions=EXTENSIONS)
