"""YAML parsing and writing utilities."""

import re
from pathlib import Path
from typing import Any

import yaml


# Opening line, lazily captured block, closing "---" line.
_FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*\r?$(?:\n)?",
    re.DOTALL | re.MULTILINE,
)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def save_yaml(path: Path, data: dict[str, Any]) -> None:
    """Write a dict to a YAML file, preserving readability."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(
            data,
            f,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )


def split_front_matter(text: str) -> tuple[str, str] | None:
    """Split ``text`` into its raw front matter block and the body after it.

    Returns ``None`` when the text does not open with a complete
    ``---`` ... ``---`` block.  The body is everything after the closing
    delimiter line, untouched.
    """
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return None
    return match.group(1), text[match.end():]


def build_front_matter(front_matter: dict[str, Any], body: str) -> str:
    """Combine a front matter dict and markdown body into a single string."""
    fm_str = yaml.dump(
        front_matter,
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
        width=120,
    ).rstrip("\n")
    return f"---\n{fm_str}\n---\n\n{body}"
