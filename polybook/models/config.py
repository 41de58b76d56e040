"""Book configuration (book.yaml)."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from polybook.errors import ConfigError
from polybook.utils.yaml_helper import load_yaml


CONFIG_FILE = "book.yaml"
DEFAULT_SRC = "src"
DEFAULT_BUILD_DIR = "out/book"


@dataclass(frozen=True)
class BookConfig:
    """Immutable settings for one book, threaded through a whole build."""

    root: Path  # Book root directory (contains book.yaml)
    title: str = ""
    src: str = DEFAULT_SRC
    languages: tuple[str, ...] = ("",)
    default: str | None = None
    build_dir_name: str = DEFAULT_BUILD_DIR
    site_root: str | None = None  # None: links relative to each page
    accumulate_languages: bool = True
    jobs: int = 1

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    @property
    def src_dir(self) -> Path:
        return self.root / self.src

    @property
    def build_dir(self) -> Path:
        return self.root / self.build_dir_name

    def language_src_dir(self, language: str) -> Path:
        return self.src_dir / language if language else self.src_dir

    def language_build_dir(self, language: str) -> Path:
        return self.build_dir / language if language else self.build_dir

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def default_language(self) -> str | None:
        return self.default

    def with_build_dir(self, build_dir: str | Path) -> BookConfig:
        """Return a copy writing to ``build_dir`` (relative to the root)."""
        return replace(self, build_dir_name=str(build_dir))

    def with_jobs(self, jobs: int) -> BookConfig:
        return replace(self, jobs=jobs)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, root: str | Path = ".") -> BookConfig:
        """Read ``book.yaml`` from ``root``.

        Raises:
            ConfigError: If the file is missing, is not valid YAML or
                holds values of the wrong type.
        """
        root = Path(root)
        path = root / CONFIG_FILE
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            data = load_yaml(path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Could not read {path}: {e}") from e
        return cls.from_dict(root, data)

    @classmethod
    def from_dict(cls, root: str | Path, data: dict[str, Any]) -> BookConfig:
        book = _section(data, "book")
        build = _section(data, "build")

        languages, flagged_default = _parse_languages(data.get("languages"))
        default = data.get("default-language", flagged_default)
        if default is not None and not isinstance(default, str):
            raise ConfigError("'default-language' must be a string")

        jobs = build.get("jobs", 1)
        if not isinstance(jobs, int) or isinstance(jobs, bool) or jobs < 1:
            raise ConfigError("'build.jobs' must be a positive integer")

        accumulate = build.get("accumulate-languages", True)
        if not isinstance(accumulate, bool):
            raise ConfigError("'build.accumulate-languages' must be true or false")

        site_root = build.get("site-root")
        if site_root:
            site_root = str(site_root)
            if not site_root.endswith("/"):
                site_root += "/"
        else:
            site_root = None

        return cls(
            root=Path(root),
            title=str(book.get("title", "")),
            src=str(book.get("src", DEFAULT_SRC)),
            languages=languages,
            default=default,
            build_dir_name=str(build.get("build-dir", DEFAULT_BUILD_DIR)),
            site_root=site_root,
            accumulate_languages=accumulate,
            jobs=jobs,
        )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' must be a mapping")
    return value


def _parse_languages(raw: Any) -> tuple[tuple[str, ...], str | None]:
    """Accept a list of codes or of ``{code, default}`` mappings."""
    if not raw:
        return ("",), None
    if not isinstance(raw, list):
        raise ConfigError("'languages' must be a list")

    languages: list[str] = []
    default = None
    for item in raw:
        if isinstance(item, dict):
            code = item.get("code", "")
            if item.get("default") and default is None:
                default = code
        else:
            code = item
        if code is None:
            code = ""
        if not isinstance(code, str):
            raise ConfigError(f"Invalid language entry: {item!r}")
        languages.append(code)
    return tuple(languages), default
