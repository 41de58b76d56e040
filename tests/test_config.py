import pytest

from polybook.errors import ConfigError
from polybook.models.config import BookConfig


def _write(tmp_path, text):
    (tmp_path / "book.yaml").write_text(text, encoding="utf-8")


def test_load_full_config(tmp_path):
    _write(tmp_path, """
book:
  title: My Book
  src: chapters
languages: [en, es]
default-language: es
build:
  build-dir: site
  site-root: /docs
  accumulate-languages: false
  jobs: 3
""")

    config = BookConfig.load(tmp_path)

    assert config.title == "My Book"
    assert config.languages == ("en", "es")
    assert config.default_language() == "es"
    assert config.src_dir == tmp_path / "chapters"
    assert config.build_dir == tmp_path / "site"
    assert config.site_root == "/docs/"
    assert config.accumulate_languages is False
    assert config.jobs == 3


def test_defaults(tmp_path):
    _write(tmp_path, "book:\n  title: Bare\n")

    config = BookConfig.load(tmp_path)

    assert config.languages == ("",)
    assert config.default_language() is None
    assert config.build_dir == tmp_path / "out" / "book"
    assert config.accumulate_languages is True
    assert config.site_root is None
    assert config.language_src_dir("") == tmp_path / "src"
    assert config.language_build_dir("") == tmp_path / "out" / "book"


def test_language_paths(tmp_path):
    _write(tmp_path, "languages: [en]\n")
    config = BookConfig.load(tmp_path)

    assert config.language_src_dir("en") == tmp_path / "src" / "en"
    assert config.language_build_dir("en") == tmp_path / "out" / "book" / "en"


def test_languages_as_mappings_with_default_flag(tmp_path):
    _write(tmp_path, """
languages:
  - code: en
  - code: fr
    default: true
""")
    config = BookConfig.load(tmp_path)

    assert config.languages == ("en", "fr")
    assert config.default_language() == "fr"


def test_with_build_dir_returns_copy(tmp_path):
    _write(tmp_path, "languages: [en]\n")
    config = BookConfig.load(tmp_path)

    other = config.with_build_dir("elsewhere")

    assert other.build_dir == tmp_path / "elsewhere"
    assert config.build_dir == tmp_path / "out" / "book"


def test_missing_config(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        BookConfig.load(tmp_path)


def test_invalid_yaml(tmp_path):
    _write(tmp_path, "book: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        BookConfig.load(tmp_path)


@pytest.mark.parametrize(
    "text",
    [
        "build:\n  jobs: many\n",
        "build:\n  jobs: 0\n",
        "build:\n  accumulate-languages: sometimes\n",
        "languages: en\n",
        "languages: [en]\ndefault-language: 3\n",
        "book: just a string\n",
    ],
)
def test_wrong_types_are_rejected(tmp_path, text):
    _write(tmp_path, text)
    with pytest.raises(ConfigError):
        BookConfig.load(tmp_path)
