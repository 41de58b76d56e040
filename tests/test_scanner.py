import pytest

from polybook.errors import DirectoryReadError, FileReadError
from polybook.services.scanner import scan_folder


def _write(directory, files):
    directory.mkdir(parents=True, exist_ok=True)
    for name, text in files.items():
        (directory / name).write_text(text, encoding="utf-8")


def test_every_readable_file_becomes_a_chapter(tmp_path):
    _write(tmp_path, {
        "a.md": "Alpha\nfirst",
        "b.md": "---\ntitle: Beta\n---\nsecond",
        "c.txt": "Gamma",
    })

    chapters = scan_folder(tmp_path)

    assert len(chapters) == 3
    assert {c.slug for c in chapters} == {"a", "b", "c"}
    assert {c.title for c in chapters} == {"Alpha", "Beta", "Gamma"}


def test_malformed_file_is_skipped_and_reported(tmp_path, capsys):
    _write(tmp_path, {
        "good.md": "Good",
        "also-good.md": "---\ntitle: Fine\n---\n",
        "broken.md": "---\ntitle: [oops\n---\n",
    })
    skipped = []

    chapters = scan_folder(tmp_path, on_skip=lambda path, err: skipped.append(path.name))

    assert {c.slug for c in chapters} == {"good", "also-good"}
    assert skipped == ["broken.md"]
    assert "[WARN]" in capsys.readouterr().out


def test_empty_file_is_skipped(tmp_path):
    _write(tmp_path, {"empty.md": "", "full.md": "Title"})
    chapters = scan_folder(tmp_path)
    assert [c.slug for c in chapters] == ["full"]


def test_empty_directory_yields_no_chapters(tmp_path):
    assert scan_folder(tmp_path) == []


def test_subdirectories_and_dotfiles_are_ignored(tmp_path):
    _write(tmp_path, {"root.md": "Root", ".hidden": "\xff not a chapter"})
    _write(tmp_path / "en", {"intro.md": "Intro"})

    chapters = scan_folder(tmp_path)

    assert [c.slug for c in chapters] == ["root"]


def test_missing_directory_raises(tmp_path):
    with pytest.raises(DirectoryReadError):
        scan_folder(tmp_path / "missing")


def test_file_instead_of_directory_raises(tmp_path):
    path = tmp_path / "file.md"
    path.write_text("x", encoding="utf-8")
    with pytest.raises(DirectoryReadError):
        scan_folder(path)


def test_unreadable_file_aborts_the_scan(tmp_path):
    _write(tmp_path, {"ok.md": "Fine"})
    (tmp_path / "binary.md").write_bytes(b"\xff\xfe\x00garbage")

    with pytest.raises(FileReadError):
        scan_folder(tmp_path)


def test_chapters_remember_their_source(tmp_path):
    _write(tmp_path, {"a.md": "A"})
    (chapter,) = scan_folder(tmp_path)
    assert chapter.source == tmp_path / "a.md"
