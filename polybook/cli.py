"""Command line entry point: ``polybook <command> [options]``."""

from __future__ import annotations

import argparse
import webbrowser
from pathlib import Path

from polybook.errors import BuildError, ConfigError
from polybook.models.config import BookConfig
from polybook.services.builder import build_book, clean_book
from polybook.services.scaffold import create_book


def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polybook",
        description="Build a multi-language static HTML book from markdown chapters",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    init = commands.add_parser("init", help="Create the boilerplate structure and files for a new book")
    init.add_argument("dir", type=Path, help="Directory to create the book in")
    init.add_argument("--title", help="Sets the book title")
    init.add_argument("--theme", action="store_true",
                      help="Copy the default theme into the book for customisation")
    init.add_argument("--language", "-l", action="append", dest="languages", metavar="LANG",
                      help="Language directory to create (repeatable, default: en)")

    build = commands.add_parser("build", help="Build a book from its markdown files")
    build.add_argument("dir", type=Path, nargs="?", default=Path("."), help="Root directory for the book")
    build.add_argument("--dest-dir", "-d", type=Path,
                       help="Output directory, relative to the book root (default: build.build-dir)")
    build.add_argument("--open", "-o", action="store_true", help="Open the built book in a web browser")
    build.add_argument("--jobs", "-j", type=int, help="Worker threads used to render pages")

    clean = commands.add_parser("clean", help="Delete a built book")
    clean.add_argument("dir", type=Path, nargs="?", default=Path("."), help="Root directory for the book")
    clean.add_argument("--dest-dir", "-d", type=Path,
                       help="Output directory, relative to the book root (default: build.build-dir)")

    completions = commands.add_parser("completions", help="Generate shell completions (not supported yet)")
    completions.add_argument("shell", nargs="?")
    completions.add_argument("out_dir", nargs="?")

    for name, help_text in (
        ("watch", "Watch a book's files and rebuild it on changes (not supported yet)"),
        ("serve", "Serve a book and rebuild it on changes (not supported yet)"),
        ("test", "Test a book's code samples (not supported yet)"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("dir", type=Path, nargs="?", default=Path("."))

    return parser


def cmd_init(args: argparse.Namespace) -> int:
    try:
        create_book(args.dir, title=args.title, languages=args.languages or ["en"], theme=args.theme)
    except (FileExistsError, OSError) as e:
        print(f"[ERROR] {e}")
        return 1
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    try:
        config = BookConfig.load(args.dir)
    except ConfigError as e:
        print(f"[ERROR] {e}")
        return 1

    if args.dest_dir is not None:
        config = config.with_build_dir(args.dest_dir)
    if args.jobs is not None:
        if args.jobs < 1:
            print("[ERROR] --jobs must be at least 1")
            return 1
        config = config.with_jobs(args.jobs)

    try:
        report = build_book(config)
    except BuildError as e:
        print(f"[ERROR] {e}")
        return 1

    for path, reason in report.skipped:
        print(f"[WARN] Skipped {path.name}: {reason}")

    if args.open:
        webbrowser.open((config.build_dir / "index.html").resolve().as_uri())

    return 0 if report.ok else 1


def cmd_clean(args: argparse.Namespace) -> int:
    try:
        config = BookConfig.load(args.dir)
    except ConfigError as e:
        print(f"[ERROR] {e}")
        return 1
    try:
        clean_book(config, args.dest_dir)
    except OSError as e:
        print(f"[ERROR] Unable to remove the build directory: {e}")
        return 1
    return 0


def cmd_unsupported(args: argparse.Namespace) -> int:
    print(f"[ERROR] '{args.command}' is not supported yet")
    return 2


COMMANDS = {
    "init": cmd_init,
    "build": cmd_build,
    "clean": cmd_clean,
    "completions": cmd_unsupported,
    "watch": cmd_unsupported,
    "serve": cmd_unsupported,
    "test": cmd_unsupported,
}


def main(argv: list[str] | None = None) -> int:
    args = get_parser().parse_args(argv)
    return COMMANDS[args.command](args)
