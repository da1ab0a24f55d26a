# main.py
#   Entry point for the `gita` command. Parses the flags, checks them, then
#   runs load -> select -> print. Every known failure ends in exit code 1.

import argparse
import logging
import sys
from pathlib import Path

from gita_cli import config
from gita_cli.corpus import load_corpus
from gita_cli.errors import GitaError, InvalidTranslatorSource
from gita_cli.presenter import COLOR_MODES, choose_style, print_verse
from gita_cli.selector import select_verse
from gita_cli.translators import DEFAULT_TRANSLATOR, TRANSLATORS, VALID_SOURCES, is_valid_source


def positive_int(value):
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    # single dash long flags (-translation, -chapter-info) are the documented
    # spelling; the double dash forms are accepted as well
    sources = ", ".join(VALID_SOURCES)
    parser = argparse.ArgumentParser(
        prog="gita",
        description="Print a verse from the Bhagavad Gita, at random or by chapter and verse.",
        allow_abbrev=False,
        epilog="Translators: " + "; ".join(f"{t.key} = {t.description}" for t in TRANSLATORS.values()),
    )
    parser.add_argument(
        "-translation", "--translation",
        default=DEFAULT_TRANSLATOR,
        help=f"Translation source ({sources})",
    )
    parser.add_argument(
        "-chapter-info", "--chapter-info",
        dest="chapter_info",
        action="store_true",
        help="Show chapter information",
    )
    parser.add_argument(
        "-summary", "--summary",
        action="store_true",
        help="Also show the chapter summary (with -chapter-info)",
    )
    parser.add_argument(
        "-c", "--chapter",
        type=int,
        default=0,
        help="Specific chapter number (use with -v)",
    )
    parser.add_argument(
        "-v", "--verse",
        type=int,
        default=0,
        help="Specific verse number (use with -c)",
    )
    parser.add_argument(
        "-lang", "--lang",
        choices=config.LANGUAGES,
        default=config.DEFAULT_LANGUAGE,
        help="Language for chapter meaning and summary (default: en)",
    )
    parser.add_argument(
        "-width", "--width",
        type=positive_int,
        default=None,
        help=f"Wrap width in characters (default: {config.DISPLAY_WIDTH})",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default="auto",
        help="Use bold/dim terminal styling (default: auto, only on a terminal)",
    )
    parser.add_argument(
        "--data",
        type=Path,
        default=None,
        help="Read the corpus from this JSON file instead of the bundled one",
    )
    return parser


def resolve_log_level(name) -> int:
    # unknown level names fall back to WARNING instead of crashing basicConfig
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def setup_logging():
    logging.basicConfig(level=resolve_log_level(config.LOG_LEVEL), format=config.LOG_FORMAT, stream=sys.stderr)


def run(args) -> None:
    # 1. check the translator before doing any dataset work
    if not is_valid_source(args.translation):
        raise InvalidTranslatorSource(args.translation, VALID_SOURCES)

    # 2. load the corpus (bundled file unless --data was given)
    corpus = load_corpus(args.data)

    # 3. pick one sloka
    verse = select_verse(corpus, args.chapter, args.verse)

    # 4. print it
    print_verse(
        verse,
        corpus,
        stream=sys.stdout,
        translation=args.translation,
        show_chapter_info=args.chapter_info,
        show_summary=args.summary,
        language=args.lang,
        width=args.width or config.DISPLAY_WIDTH,
        style=choose_style(args.color, sys.stdout),
    )


def main(argv=None) -> int:
    # pick up the environment and any .env file of the directory we run in
    config.load_settings()
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        run(args)
    except InvalidTranslatorSource as e:
        print(e, file=sys.stderr)
        print(f"Valid sources: {', '.join(e.valid)}", file=sys.stderr)
        return 1
    except GitaError as e:
        logging.debug("gita failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
