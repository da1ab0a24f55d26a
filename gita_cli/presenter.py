# presenter.py
#   Turns a selected verse into the text printed on the terminal: optional
#   chapter block, verse header, Sanskrit, transliteration and one translation.

import os
import sys
from dataclasses import dataclass
from typing import List, TextIO

from gita_cli import config
from gita_cli.models import Chapter, Corpus, Verse
from gita_cli.translators import DEFAULT_TRANSLATOR
from gita_cli.wrap import wrap_text


# --- styling ---

@dataclass(frozen=True)
class Style:
    bold: str
    dim: str
    reset: str


ANSI = Style(bold="\033[1m", dim="\033[2m", reset="\033[0m")
PLAIN = Style(bold="", dim="", reset="")

COLOR_MODES = ("auto", "always", "never")


def choose_style(mode: str = "auto", stream: TextIO = None) -> Style:
    # "auto" only styles real terminals and honours the NO_COLOR convention
    if mode == "always":
        return ANSI
    if mode == "never":
        return PLAIN
    stream = stream if stream is not None else sys.stdout
    if os.environ.get("NO_COLOR"):
        return PLAIN
    isatty = getattr(stream, "isatty", None)
    return ANSI if isatty is not None and isatty() else PLAIN


# --- sections ---

def split_sanskrit(slok: str) -> List[str]:
    # one output line per source line, blank lines dropped
    return [line.strip() for line in slok.split("\n") if line.strip()]


def split_transliteration(text: str) -> List[str]:
    # the transliteration marks line ends with periods
    return [part.strip() for part in text.split(".") if part.strip()]


def chapter_block(chapter: Chapter, language: str, show_summary: bool, width: int, style: Style) -> List[str]:
    lines = [f"{style.bold}Chapter {chapter.chapter_number}: {chapter.name}{style.reset}"]
    if chapter.translation:
        lines.append(f"({chapter.translation})")
    meaning = chapter.meaning.get(language)
    if meaning:
        lines.append(wrap_text("Meaning: " + meaning, width))
    if show_summary:
        summary = chapter.summary.get(language)
        if summary:
            lines.append(wrap_text("Summary: " + summary, width))
    return lines


def translation_block(verse: Verse, translation: str, width: int, style: Style) -> List[str]:
    entry = verse.translation_for(translation)
    if entry is None:
        return [f"{style.dim}(no {translation} translation available){style.reset}"]
    lines = []
    if entry.text.strip():
        lines.append(wrap_text(entry.text, width))
    lines.append(f"{style.dim}({entry.author}){style.reset}")
    return lines


# --- full output ---

def render_verse(verse: Verse, corpus: Corpus, translation: str = DEFAULT_TRANSLATOR,
                 show_chapter_info: bool = False, show_summary: bool = False,
                 language: str = config.DEFAULT_LANGUAGE, width: int = None,
                 style: Style = PLAIN) -> str:
    """
    Builds the complete output for one verse. Sections are separated by blank
    lines and the text starts and ends with one. The chapter block is left out
    entirely when the verse's chapter has no metadata in the corpus.
    """
    if width is None:
        width = config.DISPLAY_WIDTH

    lines = [""]

    # 1. chapter information (optional)
    if show_chapter_info:
        chapter = corpus.find_chapter(verse.chapter)
        if chapter is not None:
            lines += chapter_block(chapter, language, show_summary, width, style)
            lines.append("")

    # 2. header
    lines.append(f"{style.bold}Chapter {verse.chapter}, Verse {verse.verse}{style.reset}")
    lines.append("")

    # 3. sanskrit, each source line wrapped on its own
    lines += [wrap_text(line, width) for line in split_sanskrit(verse.slok)]
    lines.append("")

    # 4. transliteration
    lines += [wrap_text(part, width) for part in split_transliteration(verse.transliteration)]
    lines.append("")

    # 5. translation and author
    lines += translation_block(verse, translation, width, style)
    lines.append("")

    return "\n".join(lines) + "\n"


def print_verse(verse: Verse, corpus: Corpus, stream: TextIO = None, **options) -> None:
    stream = stream if stream is not None else sys.stdout
    stream.write(render_verse(verse, corpus, **options))
    stream.flush()
