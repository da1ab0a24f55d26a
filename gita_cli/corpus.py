# corpus.py
#   Loads the bundled gita.json into a Corpus value. This is the only place
#   that touches the file system; everything downstream gets the Corpus passed in.
#
#   Layout of the file:
#     {"chapters": [{"chapter_number": 1, "verses_count": 47, "name": "...",
#                    "translation": "...", "transliteration": "...",
#                    "meaning": {"en": "...", "hi": "..."},
#                    "summary": {"en": "...", "hi": "..."}}, ...],
#      "slokas":   [{"_id": "BG1.1", "chapter": 1, "verse": 1, "slok": "...",
#                    "transliteration": "...",
#                    "siva": {"author": "...", "et": "..."}, ...}, ...]}

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from gita_cli import config
from gita_cli.errors import DatasetMalformed, DatasetUnreadable
from gita_cli.models import Chapter, Corpus, LocalizedText, TranslatorEntry, Verse
from gita_cli.translators import TRANSLATORS


# --- field helpers ---

def _require(obj: Dict[str, Any], key: str, kind, where: str):
    # fetches a mandatory field and checks its JSON type
    if key not in obj:
        raise DatasetMalformed(f"{where}: missing '{key}'")
    value = obj[key]
    # bool is a subclass of int, never accept it as a number
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DatasetMalformed(f"{where}: '{key}' has wrong type {type(value).__name__}")
    return value


def _optional_str(obj: Dict[str, Any], key: str, where: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DatasetMalformed(f"{where}: '{key}' has wrong type {type(value).__name__}")
    return value


def _localized(obj: Dict[str, Any], key: str, where: str) -> LocalizedText:
    value = obj.get(key)
    if value is None:
        return LocalizedText()
    if not isinstance(value, dict):
        raise DatasetMalformed(f"{where}: '{key}' must be an object")
    return LocalizedText(
        en=_optional_str(value, "en", f"{where}.{key}"),
        hi=_optional_str(value, "hi", f"{where}.{key}"),
    )


# --- record parsers ---

def parse_chapter(obj: Any, index: int) -> Chapter:
    where = f"chapters[{index}]"
    if not isinstance(obj, dict):
        raise DatasetMalformed(f"{where}: expected an object")
    return Chapter(
        chapter_number=_require(obj, "chapter_number", int, where),
        verses_count=_require(obj, "verses_count", int, where),
        name=_require(obj, "name", str, where),
        translation=_optional_str(obj, "translation", where),
        transliteration=_optional_str(obj, "transliteration", where),
        meaning=_localized(obj, "meaning", where),
        summary=_localized(obj, "summary", where),
    )


def parse_translations(obj: Dict[str, Any], where: str) -> Dict[str, TranslatorEntry]:
    # normalises the six differently shaped translator blocks into (author, text)
    entries = {}
    for key, translator in TRANSLATORS.items():
        block = obj.get(key)
        if block is None:
            continue
        if not isinstance(block, dict):
            raise DatasetMalformed(f"{where}: '{key}' must be an object")
        entries[key] = TranslatorEntry(
            author=_optional_str(block, "author", f"{where}.{key}"),
            text=_optional_str(block, translator.text_field, f"{where}.{key}"),
        )
    return entries


def parse_verse(obj: Any, index: int) -> Verse:
    where = f"slokas[{index}]"
    if not isinstance(obj, dict):
        raise DatasetMalformed(f"{where}: expected an object")
    return Verse(
        id=_require(obj, "_id", str, where),
        chapter=_require(obj, "chapter", int, where),
        verse=_require(obj, "verse", int, where),
        slok=_optional_str(obj, "slok", where),
        transliteration=_optional_str(obj, "transliteration", where),
        translations=parse_translations(obj, where),
    )


def parse_corpus(raw: Any) -> Corpus:
    """Builds a Corpus from already decoded JSON, raising DatasetMalformed on bad shapes."""
    if not isinstance(raw, dict):
        raise DatasetMalformed("top level must be an object with 'chapters' and 'slokas'")

    chapters = raw.get("chapters", [])
    slokas = raw.get("slokas", [])
    if not isinstance(chapters, list):
        raise DatasetMalformed("'chapters' must be a list")
    if not isinstance(slokas, list):
        raise DatasetMalformed("'slokas' must be a list")

    return Corpus(
        chapters=tuple(parse_chapter(c, i) for i, c in enumerate(chapters)),
        verses=tuple(parse_verse(s, i) for i, s in enumerate(slokas)),
    )


# --- loading ---

def read_data(path: Union[str, Path]) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise DatasetUnreadable(f"Error reading embedded data: {e}") from e


def load_corpus(path: Optional[Union[str, Path]] = None) -> Corpus:
    """
    Reads and parses the corpus file (the bundled one unless a path is given).
    Any failure is fatal to the caller: there is no partial or fallback corpus.
    """
    path = Path(path) if path else config.DATA_PATH
    logging.debug(f"Loading corpus from {path}")

    data = read_data(path)
    try:
        raw = json.loads(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise DatasetUnreadable(f"Error reading embedded data: {e}") from e
    except json.JSONDecodeError as e:
        raise DatasetMalformed(f"Error parsing JSON: {e}") from e

    try:
        corpus = parse_corpus(raw)
    except DatasetMalformed as e:
        raise DatasetMalformed(f"Error parsing JSON: {e}") from e

    logging.info(f"Loaded {len(corpus.chapters)} chapters and {len(corpus.verses)} slokas from {path.name}")
    return corpus
