# models.py
#   Plain data holders for the loaded corpus. Everything is frozen: the corpus
#   is read once per run and never modified afterwards.

from typing import Dict, Optional, Tuple
from dataclasses import dataclass, field


@dataclass(frozen=True)
class LocalizedText:
    """A piece of chapter metadata available in English and/or Hindi."""
    en: str = ""
    hi: str = ""

    def get(self, language: str) -> str:
        # unknown languages have no text
        return {"en": self.en, "hi": self.hi}.get(language) or ""


@dataclass(frozen=True)
class Chapter:
    chapter_number: int
    verses_count: int
    name: str
    translation: str = ""
    transliteration: str = ""
    meaning: LocalizedText = field(default_factory=LocalizedText)
    summary: LocalizedText = field(default_factory=LocalizedText)


@dataclass(frozen=True)
class TranslatorEntry:
    author: str
    text: str


@dataclass(frozen=True)
class Verse:
    id: str
    chapter: int
    verse: int
    slok: str
    transliteration: str
    # a dict cannot be hashed; (id, chapter, verse) already identify the verse
    translations: Dict[str, TranslatorEntry] = field(default_factory=dict, hash=False)

    @property
    def ref(self) -> str:
        return f"{self.chapter}.{self.verse}"

    def translation_for(self, key: str) -> Optional[TranslatorEntry]:
        return self.translations.get(key)


@dataclass(frozen=True)
class Corpus:
    chapters: Tuple[Chapter, ...] = ()
    verses: Tuple[Verse, ...] = ()

    # lookup tables, built once from the tuples above
    _chapter_index: Dict[int, Chapter] = field(default_factory=dict, init=False, repr=False, compare=False)
    _verse_index: Dict[Tuple[int, int], Verse] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        # setdefault keeps the first entry in load order when keys repeat
        for chapter in self.chapters:
            self._chapter_index.setdefault(chapter.chapter_number, chapter)
        for verse in self.verses:
            self._verse_index.setdefault((verse.chapter, verse.verse), verse)

    def __len__(self):
        return len(self.verses)

    def find_chapter(self, number: int) -> Optional[Chapter]:
        return self._chapter_index.get(number)

    def find_verse(self, chapter: int, verse: int) -> Optional[Verse]:
        return self._verse_index.get((chapter, verse))
