# selector.py
#   Picks the verse to show: an exact chapter/verse lookup when both numbers
#   are given, otherwise a random sloka from the whole corpus.

import logging
import random
import time
from typing import Optional

from gita_cli.errors import EmptyCorpus, VerseNotFound
from gita_cli.models import Corpus, Verse


def wants_exact_lookup(chapter: int, verse: int) -> bool:
    # only one of the two numbers set counts as neither set: fall back to random
    return chapter > 0 and verse > 0


def select_verse(corpus: Corpus, chapter: int = 0, verse: int = 0,
                 rng: Optional[random.Random] = None) -> Verse:
    """
    Resolves exactly one verse from the corpus.

    Raises VerseNotFound when an exact lookup has no match, and EmptyCorpus when
    a random pick is requested from a corpus without slokas. `rng` can be passed
    in for repeatable picks; by default a fresh generator is seeded from the
    clock so each run shows a different verse.
    """
    # --- 1. exact lookup ---
    if wants_exact_lookup(chapter, verse):
        found = corpus.find_verse(chapter, verse)
        if found is None:
            logging.debug(f"No sloka for chapter {chapter}, verse {verse} among {len(corpus.verses)}")
            raise VerseNotFound(chapter, verse)
        return found

    if chapter > 0 or verse > 0:
        logging.info("Only one of chapter/verse given, picking a random sloka instead.")

    # --- 2. random pick ---
    if not corpus.verses:
        raise EmptyCorpus()

    if rng is None:
        rng = random.Random(time.time_ns())
    picked = rng.choice(corpus.verses)
    logging.debug(f"Randomly selected sloka {picked.ref} of {len(corpus.verses)}")
    return picked
