# translators.py
#   The six commentary providers bundled in the dataset. Each translator block
#   in the JSON keeps its text under a different field name; this table is the
#   one place that knows which, and also the list the CLI validates against.

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Translator:
    key: str
    text_field: str  # JSON field holding the translation/commentary text
    description: str


TRANSLATORS: Dict[str, Translator] = {
    "siva": Translator("siva", "et", "Swami Sivananda (English translation)"),
    "purohit": Translator("purohit", "et", "Shri Purohit Swami (English translation)"),
    "adi": Translator("adi", "et", "Swami Adidevananda (English translation)"),
    "san": Translator("san", "et", "Dr. S. Sankaranarayan (English translation)"),
    "tej": Translator("tej", "ht", "Swami Tejomayananda (Hindi translation)"),
    "chinmay": Translator("chinmay", "hc", "Swami Chinmayananda (Hindi commentary)"),
}

DEFAULT_TRANSLATOR = "siva"

# insertion order of TRANSLATORS is the order shown to users
VALID_SOURCES: Tuple[str, ...] = tuple(TRANSLATORS)


def is_valid_source(source: str) -> bool:
    return source in TRANSLATORS
