import json
import os

import pytest

from gita_cli import config
from gita_cli.corpus import parse_corpus


def make_sloka(chapter, verse, **overrides):
    sloka = {
        "_id": f"BG{chapter}.{verse}",
        "chapter": chapter,
        "verse": verse,
        "slok": f"प्रथमा पङ्क्तिः {chapter}.{verse}\n\n  द्वितीया पङ्क्तिः  \n",
        "transliteration": "prathamā paṅktiḥ . dvitīyā paṅktiḥ .",
        "siva": {"author": "Swami Sivananda", "et": f"Sivananda text {chapter}.{verse}.", "ec": "commentary"},
        "purohit": {"author": "Shri Purohit Swami", "et": f"Purohit text {chapter}.{verse}."},
        "adi": {"author": "Swami Adidevananda", "et": f"Adidevananda text {chapter}.{verse}."},
        "san": {"author": "Dr. S. Sankaranarayan", "et": f"Sankaranarayan text {chapter}.{verse}."},
        "tej": {"author": "Swami Tejomayananda", "ht": f"तेजोमयानन्द {chapter}.{verse}"},
        "chinmay": {"author": "Swami Chinmayananda", "hc": f"चिन्मयानन्द {chapter}.{verse}"},
    }
    sloka.update(overrides)
    return sloka


@pytest.fixture
def raw_corpus():
    return {
        "chapters": [
            {
                "chapter_number": 1,
                "verses_count": 47,
                "name": "अर्जुनविषादयोग",
                "translation": "Arjuna Visada Yoga",
                "transliteration": "Arjun Viṣhād Yog",
                "meaning": {"en": "Arjuna's Dilemma", "hi": "अर्जुन विषाद योग"},
                "summary": {"en": "Arjuna lays down his bow.", "hi": "अर्जुन धनुष रख देता है।"},
            },
            {
                "chapter_number": 2,
                "verses_count": 72,
                "name": "सांख्ययोग",
                "meaning": {"en": "Transcendental Knowledge"},
            },
        ],
        "slokas": [
            make_sloka(1, 1),
            make_sloka(2, 47),
            # chapter 3 deliberately has no chapter entry
            make_sloka(3, 5),
        ],
    }


@pytest.fixture
def corpus(raw_corpus):
    return parse_corpus(raw_corpus)


@pytest.fixture
def empty_corpus():
    return parse_corpus({"chapters": [], "slokas": []})


@pytest.fixture
def corpus_file(tmp_path, raw_corpus):
    path = tmp_path / "gita.json"
    path.write_text(json.dumps(raw_corpus, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def use_corpus_file(monkeypatch, corpus_file):
    # points the default data path at the fixture file, also for main() which
    # re-reads its settings from the environment
    monkeypatch.setenv("GITA_DATA_PATH", str(corpus_file))
    monkeypatch.setattr(config, "DATA_PATH", corpus_file)
    return corpus_file


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    # load_dotenv writes straight into os.environ, so every test gets its own
    # copy; the config globals are restored after each test as well
    monkeypatch.setattr(os, "environ", dict(os.environ))
    for name in ("GITA_DATA_PATH", "GITA_DISPLAY_WIDTH", "GITA_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "DATA_PATH", config.BUNDLED_DATA_PATH)
    monkeypatch.setattr(config, "DISPLAY_WIDTH", config.DEFAULT_DISPLAY_WIDTH)
    monkeypatch.setattr(config, "LOG_LEVEL", config.DEFAULT_LOG_LEVEL)
