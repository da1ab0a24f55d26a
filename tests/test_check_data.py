import json

from gita_cli import config
from gita_cli.tools.check_data import check_data_quality, main

from conftest import make_sloka


def write_corpus(tmp_path, raw):
    path = tmp_path / "gita.json"
    path.write_text(json.dumps(raw, ensure_ascii=False), encoding="utf-8")
    return path


def test_bundled_corpus_is_clean(capsys):
    assert check_data_quality(config.BUNDLED_DATA_PATH) == 0
    assert "Found 0 potential issues" in capsys.readouterr().out


def test_reports_orphan_verse(capsys, corpus_file):
    # the fixture corpus has a verse in chapter 3 without a chapter entry
    assert check_data_quality(corpus_file) == 1
    assert "3.5: No chapter entry for chapter 3" in capsys.readouterr().out


def test_reports_each_kind_of_issue(capsys, tmp_path):
    chapter = {"chapter_number": 1, "verses_count": 2, "name": "x"}
    bad_text = make_sloka(1, 4, slok="  ", adi={"author": "", "et": ""})
    raw = {
        "chapters": [chapter],
        "slokas": [make_sloka(1, 1), make_sloka(1, 1), bad_text],
    }
    assert check_data_quality(write_corpus(tmp_path, raw)) == 5
    out = capsys.readouterr().out
    assert "1.1: Duplicate sloka (2 entries)" in out
    assert "Chapter 1: verses_count 2 but verse 4 present" in out
    assert "1.4: Empty sloka text" in out
    assert "1.4: Empty 'adi' translation" in out
    assert "1.4: Missing 'adi' author" in out


def test_missing_file(capsys, tmp_path):
    assert check_data_quality(tmp_path / "missing.json") == -1
    assert "ERROR: File not found" in capsys.readouterr().out


def test_malformed_file(capsys, tmp_path):
    path = tmp_path / "gita.json"
    path.write_text("[1, 2", encoding="utf-8")
    assert check_data_quality(path) == -1
    assert "ERROR: Error parsing JSON" in capsys.readouterr().out


def test_main_exit_codes(capsys, corpus_file):
    assert main([str(config.BUNDLED_DATA_PATH)]) == 0
    assert main([str(corpus_file)]) == 1
    assert main(["a", "b"]) == 1
    assert "Usage:" in capsys.readouterr().out


def test_main_defaults_to_configured_path(use_corpus_file):
    assert main([]) == 1
