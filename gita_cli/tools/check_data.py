# check_data.py
import sys
from collections import Counter
from pathlib import Path

from gita_cli import config
from gita_cli.corpus import load_corpus
from gita_cli.errors import GitaError


def check_data_quality(file_path: Path) -> int:
    """
    Loads a gita.json corpus and reports data quality issues, one line each.
    Returns the number of issues found, or -1 if the file could not be loaded.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        print(f"ERROR: File not found at {file_path}")
        return -1

    print(f"--- Starting data quality check for: {file_path.name} ---")
    try:
        corpus = load_corpus(file_path)
    except GitaError as e:
        print(f"ERROR: {e}")
        return -1

    issue_count = 0

    # Check 1: every sloka points at a known chapter
    for verse in corpus.verses:
        if corpus.find_chapter(verse.chapter) is None:
            print(f"{verse.ref}: No chapter entry for chapter {verse.chapter}")
            issue_count += 1

    # Check 2: (chapter, verse) must be unique, lookups only ever see the first
    pairs = Counter((v.chapter, v.verse) for v in corpus.verses)
    for (chapter, verse), count in sorted(pairs.items()):
        if count > 1:
            print(f"{chapter}.{verse}: Duplicate sloka ({count} entries)")
            issue_count += 1

    # Check 3: verses_count should cover the highest verse number present
    highest = {}
    for v in corpus.verses:
        highest[v.chapter] = max(highest.get(v.chapter, 0), v.verse)
    for chapter in corpus.chapters:
        top = highest.get(chapter.chapter_number, 0)
        if top > chapter.verses_count:
            print(f"Chapter {chapter.chapter_number}: verses_count {chapter.verses_count} but verse {top} present")
            issue_count += 1

    # Check 4: text quality
    for verse in corpus.verses:
        if not verse.slok.strip():
            print(f"{verse.ref}: Empty sloka text")
            issue_count += 1
        for key, entry in verse.translations.items():
            if not entry.text.strip():
                print(f"{verse.ref}: Empty '{key}' translation")
                issue_count += 1
            if not entry.author.strip():
                print(f"{verse.ref}: Missing '{key}' author")
                issue_count += 1

    print(f"--- Check complete. Found {issue_count} potential issues. ---")
    return issue_count


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) > 1:
        print("Usage: gita-check-data [path_to_gita_json]")
        return 1
    config.load_settings()
    path = Path(argv[0]) if argv else config.DATA_PATH
    return 0 if check_data_quality(path) == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
