# errors.py
#   Every failure the tool knows about. They are all fatal: main() turns any
#   GitaError into a one line message on stderr and exit code 1.


class GitaError(Exception):
    """Base class for all expected gita-cli failures."""


class InvalidTranslatorSource(GitaError):
    def __init__(self, source, valid):
        self.source = source
        self.valid = tuple(valid)
        super().__init__(f"Invalid translation source: {source}")


class DatasetUnreadable(GitaError):
    """The corpus file is missing or could not be read."""


class DatasetMalformed(GitaError):
    """The corpus file was read but is not the expected JSON layout."""


class EmptyCorpus(GitaError):
    def __init__(self):
        super().__init__("No slokas found in the JSON data.")


class VerseNotFound(GitaError):
    def __init__(self, chapter, verse):
        self.chapter = chapter
        self.verse = verse
        super().__init__(f"Chapter {chapter}, Verse {verse} not found.")
