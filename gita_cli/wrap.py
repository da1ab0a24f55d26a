# wrap.py
#   Word wrapping for terminal output. Unlike textwrap this also starts a new
#   line after every sentence, which reads better for verse translations.

from gita_cli import config

SENTENCE_END = (".", "!", "?")
# a sentence break is skipped when the next word only closes the sentence off
NO_BREAK_BEFORE = (")", ",")


def wrap_text(text: str, width: int = None) -> str:
    """
    Wraps text to at most `width` characters per line (default: the configured
    display width) and breaks after sentence ending punctuation.

    Lengths are counted in characters, not bytes, so Devanagari lines wrap the
    same way Latin ones do. A single word longer than the width is kept whole
    on its own line. Existing line breaks are treated as plain whitespace.
    """
    if width is None:
        width = config.DISPLAY_WIDTH

    words = text.split()
    lines = []
    current = []
    length = 0

    for i, word in enumerate(words):
        if length + len(word) + 1 > width and length > 0:
            lines.append(" ".join(current))
            current, length = [], 0

        if length > 0:
            length += 1  # separator space
        current.append(word)
        length += len(word)

        is_last = i == len(words) - 1
        if not is_last and word.endswith(SENTENCE_END) and not words[i + 1].startswith(NO_BREAK_BEFORE):
            lines.append(" ".join(current))
            current, length = [], 0

    if current:
        lines.append(" ".join(current))
    return "\n".join(lines)
