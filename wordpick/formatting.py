"""Output formatting."""
from typing import Iterable

LINE_WIDTH = 80


def wrap_words(words: Iterable[str], width: int = LINE_WIDTH) -> str:
    """
    Greedily fill space-separated lines of at most `width` columns.

    The result starts with a newline and ends with a blank line.
    """
    parts = []
    line_len = width + 1  # forces a line break before the first word
    for word in words:
        line_len += len(word) + 1
        if line_len > width:
            line_len = len(word) + 1
            parts.append('\n' + word)
        else:
            parts.append(' ' + word)
    parts.append('\n\n')
    return ''.join(parts)
