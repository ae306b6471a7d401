"""
Basic romanizer for kana-typist.

Context-free, tendency-free transliteration using canonical spellings only.
Used as the safety net of the best-continuation search.
"""

from kana_typist.constants import MORAIC_N, BARE_N, MAX_KANA_LENGTH
from kana_typist.keyconfig import lookup_by_kana


def basic_romaji(reading_text: str) -> str:
    """
    Convert kana text to romaji with the canonical spelling of each token.

    ん is always "n". Other tokens are matched longest first; characters
    without a table entry pass through unchanged.

    Example:
        >>> basic_romaji("きょうは")
        'kyouha'
    """
    result = []
    i = 0
    n = len(reading_text)

    while i < n:
        if reading_text[i] == MORAIC_N:
            result.append(BARE_N)
            i += 1
            continue

        for length in range(min(MAX_KANA_LENGTH, n - i), 0, -1):
            config = lookup_by_kana(reading_text[i:i + length])
            if config is not None:
                result.append(config.canonical)
                i += length
                break
        else:
            result.append(reading_text[i])
            i += 1

    return "".join(result)
