"""
kana-typist: kana → romaji engine for Japanese typing games

Given a kana line and the romaji a player has typed so far, tells which keys
may come next and renders the best full romanization, honoring per-kana
spelling preferences (tendencies).

Basic Usage:
    import kana_typist

    keys = kana_typist.predict_next("きょうは", "ky")
    print(sorted({k.letter for k in keys}))        # ['o']

    tendencies = kana_typist.default_tendencies()
    print(kana_typist.best_romanization(tendencies, "しゃしん", "sh"))  # shasin
"""

from typing import List, Mapping, Optional

from kana_typist.keyconfig import (
    KeyConfig, KeyConfigError, lookup_by_kana, longest_matches_at,
)
from kana_typist.predict import Prediction
from kana_typist.tendencies import (
    DEFAULT_TENDENCIES, default_tendencies, validate_tendencies,
)

__version__ = "0.1.0"


# =============================================================================
# Main API
# =============================================================================

def predict_next(reading_text: str, current_input: str) -> List[Prediction]:
    """
    Get the keys that may be typed next.

    An empty list means the text is fully typed or the input has diverged;
    use is_complete() to tell the two apart.

    Example:
        >>> [p.letter for p in kana_typist.predict_next("つき", "tu")]
        ['k']
    """
    from kana_typist.predict import predict_next as _predict_next
    return _predict_next(reading_text, current_input)


def best_romanization(
    tendencies: Optional[Mapping[str, str]],
    reading_text: str,
    current_input: str = "",
) -> str:
    """
    Render the best full romanization of a kana text.

    The result starts with current_input whenever the input fits the text.
    Otherwise the canonical basic romanization is returned. Never raises.

    Example:
        >>> kana_typist.best_romanization({"し": "shi"}, "し", "sh")
        'shi'
    """
    from kana_typist.search import best_romanization as _best
    return _best(tendencies, reading_text, current_input)


def remaining_romaji(
    tendencies: Optional[Mapping[str, str]],
    reading_text: str,
    current_input: str,
) -> str:
    """Get the part of the best romanization that is still to be typed."""
    from kana_typist.search import remaining_romaji as _remaining
    return _remaining(tendencies, reading_text, current_input)


def basic_romaji(reading_text: str) -> str:
    """
    Convert kana text to romaji with canonical spellings only.

    Example:
        >>> kana_typist.basic_romaji("こんにちは")
        'konnitiha'
    """
    from kana_typist.basic import basic_romaji as _basic
    return _basic(reading_text)


def is_complete(reading_text: str, current_input: str) -> bool:
    """True if current_input spells the whole reading text."""
    from kana_typist.predict import is_complete as _is_complete
    return _is_complete(reading_text, current_input)


def is_valid_input(reading_text: str, current_input: str) -> bool:
    """True if current_input is a prefix of some spelling of reading_text."""
    from kana_typist.predict import is_valid_input as _is_valid
    return _is_valid(reading_text, current_input)


def get_version() -> str:
    """Get the library version."""
    return __version__


# =============================================================================
# Module-level exports
# =============================================================================

__all__ = [
    # Data classes
    "KeyConfig",
    "Prediction",
    # Engine
    "predict_next",
    "best_romanization",
    "remaining_romaji",
    "basic_romaji",
    "is_complete",
    "is_valid_input",
    # Table
    "lookup_by_kana",
    "longest_matches_at",
    # Tendencies
    "DEFAULT_TENDENCIES",
    "default_tendencies",
    "validate_tendencies",
    # Exceptions
    "KeyConfigError",
    "get_version",
    "__version__",
]
