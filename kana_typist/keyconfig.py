"""
Key Config Table for kana-typist.

This module holds the kana → romaji spellings table and its lookup indices:
- an exact-match dict (kana → KeyConfig)
- a marisa_trie.Trie over every kana token for prefix matching

Both are built once, on first use, from KEY_CONFIG_DATA and shared by the
whole process. They are never mutated afterwards.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

import marisa_trie

from kana_typist.constants import KEY_CONFIG_DATA, MAX_KANA_LENGTH


class KeyConfigError(ValueError):
    """Raised when the static key config data is malformed."""
    pass


@dataclass(frozen=True, slots=True)
class KeyConfig:
    """
    A kana token and the romaji spellings accepted for it.

    Attributes:
        kana: The kana token (one or two characters)
        spellings: Accepted spellings; spellings[0] is canonical
    """
    kana: str
    spellings: Tuple[str, ...]

    @property
    def canonical(self) -> str:
        """The default spelling."""
        return self.spellings[0]

    def __repr__(self) -> str:
        return f"KeyConfig({self.kana!r}, {list(self.spellings)!r})"


@dataclass(frozen=True, slots=True)
class KeyConfigTable:
    """Immutable lookup indices over a list of KeyConfig entries."""
    configs: Tuple[KeyConfig, ...]
    by_kana: Dict[str, KeyConfig]
    trie: marisa_trie.Trie
    order: Dict[str, int]


# ============================================================================
# Table Building
# ============================================================================

# Module-level singleton
_TABLE: Optional[KeyConfigTable] = None


def build_table(data: Iterable[Tuple[str, Iterable[str]]]) -> KeyConfigTable:
    """
    Build lookup indices from (kana, spellings) pairs.

    Raises:
        KeyConfigError: On an empty kana, an empty spelling list, an empty
            spelling or a duplicate kana
    """
    configs: List[KeyConfig] = []
    by_kana: Dict[str, KeyConfig] = {}

    for kana, spellings in data:
        spellings = tuple(spellings)
        if not kana:
            raise KeyConfigError("kana must be a non-empty string")
        if not spellings:
            raise KeyConfigError(f"{kana!r} has no spellings")
        if any(not s for s in spellings):
            raise KeyConfigError(f"{kana!r} has an empty spelling")
        if kana in by_kana:
            raise KeyConfigError(f"duplicate kana {kana!r}")

        config = KeyConfig(kana=kana, spellings=spellings)
        configs.append(config)
        by_kana[kana] = config

    order = {config.kana: i for i, config in enumerate(configs)}

    return KeyConfigTable(
        configs=tuple(configs),
        by_kana=by_kana,
        trie=marisa_trie.Trie(list(by_kana)),
        order=order,
    )


def load_key_configs() -> KeyConfigTable:
    """Get the process-wide table. Builds it on first call."""
    global _TABLE

    if _TABLE is None:
        _TABLE = build_table(KEY_CONFIG_DATA)

    return _TABLE


# ============================================================================
# Lookups
# ============================================================================

def lookup_by_kana(kana: str) -> Optional[KeyConfig]:
    """Exact lookup of a kana token."""
    return load_key_configs().by_kana.get(kana)


def is_known_kana(kana: str) -> bool:
    """True if the kana token has a table entry."""
    return kana in load_key_configs().by_kana


def longest_matches_at(text: str, pos: int) -> List[KeyConfig]:
    """
    Find the table entries whose kana is a prefix of text[pos:].

    Only entries of the maximum matching length are returned. Several
    entries of that length are all kept, in table order, so callers can
    resolve ambiguous segmentation themselves.

    Args:
        text: The reading text
        pos: Start position in text

    Returns:
        List of KeyConfig (empty if nothing matches or pos is out of range)
    """
    if pos < 0 or pos >= len(text):
        return []

    table = load_key_configs()
    prefixes = table.trie.prefixes(text[pos:pos + MAX_KANA_LENGTH])
    if not prefixes:
        return []

    max_len = max(len(p) for p in prefixes)
    longest = [p for p in prefixes if len(p) == max_len]
    longest.sort(key=table.order.__getitem__)

    return [table.by_kana[p] for p in longest]


def get_table_size() -> int:
    """Get the number of kana tokens in the table."""
    return len(load_key_configs().configs)
