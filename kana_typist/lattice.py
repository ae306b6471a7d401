"""
Position lattice for kana-typist.

Every position of a reading text is resolved once into one of a few kinds
(sokuon, moraic n, ordinary table kana, literal character) together with the
romaji options that can be typed from there. The option enumerator and the
best-continuation search both walk this lattice, so they apply the same
sokuon / moraic-n rules.

A lattice is built per call and discarded afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from kana_typist.constants import (
    SOKUON, MORAIC_N, MORAIC_N_SPELLINGS, BARE_N,
    N_BLOCKING_INITIALS, CONSONANTS,
)
from kana_typist.keyconfig import lookup_by_kana, longest_matches_at


class PositionKind(Enum):
    """What sits at a text position."""
    END = "end"
    LITERAL = "literal"
    SOKUON = "sokuon"
    MORAIC_N = "moraic_n"
    ORDINARY = "ordinary"


@dataclass(frozen=True, slots=True)
class RomajiOption:
    """
    One way of typing the text from a given position.

    Attributes:
        spelling: Keys to type
        advance: Number of reading-text characters consumed
        kana: Kana token this option realizes (the character itself for literals)
        kind: Kind of the position the option starts at
        doubled: For sokuon doubling, the option of the next kana being doubled
    """
    spelling: str
    advance: int
    kana: str
    kind: PositionKind
    doubled: Optional["RomajiOption"] = None


class KanaLattice:
    """Memoized options and initial letters per position of one reading text."""

    def __init__(self, text: str):
        self.text = text
        self._options: Dict[int, List[RomajiOption]] = {}
        self._initials: Dict[int, List[str]] = {}

    def kind_at(self, pos: int) -> PositionKind:
        if pos >= len(self.text):
            return PositionKind.END

        char = self.text[pos]
        if char == SOKUON:
            return PositionKind.SOKUON
        if char == MORAIC_N:
            return PositionKind.MORAIC_N
        if longest_matches_at(self.text, pos):
            return PositionKind.ORDINARY
        return PositionKind.LITERAL

    def options_at(self, pos: int) -> List[RomajiOption]:
        """
        Get every option that can be typed starting at pos.

        Sokuon and moraic-n options depend on the following position, so
        missing entries are filled from the end of the text backwards; each
        position then only reads an already-computed neighbour.
        """
        if pos in self._options:
            return self._options[pos]

        for p in range(max(len(self.text), pos), pos - 1, -1):
            if p not in self._options:
                self._options[p] = self._build_options(p)

        return self._options[pos]

    def initials_at(self, pos: int) -> List[str]:
        """First letters of the options at pos, deduplicated in option order."""
        if pos in self._initials:
            return self._initials[pos]

        initials: List[str] = []
        for option in self.options_at(pos):
            first = option.spelling[0]
            if first not in initials:
                initials.append(first)

        self._initials[pos] = initials
        return initials

    # ------------------------------------------------------------------------

    def _build_options(self, pos: int) -> List[RomajiOption]:
        kind = self.kind_at(pos)

        if kind is PositionKind.END:
            return []
        if kind is PositionKind.SOKUON:
            return self._sokuon_options(pos)
        if kind is PositionKind.MORAIC_N:
            return self._moraic_n_options(pos)
        if kind is PositionKind.ORDINARY:
            return [
                RomajiOption(spelling, len(config.kana), config.kana, kind)
                for config in longest_matches_at(self.text, pos)
                for spelling in config.spellings
            ]

        char = self.text[pos]
        return [RomajiOption(char, 1, char, kind)]

    def _sokuon_options(self, pos: int) -> List[RomajiOption]:
        options = []

        fixed = lookup_by_kana(SOKUON)
        if fixed is not None:
            for spelling in fixed.spellings:
                options.append(RomajiOption(spelling, 1, SOKUON, PositionKind.SOKUON))

        # Doubling: っか -> "kka" (the sokuon and the next kana typed as one unit)
        for nxt in self._options[pos + 1]:
            first = nxt.spelling[0]
            if first in CONSONANTS:
                options.append(RomajiOption(
                    spelling=first + nxt.spelling,
                    advance=1 + nxt.advance,
                    kana=SOKUON,
                    kind=PositionKind.SOKUON,
                    doubled=nxt,
                ))

        return options

    def _moraic_n_options(self, pos: int) -> List[RomajiOption]:
        spellings = list(MORAIC_N_SPELLINGS)

        is_last = pos == len(self.text) - 1
        blocked = any(c in N_BLOCKING_INITIALS for c in self.initials_at(pos + 1))
        if is_last or not blocked:
            spellings.append(BARE_N)

        return [RomajiOption(s, 1, MORAIC_N, PositionKind.MORAIC_N) for s in spellings]
