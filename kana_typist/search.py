"""
Best-continuation search for kana-typist.

Finds the romanization of the whole reading text that
1. starts with what the player already typed,
2. uses as few non-preferred spellings as possible (tendency penalty),
3. is as short as possible.

Score = penalty * PENALTY_WEIGHT + (len(output) - len(current_input)),
lower is better; exact ties keep the first candidate in table order.

The typed part is explored depth-first, with an explicit stack and a
prefix-consistency prune. Once a partial output covers the typed input,
the rest of the text is unconstrained, so the best remainder from each
position is computed once and reused.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from kana_typist.basic import basic_romaji
from kana_typist.constants import PENALTY_WEIGHT
from kana_typist.lattice import KanaLattice, PositionKind, RomajiOption

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Candidate:
    """A complete romanization and its tendency penalty."""
    output: str
    penalty: int


class ContinuationSearch:
    """One best-romanization query."""

    def __init__(self, lattice: KanaLattice, tendencies: Mapping[str, str], current_input: str):
        self.lattice = lattice
        self.tendencies = tendencies
        self.current_input = current_input
        self.candidates: List[Candidate] = []
        self._tails: Dict[int, Optional[Candidate]] = {}

    def prefix_matches(self, output: str) -> bool:
        """True if output and current_input agree on their common length."""
        typed = self.current_input
        if len(output) <= len(typed):
            return typed.startswith(output)
        return output.startswith(typed)

    def penalty(self, option: RomajiOption) -> int:
        if option.doubled is not None:
            return self.penalty(option.doubled)
        if option.kind is not PositionKind.ORDINARY:
            return 0
        return 0 if self.tendencies.get(option.kana) == option.spelling else 1

    def score(self, candidate: Candidate) -> int:
        return candidate.penalty * PENALTY_WEIGHT + len(candidate.output) - len(self.current_input)

    def run(self) -> Optional[Candidate]:
        """Collect candidates and return the best one (None if there are none)."""
        self.candidates = []
        self._descend(0, "", 0)

        if not self.candidates:
            return None
        return min(self.candidates, key=self.score)

    def _descend(self, pos: int, output: str, penalty: int) -> None:
        # explicit stack; children pushed reversed so they pop in table order
        stack: List[Tuple[int, str, int]] = [(pos, output, penalty)]
        while stack:
            pos, output, penalty = stack.pop()
            if not self.prefix_matches(output):
                continue

            if len(output) >= len(self.current_input):
                tail = self._best_tail(pos)
                if tail is not None:
                    self.candidates.append(Candidate(output + tail.output, penalty + tail.penalty))
                continue

            for option in reversed(self.lattice.options_at(pos)):
                stack.append((pos + option.advance, output + option.spelling, penalty + self.penalty(option)))

    def _best_tail(self, pos: int) -> Optional[Candidate]:
        """Best unconstrained romanization of text[pos:]."""
        if pos in self._tails:
            return self._tails[pos]

        end = len(self.lattice.text)
        for p in range(max(end, pos), pos - 1, -1):
            if p in self._tails:
                continue
            if p >= end:
                self._tails[p] = Candidate("", 0)
                continue

            best: Optional[Candidate] = None
            best_score = 0
            for option in self.lattice.options_at(p):
                rest = self._tails.get(p + option.advance)
                if rest is None:
                    continue
                cand = Candidate(option.spelling + rest.output, self.penalty(option) + rest.penalty)
                cand_score = cand.penalty * PENALTY_WEIGHT + len(cand.output)
                if best is None or cand_score < best_score:
                    best, best_score = cand, cand_score
            self._tails[p] = best

        return self._tails[pos]


def best_romanization(
    tendencies: Optional[Mapping[str, str]],
    reading_text: str,
    current_input: str,
) -> str:
    """
    Render the best full romanization of reading_text.

    Args:
        tendencies: Preferred spelling per kana (may be empty or None)
        reading_text: Target kana text
        current_input: Romaji typed so far

    Returns:
        The best romanization starting with current_input, or
        basic_romaji(reading_text) if current_input fits no spelling
    """
    lattice = KanaLattice(reading_text)
    search = ContinuationSearch(lattice, tendencies or {}, current_input)
    best = search.run()

    if best is None:
        logger.debug("No romanization of %r starts with %r; using basic romaji",
                     reading_text, current_input)
        return basic_romaji(reading_text)

    return best.output


def remaining_romaji(
    tendencies: Optional[Mapping[str, str]],
    reading_text: str,
    current_input: str,
) -> str:
    """The part of the best romanization the player still has to type."""
    best = best_romanization(tendencies, reading_text, current_input)
    if best.startswith(current_input):
        return best[len(current_input):]
    return best
