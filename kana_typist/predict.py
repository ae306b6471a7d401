"""
Next-keystroke prediction for kana-typist.

The typed input is replayed against every decomposition of the reading text
at once. Each live decomposition is a State: a text position plus the
letters still owed for the option being typed. States form a set, so one
branch dying never affects another.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from kana_typist.keyconfig import is_known_kana
from kana_typist.lattice import KanaLattice


@dataclass(frozen=True, slots=True)
class Prediction:
    """
    A valid next key.

    Attributes:
        letter: The key to press
        kana: Kana token the key belongs to (None before anything is known)
        spelling: Full spelling of the option the key continues
        recognized: True if kana is a table entry, False for pass-through characters
    """
    letter: str
    kana: Optional[str]
    spelling: Optional[str]
    recognized: bool

    def __repr__(self) -> str:
        return (f"Prediction({self.letter!r}, kana={self.kana!r}, "
                f"spelling={self.spelling!r}, recognized={self.recognized!r})")


@dataclass(frozen=True, slots=True)
class State:
    """A partial decomposition of the reading text during replay."""
    pos: int
    buffer: str
    kana: Optional[str] = None
    spelling: Optional[str] = None

    @property
    def key(self) -> Tuple[int, str, Optional[str]]:
        return (self.pos, self.buffer, self.kana)


def dedupe_states(states: List[State]) -> List[State]:
    """Keep the first state per (pos, buffer, kana)."""
    seen: Dict[Tuple[int, str, Optional[str]], State] = {}
    for state in states:
        if state.key not in seen:
            seen[state.key] = state
    return list(seen.values())


def step_states(lattice: KanaLattice, states: List[State], char: str) -> List[State]:
    """Advance every state by one typed character; states that reject it die."""
    next_states: List[State] = []

    for state in states:
        if state.buffer:
            if state.buffer[0] == char:
                next_states.append(State(
                    pos=state.pos,
                    buffer=state.buffer[1:],
                    kana=state.kana,
                    spelling=state.spelling,
                ))
            continue

        for option in lattice.options_at(state.pos):
            if option.spelling[0] == char:
                next_states.append(State(
                    pos=state.pos + option.advance,
                    buffer=option.spelling[1:],
                    kana=option.kana,
                    spelling=option.spelling,
                ))

    return dedupe_states(next_states)


def replay(lattice: KanaLattice, current_input: str) -> List[State]:
    """
    Replay typed input from the start of the text.

    Returns:
        The surviving states (empty if the input diverged)
    """
    states = [State(pos=0, buffer="")]

    for char in current_input:
        states = step_states(lattice, states, char)
        if not states:
            break

    return states


def is_finished(lattice: KanaLattice, states: List[State]) -> bool:
    """True if some state has typed the whole text."""
    end = len(lattice.text)
    return any(not st.buffer and st.pos >= end for st in states)


def predict_next(reading_text: str, current_input: str) -> List[Prediction]:
    """
    Get the keys that may be typed next.

    Args:
        reading_text: Target kana text
        current_input: Romaji typed so far

    Returns:
        Predictions deduplicated by (letter, kana, spelling) in discovery
        order. Empty when the text is fully typed or the input diverged.
    """
    lattice = KanaLattice(reading_text)
    states = replay(lattice, current_input)

    if is_finished(lattice, states):
        return []

    results: List[Prediction] = []
    seen = set()

    def push(letter: str, kana: Optional[str], spelling: Optional[str]) -> None:
        ident = (letter, kana, spelling)
        if ident in seen:
            return
        seen.add(ident)
        recognized = kana is not None and is_known_kana(kana)
        results.append(Prediction(letter, kana, spelling, recognized))

    for state in states:
        if state.buffer:
            push(state.buffer[0], state.kana, state.spelling)
            continue
        for option in lattice.options_at(state.pos):
            push(option.spelling[0], option.kana, option.spelling)

    return results


def is_complete(reading_text: str, current_input: str) -> bool:
    """True if current_input spells the whole reading text."""
    lattice = KanaLattice(reading_text)
    return is_finished(lattice, replay(lattice, current_input))


def is_valid_input(reading_text: str, current_input: str) -> bool:
    """True if current_input is a prefix of some spelling of reading_text."""
    return bool(replay(KanaLattice(reading_text), current_input))
