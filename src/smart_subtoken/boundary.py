from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .classifier import RuneClassifier
from .models import BoundaryState


@dataclass(frozen=True, slots=True)
class TrackerState:
    """The open segment and the segment closed by the most recent boundary."""

    previous: BoundaryState = field(default_factory=BoundaryState)
    current: BoundaryState = field(default_factory=BoundaryState)


INITIAL_STATE = TrackerState()


def advance(
    state: TrackerState, char: str, classifier: RuneClassifier
) -> Tuple[TrackerState, bool]:
    """
    Feed one character and return the next state plus whether a boundary
    starts at this character.

    A boundary occurs when the character class changes or, for letters, when
    the language index changes. Non-letters always carry language -1.
    """
    rune_class, language = classifier.state_of(char)
    current = state.current
    if rune_class is current.rune_class and language == current.language:
        return state, False
    return TrackerState(previous=current, current=BoundaryState(rune_class, language)), True


class BoundaryTracker:
    """Stateful wrapper around :func:`advance` for scanning one word at a time."""

    def __init__(self, classifier: RuneClassifier) -> None:
        self.classifier = classifier
        self.state = INITIAL_STATE

    def flush(self) -> None:
        self.state = INITIAL_STATE

    def push(self, char: str) -> bool:
        self.state, boundary = advance(self.state, char, self.classifier)
        return boundary

    @property
    def previous(self) -> BoundaryState:
        return self.state.previous

    @property
    def current(self) -> BoundaryState:
        return self.state.current
