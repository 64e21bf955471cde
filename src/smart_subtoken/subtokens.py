"""
Window-bounded subtoken generation for a single word.

Boundary offsets are pushed into a circular window whose capacity is the
policy depth plus one. Each time the window is full, and again while it
drains at the end of the word, every substring from the window's left edge
to one of the later offsets is emitted. Two parallel windows track the class
and language of the segments between those offsets.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List

from .boundary import BoundaryTracker
from .circular_window import CircularWindow
from .classifier import RuneClassifier
from .detection import detect_language
from .models import BoundaryState, LanguageTag, RuneClass
from .policy import DepthPolicy, UnboundedDepthPolicy


@dataclass(slots=True)
class WindowSnapshot:
    """Contents of the offset window and its segment descriptions at one step."""

    left: int
    rest: List[int]
    classes: List[RuneClass]
    languages: List[int]

    @property
    def offsets(self) -> List[int]:
        return [self.left, *self.rest]


class SubtokenGenerator:
    """Emits every boundary-aligned substring of a word within the policy depth."""

    def __init__(
        self,
        classifier: RuneClassifier | None = None,
        policy: DepthPolicy | None = None,
    ) -> None:
        self.classifier = classifier if classifier is not None else RuneClassifier()
        self.policy = policy if policy is not None else UnboundedDepthPolicy()

    def depth_for(self, word: str) -> int:
        depth = self.policy.get_depth(len(word))
        if depth < 0:
            raise ValueError(
                f"{self.policy!r} returned negative depth {depth} for length {len(word)}."
            )
        return depth

    def subtokens_with_depth(self, word: str, depth: int | None = None) -> Dict[str, int]:
        """Map each subtoken to its depth index (segments spanned minus one)."""
        if depth is None:
            depth = self.depth_for(word)
        elif depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}.")
        subtokens: Dict[str, int] = {}
        for snapshot in self.windows(word, depth):
            for position, right in enumerate(snapshot.rest):
                subtokens[word[snapshot.left : right]] = position
        return subtokens

    def subtokens_with_language(self, word: str) -> Dict[str, LanguageTag]:
        """Map each subtoken to its detected language and base span."""
        subtokens: Dict[str, LanguageTag] = {}
        for snapshot in self.windows(word, self.depth_for(word)):
            offsets = snapshot.offsets
            for position, right in enumerate(snapshot.rest):
                subtokens[word[snapshot.left : right]] = detect_language(
                    offsets,
                    snapshot.classes[: position + 1],
                    snapshot.languages[: position + 1],
                )
        return subtokens

    def windows(self, word: str, depth: int) -> Iterator[WindowSnapshot]:
        """Yield the window contents at every full step and every drain step."""
        offsets = CircularWindow(depth + 1)
        classes = CircularWindow(max(1, depth))
        languages = CircularWindow(max(1, depth))
        tracker = BoundaryTracker(self.classifier)

        for index, char in enumerate(word):
            if not tracker.push(char):
                continue
            offsets.push(index)
            if tracker.previous.defined:
                _push_segment(classes, languages, tracker.previous)
            if offsets.full():
                yield _snapshot(offsets, classes, languages)

        # Close the last open segment at the end of the word.
        offsets.push(len(word))
        if tracker.current.defined:
            _push_segment(classes, languages, tracker.current)

        while not offsets.empty():
            yield _snapshot(offsets, classes, languages)
            offsets.pop()
            classes.pop()
            languages.pop()


def _push_segment(
    classes: CircularWindow, languages: CircularWindow, state: BoundaryState
) -> None:
    classes.push(state.rune_class.value)
    languages.push(state.language)


def _snapshot(
    offsets: CircularWindow, classes: CircularWindow, languages: CircularWindow
) -> WindowSnapshot:
    left, rest = offsets.extract()
    return WindowSnapshot(
        left=left,
        rest=rest,
        classes=[RuneClass(value) for value in classes.values()],
        languages=languages.values(),
    )
