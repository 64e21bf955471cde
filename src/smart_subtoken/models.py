from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class RuneClass(Enum):
    """Coarse character class of a single code point."""

    UNDEFINED = -1
    LETTER = 0
    DIGIT = 1
    PUNCTUATION = 2
    OTHER = 3


NO_LANGUAGE = -1


@dataclass(frozen=True, slots=True)
class BoundaryState:
    """Character class and language index of the segment being scanned."""

    rune_class: RuneClass = RuneClass.UNDEFINED
    language: int = NO_LANGUAGE

    @property
    def defined(self) -> bool:
        return self.rune_class is not RuneClass.UNDEFINED


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Detected dominant language and base span of a subtoken.

    ``detected_base`` holds inclusive-exclusive offsets relative to the
    subtoken start; ``(0, 0)`` means the base could not be determined.
    """

    detected_language: int = NO_LANGUAGE
    detected_base: Tuple[int, int] = (0, 0)


@dataclass(slots=True)
class Word:
    """A whitespace-delimited run and its inclusive-exclusive character offsets."""

    text: str
    start_char: int
    end_char: int


@dataclass(slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str
