"""
Dominant-language and base-span inference for composite subtokens.

A subtoken spanning one to three boundary segments is reduced to the letter
pattern of its segments (a segment counts as a letter segment only when its
letters belong to a registered language). The pattern selects which segment
supplies the language and which contiguous segments form the base.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence, Tuple

from .models import NO_LANGUAGE, LanguageTag, RuneClass

UNDETERMINED = LanguageTag()

# letter pattern -> (segment providing the language, first base segment, last base segment)
_DECISIONS: Dict[Tuple[bool, ...], Optional[Tuple[int, int, int]]] = {
    (True,): (0, 0, 0),
    (False,): None,
    (True, True): (1, 0, 1),
    (True, False): (0, 0, 0),
    (False, True): (1, 1, 1),
    (False, False): None,
    (True, True, True): None,
    (True, True, False): (1, 0, 1),
    (False, True, True): (2, 1, 2),
    (True, False, False): (0, 0, 0),
    (False, True, False): (1, 1, 1),
    (False, False, True): (2, 2, 2),
    (False, False, False): None,
}


def detect_language(
    offsets: Sequence[int],
    classes: Sequence[RuneClass],
    languages: Sequence[int],
) -> LanguageTag:
    """
    Infer the dominant language and base span of a subtoken.

    ``offsets`` holds the boundary offsets of the subtoken, left edge first,
    so segment ``i`` runs from ``offsets[i]`` to ``offsets[i + 1]``.
    ``classes`` and ``languages`` describe each segment in order. Base offsets
    are returned relative to ``offsets[0]``.
    """
    count = len(classes)
    if count == 0 or count > 3 or len(offsets) < count + 1:
        return UNDETERMINED

    pattern = tuple(
        rune_class is RuneClass.LETTER and language != NO_LANGUAGE
        for rune_class, language in zip(classes, languages)
    )
    if pattern == (True, False, True):
        if languages[0] == languages[2]:
            return _tag(offsets, languages[0], 0, 2)
        return _tag(offsets, languages[2], 2, 2)

    decision = _DECISIONS[pattern]
    if decision is None:
        return UNDETERMINED
    source, first, last = decision
    return _tag(offsets, languages[source], first, last)


def _tag(offsets: Sequence[int], language: int, first: int, last: int) -> LanguageTag:
    origin = offsets[0]
    return LanguageTag(
        detected_language=language,
        detected_base=(offsets[first] - origin, offsets[last + 1] - origin),
    )
