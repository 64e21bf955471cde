"""
Script membership tests and the ordered registry that assigns language indices.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List

import regex

from .models import NO_LANGUAGE

LOGGER = logging.getLogger(__name__)

DEFAULT_LANGUAGES = ("Latin", "Cyrillic")


class ScriptMembership(ABC):
    """Answers whether a single character belongs to a language's script."""

    name: str

    @abstractmethod
    def contains(self, char: str) -> bool:
        raise NotImplementedError

    def __contains__(self, char: object) -> bool:
        return isinstance(char, str) and self.contains(char)


class UnicodeScript(ScriptMembership):
    """Membership in a Unicode script such as ``Latin`` or ``Han``."""

    def __init__(self, script: str) -> None:
        try:
            self._pattern = regex.compile(rf"\p{{Script={script}}}")
        except regex.error as exc:
            raise ValueError(f"Unknown Unicode script '{script}'.") from exc
        self.name = script

    def contains(self, char: str) -> bool:
        return self._pattern.match(char) is not None

    def __repr__(self) -> str:
        return f"UnicodeScript({self.name!r})"


class CharacterSet(ScriptMembership):
    """Membership in an explicit set of characters."""

    def __init__(self, name: str, characters: Iterable[str]) -> None:
        self.name = name
        self._characters = frozenset(characters)

    def contains(self, char: str) -> bool:
        return char in self._characters

    def __repr__(self) -> str:
        return f"CharacterSet({self.name!r}, {len(self._characters)} chars)"


class LanguageRegistry:
    """
    Ordered collection of script membership tests.

    The position of a membership test is its language index. Lookups scan in
    registration order and the first accepting test wins, so overlapping
    scripts resolve to whichever was registered first.
    """

    def __init__(self, languages: Iterable[ScriptMembership] = ()) -> None:
        self._languages: List[ScriptMembership] = list(languages)

    def register(self, language: ScriptMembership) -> int:
        """Append a membership test and return its language index."""
        self._languages.append(language)
        return len(self._languages) - 1

    def index_of(self, char: str) -> int:
        for index, language in enumerate(self._languages):
            if language.contains(char):
                return index
        return NO_LANGUAGE

    @property
    def names(self) -> List[str]:
        return [language.name for language in self]

    def __len__(self) -> int:
        return len(self._languages)

    def __iter__(self) -> Iterator[ScriptMembership]:
        return iter(self._languages)

    def __getitem__(self, index: int) -> ScriptMembership:
        return self._languages[index]

    def __repr__(self) -> str:
        return f"LanguageRegistry({self.names!r})"


def build_registry(scripts: Iterable[str]) -> LanguageRegistry:
    """Build a registry from Unicode script names, preserving their order."""
    registry = LanguageRegistry()
    for script in scripts:
        registry.register(UnicodeScript(script))
    LOGGER.debug("Registered languages: %s", registry.names)
    return registry
