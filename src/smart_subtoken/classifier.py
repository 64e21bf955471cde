from __future__ import annotations

import unicodedata

from .languages import LanguageRegistry
from .models import NO_LANGUAGE, RuneClass


def classify_rune(char: str) -> RuneClass:
    """Classify a single character as letter, decimal digit, punctuation or other."""
    category = unicodedata.category(char)
    if category.startswith("L"):
        return RuneClass.LETTER
    if category == "Nd":
        return RuneClass.DIGIT
    if category.startswith("P"):
        return RuneClass.PUNCTUATION
    return RuneClass.OTHER


class RuneClassifier:
    """Assigns a character class and, for letters, a language index."""

    def __init__(self, registry: LanguageRegistry | None = None) -> None:
        self.registry = registry if registry is not None else LanguageRegistry()

    def classify(self, char: str) -> RuneClass:
        return classify_rune(char)

    def language_index(self, char: str) -> int:
        """Index of the first registered script containing ``char``, or -1."""
        return self.registry.index_of(char)

    def state_of(self, char: str) -> tuple[RuneClass, int]:
        rune_class = classify_rune(char)
        if rune_class is RuneClass.LETTER:
            return rune_class, self.registry.index_of(char)
        return rune_class, NO_LANGUAGE
