from __future__ import annotations

import re
from typing import Dict, List, Set

from .classifier import RuneClassifier
from .config import SmartTokenConfig
from .languages import LanguageRegistry, build_registry
from .models import LanguageTag, Word
from .policy import DepthPolicy, build_depth_policy_from_config
from .subtokens import SubtokenGenerator

WORD_PATTERN = re.compile(r"\S+", re.UNICODE)

METADATA_MODES = ("language", "depth")


def split_words(text: str) -> List[Word]:
    """Split text on Unicode whitespace into words with character offsets."""
    words: List[Word] = []
    for match in WORD_PATTERN.finditer(text):
        words.append(
            Word(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return words


class SmartTokenizer:
    """
    Splits text into words and merges every word's subtokens into one mapping.

    When the same subtoken text is produced more than once, the metadata
    computed last replaces the earlier value.
    """

    def __init__(
        self,
        registry: LanguageRegistry | None = None,
        policy: DepthPolicy | None = None,
        metadata: str = "language",
    ) -> None:
        if metadata not in METADATA_MODES:
            raise ValueError(
                f"Unknown metadata mode '{metadata}'; expected one of {METADATA_MODES}."
            )
        self.registry = registry if registry is not None else LanguageRegistry()
        self.metadata = metadata
        self.generator = SubtokenGenerator(RuneClassifier(self.registry), policy)

    @classmethod
    def from_config(cls, config: SmartTokenConfig) -> "SmartTokenizer":
        return cls(
            registry=build_registry(config.languages),
            policy=build_depth_policy_from_config(config),
            metadata=config.metadata,
        )

    def tokenize(self, text: str) -> Dict[str, LanguageTag] | Dict[str, int]:
        """Tokenize using the configured metadata mode."""
        if self.metadata == "depth":
            return self.tokenize_with_depth(text)
        return self.tokenize_with_language(text)

    def tokenize_with_language(self, text: str) -> Dict[str, LanguageTag]:
        result: Dict[str, LanguageTag] = {}
        for word in split_words(text):
            result.update(self.generator.subtokens_with_language(word.text))
        return result

    def tokenize_with_depth(self, text: str) -> Dict[str, int]:
        result: Dict[str, int] = {}
        for word in split_words(text):
            result.update(self.generator.subtokens_with_depth(word.text))
        return result

    def subtoken_set(self, text: str) -> Set[str]:
        """Return only the distinct subtoken strings found in ``text``."""
        return set(self.tokenize_with_depth(text))

    def tokenize_words(self, text: str) -> List[tuple[Word, Dict[str, LanguageTag]]]:
        """Return each word alongside its own subtokens, without merging."""
        return [
            (word, self.generator.subtokens_with_language(word.text))
            for word in split_words(text)
        ]
