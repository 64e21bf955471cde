"""
smart_subtoken splits text into multi-resolution subtokens annotated with
depth or detected language.
"""

from __future__ import annotations

from .circular_window import CircularWindow
from .classifier import RuneClassifier, classify_rune
from .config import (
    DepthPolicySettings,
    SmartTokenConfig,
    config_from_dict,
    config_from_yaml,
    load_config,
)
from .detection import detect_language
from .languages import (
    CharacterSet,
    LanguageRegistry,
    ScriptMembership,
    UnicodeScript,
    build_registry,
)
from .models import LanguageTag, RuneClass
from .pipeline import process_corpus, process_document
from .policy import (
    DepthPolicy,
    InterpolatedDepthPolicy,
    UnboundedDepthPolicy,
    build_depth_policy_from_config,
    create_depth_policy,
)
from .subtokens import SubtokenGenerator
from .tokenization import SmartTokenizer, split_words

__all__ = [
    "CircularWindow",
    "RuneClassifier",
    "classify_rune",
    "DepthPolicySettings",
    "SmartTokenConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "detect_language",
    "CharacterSet",
    "LanguageRegistry",
    "ScriptMembership",
    "UnicodeScript",
    "build_registry",
    "LanguageTag",
    "RuneClass",
    "process_corpus",
    "process_document",
    "DepthPolicy",
    "InterpolatedDepthPolicy",
    "UnboundedDepthPolicy",
    "build_depth_policy_from_config",
    "create_depth_policy",
    "SubtokenGenerator",
    "SmartTokenizer",
    "split_words",
]

__version__ = "0.1.0"
