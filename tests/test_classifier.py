import pytest

from smart_subtoken.boundary import INITIAL_STATE, BoundaryTracker, advance
from smart_subtoken.classifier import RuneClassifier, classify_rune
from smart_subtoken.languages import (
    CharacterSet,
    LanguageRegistry,
    UnicodeScript,
    build_registry,
)
from smart_subtoken.models import BoundaryState, RuneClass


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("a", RuneClass.LETTER),
        ("ж", RuneClass.LETTER),
        ("你", RuneClass.LETTER),
        ("7", RuneClass.DIGIT),
        ("٣", RuneClass.DIGIT),
        (".", RuneClass.PUNCTUATION),
        ("«", RuneClass.PUNCTUATION),
        ("☭", RuneClass.OTHER),
        ("+", RuneClass.OTHER),
        ("²", RuneClass.OTHER),
    ],
)
def test_classify_rune(char: str, expected: RuneClass):
    assert classify_rune(char) is expected


def test_registry_uses_registration_order():
    registry = build_registry(["Latin", "Cyrillic"])

    assert registry.names == ["Latin", "Cyrillic"]
    assert registry.index_of("a") == 0
    assert registry.index_of("а") == 1
    assert registry.index_of("你") == -1


def test_registry_first_match_wins():
    registry = LanguageRegistry([CharacterSet("vowels", "aeiou"), UnicodeScript("Latin")])

    assert registry.index_of("a") == 0
    assert registry.index_of("b") == 1

    reordered = LanguageRegistry([UnicodeScript("Latin"), CharacterSet("vowels", "aeiou")])
    assert reordered.index_of("a") == 0
    assert reordered.index_of("b") == 0


def test_register_returns_language_index():
    registry = LanguageRegistry()

    assert registry.register(UnicodeScript("Greek")) == 0
    assert registry.register(UnicodeScript("Han")) == 1
    assert len(registry) == 2
    assert "λ" in registry[0]
    assert "λ" not in registry[1]


def test_unknown_script_is_rejected():
    with pytest.raises(ValueError):
        UnicodeScript("Klingon")


def test_language_index_only_for_letters():
    classifier = RuneClassifier(build_registry(["Latin"]))

    assert classifier.state_of("q") == (RuneClass.LETTER, 0)
    assert classifier.state_of("5") == (RuneClass.DIGIT, -1)
    assert classifier.state_of("你") == (RuneClass.LETTER, -1)


def test_advance_threads_explicit_state():
    classifier = RuneClassifier(build_registry(["Latin", "Cyrillic"]))

    state, boundary = advance(INITIAL_STATE, "h", classifier)
    assert boundary
    assert not state.previous.defined
    assert state.current == BoundaryState(RuneClass.LETTER, 0)

    same, boundary = advance(state, "i", classifier)
    assert not boundary
    assert same == state

    state, boundary = advance(state, "и", classifier)
    assert boundary
    assert state.previous == BoundaryState(RuneClass.LETTER, 0)
    assert state.current == BoundaryState(RuneClass.LETTER, 1)

    state, boundary = advance(state, "4", classifier)
    assert boundary
    assert state.current == BoundaryState(RuneClass.DIGIT, -1)

    state, boundary = advance(state, "你", classifier)
    assert boundary
    assert state.previous == BoundaryState(RuneClass.DIGIT, -1)
    assert state.current == BoundaryState(RuneClass.LETTER, -1)


def test_tracker_reports_boundaries_and_flushes():
    tracker = BoundaryTracker(RuneClassifier(build_registry(["Latin"])))

    assert [tracker.push(char) for char in "ab12.."] == [
        True,
        False,
        True,
        False,
        True,
        False,
    ]
    assert tracker.previous == BoundaryState(RuneClass.DIGIT, -1)
    assert tracker.current == BoundaryState(RuneClass.PUNCTUATION, -1)

    tracker.flush()
    assert tracker.state == INITIAL_STATE
    assert tracker.push(".")
