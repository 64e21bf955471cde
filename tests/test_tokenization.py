import pytest

from smart_subtoken.config import SmartTokenConfig, config_from_dict
from smart_subtoken.languages import build_registry
from smart_subtoken.models import LanguageTag
from smart_subtoken.policy import InterpolatedDepthPolicy
from smart_subtoken.tokenization import SmartTokenizer, split_words


@pytest.fixture
def tokenizer() -> SmartTokenizer:
    return SmartTokenizer(
        registry=build_registry(["Latin", "Cyrillic"]),
        policy=InterpolatedDepthPolicy(10, 10, 18, 2),
    )


def test_split_words_returns_offsets():
    text = "  hello\tworld\n　привет  "
    words = split_words(text)

    assert [word.text for word in words] == ["hello", "world", "привет"]
    assert words[0].start_char == 2
    assert words[0].end_char == 7
    assert text[words[-1].start_char : words[-1].end_char] == "привет"


def test_tokenize_splits_on_whitespace(tokenizer: SmartTokenizer):
    assert tokenizer.tokenize("hello world") == {
        "hello": LanguageTag(0, (0, 5)),
        "world": LanguageTag(0, (0, 5)),
    }


@pytest.mark.parametrize("text", ["", "   ", "\n\t  "])
def test_blank_text_yields_empty_mapping(tokenizer: SmartTokenizer, text: str):
    assert tokenizer.tokenize(text) == {}


def test_results_merge_across_words(tokenizer: SmartTokenizer):
    separate = {**tokenizer.tokenize("hello123"), **tokenizer.tokenize("где!")}

    assert tokenizer.tokenize("hello123 где!") == separate


def test_repeated_subtokens_collapse_to_one_key(tokenizer: SmartTokenizer):
    result = tokenizer.tokenize_with_depth("ab.cd x.ab")

    assert result == {
        "ab": 0,
        "ab.": 1,
        "ab.cd": 2,
        ".": 0,
        ".cd": 1,
        "cd": 0,
        "x": 0,
        "x.": 1,
        "x.ab": 2,
        ".ab": 1,
    }


def test_tokenize_does_not_leak_state_between_calls(tokenizer: SmartTokenizer):
    first = tokenizer.tokenize("hello123")
    tokenizer.tokenize("你好привет aаaа a.b.c.d")
    last = tokenizer.tokenize("hello123")

    assert first == last
    assert first == {
        "hello": LanguageTag(0, (0, 5)),
        "123": LanguageTag(-1, (0, 0)),
        "hello123": LanguageTag(0, (0, 5)),
    }


def test_subtoken_set(tokenizer: SmartTokenizer):
    assert tokenizer.subtoken_set("hello... ☭123") == {
        "hello",
        "...",
        "hello...",
        "☭",
        "123",
        "☭123",
    }


def test_tokenize_words_keeps_words_apart(tokenizer: SmartTokenizer):
    per_word = tokenizer.tokenize_words("hello hello1")

    assert [word.text for word, _ in per_word] == ["hello", "hello1"]
    assert set(per_word[1][1]) == {"hello", "1", "hello1"}


def test_depth_metadata_mode():
    config = config_from_dict({"metadata": "depth"})
    tokenizer = SmartTokenizer.from_config(config)

    assert tokenizer.tokenize("hello123") == {"hello": 0, "123": 0, "hello123": 1}


def test_from_config_registers_languages_in_order():
    tokenizer = SmartTokenizer.from_config(SmartTokenConfig(languages=["Cyrillic", "Latin"]))

    assert tokenizer.registry.names == ["Cyrillic", "Latin"]
    assert tokenizer.tokenize("helloпривет")["helloпривет"] == LanguageTag(0, (0, 11))


def test_empty_registry_never_detects_a_language():
    tokenizer = SmartTokenizer.from_config(SmartTokenConfig(languages=[]))

    result = tokenizer.tokenize("hello123")
    assert all(tag.detected_language == -1 for tag in result.values())


def test_invalid_configuration_is_rejected_up_front():
    with pytest.raises(ValueError):
        SmartTokenizer(metadata="frequency")
    with pytest.raises(ValueError):
        SmartTokenizer.from_config(SmartTokenConfig(languages=["Elvish"]))
    with pytest.raises(ValueError):
        SmartTokenizer.from_config(
            config_from_dict({"depth_policy": {"name": "interpolated", "min_depth": -1}})
        )


@pytest.mark.parametrize("depth_policy", [{"max_depth": 10.5}, {"min_depth": None}])
def test_non_integer_depth_settings_are_rejected_up_front(depth_policy: dict):
    config = config_from_dict({"depth_policy": depth_policy})

    with pytest.raises(ValueError):
        SmartTokenizer.from_config(config)
