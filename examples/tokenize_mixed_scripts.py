"""
Example: extract language-tagged subtokens from mixed-script text.

Usage:
    python examples/tokenize_mixed_scripts.py "hello123 你好привет"
"""

from __future__ import annotations

import sys

from smart_subtoken import SmartTokenizer, load_config


def main() -> None:
    text = " ".join(sys.argv[1:]) or "hello123 你好привет aаaа"
    tokenizer = SmartTokenizer.from_config(load_config())
    languages = tokenizer.registry.names
    for subtoken, tag in sorted(tokenizer.tokenize_with_language(text).items()):
        if tag.detected_language < 0:
            print(f"{subtoken!r}: undetermined")
            continue
        start, end = tag.detected_base
        print(
            f"{subtoken!r}: {languages[tag.detected_language]} "
            f"(base {subtoken[start:end]!r})"
        )


if __name__ == "__main__":
    main()
