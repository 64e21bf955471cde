from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import SmartTokenConfig, load_config
from .models import Document, LanguageTag
from .pipeline import Subtokens, process_corpus
from .tokenization import SmartTokenizer

app = typer.Typer(help="Smart subtoken extraction CLI.", no_args_is_help=True)


@app.callback()
def configure(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging on stderr."
    ),
) -> None:
    """Multi-resolution subtoken extraction."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


@app.command()
def tokenize(
    text: str = typer.Argument(..., help="Text to split into subtokens."),
    config: Path | None = typer.Option(None, "--config", "-c"),
    languages: List[str] | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Unicode script to register, in order (repeatable).",
    ),
    metadata: str | None = typer.Option(
        None, "--metadata", "-m", help="Metadata to report: 'language' or 'depth'."
    ),
    policy: str | None = typer.Option(
        None, "--policy", help="Depth policy: 'interpolated' or 'unbounded'."
    ),
    max_length: int | None = typer.Option(None, "--max-length"),
    max_depth: int | None = typer.Option(None, "--max-depth"),
    min_length: int | None = typer.Option(None, "--min-length"),
    min_depth: int | None = typer.Option(None, "--min-depth"),
) -> None:
    """Tokenize TEXT and print the subtoken mapping as JSON."""
    cfg = load_config(config)
    _apply_overrides(
        cfg, languages, metadata, policy, max_length, max_depth, min_length, min_depth
    )
    tokenizer = _build_tokenizer(cfg)
    typer.echo(
        json.dumps(_subtokens_payload(tokenizer.tokenize(text)), ensure_ascii=False, indent=2)
    )


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    languages: List[str] | None = typer.Option(
        None,
        "--language",
        "-l",
        help="Unicode script to register, in order (repeatable).",
    ),
    metadata: str | None = typer.Option(
        None, "--metadata", "-m", help="Metadata to report: 'language' or 'depth'."
    ),
    policy: str | None = typer.Option(
        None, "--policy", help="Depth policy: 'interpolated' or 'unbounded'."
    ),
    max_length: int | None = typer.Option(None, "--max-length"),
    max_depth: int | None = typer.Option(None, "--max-depth"),
    min_length: int | None = typer.Option(None, "--min-length"),
    min_depth: int | None = typer.Option(None, "--min-depth"),
) -> None:
    """Tokenize every .txt document under INPUT_PATH and emit a JSON summary."""
    cfg = load_config(config)
    _apply_overrides(
        cfg, languages, metadata, policy, max_length, max_depth, min_length, min_depth
    )
    tokenizer = _build_tokenizer(cfg)
    documents = _load_documents(input_path)
    results = process_corpus(documents, tokenizer)
    typer.echo(
        json.dumps({"documents": _build_summary(results)}, ensure_ascii=False, indent=2)
    )


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = SmartTokenConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: SmartTokenConfig,
    languages: List[str] | None,
    metadata: str | None,
    policy: str | None,
    max_length: int | None,
    max_depth: int | None,
    min_length: int | None,
    min_depth: int | None,
) -> None:
    """Apply CLI overrides to the loaded configuration when provided."""
    if languages:
        config.languages = list(languages)
    if metadata:
        config.metadata = metadata
    settings = config.depth_policy
    if policy:
        settings.name = policy
    if max_length is not None:
        settings.max_length = max_length
    if max_depth is not None:
        settings.max_depth = max_depth
    if min_length is not None:
        settings.min_length = min_length
    if min_depth is not None:
        settings.min_depth = min_depth


def _build_tokenizer(config: SmartTokenConfig) -> SmartTokenizer:
    """Build the tokenizer, reporting configuration mistakes as CLI errors."""
    try:
        return SmartTokenizer.from_config(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


SUPPORTED_INPUT_EXTENSIONS = {".txt"}


class DocumentSummary(TypedDict):
    doc_id: str
    subtoken_count: int
    subtokens: Dict[str, Any]


def _load_documents(input_path: Path) -> List[Document]:
    """Read one .txt file, or every .txt file below a directory keyed by relative path."""
    if input_path.is_file():
        return [_document_from_file(input_path, input_path.name)]

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [
        _document_from_file(file, file.relative_to(input_path).as_posix())
        for file in files
    ]


def _document_from_file(path: Path, doc_id: str) -> Document:
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise typer.BadParameter(f"{path} is not valid UTF-8 text.") from exc
    return Document(doc_id=doc_id, text=text)


def _build_summary(results: Dict[str, Subtokens]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each processed document."""
    summary: List[DocumentSummary] = []
    for doc_id, subtokens in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "subtoken_count": len(subtokens),
                "subtokens": _subtokens_payload(subtokens),
            }
        )
    return summary


def _subtokens_payload(subtokens: Subtokens) -> Dict[str, Any]:
    return {text: _metadata_payload(value) for text, value in subtokens.items()}


def _metadata_payload(value: LanguageTag | int) -> Any:
    if isinstance(value, LanguageTag):
        return {
            "language": value.detected_language,
            "base": list(value.detected_base),
        }
    return value


if __name__ == "__main__":
    main()
