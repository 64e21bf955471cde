from __future__ import annotations

import logging
from typing import Dict, List, Union

from .models import Document, LanguageTag
from .tokenization import SmartTokenizer

LOGGER = logging.getLogger(__name__)

Subtokens = Union[Dict[str, LanguageTag], Dict[str, int]]


def process_document(doc: Document, tokenizer: SmartTokenizer) -> Subtokens:
    """Extract the merged subtoken mapping for a single document."""
    subtokens = tokenizer.tokenize(doc.text)
    LOGGER.debug("Document %s produced %d subtokens", doc.doc_id, len(subtokens))
    return subtokens


def process_corpus(
    documents: List[Document], tokenizer: SmartTokenizer
) -> Dict[str, Subtokens]:
    """Process all documents and return the per-document subtoken mappings."""
    results: Dict[str, Subtokens] = {}
    for document in documents:
        results[document.doc_id] = process_document(document, tokenizer)
    LOGGER.info(
        "Tokenized %d documents into %d subtokens",
        len(results),
        sum(len(subtokens) for subtokens in results.values()),
    )
    return results
