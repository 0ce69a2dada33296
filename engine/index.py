"""In-memory inverted index: term → {document id → TF}.

TF is computed over the stop-word filtered token list of a document, so the
TFs of one document always sum to 1.0.  The corpus size is tracked here as
well because IDF must be computed against the current size at query time.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Mapping
from types import MappingProxyType

logger = logging.getLogger(__name__)

_EMPTY: Mapping[int, float] = MappingProxyType({})


def compute_tf(words: list[str]) -> dict[str, float]:
    """Per-word term frequency.  Empty input → empty dict."""
    total = len(words)
    if total == 0:
        return {}
    return {word: count / total for word, count in Counter(words).items()}


class InvertedIndex:
    def __init__(self) -> None:
        self._postings: dict[str, dict[int, float]] = {}
        # document id → terms it contributed; lets a re-added id be replaced cleanly
        self._doc_terms: dict[int, frozenset[str]] = {}

    # ── Writes ──────────────────────────────────────────────────────

    def add_document(self, document_id: int, words: list[str]) -> None:
        """Index an already filtered word list under `document_id`.

        A document with no words still counts toward the corpus size.  Adding
        an id that is already present replaces that document entirely.
        """
        if document_id < 0:
            raise ValueError(f"document_id must be non-negative, got {document_id}")

        if document_id in self._doc_terms:
            logger.debug("Document %d re-added, replacing its postings", document_id)
            self._remove(document_id)

        tf_map = compute_tf(words)
        if not tf_map:
            logger.debug("Document %d has no words after stop-word filtering", document_id)

        for term, tf in tf_map.items():
            self._postings.setdefault(term, {})[document_id] = tf
        self._doc_terms[document_id] = frozenset(tf_map)

        logger.debug(
            "Indexed document %d: %d words, %d unique terms",
            document_id,
            len(words),
            len(tf_map),
        )

    def _remove(self, document_id: int) -> None:
        for term in self._doc_terms.pop(document_id):
            postings = self._postings[term]
            del postings[document_id]
            if not postings:
                del self._postings[term]

    # ── Reads ───────────────────────────────────────────────────────

    def terms_for(self, term: str) -> Mapping[int, float]:
        postings = self._postings.get(term)
        if postings is None:
            return _EMPTY
        return MappingProxyType(postings)

    def document_frequency(self, term: str) -> int:
        return len(self._postings.get(term, ()))

    def document_count(self) -> int:
        return len(self._doc_terms)

    def document_ids(self) -> list[int]:
        return sorted(self._doc_terms)

    @property
    def terms(self) -> list[str]:
        return sorted(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)
