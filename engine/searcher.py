"""Search server: TF-IDF ranking with stop-words and minus-words.

`find_top_documents()` runs the pipeline: split → drop stop words → parse
plus/minus words → score plus words by TF-IDF → drop documents holding a
minus word → sort → cap at max_results.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from engine.config import EngineConfig
from engine.index import InvertedIndex
from engine.query import Query, parse_query
from engine.text import StopWords

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DocumentMatch:
    document_id: int
    relevance: float

    def to_dict(self) -> dict:
        return {"document_id": self.document_id, "relevance": self.relevance}


class SearchServer:
    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.stop_words = StopWords(self.config.stop_words)
        self.index = InvertedIndex()

    @classmethod
    def from_documents(
        cls,
        documents: list[str],
        stop_words: str = "",
        config: EngineConfig | None = None,
    ) -> SearchServer:
        """Build a server with ids 0..len(documents)-1 in order."""
        server = cls(config)
        server.set_stop_words(stop_words)
        for document_id, text in enumerate(documents):
            server.add_document(document_id, text)
        return server

    # ── Indexing ────────────────────────────────────────────────────

    def set_stop_words(self, text: str) -> None:
        self.stop_words.add(text)

    def add_document(self, document_id: int, text: str) -> None:
        self.index.add_document(document_id, self.stop_words.split(text))

    @property
    def document_count(self) -> int:
        return self.index.document_count()

    # ── Querying ────────────────────────────────────────────────────

    def parse_query(self, raw_query: str) -> Query:
        return parse_query(self.stop_words.split(raw_query), self.config.minus_marker)

    def find_all_documents(self, query: Query) -> dict[int, float]:
        """Score every document matching a plus word.  Returns {id: relevance}."""
        n = self.index.document_count()
        if n == 0:
            return {}

        relevance: dict[int, float] = {}

        for word in query.plus_words:
            postings = self.index.terms_for(word)
            if not postings:
                continue
            idf = math.log(n / len(postings))
            for document_id, tf in postings.items():
                relevance[document_id] = relevance.get(document_id, 0.0) + tf * idf

        for word in query.minus_words:
            for document_id in self.index.terms_for(word):
                relevance.pop(document_id, None)

        return relevance

    def find_top_documents(self, raw_query: str) -> list[DocumentMatch]:
        query = self.parse_query(raw_query)
        relevance = self.find_all_documents(query)

        # Ties → ascending id, so results are reproducible
        ranked = sorted(relevance.items(), key=lambda x: (-x[1], x[0]))
        matches = [DocumentMatch(doc_id, score) for doc_id, score in ranked]

        logger.debug(
            "Query %r: %d plus, %d minus words, %d matched of %d documents",
            raw_query,
            len(query.plus_words),
            len(query.minus_words),
            len(matches),
            self.index.document_count(),
        )
        return matches[: self.config.max_results]
