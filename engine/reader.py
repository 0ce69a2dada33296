"""Line-oriented input framing and result record format.

Stream layout: one line of stop words, one line with the document count N,
N document lines (ids 0..N-1), then one query line.
"""

from __future__ import annotations

from typing import TextIO

from engine.config import EngineConfig
from engine.errors import InputError
from engine.searcher import DocumentMatch, SearchServer


def read_line(stream: TextIO) -> str:
    """Next line without its terminator; "" at end of stream."""
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    line = read_line(stream)
    try:
        value = int(line.strip())
    except ValueError:
        raise InputError(f"Expected a document count, got {line!r}") from None
    if value < 0:
        raise InputError(f"Document count must be non-negative, got {value}")
    return value


def read_search_server(stream: TextIO, config: EngineConfig | None = None) -> SearchServer:
    server = SearchServer(config)
    server.set_stop_words(read_line(stream))
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        server.add_document(document_id, read_line(stream))
    return server


def read_query(stream: TextIO) -> str:
    return read_line(stream)


def format_match(match: DocumentMatch) -> str:
    return f"{{ document_id = {match.document_id}, relevance = {match.relevance:g} }}"
