"""Exceptions raised at the engine boundary."""

from __future__ import annotations


class SiftError(Exception):
    pass


class ConfigError(SiftError, ValueError):
    """Config file failed validation.  `errors` holds one message per problem."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class InputError(SiftError, ValueError):
    """Framed input stream is malformed (e.g. a bad document count line)."""
