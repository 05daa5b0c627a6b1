from __future__ import annotations


class KoenDictError(Exception):
    """Base class for everything the dictionary pipeline raises on purpose."""


class LookupFailure(KoenDictError, LookupError):
    """The term search returned no usable entry id."""

    def __init__(self, term: str, message: str | None = None):
        self.term = term
        super().__init__(message or f"No entry found for {term!r}")


class ValidationFailure(KoenDictError, ValueError):
    """An entry record holds a value outside its expected domain.

    Raised for an importance score outside 0-3, a description blob that is
    not a JSON object, or a field whose type the record model rejects.
    """


class TransportFailure(KoenDictError):
    """The dictionary API could not be reached or returned something that isn't JSON."""
