from koen_dict.composer import compose
from koen_dict.errors import KoenDictError, LookupFailure, TransportFailure, ValidationFailure
from koen_dict.extractor import extract
from koen_dict.models import NormalizedEntry, RawEntryRecord
from koen_dict.pipeline import build_message, get_entry, get_message
from koen_dict.resolver import resolve

__all__ = [
    "KoenDictError",
    "LookupFailure",
    "NormalizedEntry",
    "RawEntryRecord",
    "TransportFailure",
    "ValidationFailure",
    "build_message",
    "compose",
    "extract",
    "get_entry",
    "get_message",
    "resolve",
]
