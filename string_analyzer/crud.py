from typing import List, Tuple

from string_analyzer.exceptions import InvalidInputError, TranslationError
from string_analyzer.filters import ensure_valid, evaluate
from string_analyzer.models import FilterSpec, StringRecord
from string_analyzer.query_parser import parse_natural_language_query
from string_analyzer.store import RecordStore
from string_analyzer.utils import analyze_string, normalize_value


def analyze_and_store(store: RecordStore, value: str) -> StringRecord:
    """Analyze a string and store it, rejecting duplicates"""
    if not isinstance(value, str):
        raise InvalidInputError("Value must be a string")
    if not normalize_value(value):
        raise InvalidInputError("Value must not be empty")

    return store.create(analyze_string(value))


def fetch(store: RecordStore, value: str) -> StringRecord:
    """Get string analysis by value"""
    return store.get_by_value(value)


def fetch_by_id(store: RecordStore, string_id: str) -> StringRecord:
    """Get string analysis by ID (hash)"""
    return store.get_by_id(string_id)


def remove_by_value(store: RecordStore, value: str) -> bool:
    """Delete string analysis by value"""
    return store.delete(value)


def query(store: RecordStore, spec: FilterSpec) -> List[StringRecord]:
    """Get all strings matching a filter spec"""
    return evaluate(store, ensure_valid(spec))


def query_by_text(store: RecordStore, text: str) -> Tuple[FilterSpec, List[StringRecord]]:
    """
    Translate a natural language query and run it.
    Returns the interpreted spec alongside the matching strings.
    """
    spec = parse_natural_language_query(text)
    if spec is None:
        raise TranslationError(text)

    spec = ensure_valid(spec)
    return spec, evaluate(store, spec)
