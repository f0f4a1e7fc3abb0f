from typing import Any, Dict, List

from pydantic import ValidationError

from string_analyzer.exceptions import InvalidFilterSpecError
from string_analyzer.models import FilterSpec, StringRecord
from string_analyzer.store import RecordStore


def validate_filter_spec(params: Dict[str, Any]) -> FilterSpec:
    """Build a FilterSpec from raw parameters, dropping unset ones"""
    cleaned = {key: value for key, value in params.items() if value is not None}
    try:
        return FilterSpec(**cleaned)
    except ValidationError as e:
        raise InvalidFilterSpecError(
            errors=e.errors(include_url=False, include_context=False),
            message=_first_message(e),
        )


def ensure_valid(spec: FilterSpec) -> FilterSpec:
    """Re-run validation on a spec that may have been built unchecked"""
    return validate_filter_spec(dict(spec))


def _first_message(error: ValidationError) -> str:
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    message = first["msg"].removeprefix("Value error, ")
    return f"{field}: {message}" if field else message


def matches(record: StringRecord, spec: FilterSpec) -> bool:
    """True when the record satisfies every constraint that is set"""
    props = record.properties

    if spec.is_palindrome is not None and props.is_palindrome != spec.is_palindrome:
        return False

    if spec.min_length is not None and props.length < spec.min_length:
        return False

    if spec.max_length is not None and props.length > spec.max_length:
        return False

    if spec.word_count is not None and props.word_count != spec.word_count:
        return False

    if (
        spec.contains_character is not None
        and props.character_frequency_map.get(spec.contains_character, 0) <= 0
    ):
        return False

    return True


def evaluate(store: RecordStore, spec: FilterSpec) -> List[StringRecord]:
    """Get every stored record matching a validated spec"""
    return [record for record in store.get_all() if matches(record, spec)]
