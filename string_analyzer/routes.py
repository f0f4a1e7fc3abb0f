from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional
import logging

from string_analyzer import crud, schemas
from string_analyzer.exceptions import InvalidFilterSpecError, StringNotFoundError, TranslationError
from string_analyzer.filters import validate_filter_spec
from string_analyzer.models import StringRecord
from string_analyzer.store import RecordStore, get_store
from string_analyzer.utils import compute_identity

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/strings", response_model=StringRecord, status_code=status.HTTP_201_CREATED)
def create_string(
    string_data: schemas.StringCreate,
    store: RecordStore = Depends(get_store)
):
    """
    Analyze and store a string.
    Returns 409 if string already exists.
    """
    record = crud.analyze_and_store(store, string_data.value)
    logger.info(f"Stored string {record.id[:12]} (length {record.properties.length})")
    return record


@router.get("/strings", response_model=schemas.StringListResponse)
def get_all_strings(
    is_palindrome: Optional[bool] = Query(None),
    min_length: Optional[int] = Query(None),
    max_length: Optional[int] = Query(None),
    word_count: Optional[int] = Query(None),
    contains_character: Optional[str] = Query(None),
    store: RecordStore = Depends(get_store)
):
    """
    Get all strings with optional filtering.
    """
    spec = validate_filter_spec({
        "is_palindrome": is_palindrome,
        "min_length": min_length,
        "max_length": max_length,
        "word_count": word_count,
        "contains_character": contains_character,
    })
    strings = crud.query(store, spec)
    filters_applied = spec.applied()

    return schemas.StringListResponse(
        data=strings,
        count=len(strings),
        filters_applied=filters_applied if filters_applied else None
    )


@router.get("/strings/filter-by-natural-language", response_model=schemas.NaturalLanguageResponse)
def filter_by_natural_language(
    query: str = Query(..., description="Natural language query"),
    store: RecordStore = Depends(get_store)
):
    """
    Filter strings using natural language queries.
    Example: "all single word palindromic strings"
    """
    try:
        spec, strings = crud.query_by_text(store, query)
    except TranslationError:
        logger.warning(f"Could not interpret query: {query!r}")
        raise
    except InvalidFilterSpecError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": "Query parsed but resulted in conflicting filters",
                "details": e.message,
            }
        )

    logger.info(f"Interpreted {query!r} as {spec.applied()}")
    return schemas.NaturalLanguageResponse(
        data=strings,
        count=len(strings),
        interpreted_query=schemas.InterpretedQuery(
            original=query,
            parsed_filters=spec.applied()
        )
    )


@router.get("/strings/{string_value}", response_model=StringRecord)
def get_string(
    string_value: str,
    store: RecordStore = Depends(get_store)
):
    """
    Get analysis for a specific string.
    Returns 404 if string doesn't exist.
    """
    return crud.fetch(store, string_value)


@router.delete("/strings/{string_value}", status_code=status.HTTP_204_NO_CONTENT)
def delete_string(
    string_value: str,
    store: RecordStore = Depends(get_store)
):
    """
    Delete a string from the system.
    Returns 404 if string doesn't exist.
    """
    if not crud.remove_by_value(store, string_value):
        raise StringNotFoundError(compute_identity(string_value))
    logger.info(f"Deleted string {string_value!r}")
    return None
