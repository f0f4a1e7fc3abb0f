import hashlib
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, Optional

from string_analyzer.models import StringProperties, StringRecord


def normalize_value(text: str) -> str:
    """
    Strip leading and trailing whitespace.

    Unpaired surrogates are replaced with U+FFFD so every value can be
    encoded as UTF-8; surrogate pairs are joined into one code point.
    """
    text = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return text.strip()


def compute_sha256(text: str) -> str:
    """Compute SHA-256 hash of a string"""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def compute_identity(raw: str) -> str:
    """Derive the storage key of a raw string without analyzing it"""
    return compute_sha256(normalize_value(raw))


def is_palindrome(text: str) -> bool:
    """Check if string is palindrome (case-insensitive, spaces count)"""
    lowered = text.lower()
    return lowered == lowered[::-1]


def count_unique_characters(text: str) -> int:
    """Count distinct characters in string"""
    return len(set(text))


def count_words(text: str) -> int:
    """Count words separated by runs of whitespace"""
    return len(text.split())


def get_character_frequency(text: str) -> Dict[str, int]:
    """Get frequency map of each character"""
    return dict(Counter(text))


def analyze_string(raw: str, created_at: Optional[datetime] = None) -> StringRecord:
    """
    Analyze a string and return a record with all computed properties.

    The value is trimmed first; the identity and every property are derived
    from the trimmed value. Characters are Unicode code points.
    Pass ``created_at`` to get a fully reproducible record.
    """
    value = normalize_value(raw)
    sha256_hash = compute_sha256(value)
    frequency = get_character_frequency(value)

    return StringRecord(
        id=sha256_hash,
        value=value,
        properties=StringProperties(
            length=len(value),
            is_palindrome=is_palindrome(value),
            unique_characters=count_unique_characters(value),
            word_count=count_words(value),
            sha256_hash=sha256_hash,
            character_frequency_map=frequency,
        ),
        created_at=created_at or datetime.now(timezone.utc),
    )
