import re
from typing import Dict, Optional

from string_analyzer.models import FilterSpec

LONGER_THAN = re.compile(r"longer than (\d+) characters")
LETTER = re.compile(r"letter ([a-z])")


def parse_natural_language_query(query: str) -> Optional[FilterSpec]:
    """
    Parse natural language query into filter parameters
    Examples:
    - "all single word palindromic strings" -> {word_count: 1, is_palindrome: true}
    - "strings longer than 10 characters" -> {min_length: 11}
    - "strings containing the letter z" -> {contains_character: "z"}
    - "strings containing the first vowel" -> {contains_character: "a"}

    Rules run in order and a later rule overwrites a field an earlier one
    set, so "first vowel" wins over "letter x". Returns None when nothing
    matched. The result is not validated here.
    """
    query = query.lower()
    filters: Dict = {}

    # Check for single word / one word
    if "single word" in query or "one word" in query:
        filters["word_count"] = 1

    # Check for palindrome
    if "palindromic" in query or "palindrome" in query:
        filters["is_palindrome"] = True

    # Check for "longer than X characters"
    length_match = LONGER_THAN.search(query)
    if length_match:
        filters["min_length"] = int(length_match.group(1)) + 1

    # Check for "letter X"
    letter_match = LETTER.search(query)
    if letter_match:
        filters["contains_character"] = letter_match.group(1)

    # Check for "first vowel" -> 'a'
    if "first vowel" in query:
        filters["contains_character"] = "a"

    if not filters:
        return None

    return FilterSpec.model_construct(**filters)
