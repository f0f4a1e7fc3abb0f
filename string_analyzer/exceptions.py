from typing import Any, Dict, List, Optional


class StringAnalyzerError(Exception):
    """Base class for every failure the core reports"""
    message = "String analyzer error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class InvalidInputError(StringAnalyzerError):
    message = "Invalid request body or missing 'value' field"


class DuplicateStringError(StringAnalyzerError):
    message = "String already exists in the system"

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__()


class StringNotFoundError(StringAnalyzerError):
    message = "String does not exist in the system"

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__()


class InvalidFilterSpecError(StringAnalyzerError):
    message = "Invalid query parameter values or types"

    def __init__(self, errors: Optional[List[Dict[str, Any]]] = None, message: Optional[str] = None):
        self.errors = errors or []
        super().__init__(message)


class TranslationError(StringAnalyzerError):
    message = "Unable to parse natural language query"

    def __init__(self, query: str):
        self.query = query
        super().__init__()
