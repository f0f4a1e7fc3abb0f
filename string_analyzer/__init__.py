"""String Analyzer Service - analyze, store and query string properties"""

__version__ = "1.0.0"
