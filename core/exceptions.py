# core/exceptions.py

class NumericAnalysisError(Exception):
    """Base exception for corpus generation and analysis errors."""
    pass

class CorpusFormatError(NumericAnalysisError):
    """Raised when a corpus token cannot be parsed as a non-negative integer."""
    pass

class CorpusIOError(NumericAnalysisError):
    """Raised when the corpus file cannot be read or written."""
    pass

class InsufficientDataError(NumericAnalysisError):
    """Raised when a strict top-K request exceeds the number of distinct values."""
    pass

class ConfigError(NumericAnalysisError):
    """Raised when the run configuration is missing, malformed or invalid."""
    pass
