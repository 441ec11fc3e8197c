from .errors import RuWordleError, PatternValidationError, CorpusAccessError, ConfigurationMissing

__all__ = ["RuWordleError", "PatternValidationError", "CorpusAccessError", "ConfigurationMissing"]
__version__ = "1.0.0"
