from .core import suggest, validate_patterns, SuggestionResult
from .io import format_table, write_csv, write_manifest, result_to_dict

__all__ = ["suggest", "validate_patterns", "SuggestionResult",
           "format_table", "write_csv", "write_manifest", "result_to_dict"]
