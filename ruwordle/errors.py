"""
Error hierarchy for ruwordle.

One class per failure kind so callers can tell them apart:
  - PatternValidationError : a pattern does not reduce to 5 slots
  - CorpusAccessError      : the word store is unreachable or a query failed
  - ConfigurationMissing   : no corpus location could be resolved
"""

from __future__ import annotations
from typing import Sequence


class RuWordleError(Exception):
    """Base class for every error raised by ruwordle."""


class PatternValidationError(RuWordleError):
    def __init__(self, patterns: Sequence[str]):
        self.patterns = list(patterns)
        joined = ", ".join(repr(p) for p in self.patterns)
        super().__init__(f"Incorrect pattern format: {joined}")


class CorpusAccessError(RuWordleError):
    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Corpus error ({location}): {reason}")


class ConfigurationMissing(RuWordleError):
    def __init__(self, config_path: str):
        self.config_path = config_path
        super().__init__(
            f"No corpus location configured (looked in {config_path}); "
            f"pass --db or run `ruwordle-config set-db PATH`"
        )
