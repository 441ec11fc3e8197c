"""
Suggestion pipeline core.

- validate_patterns: list the submitted patterns that are malformed.
- suggest:           run every pattern against the corpus, intersect the
                     results, rank the survivors.

Flow for one invocation:
  1) validate ALL patterns up front; any failure ends the run before the
     corpus is touched (returned as a result, not raised)
  2) collapse '_<letter>' markers and merge their letters with the reject
     argument into ONE reject set
  3) per pattern, in order: build filter -> query corpus -> intersect with
     the running set; an empty running set stops the loop early
  4) rank the final set

Corpus failures are not recovered: CorpusAccessError propagates as-is.
All state is local to one call, so concurrent calls never share it.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set

from ..corpus.base import BaseCorpus
from ..engine import (
    Candidate, build_filter, is_valid_pattern, merge_rejects, normalize_pattern,
    parse_constraint, rank_candidates,
)

log = logging.getLogger(__name__)


@dataclass
class SuggestionResult:
    ok: bool
    candidates: List[Candidate] = field(default_factory=list)
    invalid_patterns: List[str] = field(default_factory=list)
    rejects: List[str] = field(default_factory=list)
    patterns_evaluated: int = 0
    short_circuited: bool = False
    elapsed_ms: float = 0.0

    @property
    def error(self) -> Optional[str]:
        if self.ok:
            return None
        if not self.invalid_patterns:
            return "At least one pattern is required"
        joined = ", ".join(repr(p) for p in self.invalid_patterns)
        return f"Incorrect pattern format: {joined}"


def validate_patterns(patterns: Sequence[str]) -> List[str]:
    """Return the malformed patterns in input order (empty list = all valid)."""
    return [p for p in patterns if not is_valid_pattern(p)]


def suggest(
        patterns: Sequence[str],
        corpus: BaseCorpus,
        *,
        rejects: str = "",
        limit: int = 0,
) -> SuggestionResult:
    """
    Find and rank the words consistent with every pattern.

    Args:
        patterns: one or more raw patterns (see engine.patterns)
        corpus:   any BaseCorpus implementation
        rejects:  comma-delimited absent letters, e.g. "о,с,и"
        limit:    keep at most this many top candidates (<= 0: all)

    Returns:
        SuggestionResult; ok=False with invalid_patterns filled when
        validation fails.
    """
    t0 = time.perf_counter()

    invalid = validate_patterns(patterns)
    if invalid or not patterns:
        for p in invalid:
            log.debug("invalid pattern %r", p)
        return SuggestionResult(ok=False, invalid_patterns=invalid)

    canonical: List[str] = []
    extracted: List[str] = []
    for p in patterns:
        c, ex = normalize_pattern(p)
        canonical.append(c)
        extracted.extend(ex)
    reject_set = merge_rejects(rejects, extracted)
    log.debug("canonical patterns=%s rejects=%s", canonical, sorted(reject_set))

    running: Optional[Set[str]] = None
    evaluated = 0
    for c in canonical:
        word_filter = build_filter(parse_constraint(c), reject_set)
        words = corpus.query(word_filter)
        evaluated += 1
        running = words if running is None else running & words
        log.debug("pattern %r matched %d word(s), %d remain", c, len(words), len(running))
        if not running:
            break

    short_circuited = evaluated < len(canonical)
    if short_circuited:
        log.debug("no candidates left; skipped %d pattern(s)", len(canonical) - evaluated)

    ranked = rank_candidates(running or set(), limit=limit)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0
    log.info("found %d candidate(s) in %.1f ms", len(ranked), elapsed_ms)

    return SuggestionResult(
        ok=True,
        candidates=ranked,
        rejects=sorted(reject_set),
        patterns_evaluated=evaluated,
        short_circuited=short_circuited,
        elapsed_ms=elapsed_ms,
    )
